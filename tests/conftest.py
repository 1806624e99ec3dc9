"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
from fovscan.core.models import GeoPoint, Pose, SensorConfig, SoilReading
from fovscan.adapters.registry import InMemoryRegistry
from fovscan.adapters.sinks import RecordingSink
from fovscan.settings import Settings


@pytest.fixture
def default_config():
    """기본 센서 설정 (fov 120, max 100, warn 40, danger 15)"""
    return SensorConfig()


@pytest.fixture
def origin_pose():
    """적도/본초자오선에서 북쪽을 향하는 자세"""
    return Pose(lat=0.0, lng=0.0, heading_deg=0.0)


@pytest.fixture
def robot_fix():
    """현장 로봇 기준 위치"""
    return GeoPoint(lat=0.3845999500559381, lng=115.77952148203585)


@pytest.fixture
def recording_sink():
    """호출 이력을 기록하는 싱크"""
    return RecordingSink()


@pytest.fixture
def sample_readings():
    """테스트용 플롯 측정값"""
    return [
        SoilReading(id="PLT-001", ph=6.5, moisture=70, n=25, p=15, k=23, temperature=28.0,
                    lat=1.8243, lng=102.3442),
        SoilReading(id="PLT-002", ph=5.2, moisture=65, n=130, p=25, k=120, temperature=29.0,
                    lat=1.8255, lng=102.3460),
        SoilReading(id="PLT-003", ph=6.8, moisture=35, n=150, p=30, k=150, temperature=27.5,
                    lat=1.8230, lng=102.3455),
        SoilReading(id="PLT-004", lat=1.8261, lng=102.3430),
    ]


@pytest.fixture
def sample_registry(sample_readings):
    """테스트용 메모리 레지스트리"""
    return InMemoryRegistry(sample_readings)


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.log_level = "DEBUG"
    return settings


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
