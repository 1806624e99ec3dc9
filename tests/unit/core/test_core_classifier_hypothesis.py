"""
hypothesis를 활용한 classifier 모듈 테스트

이 모듈은 토양 측정값의 상태 분류와 상태별 링 매핑을 테스트합니다.
"""

import pytest
from hypothesis import given, strategies as st

from fovscan.core.models import HealthStatus, SoilReading, StatusThresholds
from fovscan.core.classifier import (
    DEFAULT_RINGS, INNER_RING, MIDDLE_RING, OUTER_RING, classify, ring_for, violation_score,
)


class TestClassify:
    """상태 분류 테스트"""

    def test_no_reading_is_no_data(self):
        assert classify(None) == HealthStatus.NO_DATA

    def test_reading_without_soil_values_is_no_data(self):
        assert classify(SoilReading(id="PLT-009", n=100)) == HealthStatus.NO_DATA

    def test_optimal(self):
        assert classify(SoilReading(id="a", ph=6.5, moisture=70)) == HealthStatus.OPTIMAL

    @pytest.mark.parametrize("ph,moisture,expected", [
        (5.5, 40, HealthStatus.OPTIMAL),      # 경계값 포함
        (7.5, 40, HealthStatus.OPTIMAL),
        (5.49, 70, HealthStatus.CRITICAL),
        (7.51, 70, HealthStatus.CRITICAL),
        (6.5, 39.9, HealthStatus.CRITICAL),
        (4.0, 10, HealthStatus.CRITICAL),
    ])
    def test_thresholds(self, ph, moisture, expected):
        """임계값 경계 테스트"""
        assert classify(SoilReading(id="a", ph=ph, moisture=moisture)) == expected

    def test_high_moisture_is_not_violation(self):
        """수분 상한은 검사하지 않음"""
        assert classify(SoilReading(id="a", ph=6.5, moisture=99)) == HealthStatus.OPTIMAL

    def test_violation_score_counts_both(self):
        assert violation_score(SoilReading(id="a", ph=8.0, moisture=20)) == 2
        assert violation_score(SoilReading(id="a", ph=8.0, moisture=60)) == 1

    def test_custom_thresholds(self):
        strict = StatusThresholds(ph_min=6.0, ph_max=7.0, moisture_min=60)
        reading = SoilReading(id="a", ph=5.8, moisture=70)
        assert classify(reading) == HealthStatus.OPTIMAL
        assert classify(reading, thresholds=strict) == HealthStatus.CRITICAL

    @given(
        ph=st.floats(min_value=0, max_value=14),
        moisture=st.floats(min_value=0, max_value=100),
    )
    def test_critical_iff_violation(self, ph, moisture):
        """위반이 하나라도 있으면 CRITICAL"""
        violated = ph < 5.5 or ph > 7.5 or moisture < 40
        status = classify(SoilReading(id="a", ph=ph, moisture=moisture))
        assert status == (HealthStatus.CRITICAL if violated else HealthStatus.OPTIMAL)


class TestRingFor:
    """상태 -> 링 매핑 테스트"""

    def test_mapping(self):
        assert ring_for(HealthStatus.CRITICAL) == INNER_RING
        assert ring_for(HealthStatus.OPTIMAL) == MIDDLE_RING
        assert ring_for(HealthStatus.NO_DATA) == OUTER_RING

    @given(status=st.sampled_from(list(HealthStatus)))
    def test_total(self, status):
        """모든 상태는 정확히 하나의 링으로 매핑"""
        assert ring_for(status) in DEFAULT_RINGS

    def test_rings_ordered(self):
        """안쪽 링일수록 반경이 작음"""
        assert INNER_RING.r_max < MIDDLE_RING.r_min
        assert MIDDLE_RING.r_max < OUTER_RING.r_min
