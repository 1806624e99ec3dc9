# fovscan/settings.py
from __future__ import annotations
import os
from pydantic import BaseModel, Field
from fovscan.core.models import PlacementRing, SensorConfig, StatusThresholds
from fovscan.core.classifier import INNER_RING, MIDDLE_RING, OUTER_RING

class PlacementConfig(BaseModel):
    inner: PlacementRing = INNER_RING      # critical
    middle: PlacementRing = MIDDLE_RING    # optimal
    outer: PlacementRing = OUTER_RING      # nodata

    @property
    def rings(self) -> tuple[PlacementRing, PlacementRing, PlacementRing]:
        return (self.inner, self.middle, self.outer)

class SeverityColors(BaseModel):
    stroke: str
    fill: str

class Theme(BaseModel):
    dark: bool = True
    # 섹터 색상 (stroke, 반투명 fill)
    normal: SeverityColors = Field(default_factory=lambda: SeverityColors(stroke="#22c55e", fill="rgba(34,197,94,0.15)"))
    warn: SeverityColors = Field(default_factory=lambda: SeverityColors(stroke="#f59e0b", fill="rgba(250,204,21,0.18)"))
    danger: SeverityColors = Field(default_factory=lambda: SeverityColors(stroke="#ef4444", fill="rgba(239,68,68,0.20)"))
    # 상태 색상
    status_optimal: str = "#2E7D32"
    status_critical: str = "#D32F2F"
    status_nodata: str = "#6b7280"
    sector_weight: int = 2
    sector_fill_opacity: float = 0.6
    marker_radius: int = 6

class RegistryConfig(BaseModel):
    path: str | None = None                # .csv | .xlsx

class Observability(BaseModel):
    log_level: str = "INFO"
    log_json: bool = False
    metrics_enabled: bool = True

class Settings(BaseModel):
    sensor: SensorConfig = Field(default_factory=SensorConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    thresholds: StatusThresholds = Field(default_factory=StatusThresholds)
    theme: Theme = Field(default_factory=Theme)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    observability: Observability = Field(default_factory=Observability)

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    """기본 설정 위에 환경 변수를 덮어씁니다."""
    s = Settings()

    # 센서 (SensorConfig는 불변이므로 새로 생성해 검증)
    s.sensor = SensorConfig(
        fov_deg=float(os.getenv("FOV_DEG", s.sensor.fov_deg)),
        max_range=float(os.getenv("MAX_RANGE_M", s.sensor.max_range)),
        warn_range=float(os.getenv("WARN_RANGE_M", s.sensor.warn_range)),
        danger_range=float(os.getenv("DANGER_RANGE_M", s.sensor.danger_range)),
    )

    # 분류 임계값
    s.thresholds.ph_min = float(os.getenv("PH_MIN", s.thresholds.ph_min))
    s.thresholds.ph_max = float(os.getenv("PH_MAX", s.thresholds.ph_max))
    s.thresholds.moisture_min = float(os.getenv("MOISTURE_MIN", s.thresholds.moisture_min))

    # 테마
    s.theme.dark = _b("THEME_DARK", s.theme.dark)

    # 레지스트리
    s.registry.path = os.getenv("REGISTRY_PATH", s.registry.path)

    # 관측성
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.log_json = _b("LOG_JSON", s.observability.log_json)
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)

    return s
