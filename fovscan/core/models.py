"""
Core domain models for fovscan.

This module defines the value types shared by the geodesy, placement
and forward sensor modules using Pydantic v2 for validation.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SeverityBand(str, Enum):
    """근접 심각도 구간"""
    DANGER = "danger"
    WARN = "warn"
    NORMAL = "normal"


class HealthStatus(str, Enum):
    """토양 센서 기반 건강 상태"""
    OPTIMAL = "optimal"
    CRITICAL = "critical"
    NO_DATA = "nodata"


class GeoPoint(BaseModel):
    """위도/경도 좌표 값 객체 (도 단위)"""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    lng: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)

    @field_validator("lng")
    @classmethod
    def _normalize_lng(cls, v: float) -> float:
        # 경도는 (-180, 180]
        return 180.0 if v == -180.0 else v


class Pose(GeoPoint):
    """
    센서를 탑재한 에이전트의 순간 자세.

    heading_deg는 진북 기준 시계 방향이며 [0, 360) 범위로 정규화됩니다.
    """
    heading_deg: float = Field(default=0.0, allow_inf_nan=False)
    timestamp: Optional[float] = None

    @field_validator("heading_deg")
    @classmethod
    def _wrap_heading(cls, v: float) -> float:
        wrapped = v % 360.0
        # -1e-15 % 360.0 == 360.0
        return 0.0 if wrapped >= 360.0 else wrapped

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class TrackedObject(BaseModel):
    """추적 대상 객체 (예: 팜 플롯)"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    position: GeoPoint
    label: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label if self.label is not None else self.id


class Detection(BaseModel):
    """한 번의 평가에서 섹터 안에 들어온 객체"""
    model_config = ConfigDict(frozen=True)

    id: str
    label: Optional[str] = None
    position: GeoPoint
    distance_m: float = Field(ge=0.0)
    bearing_deg: float = Field(ge=0.0, lt=360.0)
    angle_diff_deg: float = Field(ge=0.0, le=180.0)
    severity: SeverityBand = SeverityBand.NORMAL


class SensorConfig(BaseModel):
    """
    전방 센서 설정.

    잘못된 임계값 순서는 생성 시점에 ValidationError로 거부됩니다.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    fov_deg: float = Field(default=120.0, gt=0.0, le=360.0)
    max_range: float = Field(default=100.0, gt=0.0)
    warn_range: float = Field(default=40.0, gt=0.0)
    danger_range: float = Field(default=15.0, gt=0.0)

    @model_validator(mode="after")
    def _check_band_order(self) -> "SensorConfig":
        if not self.danger_range < self.warn_range:
            raise ValueError(
                f"danger_range({self.danger_range}) must be < warn_range({self.warn_range})"
            )
        if self.warn_range > self.max_range:
            raise ValueError(
                f"warn_range({self.warn_range}) must be <= max_range({self.max_range})"
            )
        return self

    @property
    def half_fov(self) -> float:
        return self.fov_deg / 2.0


class PlacementRing(BaseModel):
    """상태별 배치 링 (미터 단위 반경 구간)"""
    model_config = ConfigDict(frozen=True)

    name: str
    r_min: float = Field(ge=0.0)
    r_max: float

    @model_validator(mode="after")
    def _check_radii(self) -> "PlacementRing":
        if not self.r_min < self.r_max:
            raise ValueError(f"r_min({self.r_min}) must be < r_max({self.r_max})")
        return self


class StatusThresholds(BaseModel):
    """건강 상태 분류용 소프트 임계값"""
    ph_min: float = 5.5
    ph_max: float = 7.5
    moisture_min: float = 40.0


class SoilReading(BaseModel):
    """플롯 하나의 최신 토양 텔레메트리"""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    ph: Optional[float] = None
    moisture: Optional[float] = None
    n: Optional[float] = None
    p: Optional[float] = None
    k: Optional[float] = None
    temperature: Optional[float] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    timestamp: Optional[str] = None

    @property
    def position(self) -> Optional[GeoPoint]:
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(lat=self.lat, lng=self.lng)


class SensorFrame(BaseModel):
    """한 번의 센서 평가 결과 (섹터, 탐지 목록, 섹터 심각도)"""
    pose: Optional[Pose] = None
    sector: List[GeoPoint] = Field(default_factory=list)
    detections: List[Detection] = Field(default_factory=list)
    severity: SeverityBand = SeverityBand.NORMAL

    @classmethod
    def inert(cls) -> "SensorFrame":
        """자세가 없을 때의 빈 결과"""
        return cls()

    @property
    def nearest(self) -> Optional[Detection]:
        return self.detections[0] if self.detections else None
