"""
Status classification functions for fovscan.

This module contains pure functions that map raw soil readings to a
health status and a health status to a placement ring.
"""

from typing import Optional
from .models import HealthStatus, PlacementRing, SoilReading, StatusThresholds

# 상태별 배치 링 (안쪽 -> 바깥쪽)
INNER_RING = PlacementRing(name="inner", r_min=20, r_max=35)
MIDDLE_RING = PlacementRing(name="middle", r_min=40, r_max=70)
OUTER_RING = PlacementRing(name="outer", r_min=80, r_max=120)

DEFAULT_RINGS = (INNER_RING, MIDDLE_RING, OUTER_RING)

DEFAULT_THRESHOLDS = StatusThresholds()

# 상태 -> 링 인덱스
RING_INDEX = {
    HealthStatus.CRITICAL: 0,
    HealthStatus.OPTIMAL: 1,
    HealthStatus.NO_DATA: 2,
}


def violation_score(reading: SoilReading, *, thresholds: StatusThresholds = DEFAULT_THRESHOLDS) -> int:
    """
    위반한 소프트 임계값 개수를 계산합니다.

    Args:
        reading: 토양 측정값
        thresholds: 분류 임계값

    Returns:
        위반 개수 (0~2)
    """
    score = 0
    if reading.ph is not None and (reading.ph < thresholds.ph_min or reading.ph > thresholds.ph_max):
        score += 1
    if reading.moisture is not None and reading.moisture < thresholds.moisture_min:
        score += 1
    return score


def classify(reading: Optional[SoilReading], *, thresholds: StatusThresholds = DEFAULT_THRESHOLDS) -> HealthStatus:
    """
    토양 측정값을 건강 상태로 분류합니다.

    Args:
        reading: 토양 측정값, 없으면 None
        thresholds: 분류 임계값

    Returns:
        건강 상태
    """
    if reading is None or (reading.ph is None and reading.moisture is None):
        return HealthStatus.NO_DATA

    score = violation_score(reading, thresholds=thresholds)
    return HealthStatus.CRITICAL if score >= 1 else HealthStatus.OPTIMAL


def ring_for(status: HealthStatus,
             rings: tuple[PlacementRing, PlacementRing, PlacementRing] = DEFAULT_RINGS) -> PlacementRing:
    """
    건강 상태에 해당하는 배치 링을 반환합니다.

    CRITICAL -> 가장 안쪽, OPTIMAL -> 중간, NO_DATA -> 가장 바깥쪽

    Args:
        status: 건강 상태
        rings: (inner, middle, outer) 링

    Returns:
        배치 링
    """
    return rings[RING_INDEX[status]]
