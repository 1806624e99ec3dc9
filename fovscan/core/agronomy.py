"""
Agronomy helpers for fovscan.

This module turns soil readings into fertilizer recommendations and
fleet-level summary figures. All functions are pure.
"""

import math
from typing import Iterable, List, Literal, Optional
from pydantic import BaseModel
from .models import HealthStatus, SoilReading
from .classifier import DEFAULT_THRESHOLDS, classify

Nutrient = Literal["N", "P", "K"]
Action = Literal["apply", "reduce", "maintain"]


class NutrientTarget(BaseModel):
    """영양소 목표 구간과 시비량 계산 파라미터"""
    nutrient: Nutrient
    low: float
    high: float
    divisor: float
    min_dose_kg: float
    fertilizer: str


# 영양소별 목표 구간 (ppm)
TARGETS = (
    NutrientTarget(nutrient="N", low=120, high=200, divisor=10, min_dose_kg=0.5, fertilizer="Urea"),
    NutrientTarget(nutrient="P", low=20, high=40, divisor=5, min_dose_kg=0.2, fertilizer="TSP/SP-36"),
    NutrientTarget(nutrient="K", low=100, high=180, divisor=10, min_dose_kg=0.5, fertilizer="MOP/KCl"),
)


class Recommendation(BaseModel):
    """시비 권고 항목"""
    nutrient: Optional[Nutrient] = None
    action: Action
    dose_kg: Optional[float] = None
    fertilizer: Optional[str] = None
    message: str


class FleetSummary(BaseModel):
    """전체 플롯 요약 지표"""
    count: int
    avg_ph: Optional[float] = None
    avg_moisture: Optional[float] = None
    avg_temperature: Optional[float] = None
    critical_count: int = 0


def _round1(x: float) -> float:
    # 0.5는 올림 (banker's rounding 사용 안 함)
    return math.floor(x * 10 + 0.5) / 10


def recommend(n: Optional[float], p: Optional[float], k: Optional[float]) -> List[Recommendation]:
    """
    N/P/K 측정값으로 시비 권고를 생성합니다.

    Args:
        n: 질소 (ppm)
        p: 인 (ppm)
        k: 칼륨 (ppm)

    Returns:
        권고 목록, 조치가 필요 없으면 유지 권고 하나
    """
    values = {"N": n, "P": p, "K": k}
    recs: List[Recommendation] = []

    for target in TARGETS:
        value = values[target.nutrient]
        if value is None:
            continue
        if value < target.low:
            dose = max(target.min_dose_kg, _round1((target.low - value) / target.divisor))
            recs.append(Recommendation(
                nutrient=target.nutrient,
                action="apply",
                dose_kg=dose,
                fertilizer=target.fertilizer,
                message=f"{target.nutrient} low: apply ~{dose} kg {target.fertilizer} per tree",
            ))
        elif value > target.high:
            recs.append(Recommendation(
                nutrient=target.nutrient,
                action="reduce",
                message=f"{target.nutrient} high: hold {target.nutrient}-rich fertilizer",
            ))

    if not recs:
        recs.append(Recommendation(action="maintain", message="Status good: keep maintenance dose"))
    return recs


def _mean(values: List[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def summarize(readings: Iterable[SoilReading], *, thresholds=DEFAULT_THRESHOLDS) -> FleetSummary:
    """
    최신 측정값들로 요약 지표를 계산합니다.

    평균은 값이 있는 측정값만 사용합니다.

    Args:
        readings: 플롯별 최신 측정값
        thresholds: 분류 임계값

    Returns:
        요약 지표
    """
    rows = list(readings)
    return FleetSummary(
        count=len(rows),
        avg_ph=_mean([r.ph for r in rows if r.ph is not None]),
        avg_moisture=_mean([r.moisture for r in rows if r.moisture is not None]),
        avg_temperature=_mean([r.temperature for r in rows if r.temperature is not None]),
        critical_count=sum(1 for r in rows if classify(r, thresholds=thresholds) == HealthStatus.CRITICAL),
    )
