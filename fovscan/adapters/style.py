"""
Rendering style adapter for fovscan.

This module maps sensor results to drawing styles. The theme is always
passed in explicitly; nothing here reads global UI state.
"""

from typing import Dict, List
from pydantic import BaseModel
from fovscan.core.models import Detection, HealthStatus, SensorFrame, SeverityBand
from fovscan.settings import SeverityColors, Theme


class PathStyle(BaseModel):
    """폴리곤/마커 그리기 스타일"""
    color: str
    weight: int
    fill_color: str
    fill_opacity: float


class MarkerView(BaseModel):
    """탐지 마커 표시 정보"""
    id: str
    lat: float
    lng: float
    radius: int
    style: PathStyle
    popup: List[str]


def _colors(severity: SeverityBand, theme: Theme) -> SeverityColors:
    return {
        SeverityBand.DANGER: theme.danger,
        SeverityBand.WARN: theme.warn,
        SeverityBand.NORMAL: theme.normal,
    }[severity]


def sector_style(severity: SeverityBand, theme: Theme) -> PathStyle:
    """섹터 심각도에 맞는 폴리곤 스타일"""
    c = _colors(severity, theme)
    return PathStyle(color=c.stroke, weight=theme.sector_weight,
                     fill_color=c.fill, fill_opacity=theme.sector_fill_opacity)


def marker_style(detection: Detection, theme: Theme) -> PathStyle:
    """탐지별 심각도에 맞는 마커 스타일 (섹터 심각도와 독립)"""
    c = _colors(detection.severity, theme)
    return PathStyle(color=c.stroke, weight=2, fill_color=c.stroke, fill_opacity=0.9)


def status_color(status: HealthStatus, theme: Theme) -> str:
    return {
        HealthStatus.OPTIMAL: theme.status_optimal,
        HealthStatus.CRITICAL: theme.status_critical,
        HealthStatus.NO_DATA: theme.status_nodata,
    }[status]


def popup_lines(detection: Detection) -> List[str]:
    return [
        detection.label or detection.id,
        f"Distance: {detection.distance_m:.1f} m",
        f"Angle: {detection.angle_diff_deg:.1f}°",
    ]


def chart_palette(theme: Theme) -> Dict[str, str]:
    """차트 범례/눈금/격자 색상"""
    if theme.dark:
        return {"legend": "#d1d5db", "ticks": "#9ca3af", "grid": "rgba(255,255,255,0.1)"}
    return {"legend": "#374151", "ticks": "#6b7280", "grid": "rgba(0,0,0,0.1)"}


def render_frame(frame: SensorFrame, theme: Theme) -> Dict[str, object]:
    """
    평가 결과를 렌더링 계층이 바로 쓸 수 있는 형태로 변환합니다.

    자세가 없는 결과는 섹터 없이 빈 마커 목록을 반환합니다.

    Args:
        frame: 센서 평가 결과
        theme: 테마 설정

    Returns:
        {"sector": [[lat, lng], ...] | None, "sector_style": ..., "markers": [...]}
    """
    if frame.pose is None:
        return {"sector": None, "sector_style": None, "markers": []}

    markers = [
        MarkerView(
            id=d.id,
            lat=d.position.lat,
            lng=d.position.lng,
            radius=theme.marker_radius,
            style=marker_style(d, theme),
            popup=popup_lines(d),
        )
        for d in frame.detections
    ]
    return {
        "sector": [[p.lat, p.lng] for p in frame.sector],
        "sector_style": sector_style(frame.severity, theme),
        "markers": markers,
    }
