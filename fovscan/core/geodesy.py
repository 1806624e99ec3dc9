"""
Geodesy utilities for fovscan.

This module provides spherical-Earth calculations: haversine distance,
initial bearing, forward projection and signed angle differences.
All public inputs and outputs are in degrees and meters.
"""

import math
from fovscan.core.models import GeoPoint

# 지구 반지름 (미터)
EARTH_RADIUS_M = 6371000.0


def normalize_bearing(deg: float) -> float:
    """
    방위각을 [0, 360) 범위로 정규화합니다.

    Args:
        deg: 임의의 각도 (도)

    Returns:
        정규화된 방위각
    """
    wrapped = deg % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def normalize_lng(deg: float) -> float:
    """
    경도를 (-180, 180] 범위로 정규화합니다.

    Args:
        deg: 임의의 경도 (도)

    Returns:
        정규화된 경도
    """
    wrapped = (deg + 180.0) % 360.0 - 180.0
    if wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """
    두 지점 간의 Haversine 거리를 계산합니다 (미터).

    Args:
        a: 첫 번째 지점
        b: 두 번째 지점

    Returns:
        두 지점 간의 대권 거리 (미터)
    """
    # 도를 라디안으로 변환
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)

    # 위도와 경도의 차이
    dlat = math.radians(b.lat - a.lat)
    dlon = math.radians(b.lng - a.lng)

    # Haversine 공식
    h = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2)
    # 반올림 오차로 1을 넘는 경우 방지
    c = 2 * math.asin(math.sqrt(min(1.0, h)))

    return c * EARTH_RADIUS_M


def bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """
    a에서 b로 향하는 대권 초기 방위각을 계산합니다.

    a와 b가 같은 지점이면 방향이 정의되지 않으므로 0.0을 반환합니다.

    Args:
        a: 출발 지점
        b: 도착 지점

    Returns:
        방위각 [0, 360), 진북 기준 시계 방향
    """
    if a.lat == b.lat and a.lng == b.lng:
        return 0.0

    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    dlon = math.radians(b.lng - a.lng)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = (math.cos(lat1_rad) * math.sin(lat2_rad) -
         math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon))

    return normalize_bearing(math.degrees(math.atan2(y, x)))


def destination(origin: GeoPoint, bearing: float, distance: float) -> GeoPoint:
    """
    출발점에서 주어진 방위각과 거리만큼 이동한 지점을 계산합니다.

    결과 경도는 (-180, 180] 범위로 정규화되어 날짜변경선 통과를 처리합니다.

    Args:
        origin: 출발 지점
        bearing: 방위각 (도)
        distance: 이동 거리 (미터)

    Returns:
        도착 지점
    """
    delta = distance / EARTH_RADIUS_M
    theta = math.radians(bearing)
    lat1_rad = math.radians(origin.lat)
    lon1_rad = math.radians(origin.lng)

    sin_lat2 = (math.sin(lat1_rad) * math.cos(delta) +
                math.cos(lat1_rad) * math.sin(delta) * math.cos(theta))
    lat2_rad = math.asin(max(-1.0, min(1.0, sin_lat2)))

    y = math.sin(theta) * math.sin(delta) * math.cos(lat1_rad)
    x = math.cos(delta) - math.sin(lat1_rad) * sin_lat2
    lon2_rad = lon1_rad + math.atan2(y, x)

    return GeoPoint(lat=math.degrees(lat2_rad), lng=normalize_lng(math.degrees(lon2_rad)))


def angle_delta(a: float, b: float) -> float:
    """
    두 방위각의 부호 있는 최소 차이 (a - b)를 계산합니다.

    angle_delta(359, 1) == -2, angle_delta(1, 359) == 2

    Args:
        a: 첫 번째 각도 (도)
        b: 두 번째 각도 (도)

    Returns:
        [-180, 180] 범위의 차이
    """
    d = math.fmod(a - b, 360.0)
    if d > 180.0:
        d -= 360.0
    elif d < -180.0:
        d += 360.0
    return d


def validate_coordinates(lat: float, lng: float) -> bool:
    """
    좌표가 유효한지 확인합니다.

    Args:
        lat: 위도
        lng: 경도

    Returns:
        좌표가 유효하면 True
    """
    return -90 <= lat <= 90 and -180 <= lng <= 180
