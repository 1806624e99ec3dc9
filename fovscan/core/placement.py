"""
Procedural placement for fovscan.

This module places simulated tracked objects around a reference point
deterministically: the object id is hashed into a 32-bit seed, the seed
drives a fixed mixing function, and the resulting angle/radius inside
the object's ring is converted into a geodetic offset.

The metre-to-degree conversion is an equirectangular local approximation.
It is only accurate for offsets of tens to low hundreds of metres, which
is the scale of the placement rings.
"""

import math
from fovscan.core.models import GeoPoint, HealthStatus, PlacementRing
from fovscan.core.classifier import DEFAULT_RINGS, ring_for
from fovscan.core.geodesy import normalize_lng

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 16777619

# 각도/반경 난수를 서로 다른 시드에서 뽑기 위한 상수
RADIUS_SEED_XOR = 0x9E3779B9

# 위도 1도당 미터 (근사)
METERS_PER_DEG_LAT = 111320.0


def fnv1a_32(text: str) -> int:
    """
    문자열의 UTF-8 바이트에 대한 32비트 FNV-1a 해시를 계산합니다.

    Args:
        text: 해시할 문자열 (객체 ID)

    Returns:
        부호 없는 32비트 해시값
    """
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & MASK32
    return h


def seeded_rand01(seed: int) -> float:
    """
    32비트 시드로부터 [0, 1) 범위의 결정적 난수를 생성합니다.

    mulberry32 한 단계와 동일한 비트 연산을 수행합니다.

    Args:
        seed: 32비트 시드

    Returns:
        [0, 1) 범위의 실수
    """
    x = (seed + 0x6D2B79F5) & MASK32
    x = ((x ^ (x >> 15)) * (x | 1)) & MASK32
    x ^= (x + (((x ^ (x >> 7)) * (x | 61)) & MASK32)) & MASK32
    return ((x ^ (x >> 14)) & MASK32) / 4294967296.0


def meters_to_degrees(lat_deg: float, dx_m: float, dy_m: float) -> tuple[float, float]:
    """
    동/북 방향 미터 오프셋을 위도/경도 차이로 변환합니다.

    Args:
        lat_deg: 기준 위도
        dx_m: 동쪽 방향 오프셋 (미터)
        dy_m: 북쪽 방향 오프셋 (미터)

    Returns:
        (dLat, dLng) 도 단위
    """
    lat_rad = math.radians(lat_deg)
    d_lat = dy_m / METERS_PER_DEG_LAT
    d_lng = dx_m / (METERS_PER_DEG_LAT * math.cos(lat_rad))
    return d_lat, d_lng


def polar_offset(object_id: str, ring: PlacementRing) -> tuple[float, float]:
    """
    객체 ID와 링으로부터 (각도 라디안, 반경 미터)를 결정합니다.

    Args:
        object_id: 객체 ID
        ring: 배치 링

    Returns:
        (angle_rad, radius_m)
    """
    seed = fnv1a_32(object_id)
    angle = seeded_rand01(seed) * math.pi * 2
    t = seeded_rand01(seed ^ RADIUS_SEED_XOR)
    radius = ring.r_min + t * (ring.r_max - ring.r_min)
    return angle, radius


def place(reference: GeoPoint, object_id: str, ring: PlacementRing) -> GeoPoint:
    """
    기준점 주변의 링 안에 객체를 결정적으로 배치합니다.

    같은 ID와 링은 항상 같은 위치를 반환합니다.

    Args:
        reference: 기준점 (보통 에이전트 위치)
        object_id: 객체 ID
        ring: 배치 링

    Returns:
        배치된 위치
    """
    angle, radius = polar_offset(object_id, ring)
    dx = math.cos(angle) * radius
    dy = math.sin(angle) * radius
    d_lat, d_lng = meters_to_degrees(reference.lat, dx, dy)
    # 극점 근처의 근사 결과는 유효 범위로 제한
    lat = max(-90.0, min(90.0, reference.lat + d_lat))
    return GeoPoint(lat=lat, lng=normalize_lng(reference.lng + d_lng))


def place_for_status(reference: GeoPoint,
                     object_id: str,
                     status: HealthStatus,
                     rings: tuple[PlacementRing, PlacementRing, PlacementRing] = DEFAULT_RINGS) -> GeoPoint:
    """상태에 맞는 링을 골라 객체를 배치합니다."""
    return place(reference, object_id, ring_for(status, rings))
