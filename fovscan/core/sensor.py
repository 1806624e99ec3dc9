"""
Forward sensor evaluation for fovscan.

This module implements the simulated forward-facing ranging sensor:
the visibility sector polygon, the in-sector detection list sorted by
distance, and the proximity severity of the sector and of each object.
"""

import time
from typing import TYPE_CHECKING, List, Optional, Sequence
from fovscan.core.models import (
    Detection,
    GeoPoint,
    Pose,
    SensorConfig,
    SensorFrame,
    SeverityBand,
    TrackedObject,
)
from fovscan.core.geodesy import angle_delta, bearing_deg, destination, distance_m, normalize_bearing
from fovscan.observability.logging_setup import get_logger

if TYPE_CHECKING:
    from fovscan.ports.sink import DetectionSink

log = get_logger("fovscan.sensor")

# 섹터 호를 샘플링하는 각도 간격 (도)
SECTOR_STEP_DEG = 4.0


def sector_polygon(pose: Pose, config: SensorConfig) -> List[GeoPoint]:
    """
    시야 섹터 폴리곤을 계산합니다.

    에이전트 위치에서 시작해 -fov/2부터 4도 간격으로 호를 따라간 뒤
    다시 에이전트 위치로 닫힙니다.

    Args:
        pose: 에이전트 자세
        config: 센서 설정

    Returns:
        닫힌 폴리곤 꼭짓점 목록
    """
    origin = pose.point
    half = config.half_fov
    pts = [origin]

    step = 0
    offset = -half
    while offset <= half:
        brg = normalize_bearing(pose.heading_deg + offset)
        pts.append(destination(origin, brg, config.max_range))
        step += 1
        offset = -half + step * SECTOR_STEP_DEG

    pts.append(origin)
    return pts


def classify_distance(distance: float, config: SensorConfig) -> SeverityBand:
    """
    거리로 심각도 구간을 결정합니다.

    Args:
        distance: 거리 (미터)
        config: 센서 설정

    Returns:
        DANGER, WARN 또는 NORMAL
    """
    if distance <= config.danger_range:
        return SeverityBand.DANGER
    if distance <= config.warn_range:
        return SeverityBand.WARN
    return SeverityBand.NORMAL


def detect(pose: Pose, objects: Sequence[TrackedObject], config: SensorConfig) -> List[Detection]:
    """
    섹터 안의 객체를 거리 오름차순으로 반환합니다.

    거리 <= max_range 이고 각도 차이 <= fov/2 인 객체만 포함합니다 (경계 포함).
    같은 거리의 객체는 입력 순서를 유지합니다.

    Args:
        pose: 에이전트 자세
        objects: 추적 객체 목록
        config: 센서 설정

    Returns:
        탐지 목록
    """
    half = config.half_fov
    hits: List[Detection] = []

    for obj in objects:
        d = distance_m(pose, obj.position)
        brg = bearing_deg(pose, obj.position)
        ad = abs(angle_delta(brg, pose.heading_deg))

        if d <= config.max_range and ad <= half:
            hits.append(Detection(
                id=obj.id,
                label=obj.label,
                position=obj.position,
                distance_m=d,
                bearing_deg=brg,
                angle_diff_deg=ad,
                severity=classify_distance(d, config),
            ))

    # list.sort는 안정 정렬
    hits.sort(key=lambda h: h.distance_m)
    return hits


def sector_severity(detections: Sequence[Detection], config: SensorConfig) -> SeverityBand:
    """
    가장 가까운 탐지 하나로 섹터 심각도를 결정합니다.

    Args:
        detections: 거리순으로 정렬된 탐지 목록
        config: 센서 설정

    Returns:
        섹터 심각도
    """
    if not detections:
        return SeverityBand.NORMAL
    return classify_distance(detections[0].distance_m, config)


def evaluate(pose: Optional[Pose], objects: Sequence[TrackedObject], config: SensorConfig) -> SensorFrame:
    """
    한 번의 센서 평가를 수행합니다.

    자세가 없으면 섹터와 탐지가 없는 빈 결과를 반환합니다.

    Args:
        pose: 에이전트 자세, 없으면 None
        objects: 추적 객체 목록
        config: 센서 설정

    Returns:
        섹터, 탐지 목록, 섹터 심각도
    """
    if pose is None:
        return SensorFrame.inert()

    detections = detect(pose, objects, config)
    return SensorFrame(
        pose=pose,
        sector=sector_polygon(pose, config),
        detections=detections,
        severity=sector_severity(detections, config),
    )


class ForwardSensor:
    """탐지 싱크를 주입받는 전방 센서"""

    def __init__(self, config: SensorConfig, sink: "DetectionSink"):
        """
        초기화합니다.

        Args:
            config: 센서 설정
            sink: 평가마다 한 번 호출되는 탐지 싱크
        """
        self.config = config
        self.sink = sink

    def evaluate(self, pose: Optional[Pose], objects: Sequence[TrackedObject]) -> SensorFrame:
        """
        센서를 평가하고 결과를 싱크에 전달합니다.

        탐지가 없어도 싱크는 빈 목록으로 정확히 한 번 호출됩니다.

        Args:
            pose: 에이전트 자세, 없으면 None
            objects: 추적 객체 목록

        Returns:
            평가 결과
        """
        start = time.perf_counter()
        frame = evaluate(pose, objects, self.config)

        if pose is None:
            log.debug("자세 없음, 빈 결과 반환")

        self.sink.on_detections(frame.detections, frame.severity)

        log.debug("센서 평가 완료",
                  objects=len(objects),
                  detections=len(frame.detections),
                  severity=frame.severity.value,
                  elapsed_ms=round((time.perf_counter() - start) * 1000, 3))
        return frame
