"""
Detection sink adapters for fovscan.

This module provides implementations of DetectionSink that keep the
latest result in memory, log it, or fan it out to several sinks.
"""

from typing import List, Optional, Sequence
from fovscan.core.models import Detection, SeverityBand
from fovscan.ports.sink import DetectionSink
from fovscan.observability.logging_setup import get_logger

log = get_logger("fovscan.sink")


class RecordingSink:
    """호출 이력과 최신 결과를 보관하는 싱크"""

    def __init__(self):
        self.calls: List[tuple[List[Detection], SeverityBand]] = []

    def on_detections(self, detections: Sequence[Detection], severity: SeverityBand) -> None:
        # 이전 결과를 병합하지 않고 통째로 대체
        self.calls.append((list(detections), severity))

    @property
    def latest(self) -> Optional[tuple[List[Detection], SeverityBand]]:
        return self.calls[-1] if self.calls else None


class LoggingSink:
    """가장 가까운 탐지를 로그로 남기는 싱크"""

    def on_detections(self, detections: Sequence[Detection], severity: SeverityBand) -> None:
        if not detections:
            log.debug("전방 탐지 없음")
            return

        nearest = detections[0]
        log.info("전방 탐지: {name} {distance:.1f}m",
                 name=nearest.label or nearest.id,
                 distance=nearest.distance_m,
                 count=len(detections),
                 severity=severity.value,
                 angle_diff=round(nearest.angle_diff_deg, 1))


class FanoutSink:
    """여러 싱크에 같은 결과를 순서대로 전달하는 싱크"""

    def __init__(self, *sinks: DetectionSink):
        self.sinks = list(sinks)

    def on_detections(self, detections: Sequence[Detection], severity: SeverityBand) -> None:
        for sink in self.sinks:
            sink.on_detections(detections, severity)
