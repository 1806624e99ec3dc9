"""
Scan orchestrator for fovscan.

This module connects the pose stream, the object registry, the
placement engine and the forward sensor into one evaluation tick.
"""

from contextlib import nullcontext
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel
from fovscan.core.models import GeoPoint, HealthStatus, PlacementRing, Pose, SensorFrame, TrackedObject
from fovscan.core.classifier import classify, ring_for
from fovscan.core.heading import HeadingTracker
from fovscan.core.placement import place
from fovscan.core.sensor import ForwardSensor
from fovscan.ports.registry import ObjectRegistry
from fovscan.ports.sink import DetectionSink
from fovscan.adapters.registry import InMemoryRegistry
from fovscan.settings import Settings
from fovscan.observability import metrics
from fovscan.observability.logging_setup import get_logger, setup_logging

log = get_logger("fovscan.orchestrator")

PlacementMode = Literal["simulated", "registry"]


class Placement(BaseModel):
    """배치 결과 (마커 렌더링용)"""
    id: str
    status: HealthStatus
    ring: PlacementRing
    position: GeoPoint


class ScanOrchestrator:
    """위치 수신 -> 자세 -> 배치 -> 센서 평가 -> 싱크 파이프라인"""

    def __init__(self,
                 registry: ObjectRegistry,
                 sink: DetectionSink,
                 *,
                 settings: Optional[Settings] = None,
                 mode: PlacementMode = "simulated",
                 tracker: Optional[HeadingTracker] = None):
        """
        초기화합니다.

        Args:
            registry: 추적 객체 레지스트리
            sink: 탐지 싱크
            settings: 설정, 없으면 기본값
            mode: "simulated"면 상태별 링에 배치된 위치로, "registry"면 레지스트리 좌표로 평가
            tracker: 진행 방향 트래커
        """
        self.registry = registry
        self.settings = settings or Settings()
        self.mode = mode
        self.tracker = tracker or HeadingTracker()
        self.sensor = ForwardSensor(self.settings.sensor, sink)
        # 직전 틱의 자세 (다음 틱의 배치 기준점)
        self._reference: Optional[Pose] = None

        log.info(f"스캔 오케스트레이터 초기화됨 mode:{mode}",
                 fov_deg=self.settings.sensor.fov_deg,
                 max_range=self.settings.sensor.max_range)

    @classmethod
    def from_settings(cls, settings: Settings, sink: DetectionSink, **kwargs) -> "ScanOrchestrator":
        """
        설정으로부터 로깅과 레지스트리를 구성해 오케스트레이터를 생성합니다.

        Args:
            settings: 설정
            sink: 탐지 싱크
            **kwargs: mode, tracker 등 생성자 인자

        Returns:
            구성된 오케스트레이터
        """
        setup_logging(settings.observability)
        path = settings.registry.path
        if path:
            registry = InMemoryRegistry.from_file(
                path, metrics_enabled=settings.observability.metrics_enabled)
        else:
            registry = InMemoryRegistry()
        return cls(registry, sink, settings=settings, **kwargs)

    def latest(self) -> Optional[Pose]:
        """가장 최근 자세 (PoseSource)"""
        return self.tracker.last

    def placements(self, pose: Pose) -> Dict[str, Placement]:
        """
        레지스트리의 모든 객체를 상태별 링에 배치합니다.

        Args:
            pose: 기준 자세

        Returns:
            ID -> 배치 결과
        """
        out: Dict[str, Placement] = {}
        rings = self.settings.placement.rings
        for oid, reading in self.registry.readings().items():
            status = classify(reading, thresholds=self.settings.thresholds)
            ring = ring_for(status, rings)
            out[oid] = Placement(id=oid, status=status, ring=ring, position=place(pose, oid, ring))
        return out

    def _place_around(self, pose: Pose) -> List[TrackedObject]:
        return [TrackedObject(id=p.id, position=p.position, label=p.id)
                for p in self.placements(pose).values()]

    def _objects_for(self, pose: Pose) -> List[TrackedObject]:
        if self.mode == "registry":
            return self.registry.objects()
        # 배치는 직전 자세 기준이지만 상태와 객체 목록은 현재 레지스트리 기준
        return self._place_around(self._reference or pose)

    def tick(self, fix: Optional[GeoPoint], timestamp: Optional[float] = None) -> SensorFrame:
        """
        한 번의 평가 틱을 수행합니다.

        fix가 None이면 자세 없이 평가하여 빈 결과를 싱크에 전달합니다.

        Args:
            fix: 새 위치, 없으면 None
            timestamp: 수신 시각 (선택)

        Returns:
            평가 결과
        """
        enabled = self.settings.observability.metrics_enabled
        timer = metrics.evaluation_seconds.time() if enabled else nullcontext()
        with timer:
            pose = self.tracker.update(fix, timestamp) if fix is not None else None
            objects = self._objects_for(pose) if pose is not None else []

            try:
                frame = self.sensor.evaluate(pose, objects)
            except Exception as e:
                log.error(f"탐지 싱크 전달 실패 error:{e}")
                raise

            if pose is not None:
                self._reference = pose

        if enabled:
            self._record(frame, len(objects))
        return frame

    def _record(self, frame: SensorFrame, n_objects: int) -> None:
        metrics.evaluations_total.labels(result="inert" if frame.pose is None else "ok").inc()
        metrics.tracked_objects.set(n_objects)
        for d in frame.detections:
            metrics.detections_total.labels(severity=d.severity.value).inc()
        nearest = frame.nearest
        metrics.nearest_detection_meters.set(nearest.distance_m if nearest else -1)
