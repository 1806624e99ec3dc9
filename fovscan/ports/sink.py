"""
Detection sink port interface.

This module defines the protocol for receiving ranked detection lists.
"""

from typing import Protocol, Sequence
from fovscan.core.models import Detection, SeverityBand

class DetectionSink(Protocol):
    """탐지 결과 수신 포트 인터페이스"""
    
    def on_detections(self, detections: Sequence[Detection], severity: SeverityBand) -> None:
        """
        한 번의 평가 결과 전체를 수신합니다.
        
        매 호출은 이전 상태를 완전히 대체합니다 (델타가 아님).
        
        Args:
            detections: 거리순으로 정렬된 탐지 목록 (비어 있을 수 있음)
            severity: 섹터 심각도
        """
        ...
