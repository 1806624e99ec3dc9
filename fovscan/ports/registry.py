"""
Object registry port interface.

This module defines the protocol for the tracked object registry.
"""

from typing import Dict, List, Protocol
from fovscan.core.models import SoilReading, TrackedObject

class ObjectRegistry(Protocol):
    """추적 객체 레지스트리 포트 인터페이스"""
    
    def objects(self) -> List[TrackedObject]:
        """
        현재 추적 객체 목록을 반환합니다.
        
        Returns:
            안정적인 ID를 가진 추적 객체 목록
        """
        ...
    
    def readings(self) -> Dict[str, SoilReading]:
        """
        객체 ID별 최신 토양 측정값을 반환합니다.
        
        Returns:
            ID -> 측정값
        """
        ...
