"""
Pose source port interface.

This module defines the protocol for the agent position stream.
"""

from typing import Optional, Protocol
from fovscan.core.models import Pose

class PoseSource(Protocol):
    """에이전트 자세 공급 포트 인터페이스"""
    
    def latest(self) -> Optional[Pose]:
        """
        가장 최근 자세를 반환합니다.
        
        Returns:
            자세, 아직 수신된 것이 없으면 None
        """
        ...
