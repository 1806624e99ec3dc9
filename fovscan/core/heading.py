"""
Heading derivation for fovscan.

The pose stream only reports positions, so the agent heading is derived
from the bearing between consecutive position fixes. A fix at exactly
the previous position keeps the previous heading instead of snapping
to north, so a stationary agent does not turn its sensor fan to 0°.
"""

from typing import Optional
from fovscan.core.models import GeoPoint, Pose
from fovscan.core.geodesy import bearing_deg


class HeadingTracker:
    """연속된 위치 수신으로부터 진행 방향을 추정하는 트래커"""

    def __init__(self, initial_heading: float = 0.0):
        self._initial_heading = initial_heading
        self._last: Optional[Pose] = None

    @property
    def last(self) -> Optional[Pose]:
        return self._last

    def update(self, fix: GeoPoint, timestamp: Optional[float] = None) -> Pose:
        """
        새 위치를 받아 자세를 계산합니다.

        첫 수신은 초기 방향을 사용하고, 이전과 같은 위치면 이전 방향을 유지합니다.

        Args:
            fix: 새 위치
            timestamp: 수신 시각 (선택)

        Returns:
            방향이 채워진 자세
        """
        prev = self._last
        if prev is None:
            heading = self._initial_heading
        elif prev.lat == fix.lat and prev.lng == fix.lng:
            heading = prev.heading_deg
        else:
            heading = bearing_deg(prev, fix)

        pose = Pose(lat=fix.lat, lng=fix.lng, heading_deg=heading, timestamp=timestamp)
        self._last = pose
        return pose

    def reset(self) -> None:
        self._last = None
