"""
Port interfaces for fovscan.

This module defines the port interfaces (Protocols) that define
the contracts between the sensor core and external collaborators.
"""

from .sink import DetectionSink
from .pose import PoseSource
from .registry import ObjectRegistry

__all__ = ["DetectionSink", "PoseSource", "ObjectRegistry"]
