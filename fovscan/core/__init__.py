"""
Core domain models and pure functions for fovscan.

This module contains the geodesy, placement, classification and forward
sensor logic, independent of external I/O and infrastructure concerns.
"""

from .models import (
    Detection, GeoPoint, HealthStatus, PlacementRing, Pose, SensorConfig,
    SensorFrame, SeverityBand, SoilReading, TrackedObject,
)
from .geodesy import angle_delta, bearing_deg, destination, distance_m
from .classifier import classify, ring_for
from .placement import place
from .sensor import ForwardSensor, evaluate

__all__ = [
    "Detection", "GeoPoint", "HealthStatus", "PlacementRing", "Pose", "SensorConfig",
    "SensorFrame", "SeverityBand", "SoilReading", "TrackedObject",
    "angle_delta", "bearing_deg", "destination", "distance_m",
    "classify", "ring_for", "place", "ForwardSensor", "evaluate",
]
