"""
Adapters for fovscan.

This module contains the concrete implementations of port interfaces
and the rendering style adapter.
"""

from .sinks import FanoutSink, LoggingSink, RecordingSink
from .registry import InMemoryRegistry, load_readings

__all__ = ["FanoutSink", "LoggingSink", "RecordingSink", "InMemoryRegistry", "load_readings"]
