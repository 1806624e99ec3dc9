"""
Orchestrators for fovscan.

This module contains the orchestrators that coordinate
the flow between ports, adapters and the sensor core.
"""
from .orchestrator import Placement, ScanOrchestrator

__all__ = ["Placement", "ScanOrchestrator"]
