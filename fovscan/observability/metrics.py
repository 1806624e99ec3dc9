"""
Metrics definitions for fovscan.

This module defines Prometheus metrics for monitoring
forward sensor evaluations.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
evaluations_total = Counter(
    "fovscan_evaluations_total",
    "Number of forward sensor evaluations",
    ["result"]
)

detections_total = Counter(
    "fovscan_detections_total",
    "Number of in-sector detections reported",
    ["severity"]
)

registry_rows_skipped = Counter(
    "fovscan_registry_rows_skipped_total",
    "Registry file rows skipped during load"
)

# 히스토그램 메트릭
evaluation_seconds = Histogram(
    "fovscan_evaluation_duration_seconds",
    "Time spent on one orchestrator tick",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)

# 게이지 메트릭
nearest_detection_meters = Gauge(
    "fovscan_nearest_detection_meters",
    "Distance to the nearest in-sector detection (-1 when none)"
)

tracked_objects = Gauge(
    "fovscan_tracked_objects",
    "Number of tracked objects in the last evaluation"
)
