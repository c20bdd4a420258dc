"""Reference dataset shown whenever generated metrics cannot be loaded."""

from __future__ import annotations

from typing import Any, Dict

from ..models.schemas import MetricsSnapshot

SAMPLE_METRICS: Dict[str, Any] = {
    "factory": {
        "totalProductiveTime": 42.5,
        "totalProductionCount": 1847,
        "avgProductionRate": 43.5,
        "avgUtilization": 88.5,
    },
    "workers": [
        {"id": "W1", "name": "John Smith", "activeTime": 7.2, "idleTime": 0.8, "utilization": 90, "unitsProduced": 312, "unitsPerHour": 43.3},
        {"id": "W2", "name": "Maria Garcia", "activeTime": 7.5, "idleTime": 0.5, "utilization": 93.8, "unitsProduced": 328, "unitsPerHour": 43.7},
        {"id": "W3", "name": "James Johnson", "activeTime": 6.8, "idleTime": 1.2, "utilization": 85, "unitsProduced": 289, "unitsPerHour": 42.5},
        {"id": "W4", "name": "Sarah Lee", "activeTime": 7.1, "idleTime": 0.9, "utilization": 88.8, "unitsProduced": 305, "unitsPerHour": 43},
        {"id": "W5", "name": "Robert Chen", "activeTime": 7.4, "idleTime": 0.6, "utilization": 92.5, "unitsProduced": 321, "unitsPerHour": 43.4},
        {"id": "W6", "name": "Lisa Williams", "activeTime": 6.5, "idleTime": 1.5, "utilization": 81.3, "unitsProduced": 292, "unitsPerHour": 44.9},
    ],
    "stations": [
        {"id": "S1", "name": "Assembly Line A", "occupancyTime": 7.3, "utilization": 91.3, "unitsProduced": 315, "throughputRate": 43.2},
        {"id": "S2", "name": "Assembly Line B", "occupancyTime": 7.1, "utilization": 88.8, "unitsProduced": 308, "throughputRate": 43.4},
        {"id": "S3", "name": "Quality Check", "occupancyTime": 6.9, "utilization": 86.3, "unitsProduced": 301, "throughputRate": 43.6},
        {"id": "S4", "name": "Packaging Unit", "occupancyTime": 7.5, "utilization": 93.8, "unitsProduced": 325, "throughputRate": 43.3},
        {"id": "S5", "name": "Welding Station", "occupancyTime": 6.7, "utilization": 83.8, "unitsProduced": 298, "throughputRate": 44.5},
        {"id": "S6", "name": "Paint Booth", "occupancyTime": 7.0, "utilization": 87.5, "unitsProduced": 300, "throughputRate": 42.9},
    ],
}


def sample_snapshot() -> MetricsSnapshot:
    """Return a fresh copy of the reference dataset."""

    return MetricsSnapshot.model_validate(SAMPLE_METRICS)
