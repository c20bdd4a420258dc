"""Derived, view-only sequences computed from the current metrics."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..models.schemas import FactorySummary, ProductionPoint, UtilizationPoint, WorkerMetric

HIGH_UTILIZATION = 90.0
MEDIUM_UTILIZATION = 80.0


def short_name(name: str) -> str:
    """Return the first space-delimited token of ``name``."""

    return name.split(" ")[0]


def utilization_points(workers: Iterable[WorkerMetric]) -> List[UtilizationPoint]:
    return [UtilizationPoint(name=short_name(w.name), utilization=w.utilization) for w in workers]


def production_points(workers: Iterable[WorkerMetric]) -> List[ProductionPoint]:
    return [ProductionPoint(name=short_name(w.name), units=w.units_produced) for w in workers]


def production_shares(points: Sequence[ProductionPoint]) -> List[float]:
    """Return each point's fraction of total units (all zero when nothing was produced)."""

    total = sum(p.units for p in points)
    if total <= 0:
        return [0.0 for _ in points]
    return [p.units / total for p in points]


def utilization_band(value: float) -> str:
    """Classify a utilization percentage as ``high``, ``medium`` or ``low``."""

    if value >= HIGH_UTILIZATION:
        return "high"
    if value >= MEDIUM_UTILIZATION:
        return "medium"
    return "low"


def summary_cards(factory: FactorySummary) -> List[Tuple[str, str, str]]:
    """Return ``(label, value, unit)`` for the four factory overview cards."""

    return [
        ("Total Productive Time", f"{factory.total_productive_time:.1f}", "hours"),
        ("Total Production", f"{factory.total_production_count}", "units"),
        ("Avg Production Rate", f"{factory.avg_production_rate:.1f}", "units/hr"),
        ("Avg Utilization", f"{factory.avg_utilization:.1f}", "%"),
    ]
