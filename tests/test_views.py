r"""tests/test_views.py"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from productivity.models.schemas import FactorySummary, ProductionPoint, WorkerMetric
from productivity.services.sample_data import sample_snapshot
from productivity.services.views import (
    production_points,
    production_shares,
    short_name,
    summary_cards,
    utilization_band,
    utilization_points,
)


def _worker(worker_id: str, name: str, utilization: float, units: int) -> WorkerMetric:
    return WorkerMetric(
        id=worker_id,
        name=name,
        active_time=7.0,
        idle_time=1.0,
        utilization=utilization,
        units_produced=units,
        units_per_hour=units / 7.0,
    )


def test_short_name() -> None:
    assert short_name("Maria Garcia") == "Maria"
    assert short_name("Mary Ann Smith") == "Mary"
    assert short_name("Cher") == "Cher"


def test_points_preserve_worker_order() -> None:
    workers = sample_snapshot().workers

    util = utilization_points(workers)
    prod = production_points(workers)

    assert [p.name for p in util] == ["John", "Maria", "James", "Sarah", "Robert", "Lisa"]
    assert [p.name for p in prod] == [p.name for p in util]
    assert util[1].utilization == 93.8
    assert prod[1].units == 328


def test_points_follow_input_order_not_ids() -> None:
    workers = [_worker("W9", "Zed Last", 70, 10), _worker("W1", "Amy First", 95, 40)]

    assert [p.name for p in utilization_points(workers)] == ["Zed", "Amy"]
    assert [p.units for p in production_points(workers)] == [10, 40]


def test_points_for_empty_list() -> None:
    assert utilization_points([]) == []
    assert production_points([]) == []


def test_production_shares() -> None:
    points = [ProductionPoint(name="A", units=30), ProductionPoint(name="B", units=10)]

    assert production_shares(points) == pytest.approx([0.75, 0.25])
    assert production_shares([ProductionPoint(name="A", units=0)]) == [0.0]


@pytest.mark.parametrize(
    ("value", "band"),
    [(100, "high"), (90, "high"), (89.9, "medium"), (80, "medium"), (79.9, "low"), (0, "low")],
)
def test_utilization_band(value: float, band: str) -> None:
    assert utilization_band(value) == band


def test_summary_cards_formatting() -> None:
    factory = FactorySummary(
        total_productive_time=42.54,
        total_production_count=1847,
        avg_production_rate=43.5,
        avg_utilization=88,
    )

    assert summary_cards(factory) == [
        ("Total Productive Time", "42.5", "hours"),
        ("Total Production", "1847", "units"),
        ("Avg Production Rate", "43.5", "units/hr"),
        ("Avg Utilization", "88.0", "%"),
    ]
