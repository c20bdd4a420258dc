r"""productivity/models/schemas.py

Pydantic models for the dashboard's view model.

Field names are snake_case in Python; the camelCase wire names used by the
generator prompt and the backend metrics API are declared as aliases.  Either
form is accepted on input.

Generated payloads are kept as parsed: numbers are not coerced (a fractional
unit count stays fractional, a numeric id stays numeric), ranges are not
checked and unknown keys are retained, so ``model_dump(by_alias=True)``
returns the parsed JSON.  Validation only rejects payloads the dashboard
cannot render, such as a missing ``workers`` list or a string where a number
is plotted.
"""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

Number = Union[StrictInt, StrictFloat]
RecordId = Union[StrictStr, StrictInt]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FactorySummary(_WireModel):
    """Aggregate metrics for the whole factory over one shift."""

    total_productive_time: Number = Field(
        ..., alias="totalProductiveTime", description="Productive hours across all workers"
    )
    total_production_count: Number = Field(
        ..., alias="totalProductionCount", description="Units produced in the shift"
    )
    avg_production_rate: Number = Field(
        ..., alias="avgProductionRate", description="Average units per hour"
    )
    avg_utilization: Number = Field(
        ..., alias="avgUtilization", description="Average utilization percentage, 0–100"
    )


class WorkerMetric(_WireModel):
    """Productivity of a single worker."""

    id: RecordId
    name: StrictStr
    active_time: Number = Field(..., alias="activeTime", description="Active hours")
    idle_time: Number = Field(..., alias="idleTime", description="Idle hours")
    utilization: Number = Field(..., description="Percentage of the shift spent producing")
    units_produced: Number = Field(..., alias="unitsProduced")
    units_per_hour: Number = Field(..., alias="unitsPerHour")


class StationMetric(_WireModel):
    """Productivity of a single workstation."""

    id: RecordId
    name: StrictStr
    occupancy_time: Number = Field(..., alias="occupancyTime", description="Occupied hours")
    utilization: Number = Field(..., description="Percentage of the shift the station was busy")
    units_produced: Number = Field(..., alias="unitsProduced")
    throughput_rate: Number = Field(..., alias="throughputRate", description="Units per hour")


class MetricsSnapshot(_WireModel):
    """Everything one load cycle produces; replaced wholesale on the next load."""

    factory: FactorySummary
    workers: List[WorkerMetric]
    stations: List[StationMetric]


class UtilizationPoint(BaseModel):
    """A bar in the worker utilization chart."""

    name: str
    utilization: Number


class ProductionPoint(BaseModel):
    """A slice in the production-by-worker chart."""

    name: str
    units: Number
