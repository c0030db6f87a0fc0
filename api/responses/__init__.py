"""
Response models for the burn-rate API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel

from engine.slo.budget import BudgetImpact
from engine.slo.chart import BurnRateChart
from engine.slo.models import Point, SloConfig


class PointOut(BaseModel):
    x: float
    y: float


class BoundsOut(BaseModel):
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class AlertZoneOut(BaseModel):
    start: float
    end: float
    duration: float


class BudgetImpactOut(BaseModel):
    error_budget_pct: float
    burn_rate: float
    evaluation_window_minutes: float
    allowed_bad_minutes: float
    budget_consumed_pct: float
    time_to_exhaustion_minutes: Optional[float] = None
    exhausted: bool


class ChartResponse(BaseModel):
    burn_rate: float
    error_budget: float
    incident_start: float
    incident_end: float
    series: Dict[str, List[PointOut]]
    bounds: BoundsOut
    alert_zone: Optional[AlertZoneOut] = None
    detection_delay_minutes: Optional[float] = None
    reset_delay_minutes: Optional[float] = None
    budget: BudgetImpactOut

    @classmethod
    def build(cls, config: SloConfig, chart: BurnRateChart, budget: BudgetImpact) -> ChartResponse:
        zone = chart.alert_zone
        return cls(
            burn_rate=chart.burn_rate,
            error_budget=config.error_budget,
            incident_start=chart.incident_start,
            incident_end=chart.incident_end,
            series={kind.value: _points(points) for kind, points in chart.series().items()},
            bounds=BoundsOut(**chart.bounds.__dict__),
            alert_zone=AlertZoneOut(start=zone.start, end=zone.end, duration=zone.duration) if zone else None,
            detection_delay_minutes=chart.detection_delay_minutes,
            reset_delay_minutes=chart.reset_delay_minutes,
            budget=BudgetImpactOut(**budget.__dict__),
        )


def _points(points: Sequence[Point]) -> List[PointOut]:
    return [PointOut(x=p.x, y=p.y) for p in points]
