"""
SLO burn-rate packages: the burn-rate model, rolling-window aggregation, multi-window
alert-zone detection and the chart assembled from them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.slo.models import Point, SloConfig
from engine.slo.burn import burn_rate_step_profile, compute_burn_rate, interpolate
from engine.slo.window import sample_times, windowed_burn_rate, windowed_burn_rate_curve, windowed_burn_rates
from engine.slo.alert import AlertZone, find_alert_zone
from engine.slo.budget import BudgetImpact, budget_impact
from engine.slo.chart import BurnRateChart, ChartBounds, build_chart

__all__ = [
    "Point",
    "SloConfig",
    "compute_burn_rate",
    "burn_rate_step_profile",
    "interpolate",
    "sample_times",
    "windowed_burn_rate",
    "windowed_burn_rates",
    "windowed_burn_rate_curve",
    "AlertZone",
    "find_alert_zone",
    "BudgetImpact",
    "budget_impact",
    "BurnRateChart",
    "ChartBounds",
    "build_chart",
]
