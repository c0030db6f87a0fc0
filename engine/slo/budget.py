"""
Budget impact of the hypothetical incident over the SLO evaluation window, derived
from the burn rate and the incident duration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from engine.slo.burn import compute_burn_rate
from engine.slo.models import SloConfig
from config import MINUTES_PER_DAY


@dataclass(frozen=True)
class BudgetImpact:
    error_budget_pct: float
    burn_rate: float
    evaluation_window_minutes: float
    allowed_bad_minutes: float
    budget_consumed_pct: float
    time_to_exhaustion_minutes: Optional[float]
    exhausted: bool


def budget_impact(config: SloConfig) -> BudgetImpact:
    burn_rate = compute_burn_rate(config.slo_target, config.bad_event_rate)
    window_minutes = config.evaluation_window_days * MINUTES_PER_DAY
    error_budget = config.error_budget

    if window_minutes > 0:
        consumed = burn_rate * config.bad_event_duration_minutes / window_minutes * 100.0
        consumed = min(100.0, consumed)
    else:
        consumed = 0.0

    exhaustion = window_minutes / burn_rate if burn_rate > 0 else None

    return BudgetImpact(
        error_budget_pct=round(error_budget, 6),
        burn_rate=round(burn_rate, 6),
        evaluation_window_minutes=window_minutes,
        allowed_bad_minutes=round(window_minutes * error_budget / 100.0, 2),
        budget_consumed_pct=round(consumed, 4),
        time_to_exhaustion_minutes=round(exhaustion, 2) if exhaustion is not None else None,
        exhausted=consumed >= 100.0,
    )
