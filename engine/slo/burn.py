"""
Burn-rate model: converts an SLO target and a bad-event rate into an instantaneous
burn rate and the step profile of the hypothetical incident.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from engine.slo.models import Point
from config import INCIDENT_START_MINUTES, STEP_EPSILON

log = logging.getLogger(__name__)


def compute_burn_rate(slo_target: float, bad_event_rate: float) -> float:
    """Return how many times faster than sustainable the incident eats the budget.

    Both arguments are percentages. A zero error budget (``slo_target == 100``)
    yields ``0.0`` rather than a division error. Out-of-range inputs are not
    rejected and simply flow through the arithmetic.
    """
    error_budget = 100.0 - slo_target
    if error_budget == 0:
        return 0.0
    return bad_event_rate / error_budget


def burn_rate_step_profile(
    slo_target: float,
    bad_event_rate: float,
    duration_minutes: float,
    start: float = INCIDENT_START_MINUTES,
) -> List[Point]:
    """Four points describing the instantaneous burn rate as a step function.

    The edges sit ``STEP_EPSILON`` apart so a renderer that joins points with
    straight lines draws them as vertical jumps.
    """
    burn_rate = compute_burn_rate(slo_target, bad_event_rate)
    end = start + duration_minutes
    log.debug("step profile burn_rate=%.4f incident=[%s, %s]", burn_rate, start, end)

    return [
        Point(x=start - STEP_EPSILON, y=0.0),
        Point(x=start, y=burn_rate),
        Point(x=end, y=burn_rate),
        Point(x=end + STEP_EPSILON, y=0.0),
    ]


def interpolate(points: Sequence[Point], x: float) -> float:
    """Sample a piecewise-linear curve at ``x``; zero outside its x-range."""
    if not points or x < points[0].x or x > points[-1].x:
        return 0.0

    for left, right in zip(points, points[1:]):
        if left.x <= x <= right.x:
            span = right.x - left.x
            if span == 0:
                return right.y
            frac = (x - left.x) / span
            return left.y + frac * (right.y - left.y)
    return points[-1].y
