"""
Data model for a hypothetical SLO incident: the configuration record and curve points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from config import INCIDENT_START_MINUTES, settings


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SloConfig:
    """One what-if scenario.

    Percentages (``slo_target``, ``bad_event_rate``) are on a 0-100 scale and
    durations are in minutes. Nothing is range checked here; validation
    belongs to whoever builds the record.
    """

    slo_target: float
    evaluation_window_days: float
    short_window_minutes: float
    long_window_minutes: float
    critical_burn_rate: float
    bad_event_rate: float
    bad_event_duration_minutes: float

    @classmethod
    def default(cls) -> SloConfig:
        return cls(
            slo_target=settings.default_slo_target,
            evaluation_window_days=settings.default_evaluation_window_days,
            short_window_minutes=settings.default_short_window_minutes,
            long_window_minutes=settings.default_long_window_minutes,
            critical_burn_rate=settings.default_critical_burn_rate,
            bad_event_rate=settings.default_bad_event_rate,
            bad_event_duration_minutes=settings.default_bad_event_duration_minutes,
        )

    @property
    def error_budget(self) -> float:
        return 100.0 - self.slo_target

    @property
    def incident_interval(self) -> Tuple[float, float]:
        start = INCIDENT_START_MINUTES
        return start, start + self.bad_event_duration_minutes
