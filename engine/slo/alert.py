"""
Alert-zone detection for a multi-window, multi-burn-rate rule: the alert fires while
both the short and the long trailing window burn at or above the threshold.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from engine.slo.window import sample_times, windowed_burn_rates
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertZone:
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, t: float) -> bool:
        return self.start <= t < self.end


def find_alert_zone(
    instant_burn_rate: float,
    short_window: float,
    long_window: float,
    incident_start: float,
    incident_end: float,
    threshold: float,
    max_time: float,
    intervals: Optional[int] = None,
) -> Optional[AlertZone]:
    """Return the first contiguous run of samples where the alert condition holds.

    The zone starts at the first sample with both window rates ``>= threshold``
    and ends at the first later sample where either drops below it, or at
    ``max_time`` if none does. Later runs are ignored. ``None`` when the
    condition never holds.
    """
    if intervals is None:
        intervals = settings.alert_scan_intervals

    times = sample_times(max_time, intervals)
    short_rates = windowed_burn_rates(instant_burn_rate, short_window, incident_start, incident_end, times)
    long_rates = windowed_burn_rates(instant_burn_rate, long_window, incident_start, incident_end, times)

    # NaN compares False, so undefined rates never fire
    both_above = (short_rates >= threshold) & (long_rates >= threshold)

    firing = np.flatnonzero(both_above)
    if firing.size == 0:
        log.debug("no alert zone for threshold=%s", threshold)
        return None

    first = int(firing[0])
    stopped = np.flatnonzero(~both_above[first:])
    start = float(times[first])
    end = float(times[first + int(stopped[0])]) if stopped.size else float(max_time)

    log.debug("alert zone [%.3f, %.3f) for threshold=%s", start, end, threshold)
    return AlertZone(start=start, end=end)
