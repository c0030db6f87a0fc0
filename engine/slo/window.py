"""
Window aggregator computing trailing rolling-average burn rates from the incident's
step profile via interval overlap, as scalars or sampled curves.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from engine.slo.models import Point
from config import settings

log = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


def windowed_burn_rate(
    instant_burn_rate: float,
    window_size: float,
    incident_start: float,
    incident_end: float,
    current_time: float,
) -> float:
    """Average burn rate over ``[current_time - window_size, current_time]``.

    The burn rate is constant inside the incident and zero outside it, so the
    average is the overlapping fraction of the window scaled by the
    instantaneous rate. A non-positive ``window_size`` gives ``inf``/``nan``
    instead of raising.
    """
    window_start = current_time - window_size
    window_end = current_time

    overlap_start = max(window_start, incident_start)
    overlap_end = min(window_end, incident_end)
    overlap = max(0.0, overlap_end - overlap_start)

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(instant_burn_rate * overlap) / window_size)


def windowed_burn_rates(
    instant_burn_rate: float,
    window_size: float,
    incident_start: float,
    incident_end: float,
    times: ArrayLike,
) -> np.ndarray:
    t = np.asarray(times, dtype=float)
    overlap = np.maximum(
        0.0,
        np.minimum(t, incident_end) - np.maximum(t - window_size, incident_start),
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        return instant_burn_rate * overlap / window_size


def sample_times(max_time: float, intervals: int) -> np.ndarray:
    """Evenly spaced times over ``[0, max_time]``, both ends included.

    ``max_time == 0`` collapses to the single sample ``0.0``; a negative (or
    NaN) ``max_time`` has nothing to sample.
    """
    if not max_time >= 0:
        return np.empty(0, dtype=float)
    if max_time == 0:
        return np.zeros(1, dtype=float)
    return np.linspace(0.0, float(max_time), max(1, int(intervals)) + 1)


def windowed_burn_rate_curve(
    instant_burn_rate: float,
    window_size: float,
    incident_start: float,
    incident_end: float,
    max_time: float,
    intervals: Optional[int] = None,
) -> List[Point]:
    if intervals is None:
        intervals = settings.curve_intervals

    times = sample_times(max_time, intervals)
    rates = windowed_burn_rates(instant_burn_rate, window_size, incident_start, incident_end, times)
    log.debug("window=%s sampled %d points up to t=%s", window_size, len(times), max_time)
    return [Point(x=float(t), y=float(y)) for t, y in zip(times, rates)]
