"""
Chart assembly: composes the burn-rate model, window aggregator and alert-zone
detector into every series a renderer needs for one configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple

from engine.enums import Series
from engine.slo.alert import AlertZone, find_alert_zone
from engine.slo.burn import burn_rate_step_profile, compute_burn_rate
from engine.slo.models import Point, SloConfig
from engine.slo.window import windowed_burn_rate_curve
from config import INCIDENT_START_MINUTES, settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


@dataclass(frozen=True)
class BurnRateChart:
    burn_rate: float
    incident_start: float
    incident_end: float
    instant: Tuple[Point, ...]
    short_window: Tuple[Point, ...]
    long_window: Tuple[Point, ...]
    threshold: Tuple[Point, ...]
    bounds: ChartBounds
    alert_zone: Optional[AlertZone]

    def series(self) -> Dict[Series, Tuple[Point, ...]]:
        return {
            Series.instant: self.instant,
            Series.short_window: self.short_window,
            Series.long_window: self.long_window,
            Series.threshold: self.threshold,
        }

    @property
    def detection_delay_minutes(self) -> Optional[float]:
        if self.alert_zone is None:
            return None
        return self.alert_zone.start - self.incident_start

    @property
    def reset_delay_minutes(self) -> Optional[float]:
        if self.alert_zone is None:
            return None
        return self.alert_zone.end - self.incident_end


def chart_bounds(
    config: SloConfig,
    burn_rate: float,
    x_multiplier: float,
    y_burn_multiplier: float,
    y_threshold_multiplier: float,
) -> ChartBounds:
    return ChartBounds(
        x_min=0.0,
        x_max=config.long_window_minutes * x_multiplier,
        y_min=0.0,
        y_max=max(burn_rate * y_burn_multiplier, config.critical_burn_rate * y_threshold_multiplier),
    )


def _build_chart(
    config: SloConfig,
    curve_intervals: int,
    alert_intervals: int,
    x_multiplier: float,
    y_burn_multiplier: float,
    y_threshold_multiplier: float,
) -> BurnRateChart:
    burn_rate = compute_burn_rate(config.slo_target, config.bad_event_rate)
    incident_start, incident_end = config.incident_interval
    bounds = chart_bounds(config, burn_rate, x_multiplier, y_burn_multiplier, y_threshold_multiplier)
    max_time = bounds.x_max

    instant = burn_rate_step_profile(
        config.slo_target,
        config.bad_event_rate,
        config.bad_event_duration_minutes,
        start=INCIDENT_START_MINUTES,
    )
    short_curve = windowed_burn_rate_curve(
        burn_rate, config.short_window_minutes, incident_start, incident_end, max_time, curve_intervals
    )
    long_curve = windowed_burn_rate_curve(
        burn_rate, config.long_window_minutes, incident_start, incident_end, max_time, curve_intervals
    )
    zone = find_alert_zone(
        burn_rate,
        config.short_window_minutes,
        config.long_window_minutes,
        incident_start,
        incident_end,
        config.critical_burn_rate,
        max_time,
        alert_intervals,
    )

    log.debug("chart built burn_rate=%.4f x_max=%.2f alert_zone=%s", burn_rate, max_time, zone)
    return BurnRateChart(
        burn_rate=burn_rate,
        incident_start=incident_start,
        incident_end=incident_end,
        instant=tuple(instant),
        short_window=tuple(short_curve),
        long_window=tuple(long_curve),
        threshold=(
            Point(x=0.0, y=config.critical_burn_rate),
            Point(x=max_time, y=config.critical_burn_rate),
        ),
        bounds=bounds,
        alert_zone=zone,
    )


_build_chart_cached = lru_cache(maxsize=settings.chart_cache_size)(_build_chart)


def build_chart(config: SloConfig) -> BurnRateChart:
    """Evaluate ``config`` into a :class:`BurnRateChart`.

    Results are memoised per configuration and sampling settings; the returned
    chart is immutable so sharing it between callers is safe.
    """
    return _build_chart_cached(
        config,
        settings.curve_intervals,
        settings.alert_scan_intervals,
        settings.x_axis_multiplier,
        settings.y_axis_burn_multiplier,
        settings.y_axis_threshold_multiplier,
    )


def clear_chart_cache() -> None:
    _build_chart_cached.cache_clear()
