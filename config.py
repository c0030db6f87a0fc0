"""
Constants and configuration for BurnView.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


APP_VERSION = "1.0.0"

BURNVIEW_HOST = os.getenv("BURNVIEW_HOST", "0.0.0.0")
BURNVIEW_PORT = int(os.getenv("BURNVIEW_PORT", "4322"))
BURNVIEW_LOG_LEVEL = os.getenv("BURNVIEW_LOG_LEVEL", "info").lower()

# incident is drawn a few minutes into the chart so the lead-in stays visible
INCIDENT_START_MINUTES: float = 5.0
STEP_EPSILON: float = 0.001

MINUTES_PER_DAY: float = 24 * 60

# chart.js colours per series
SERIES_COLORS: dict[str, str] = {
    "instant": "#2196f3",
    "short_window": "#4caf50",
    "long_window": "#ff9800",
    "threshold": "#f44336",
}
ALERT_ZONE_FILL = "rgba(244, 67, 54, 0.15)"
ALERT_ZONE_BORDER = "rgba(244, 67, 54, 0.3)"


class Settings(BaseSettings):
    host: str = BURNVIEW_HOST
    port: int = BURNVIEW_PORT
    log_level: str = BURNVIEW_LOG_LEVEL

    # initial form state
    default_slo_target: float = 99.0
    default_evaluation_window_days: float = 7.0
    default_short_window_minutes: float = 5.0
    default_long_window_minutes: float = 60.0
    default_critical_burn_rate: float = 3.36
    default_bad_event_rate: float = 20.0
    default_bad_event_duration_minutes: float = 5.0

    # sampling density: N intervals means N + 1 samples
    curve_intervals: int = 200
    alert_scan_intervals: int = 500

    # axis bounds
    x_axis_multiplier: float = 1.3
    y_axis_burn_multiplier: float = 1.5
    y_axis_threshold_multiplier: float = 1.2

    chart_cache_size: int = 256

    model_config = {
        "env_prefix": "BURNVIEW_",
        "extra": "ignore",
    }


settings = Settings()
