"""
Chart.js document builder: turns a BurnRateChart into the line-chart data, options
and alert-zone annotation consumed by the browser front-end.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence

import numpy as np

from engine.enums import Series
from engine.slo.chart import BurnRateChart
from engine.slo.models import Point, SloConfig
from config import ALERT_ZONE_BORDER, ALERT_ZONE_FILL


def js_number(value: float) -> str:
    """Format a number the way JavaScript's Number#toString prints it.

    Positional notation for magnitudes in ``[1e-6, 1e21)``, exponent notation
    (``1e+21``, ``1.5e-7``) outside it.
    """
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"
    if 1e-6 <= abs(v) < 1e21:
        return np.format_float_positional(v, trim="-")
    return np.format_float_scientific(v, trim="-", exp_digits=1)


def _points(points: Sequence[Point]) -> List[Dict[str, float]]:
    return [{"x": p.x, "y": p.y} for p in points]


def _datasets(chart: BurnRateChart, config: SloConfig) -> List[Dict[str, Any]]:
    return [
        {
            "label": "Instantaneous Burn Rate",
            "data": _points(chart.instant),
            "borderColor": Series.instant.color(),
            "tension": 0,
            "pointRadius": 0,
        },
        {
            "label": f"Short Window ({js_number(config.short_window_minutes)}m)",
            "data": _points(chart.short_window),
            "borderColor": Series.short_window.color(),
            "borderWidth": 2,
            "pointRadius": 0,
            "fill": False,
        },
        {
            "label": f"Long Window ({js_number(config.long_window_minutes)}m)",
            "data": _points(chart.long_window),
            "borderColor": Series.long_window.color(),
            "borderWidth": 2,
            "pointRadius": 0,
            "fill": False,
        },
        {
            "label": "Critical Threshold",
            "data": _points(chart.threshold),
            "borderColor": Series.threshold.color(),
            "borderDash": [5, 5],
            "pointRadius": 0,
            "fill": False,
        },
    ]


def _annotations(chart: BurnRateChart) -> Dict[str, Any]:
    zone = chart.alert_zone
    if zone is None:
        return {}
    return {
        "alertBox": {
            "type": "box",
            "xMin": zone.start,
            "xMax": zone.end,
            "yMin": 0,
            "yMax": chart.bounds.y_max,
            "backgroundColor": ALERT_ZONE_FILL,
            "borderColor": ALERT_ZONE_BORDER,
            "borderWidth": 1,
        }
    }


def to_chartjs(chart: BurnRateChart, config: SloConfig) -> Dict[str, Any]:
    bounds = chart.bounds
    return {
        "type": "line",
        "data": {"datasets": _datasets(chart, config)},
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "scales": {
                "x": {
                    "type": "linear",
                    "min": bounds.x_min,
                    "max": bounds.x_max,
                    "title": {"display": True, "text": "Time (minutes)"},
                },
                "y": {
                    "type": "linear",
                    "min": bounds.y_min,
                    "max": bounds.y_max,
                    "title": {"display": True, "text": "Burn Rate"},
                },
            },
            "plugins": {
                "legend": {"position": "top"},
                "annotation": {"annotations": _annotations(chart)},
            },
        },
    }
