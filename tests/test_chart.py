"""
Test cases for chart assembly: axis bounds, series shapes, threshold line, alert
summary and memoisation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from dataclasses import replace

import pytest

from config import settings
from engine.enums import Series
from engine.slo.chart import BurnRateChart, build_chart, clear_chart_cache
from engine.slo.models import Point


def test_default_chart_shape(default_config):
    chart = build_chart(default_config)
    assert isinstance(chart, BurnRateChart)
    assert chart.burn_rate == 20.0
    assert (chart.incident_start, chart.incident_end) == (5.0, 10.0)
    assert len(chart.instant) == 4
    assert len(chart.short_window) == 201
    assert len(chart.long_window) == 201
    assert chart.short_window[-1].x == pytest.approx(chart.bounds.x_max)


def test_axis_bounds(default_config):
    bounds = build_chart(default_config).bounds
    assert bounds.x_min == 0
    assert bounds.y_min == 0
    assert bounds.x_max == pytest.approx(60 * 1.3)
    assert bounds.y_max == pytest.approx(20 * 1.5)


def test_y_axis_follows_threshold_when_burn_is_low(default_config):
    chart = build_chart(replace(default_config, bad_event_rate=1, critical_burn_rate=10))
    assert chart.bounds.y_max == pytest.approx(10 * 1.2)


def test_threshold_line_spans_chart(default_config):
    chart = build_chart(default_config)
    assert chart.threshold == (
        Point(x=0.0, y=3.36),
        Point(x=chart.bounds.x_max, y=3.36),
    )


def test_default_chart_has_no_alert(default_config):
    chart = build_chart(default_config)
    assert chart.alert_zone is None
    assert chart.detection_delay_minutes is None
    assert chart.reset_delay_minutes is None


def test_firing_chart_alert_summary(firing_config):
    chart = build_chart(firing_config)
    zone = chart.alert_zone
    assert zone is not None
    assert 9.032 <= zone.start < 9.2
    assert 14.6 < zone.end < 14.9
    assert chart.detection_delay_minutes == pytest.approx(zone.start - 5)
    assert chart.reset_delay_minutes == pytest.approx(zone.end - 10)


def test_series_mapping(default_config):
    chart = build_chart(default_config)
    series = chart.series()
    assert set(series) == set(Series)
    assert series[Series.long_window] is chart.long_window


def test_recomputation_is_identical(default_config):
    first = build_chart(default_config)
    clear_chart_cache()
    second = build_chart(default_config)
    assert first is not second
    assert first == second


def test_cache_returns_same_chart(default_config):
    assert build_chart(default_config) is build_chart(default_config)


def test_cache_respects_sampling_settings(default_config, monkeypatch):
    dense = build_chart(default_config)
    monkeypatch.setattr(settings, "curve_intervals", 50)
    sparse = build_chart(default_config)
    assert len(dense.long_window) == 201
    assert len(sparse.long_window) == 51
