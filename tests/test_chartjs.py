"""
Test cases for the Chart.js document built from a burn-rate chart.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from dataclasses import replace

import pytest

from config import ALERT_ZONE_FILL
from engine.chartjs import js_number, to_chartjs
from engine.slo.chart import build_chart


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "5"),
        (5.0, "5"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (-0.0, "0"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (float("inf"), "Infinity"),
        (float("nan"), "NaN"),
    ],
)
def test_js_number(value, expected):
    assert js_number(value) == expected


def test_datasets(default_config):
    doc = to_chartjs(build_chart(default_config), default_config)
    datasets = doc["data"]["datasets"]
    assert [d["label"] for d in datasets] == [
        "Instantaneous Burn Rate",
        "Short Window (5m)",
        "Long Window (60m)",
        "Critical Threshold",
    ]
    assert [d["borderColor"] for d in datasets] == ["#2196f3", "#4caf50", "#ff9800", "#f44336"]
    assert datasets[0]["tension"] == 0
    assert datasets[3]["borderDash"] == [5, 5]
    assert all(d["pointRadius"] == 0 for d in datasets)
    assert datasets[0]["data"][1] == {"x": 5.0, "y": 20.0}


def test_window_labels_keep_fractions(default_config):
    cfg = replace(default_config, short_window_minutes=2.5)
    doc = to_chartjs(build_chart(cfg), cfg)
    assert doc["data"]["datasets"][1]["label"] == "Short Window (2.5m)"


def test_scales(default_config):
    chart = build_chart(default_config)
    scales = to_chartjs(chart, default_config)["options"]["scales"]
    assert scales["x"]["type"] == "linear"
    assert scales["x"]["max"] == chart.bounds.x_max
    assert scales["x"]["title"]["text"] == "Time (minutes)"
    assert scales["y"]["max"] == chart.bounds.y_max
    assert scales["y"]["title"]["text"] == "Burn Rate"


def test_no_annotation_without_alert(default_config):
    doc = to_chartjs(build_chart(default_config), default_config)
    assert doc["options"]["plugins"]["annotation"]["annotations"] == {}
    assert doc["options"]["plugins"]["legend"]["position"] == "top"


def test_alert_box_spans_full_height(firing_config):
    chart = build_chart(firing_config)
    box = to_chartjs(chart, firing_config)["options"]["plugins"]["annotation"]["annotations"]["alertBox"]
    assert box["type"] == "box"
    assert (box["xMin"], box["xMax"]) == (chart.alert_zone.start, chart.alert_zone.end)
    assert (box["yMin"], box["yMax"]) == (0, chart.bounds.y_max)
    assert box["backgroundColor"] == ALERT_ZONE_FILL
    assert box["borderWidth"] == 1
