"""
Request models for the burn-rate API, including the configuration form's field layout.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.slo.models import SloConfig
from config import settings


class SloConfigRequest(BaseModel):
    """Wire form of :class:`SloConfig`; camelCase on the wire, snake_case accepted.

    Missing fields fall back to the default scenario. Range limits follow the
    input hints of the configuration form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    slo_target: float = Field(default_factory=lambda: settings.default_slo_target, ge=0.0, le=100.0)
    evaluation_window_days: float = Field(default_factory=lambda: settings.default_evaluation_window_days, ge=1.0)
    short_window_minutes: float = Field(default_factory=lambda: settings.default_short_window_minutes, ge=1.0)
    long_window_minutes: float = Field(default_factory=lambda: settings.default_long_window_minutes, ge=1.0)
    critical_burn_rate: float = Field(default_factory=lambda: settings.default_critical_burn_rate, ge=0.0)
    bad_event_rate: float = Field(default_factory=lambda: settings.default_bad_event_rate, ge=0.0, le=100.0)
    bad_event_duration_minutes: float = Field(
        default_factory=lambda: settings.default_bad_event_duration_minutes, ge=1.0
    )

    def to_config(self) -> SloConfig:
        return SloConfig(
            slo_target=self.slo_target,
            evaluation_window_days=self.evaluation_window_days,
            short_window_minutes=self.short_window_minutes,
            long_window_minutes=self.long_window_minutes,
            critical_burn_rate=self.critical_burn_rate,
            bad_event_rate=self.bad_event_rate,
            bad_event_duration_minutes=self.bad_event_duration_minutes,
        )


def _field(name: str, label: str, **hints: Any) -> Dict[str, Any]:
    return {"name": to_camel(name), "label": label, "type": "number", **hints}


CONFIG_FORM: List[Dict[str, Any]] = [
    {
        "legend": "SLO Information",
        "fields": [
            _field("slo_target", "SLO Target (%)", min=0, max=100, step=0.01),
            _field("evaluation_window_days", "Evaluation Window (days)", min=1),
        ],
    },
    {
        "legend": "Burn Rate Windows",
        "fields": [
            _field("short_window_minutes", "Short Window (minutes)", min=1),
            _field("long_window_minutes", "Long Window (minutes)", min=1),
        ],
    },
    {
        "legend": "Alert Threshold",
        "fields": [
            _field("critical_burn_rate", "Critical Burn Rate", min=0, step=0.01),
        ],
    },
    {
        "legend": "Hypothetical Situation",
        "fields": [
            _field("bad_event_rate", "Bad Event Rate (%)", min=0, max=100),
            _field("bad_event_duration_minutes", "Bad Event Duration (minutes)", min=1),
        ],
    },
]
