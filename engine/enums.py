"""
Enumerations for the chart series produced by the burn-rate pipeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import SERIES_COLORS


class Series(str, Enum):
    instant = "instant"
    short_window = "short_window"
    long_window = "long_window"
    threshold = "threshold"

    def color(self) -> str:
        return SERIES_COLORS[self.value]
