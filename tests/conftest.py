import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.slo.chart import clear_chart_cache
from engine.slo.models import SloConfig


@pytest.fixture(autouse=True)
def fresh_chart_cache():
    """Start and finish every test with an empty chart cache."""
    clear_chart_cache()
    yield
    clear_chart_cache()


@pytest.fixture
def default_config() -> SloConfig:
    return SloConfig.default()


@pytest.fixture
def firing_config() -> SloConfig:
    # 99.9% target with 5% bad events burns at ~50x, enough for the 60m window
    return SloConfig(
        slo_target=99.9,
        evaluation_window_days=30,
        short_window_minutes=5,
        long_window_minutes=60,
        critical_burn_rate=3.36,
        bad_event_rate=5,
        bad_event_duration_minutes=5,
    )
