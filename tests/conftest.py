import pytest

from src.pricing.estimate import SavingsInput

ESTIMATOR_ENV_VARS = [
    "ESTIMATOR_CURRENCY",
    "ESTIMATOR_MARKETING_FACTOR",
    "ESTIMATOR_MIN_MULTIPLIER",
    "ESTIMATOR_MAX_MULTIPLIER",
    "ESTIMATOR_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def _clean_estimator_env(monkeypatch):
    for key in ESTIMATOR_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


def _profile(**kw):
    # form defaults; override per test
    base = dict(
        age_range="30-64",
        state="CA",
        vehicle_type="sedan",
        coverage_level="standard",
        driving_history="clean",
        current_premium=180,
    )
    base.update(kw)
    return SavingsInput(**base)


@pytest.fixture
def profile():
    return _profile
