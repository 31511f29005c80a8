from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.pricing.config import EstimatorConfig


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_float(key: str, default: float) -> float:
    v = _env(key)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"{key} must be a number, got: {v!r}") from None


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    data_dir: Path
    reports_dir: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/utils/config.py
    """
    return Path(__file__).resolve().parents[2]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    return ProjectPaths(
        root=root,
        data_dir=root / "data",
        reports_dir=root / "reports",
    )


def get_estimator_config() -> EstimatorConfig:
    """
    Estimator constants, overridable via environment variables.
    Unset variables keep the built-in defaults.

    Env:
      ESTIMATOR_CURRENCY          (default: USD)
      ESTIMATOR_MARKETING_FACTOR  (default: 0.92)
      ESTIMATOR_MIN_MULTIPLIER    (default: 0.70)
      ESTIMATOR_MAX_MULTIPLIER    (default: 1.00)
    """
    d = EstimatorConfig()
    return EstimatorConfig(
        currency=_env("ESTIMATOR_CURRENCY", d.currency) or d.currency,
        marketing_factor=_env_float("ESTIMATOR_MARKETING_FACTOR", d.marketing_factor),
        min_multiplier=_env_float("ESTIMATOR_MIN_MULTIPLIER", d.min_multiplier),
        max_multiplier=_env_float("ESTIMATOR_MAX_MULTIPLIER", d.max_multiplier),
    )


def get_log_level() -> str:
    """ESTIMATOR_LOG_LEVEL (default: INFO)."""
    return (_env("ESTIMATOR_LOG_LEVEL", "INFO") or "INFO").upper()
