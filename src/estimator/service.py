# src/estimator/service.py
"""
End-to-end estimation service for the Premium Savings Estimator.

Single source of truth:
- raw form dict -> coerced SavingsInput (+ warnings)
- SavingsInput -> estimate -> report (rows, display strings, tips)
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import asdict, replace
from typing import Any, Dict, List, Optional, Tuple

from src.estimator.content import (
    DEFAULT_FORM_VALUES,
    DISCLAIMER,
    PREMIUM_MAX,
    PREMIUM_MIN,
    tips_for,
)
from src.estimator.formatting import format_currency, format_factor
from src.estimator.schemas import BreakdownRow, EstimateReport
from src.pricing.config import EstimatorConfig
from src.pricing.estimate import (
    SavingsBreakdown,
    SavingsInput,
    breakdown_from_factors,
    estimate,
    resolve_factors,
)
from src.pricing.factors import (
    AGE_RANGES,
    COVERAGE_LEVELS,
    DRIVING_HISTORIES,
    VEHICLE_TYPES,
    is_known_state,
)
from src.utils.config import get_estimator_config

logger = logging.getLogger(__name__)

# Form field names as posted by the browser form
_CAMEL_KEYS = {
    "ageRange": "age_range",
    "vehicleType": "vehicle_type",
    "coverageLevel": "coverage_level",
    "drivingHistory": "driving_history",
    "currentPremium": "current_premium",
}

_ENUM_FIELDS = {
    "age_range": AGE_RANGES,
    "vehicle_type": VEHICLE_TYPES,
    "coverage_level": COVERAGE_LEVELS,
    "driving_history": DRIVING_HISTORIES,
}

_OVERRIDE_KEYS = ["currency", "marketing_factor", "min_multiplier", "max_multiplier"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_premium(value: Any) -> Tuple[int, List[str]]:
    """
    Coerce a raw premium entry to an integer the way the form input does:
    leading integer digits are kept, anything unparsable becomes 0.
    Returns (premium, warnings).
    """
    if isinstance(value, bool):
        return 0, [f"Could not parse current_premium={value!r}; set to 0."]
    if isinstance(value, numbers.Integral):
        return int(value), []
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value), []
        return 0, [f"Could not parse current_premium={value!r}; set to 0."]
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        if m:
            try:
                return int(m.group(1)), []
            except ValueError:
                # beyond the interpreter's int-from-str digit limit
                pass
    return 0, [f"Could not parse current_premium={value!r}; set to 0."]


def _normalise_keys(raw: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in raw.items():
        out[_CAMEL_KEYS.get(k, k)] = v
    return out


def build_input(raw: Dict[str, Any]) -> Tuple[SavingsInput, List[str]]:
    """
    Build a SavingsInput from a raw form dict (snake_case or camelCase keys).
    Missing fields take the form defaults. Returns (SavingsInput, warnings).

    Raises:
        ValueError: a categorical field is outside its accepted values.
    """
    warnings: List[str] = []
    data = dict(DEFAULT_FORM_VALUES)
    data.update({k: v for k, v in _normalise_keys(raw).items() if k in DEFAULT_FORM_VALUES})

    for name, allowed in _ENUM_FIELDS.items():
        value = str(data[name]).strip()
        if name != "age_range":
            value = value.lower()
        if value not in allowed:
            raise ValueError(f"Unknown {name}: {data[name]!r}. Expected one of {list(allowed)}")
        data[name] = value

    state = str(data["state"]).strip().upper()
    if not is_known_state(state):
        warnings.append(f"Unrecognised state '{state}'; national average factor used.")
    data["state"] = state

    premium, premium_warnings = coerce_premium(data["current_premium"])
    warnings.extend(premium_warnings)
    if not premium_warnings and not PREMIUM_MIN <= premium <= PREMIUM_MAX:
        warnings.append(
            f"current_premium={premium} is outside the expected range {PREMIUM_MIN}-{PREMIUM_MAX}."
        )
    data["current_premium"] = premium

    return SavingsInput(**data), warnings


def _merge_config_overrides(overrides: Dict[str, Any], base: EstimatorConfig) -> EstimatorConfig:
    """
    Apply user overrides to EstimatorConfig.
    Supported keys:
      currency, marketing_factor, min_multiplier, max_multiplier
    """
    cfg_dict = asdict(base)
    for k in _OVERRIDE_KEYS:
        v = overrides.get(k)
        if v is not None:
            cfg_dict[k] = v
    return EstimatorConfig(**cfg_dict)


def build_breakdown_rows(
    inputs: SavingsInput,
    breakdown: SavingsBreakdown,
    currency: str = "USD",
) -> List[BreakdownRow]:
    return [
        BreakdownRow("Current Premium", format_currency(inputs.current_premium, currency)),
        BreakdownRow("Risk Adjustment Factor", format_factor(breakdown.risk_adjustment)),
        BreakdownRow("Coverage Adjustment", format_factor(breakdown.coverage_factor)),
        BreakdownRow(
            "Estimated New Premium",
            format_currency(breakdown.estimated_new_premium, currency),
            is_total=True,
        ),
    ]


def build_report(inputs: SavingsInput, cfg: EstimatorConfig) -> EstimateReport:
    factors = resolve_factors(inputs)
    breakdown = breakdown_from_factors(inputs, factors, cfg)
    display = {
        "monthly_savings": format_currency(breakdown.monthly_savings, cfg.currency),
        "annual_savings": format_currency(breakdown.annual_savings, cfg.currency),
        "estimated_new_premium": format_currency(breakdown.estimated_new_premium, cfg.currency) + "/mo",
    }
    return EstimateReport(
        currency=cfg.currency,
        inputs=inputs.to_dict(),
        factors=factors.to_dict(),
        breakdown=breakdown.to_dict(),
        display=display,
        rows=build_breakdown_rows(inputs, breakdown, cfg.currency),
        tips=tips_for(inputs.coverage_level),
        disclaimer=DISCLAIMER,
    )


def estimate_from_form(
    raw: Dict[str, Any],
    *,
    overrides: Optional[Dict[str, Any]] = None,
    cfg: Optional[EstimatorConfig] = None,
) -> Tuple[EstimateReport, List[str]]:
    """
    Full estimation:
      raw form -> SavingsInput -> breakdown -> EstimateReport
    Returns (EstimateReport, warnings).
    """
    inputs, warnings = build_input(raw)

    base_cfg = cfg or get_estimator_config()
    cfg = _merge_config_overrides(overrides or {}, base_cfg)

    report = build_report(inputs, cfg)
    logger.debug(
        "Estimated %s/%s/%s/%s/%s premium=%d -> new=%d",
        inputs.age_range,
        inputs.state,
        inputs.vehicle_type,
        inputs.coverage_level,
        inputs.driving_history,
        inputs.current_premium,
        report.breakdown["estimated_new_premium"],
    )
    return report, warnings


def estimate_from_form_dict(
    raw: Dict[str, Any],
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Convenience: returns a JSON-ready dict and includes warnings.
    """
    report, warnings = estimate_from_form(raw, overrides=overrides)
    out = report.to_dict()
    out["warnings"] = warnings
    return out


def compare_coverage_levels(
    inputs: SavingsInput,
    cfg: Optional[EstimatorConfig] = None,
) -> Dict[str, SavingsBreakdown]:
    """
    Evaluate the same profile at every coverage level, in ascending order.
    """
    cfg = cfg or get_estimator_config()
    return {
        level: estimate(replace(inputs, coverage_level=level), cfg=cfg)  # type: ignore[arg-type]
        for level in COVERAGE_LEVELS
    }
