# src/pricing/estimate.py
"""
Premium savings estimation.

Provides:
- factor resolution from the rating tables
- savings multiplier calculation (inverted, scaled, clamped)
- the savings breakdown output object

Flow:
  profile -> five factors -> risk adjustment -> baseline multiplier
          -> savings multiplier -> new premium -> monthly / annual savings

Notes:
- Everything here is pure: same profile in, bit-identical breakdown out.
- New premium is the exact product (Fraction) rounded half-to-even.
- A non-positive current premium passes through unchanged with zero savings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from fractions import Fraction
from typing import Any, Dict, Literal, Mapping, Optional

import numpy as np

from src.pricing.config import EstimatorConfig
from src.pricing.factors import (
    AGE_FACTOR,
    COVERAGE_FACTOR,
    HISTORY_FACTOR,
    STATE_FACTOR,
    VEHICLE_FACTOR,
    state_factor,
)

AgeRange = Literal["16-19", "20-24", "25-29", "30-64", "65-74", "75+"]
VehicleType = Literal["sedan", "suv", "truck", "sports", "luxury", "electric"]
CoverageLevel = Literal["minimum", "standard", "full"]
DrivingHistory = Literal["clean", "minor"]


@dataclass(frozen=True)
class SavingsInput:
    age_range: AgeRange
    state: str
    vehicle_type: VehicleType
    coverage_level: CoverageLevel
    driving_history: DrivingHistory
    current_premium: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FactorSet:
    age: float
    state: float
    vehicle: float
    coverage: float
    history: float
    state_is_default: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SavingsBreakdown:
    risk_adjustment: float
    coverage_factor: float
    baseline_multiplier: float
    savings_multiplier: float
    estimated_new_premium: int
    monthly_savings: int
    annual_savings: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _lookup(table: Mapping[str, float], key: str, field: str) -> float:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Unknown {field}: {key!r}. Expected one of {list(table)}") from None


def resolve_factors(inputs: SavingsInput) -> FactorSet:
    """
    Resolve the five rating factors for a profile.

    State codes are matched case-insensitively; an unlisted code resolves to
    DEFAULT_STATE_FACTOR (national average).
    """
    state_key = inputs.state.strip().upper()
    return FactorSet(
        age=_lookup(AGE_FACTOR, inputs.age_range, "age_range"),
        state=state_factor(state_key),
        vehicle=_lookup(VEHICLE_FACTOR, inputs.vehicle_type, "vehicle_type"),
        coverage=_lookup(COVERAGE_FACTOR, inputs.coverage_level, "coverage_level"),
        history=_lookup(HISTORY_FACTOR, inputs.driving_history, "driving_history"),
        state_is_default=state_key not in STATE_FACTOR,
    )


def compute_savings_multiplier(baseline_multiplier: float, cfg: EstimatorConfig) -> float:
    """
    Savings multiplier with clamping.

    multiplier = clip(1 / baseline * marketing_factor, min_multiplier, max_multiplier)
    """
    raw = 1.0 / float(baseline_multiplier) * cfg.marketing_factor
    return float(np.clip(raw, cfg.min_multiplier, cfg.max_multiplier))


def breakdown_from_factors(
    inputs: SavingsInput,
    f: FactorSet,
    cfg: Optional[EstimatorConfig] = None,
) -> SavingsBreakdown:
    """
    Breakdown for a profile whose factors are already resolved.
    """
    cfg = cfg or EstimatorConfig()

    risk_adjustment = f.age * f.state * f.vehicle * f.history
    baseline_multiplier = risk_adjustment * f.coverage
    savings_multiplier = compute_savings_multiplier(baseline_multiplier, cfg)

    current = int(inputs.current_premium)
    if current > 0:
        # exact product, so premiums beyond float range still round
        new_premium = round(current * Fraction(savings_multiplier))
    else:
        new_premium = current

    # Redundant with the clamp, kept as an explicit floor
    monthly = max(0, current - new_premium)

    return SavingsBreakdown(
        risk_adjustment=risk_adjustment,
        coverage_factor=f.coverage,
        baseline_multiplier=baseline_multiplier,
        savings_multiplier=savings_multiplier,
        estimated_new_premium=new_premium,
        monthly_savings=monthly,
        annual_savings=monthly * cfg.months_per_year,
    )


def estimate(
    inputs: SavingsInput,
    cfg: Optional[EstimatorConfig] = None,
) -> SavingsBreakdown:
    """
    Estimate the new premium and the savings for a profile.
    """
    return breakdown_from_factors(inputs, resolve_factors(inputs), cfg)
