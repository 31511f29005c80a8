# src/pricing/config.py
"""
Estimator configuration.

Kept small and explainable:
- marketing_factor: scale applied to the inverted baseline multiplier
- min/max multiplier: clamp on the savings multiplier
- months_per_year: annualisation of monthly savings
- currency: ISO code used when rendering amounts
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EstimatorConfig:
    currency: str = "USD"

    # savings_multiplier = clamp(1 / baseline * marketing_factor)
    marketing_factor: float = 0.92

    # Clamp on the savings multiplier: never a premium increase, never more than 30% off
    min_multiplier: float = 0.70
    max_multiplier: float = 1.00

    months_per_year: int = 12

    def __post_init__(self) -> None:
        if not self.marketing_factor > 0:
            raise ValueError(f"marketing_factor must be positive, got {self.marketing_factor}")
        if not 0 < self.min_multiplier <= self.max_multiplier <= 1.0:
            raise ValueError(
                "Multiplier bounds must satisfy 0 < min_multiplier <= max_multiplier <= 1, "
                f"got min={self.min_multiplier}, max={self.max_multiplier}"
            )
        if self.months_per_year <= 0:
            raise ValueError(f"months_per_year must be positive, got {self.months_per_year}")
