# src/pricing/factors.py
"""
Rating factor tables.

Each categorical field of a savings profile maps to a positive multiplier:
- age range      -> AGE_FACTOR
- state          -> STATE_FACTOR (unlisted jurisdictions use DEFAULT_STATE_FACTOR)
- vehicle type   -> VEHICLE_FACTOR
- coverage level -> COVERAGE_FACTOR
- driving record -> HISTORY_FACTOR

Tables are wrapped in MappingProxyType so nothing can retune them at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

AGE_RANGES = ("16-19", "20-24", "25-29", "30-64", "65-74", "75+")
VEHICLE_TYPES = ("sedan", "suv", "truck", "sports", "luxury", "electric")
COVERAGE_LEVELS = ("minimum", "standard", "full")
DRIVING_HISTORIES = ("clean", "minor")

# 50 states + DC, in form order
STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC",
)

AGE_FACTOR: Mapping[str, float] = MappingProxyType(
    {"16-19": 1.85, "20-24": 1.55, "25-29": 1.20, "30-64": 1.00, "65-74": 1.15, "75+": 1.35}
)

# National-average rate for any jurisdiction not listed below
DEFAULT_STATE_FACTOR: float = 1.00

STATE_FACTOR: Mapping[str, float] = MappingProxyType(
    {"MI": 1.45, "LA": 1.40, "FL": 1.35, "NY": 1.30, "CA": 1.25, "NJ": 1.28, "TX": 1.20}
)

VEHICLE_FACTOR: Mapping[str, float] = MappingProxyType(
    {"sedan": 1.00, "suv": 1.10, "truck": 1.08, "sports": 1.45, "luxury": 1.55, "electric": 1.15}
)

COVERAGE_FACTOR: Mapping[str, float] = MappingProxyType(
    {"minimum": 0.65, "standard": 1.00, "full": 1.45}
)

HISTORY_FACTOR: Mapping[str, float] = MappingProxyType({"clean": 0.85, "minor": 1.00})


def state_factor(state: str) -> float:
    """Look up a jurisdiction, falling back to the national average."""
    return STATE_FACTOR.get(state.strip().upper(), DEFAULT_STATE_FACTOR)


def is_known_state(state: str) -> bool:
    return state.strip().upper() in STATES
