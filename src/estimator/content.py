# src/estimator/content.py
"""
Static content for the estimator form: option labels, defaults, premium
bounds, coverage tips and the disclaimer copy.

Nothing here feeds the calculation; it is looked up by coverage level or
served as-is by the API.
"""

from __future__ import annotations

from typing import Any, Dict, List

from src.pricing.factors import COVERAGE_LEVELS

AGE_RANGE_LABELS: Dict[str, str] = {
    "16-19": "16-19 years",
    "20-24": "20-24 years",
    "25-29": "25-29 years",
    "30-64": "30-64 years",
    "65-74": "65-74 years",
    "75+": "75+ years",
}

VEHICLE_TYPE_LABELS: Dict[str, str] = {
    "sedan": "Sedan",
    "suv": "SUV",
    "truck": "Truck",
    "sports": "Sports Car",
    "luxury": "Luxury Vehicle",
    "electric": "Electric Vehicle",
}

COVERAGE_LEVEL_LABELS: Dict[str, str] = {
    "minimum": "Minimum (Liability Only)",
    "standard": "Standard (Liability + Collision)",
    "full": "Full (Comprehensive)",
}

DRIVING_HISTORY_LABELS: Dict[str, str] = {
    "clean": "Clean Record",
    "minor": "Minor Issues",
}

DEFAULT_FORM_VALUES: Dict[str, Any] = {
    "age_range": "30-64",
    "state": "CA",
    "vehicle_type": "sedan",
    "coverage_level": "standard",
    "driving_history": "clean",
    "current_premium": 180,
}

# Monthly premium input bounds
PREMIUM_MIN = 50
PREMIUM_MAX = 1000
PREMIUM_STEP = 10

COVERAGE_TIPS: Dict[str, List[str]] = {
    "minimum": [
        "Lower premium with basic coverage",
        "State-required liability only",
        "Best for older vehicles",
        "Higher out-of-pocket risk",
    ],
    "standard": [
        "Balanced protection and cost",
        "Collision coverage included",
        "Uninsured motorist protection",
        "Good for most drivers",
    ],
    "full": [
        "Maximum coverage protection",
        "Comprehensive + collision",
        "Lower deductibles available",
        "Best for newer vehicles",
    ],
}

DISCLAIMER = (
    "This tool provides informational estimates of potential auto insurance savings "
    "based on driver profile and coverage preferences. The figures shown are estimates "
    "only and do not constitute an insurance quote. Actual premiums and savings vary "
    "based on driving record, credit history, vehicle details, and insurer criteria. "
    "Contact licensed insurance providers for accurate quotes and policy information."
)

FOOTER_NOTES = ["Estimates only", "Not an insurance quote", "Free to use"]


def tips_for(coverage_level: str) -> List[str]:
    if coverage_level not in COVERAGE_TIPS:
        raise ValueError(f"Unknown coverage_level: {coverage_level!r}. Expected one of {list(COVERAGE_LEVELS)}")
    return list(COVERAGE_TIPS[coverage_level])
