# src/api/app.py
"""
FastAPI service for the Premium Savings Estimator (thin API wrapper).

Endpoints:
- GET  /health
- GET  /options                   -> form choices, labels, defaults, premium bounds
- POST /estimate                  -> breakdown + display rows + tips (+ warnings)
- POST /estimate/compare          -> breakdown at every coverage level
- GET  /tips/{coverage_level}     -> coverage tips

The API layer stays thin:
- validates input
- calls src.estimator.service
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from src.estimator.content import (
    AGE_RANGE_LABELS,
    COVERAGE_LEVEL_LABELS,
    DEFAULT_FORM_VALUES,
    DISCLAIMER,
    DRIVING_HISTORY_LABELS,
    FOOTER_NOTES,
    PREMIUM_MAX,
    PREMIUM_MIN,
    PREMIUM_STEP,
    VEHICLE_TYPE_LABELS,
    tips_for,
)
from src.estimator.service import build_input, compare_coverage_levels, estimate_from_form
from src.pricing.estimate import AgeRange, CoverageLevel, DrivingHistory, VehicleType
from src.pricing.factors import STATES
from src.utils.config import get_estimator_config
from src.utils.log import configure_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Premium Savings Estimator", version="0.1.0")


@app.on_event("startup")
def _startup() -> None:
    configure_logging()
    # Fail fast on a bad environment override
    get_estimator_config()


# -----------------------------
# Schemas
# -----------------------------
class ProfileInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    age_range: AgeRange = Field(default="30-64", alias="ageRange")
    state: str = "CA"
    vehicle_type: VehicleType = Field(default="sedan", alias="vehicleType")
    coverage_level: CoverageLevel = Field(default="standard", alias="coverageLevel")
    driving_history: DrivingHistory = Field(default="clean", alias="drivingHistory")

    # Raw form entry; coerced by the service (unparsable -> 0)
    current_premium: Any = Field(default=180, alias="currentPremium")


class EstimateRequest(ProfileInput):
    # Optional estimator overrides
    currency: Optional[str] = None
    marketing_factor: Optional[float] = None
    min_multiplier: Optional[float] = None
    max_multiplier: Optional[float] = None


class EstimateResponse(BaseModel):
    currency: str
    inputs: Dict[str, Any]
    factors: Dict[str, Any]
    breakdown: Dict[str, Any]
    display: Dict[str, str]
    rows: List[Dict[str, Any]]
    tips: List[str]
    disclaimer: str
    warnings: list[str] = Field(default_factory=list)


class CompareResponse(BaseModel):
    inputs: Dict[str, Any]
    levels: Dict[str, Dict[str, Any]]
    warnings: list[str] = Field(default_factory=list)


_PROFILE_FIELDS = ["age_range", "state", "vehicle_type", "coverage_level", "driving_history", "current_premium"]


def _profile_dict(req: ProfileInput) -> Dict[str, Any]:
    return {k: getattr(req, k) for k in _PROFILE_FIELDS}


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "service": app.title}


@app.get("/options")
def options() -> Dict[str, Any]:
    return {
        "age_ranges": AGE_RANGE_LABELS,
        "states": list(STATES),
        "vehicle_types": VEHICLE_TYPE_LABELS,
        "coverage_levels": COVERAGE_LEVEL_LABELS,
        "driving_histories": DRIVING_HISTORY_LABELS,
        "defaults": DEFAULT_FORM_VALUES,
        "premium": {"min": PREMIUM_MIN, "max": PREMIUM_MAX, "step": PREMIUM_STEP},
        "disclaimer": DISCLAIMER,
        "footer": FOOTER_NOTES,
    }


@app.post("/estimate", response_model=EstimateResponse)
def estimate(req: EstimateRequest) -> EstimateResponse:
    overrides = {
        "currency": req.currency,
        "marketing_factor": req.marketing_factor,
        "min_multiplier": req.min_multiplier,
        "max_multiplier": req.max_multiplier,
    }

    try:
        report, warnings = estimate_from_form(_profile_dict(req), overrides=overrides)
    except ValueError as e:
        logger.info("Rejected estimate request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return EstimateResponse(**report.to_dict(), warnings=warnings)


@app.post("/estimate/compare", response_model=CompareResponse)
def compare(req: ProfileInput) -> CompareResponse:
    try:
        inputs, warnings = build_input(_profile_dict(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    levels = compare_coverage_levels(inputs)
    return CompareResponse(
        inputs=inputs.to_dict(),
        levels={level: b.to_dict() for level, b in levels.items()},
        warnings=warnings,
    )


@app.get("/tips/{coverage_level}")
def tips(coverage_level: str) -> Dict[str, Any]:
    try:
        items = tips_for(coverage_level)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"coverage_level": coverage_level, "tips": items}
