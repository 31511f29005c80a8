# tests/test_service.py
import pytest

from src.estimator.content import COVERAGE_TIPS, DISCLAIMER, tips_for
from src.estimator import service
from src.estimator.formatting import format_currency, format_factor
from src.estimator.service import (
    build_breakdown_rows,
    build_input,
    coerce_premium,
    compare_coverage_levels,
    estimate_from_form,
    estimate_from_form_dict,
)
from src.pricing.config import EstimatorConfig
from src.pricing.estimate import estimate
from src.utils.config import get_estimator_config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (180, 180),
        (180.9, 180),
        ("250", 250),
        (" 300 dollars", 300),
        ("12.7", 12),
        ("-40", -40),
        ("9" * 400, 10**400 - 1),
    ],
)
def test_coerce_premium_keeps_leading_integer(raw, expected):
    value, warnings = coerce_premium(raw)
    assert value == expected
    assert warnings == []


@pytest.mark.parametrize("raw", [None, "", "abc", float("nan"), float("inf"), True, [180]])
def test_coerce_premium_falls_back_to_zero(raw):
    value, warnings = coerce_premium(raw)
    assert value == 0
    assert len(warnings) == 1


def test_build_input_fills_form_defaults():
    inputs, warnings = build_input({})
    assert inputs.age_range == "30-64"
    assert inputs.state == "CA"
    assert inputs.vehicle_type == "sedan"
    assert inputs.coverage_level == "standard"
    assert inputs.driving_history == "clean"
    assert inputs.current_premium == 180
    assert warnings == []


def test_build_input_accepts_camel_case_keys():
    inputs, _ = build_input(
        {"ageRange": "75+", "vehicleType": "Luxury", "coverageLevel": "full", "drivingHistory": "minor", "currentPremium": "420"}
    )
    assert inputs.age_range == "75+"
    assert inputs.vehicle_type == "luxury"
    assert inputs.coverage_level == "full"
    assert inputs.driving_history == "minor"
    assert inputs.current_premium == 420


def test_build_input_warns_on_unknown_state_and_out_of_range_premium():
    inputs, warnings = build_input({"state": "pr", "current_premium": 1500})
    assert inputs.state == "PR"
    assert len(warnings) == 2
    assert any("PR" in w for w in warnings)
    assert any("1500" in w for w in warnings)


def test_build_input_rejects_unknown_category():
    with pytest.raises(ValueError, match="coverage_level"):
        build_input({"coverage_level": "platinum"})


def test_unparsable_premium_is_estimated_as_zero():
    report, warnings = estimate_from_form({"current_premium": "n/a"})
    assert report.breakdown["estimated_new_premium"] == 0
    assert report.breakdown["monthly_savings"] == 0
    assert len(warnings) == 1


def test_report_for_default_form():
    report, warnings = estimate_from_form({})

    assert warnings == []
    assert report.currency == "USD"
    assert report.breakdown["monthly_savings"] == 24
    assert report.display == {
        "monthly_savings": "$24",
        "annual_savings": "$288",
        "estimated_new_premium": "$156/mo",
    }
    assert [r.label for r in report.rows] == [
        "Current Premium",
        "Risk Adjustment Factor",
        "Coverage Adjustment",
        "Estimated New Premium",
    ]
    assert report.rows[0].value == "$180"
    assert report.rows[2].value == "1.00x"
    assert report.rows[-1].is_total
    assert report.tips == COVERAGE_TIPS["standard"]
    assert report.disclaimer == DISCLAIMER
    assert report.factors["state"] == 1.25


def test_report_resolves_factors_once(monkeypatch):
    calls = []
    real = service.resolve_factors

    def counting(inputs):
        calls.append(inputs)
        return real(inputs)

    monkeypatch.setattr(service, "resolve_factors", counting)
    report, _ = estimate_from_form({})
    assert len(calls) == 1
    assert report.breakdown["monthly_savings"] == 24
    assert report.factors["state"] == 1.25


def test_overrides_are_applied():
    report, _ = estimate_from_form({}, overrides={"currency": "EUR", "min_multiplier": None})
    assert report.currency == "EUR"
    assert report.display["monthly_savings"] == "EUR 24"


def test_invalid_override_raises():
    with pytest.raises(ValueError):
        estimate_from_form({}, overrides={"max_multiplier": 1.5})


def test_env_config_is_used(monkeypatch):
    monkeypatch.setenv("ESTIMATOR_MARKETING_FACTOR", "0.5")
    cfg = get_estimator_config()
    assert cfg.marketing_factor == 0.5

    # 0.5 / 1.0625 < 0.70 -> floor
    report, _ = estimate_from_form({})
    assert report.breakdown["savings_multiplier"] == 0.70
    assert report.breakdown["estimated_new_premium"] == 126


def test_env_config_rejects_non_numeric(monkeypatch):
    monkeypatch.setenv("ESTIMATOR_MIN_MULTIPLIER", "low")
    with pytest.raises(ValueError, match="ESTIMATOR_MIN_MULTIPLIER"):
        get_estimator_config()


def test_dict_output_carries_warnings():
    out = estimate_from_form_dict({"state": "ZZ"})
    assert out["warnings"]
    assert out["factors"]["state_is_default"] is True
    assert out["rows"][-1]["is_total"] is True


def test_compare_coverage_levels(profile):
    levels = compare_coverage_levels(profile(current_premium=400))
    assert list(levels) == ["minimum", "standard", "full"]
    assert levels["standard"] == estimate(profile(current_premium=400))
    savings = [b.monthly_savings for b in levels.values()]
    assert savings == sorted(savings)


def test_breakdown_rows_use_config_currency(profile):
    p = profile()
    rows = build_breakdown_rows(p, estimate(p, EstimatorConfig()), currency="GBP")
    assert rows[0].value == "GBP 180"


def test_tips_lookup():
    assert tips_for("minimum")[0] == "Lower premium with basic coverage"
    assert len(tips_for("full")) == 4
    with pytest.raises(ValueError):
        tips_for("gold")


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "$0"), (24, "$24"), (1080, "$1,080"), (1234567, "$1,234,567"), (-5, "-$5"), (155.6, "$156"),
     (2.5, "$3"), (-2.5, "-$3"), (0.5, "$1"), (10**21, "$1,000,000,000,000,000,000,000")],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_factor():
    assert format_factor(1.5) == "1.50x"
    assert format_factor(0.65) == "0.65x"
