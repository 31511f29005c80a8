# src/scripts/estimate_cli.py
"""
Estimate savings for one profile from the command line.

Usage:
  python -m src.scripts.estimate_cli --age_range 16-19 --state MI \
    --vehicle_type sports --coverage_level full --driving_history minor \
    --current_premium 300

  python -m src.scripts.estimate_cli --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from src.estimator.content import DEFAULT_FORM_VALUES
from src.estimator.service import estimate_from_form
from src.pricing.factors import AGE_RANGES, COVERAGE_LEVELS, DRIVING_HISTORIES, VEHICLE_TYPES
from src.utils.log import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    d = DEFAULT_FORM_VALUES
    p = argparse.ArgumentParser(description="Estimate monthly and annual auto insurance savings.")
    p.add_argument("--age_range", choices=AGE_RANGES, default=d["age_range"])
    p.add_argument("--state", type=str, default=d["state"], help="Two-letter state code (unlisted -> national average)")
    p.add_argument("--vehicle_type", choices=VEHICLE_TYPES, default=d["vehicle_type"])
    p.add_argument("--coverage_level", choices=COVERAGE_LEVELS, default=d["coverage_level"])
    p.add_argument("--driving_history", choices=DRIVING_HISTORIES, default=d["driving_history"])
    p.add_argument("--current_premium", type=str, default=str(d["current_premium"]), help="Current monthly premium")
    p.add_argument("--json", action="store_true", help="Print the full report as JSON")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    raw = {
        "age_range": args.age_range,
        "state": args.state,
        "vehicle_type": args.vehicle_type,
        "coverage_level": args.coverage_level,
        "driving_history": args.driving_history,
        "current_premium": args.current_premium,
    }
    report, warnings = estimate_from_form(raw)

    if args.json:
        out = report.to_dict()
        out["warnings"] = warnings
        print(json.dumps(out, indent=2))
        return 0

    for w in warnings:
        print(f"[WARN] {w}", file=sys.stderr)

    for row in report.rows:
        print(f"{row.label:24s}: {row.value}")
    print(f"[OK] Monthly savings : {report.display['monthly_savings']}")
    print(f"[OK] Annual savings  : {report.display['annual_savings']}")
    print(f"[OK] New premium     : {report.display['estimated_new_premium']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
