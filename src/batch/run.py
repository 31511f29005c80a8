# src/batch/run.py
"""
Estimate savings for a file of driver profiles.

What it does:
- Reads a CSV or Parquet of profiles (one row per profile; snake_case or camelCase columns)
- Runs every row through the estimator
- Writes the profiles + breakdown columns to an output file
- Writes a summary JSON to reports/ (row count, totals, input hash, warnings)

Usage:
  python -m src.batch.run --in_path data/profiles.csv

Optional:
  python -m src.batch.run --in_path data/profiles.csv \
    --out_path data/profiles_estimates.parquet \
    --summary_path reports/batch_summary.json

Blank profile cells take the form defaults (with a warning); a blank premium becomes 0.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from src.estimator.content import DEFAULT_FORM_VALUES
from src.estimator.service import build_input
from src.pricing.config import EstimatorConfig
from src.pricing.estimate import estimate
from src.utils.config import get_estimator_config, get_paths
from src.utils.io import read_df, sha256_file, write_df, write_json
from src.utils.log import configure_logging

logger = logging.getLogger(__name__)

_PREMIUM_COLUMNS = {"current_premium", "currentPremium"}

# column name -> form field, for the non-premium profile columns
_PROFILE_COLUMNS = {
    "age_range": "age_range",
    "ageRange": "age_range",
    "state": "state",
    "vehicle_type": "vehicle_type",
    "vehicleType": "vehicle_type",
    "coverage_level": "coverage_level",
    "coverageLevel": "coverage_level",
    "driving_history": "driving_history",
    "drivingHistory": "driving_history",
}


@dataclass
class BatchSummary:
    source_path: str
    output_path: str
    created_utc: str
    rows: int
    total_monthly_savings: int
    total_annual_savings: int
    mean_savings_multiplier: float
    rows_with_warnings: int
    sha256: str
    notes: list[str]


def _utc_now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def _row_to_raw(record: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Drop blank cells so the form defaults apply, and say so for profile columns.
    A blank premium is kept as None (coerced to 0 downstream).
    """
    raw: Dict[str, Any] = {}
    warnings: List[str] = []
    for k, v in record.items():
        if k in _PREMIUM_COLUMNS:
            raw[k] = None if pd.isna(v) else v
        elif not pd.isna(v):
            raw[k] = v
        elif k in _PROFILE_COLUMNS:
            default = DEFAULT_FORM_VALUES[_PROFILE_COLUMNS[k]]
            warnings.append(f"{k} cell is blank; form default '{default}' used.")
    return raw, warnings


def estimate_frame(df: pd.DataFrame, cfg: Optional[EstimatorConfig] = None) -> pd.DataFrame:
    """
    Estimate every row of a profile DataFrame.

    Returns one row per input row with the normalised profile fields, the
    breakdown fields and a ``warnings`` column ("; "-joined, empty if none).

    Raises:
        ValueError: a row carries an unknown categorical value (row index in message).
    """
    cfg = cfg or get_estimator_config()
    out_rows: List[Dict[str, Any]] = []

    for idx, record in zip(df.index, df.to_dict(orient="records")):
        try:
            raw, blank_warnings = _row_to_raw(record)
            inputs, warnings = build_input(raw)
        except ValueError as e:
            raise ValueError(f"Row {idx}: {e}") from e

        row = inputs.to_dict()
        row.update(estimate(inputs, cfg=cfg).to_dict())
        row["warnings"] = "; ".join(blank_warnings + warnings)
        out_rows.append(row)

    return pd.DataFrame(out_rows, index=df.index)


def build_summary(
    result: pd.DataFrame,
    source_path: Path,
    output_path: Path,
    sha: str,
    notes: Optional[list[str]] = None,
) -> BatchSummary:
    if notes is None:
        notes = []

    rows = int(result.shape[0])
    return BatchSummary(
        source_path=str(source_path),
        output_path=str(output_path),
        created_utc=_utc_now_iso(),
        rows=rows,
        total_monthly_savings=int(result["monthly_savings"].sum()) if rows else 0,
        total_annual_savings=int(result["annual_savings"].sum()) if rows else 0,
        mean_savings_multiplier=float(result["savings_multiplier"].mean()) if rows else 0.0,
        rows_with_warnings=int((result["warnings"] != "").sum()) if rows else 0,
        sha256=sha,
        notes=notes,
    )


def _default_out_path(in_path: Path) -> Path:
    return in_path.with_name(f"{in_path.stem}_estimates{in_path.suffix}")


def _default_summary_path() -> Path:
    return get_paths().reports_dir / "batch_summary.json"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Estimate premium savings for a file of driver profiles.")
    p.add_argument("--in_path", type=str, required=True, help="Input CSV/Parquet of profiles")
    p.add_argument("--out_path", type=str, default=None, help="Output path. Default: <in_stem>_estimates.<ext>")
    p.add_argument("--summary_path", type=str, default=None, help="Summary JSON path. Default: reports/batch_summary.json")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()

    in_path = Path(args.in_path)
    out_path = Path(args.out_path) if args.out_path else _default_out_path(in_path)
    summary_path = Path(args.summary_path) if args.summary_path else _default_summary_path()

    df = read_df(in_path)

    notes: list[str] = []
    if df.empty:
        notes.append("WARNING: Input dataframe is empty.")
        logger.warning("Input %s has no rows", in_path)

    result = estimate_frame(df)
    write_df(result, out_path)

    summary = build_summary(
        result,
        source_path=in_path,
        output_path=out_path,
        sha=sha256_file(in_path),
        notes=notes,
    )
    write_json(summary, summary_path)

    print(f"[OK] Profiles read        : {in_path}")
    print(f"[OK] Estimates saved      : {out_path}")
    print(f"[OK] Summary saved        : {summary_path}")
    print(
        f"Rows: {summary.rows} | Monthly savings: {summary.total_monthly_savings} | "
        f"Annual savings: {summary.total_annual_savings} | Warnings: {summary.rows_with_warnings}"
    )


if __name__ == "__main__":
    main()
