from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Union

import numpy as np
import pandas as pd

SUPPORTED_FORMATS = (".csv", ".parquet", ".json")


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def sha256_file(path: Path, chunk_size: int = 1024 * 1024) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()


def _json_default(obj: Any) -> Any:
    # numpy scalars leak in from DataFrame aggregates
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def write_json(obj: Any, path: Path) -> None:
    ensure_dir(path.parent)
    payload = asdict(obj) if is_dataclass(obj) else obj

    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=_json_default)


def _suffix(path: Path) -> str:
    suf = path.suffix.lower()
    if suf not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported dataframe format: {suf!r}. Expected one of {list(SUPPORTED_FORMATS)}")
    return suf


def read_df(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a profile table. JSON files must hold a list of records.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suf = _suffix(path)
    if suf == ".csv":
        return pd.read_csv(path)
    if suf == ".parquet":
        return pd.read_parquet(path)
    return pd.read_json(path, orient="records")


def write_df(df: pd.DataFrame, path: Union[str, Path]) -> None:
    path = Path(path)
    suf = _suffix(path)
    ensure_dir(path.parent)

    if suf == ".csv":
        df.to_csv(path, index=False)
    elif suf == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_json(path, orient="records", indent=2)
