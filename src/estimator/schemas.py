# src/estimator/schemas.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class BreakdownRow:
    label: str
    value: str
    is_total: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EstimateReport:
    currency: str
    inputs: Dict[str, Any]
    factors: Dict[str, Any]
    breakdown: Dict[str, Any]
    display: Dict[str, str]
    rows: List[BreakdownRow] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)
    disclaimer: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currency": self.currency,
            "inputs": self.inputs,
            "factors": self.factors,
            "breakdown": self.breakdown,
            "display": self.display,
            "rows": [r.to_dict() for r in self.rows],
            "tips": list(self.tips),
            "disclaimer": self.disclaimer,
        }
