import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORIES = ("strengths", "weaknesses", "opportunities", "threats")

PREFIXES: Dict[str, str] = {
    "strengths": "S",
    "weaknesses": "W",
    "opportunities": "O",
    "threats": "T",
}

# Singular names used for placeholder tooltips ("Opportunity 3").
SINGULAR: Dict[str, str] = {
    "strengths": "Strength",
    "weaknesses": "Weakness",
    "opportunities": "Opportunity",
    "threats": "Threat",
}

STRATEGY_KEY_RE = re.compile(r"^([SW])([1-9][0-9]*)-([OT])([1-9][0-9]*)$")


class StrategyQuadrant(str, Enum):
    SO = "SO"
    ST = "ST"
    WO = "WO"
    WT = "WT"

    @property
    def label(self) -> str:
        return {
            "SO": "Growth",
            "ST": "Defensive",
            "WO": "Turnaround",
            "WT": "Survival",
        }[self.value]

    @classmethod
    def for_labels(cls, row_label: str, col_label: str) -> "StrategyQuadrant":
        return cls(row_label[0] + col_label[0])


def strategy_key(row_label: str, col_label: str) -> str:
    return f"{row_label}-{col_label}"


def parse_strategy_key(key: str) -> Optional[tuple]:
    """Split ``"S1-O2"`` into ``("S", 1, "O", 2)``; ``None`` if malformed."""
    m = STRATEGY_KEY_RE.fullmatch(key or "")
    if not m:
        return None
    return m.group(1), int(m.group(2)), m.group(3), int(m.group(4))


class SWOTSet(BaseModel):
    """Labeled items per category. Replaced wholesale, never mutated."""

    model_config = ConfigDict(frozen=True)

    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)

    def items(self, category: str) -> List[str]:
        return list(getattr(self, category))

    def counts(self) -> Dict[str, int]:
        return {c: len(getattr(self, c)) for c in CATEGORIES}

    def is_empty(self) -> bool:
        return not any(self.counts().values())


class InitialStateDocument(BaseModel):
    """Structure of ``default-swot.json`` and uploaded example files."""

    model_config = ConfigDict(populate_by_name=True)

    strengths: List[str]
    weaknesses: List[str]
    opportunities: List[str]
    threats: List[str]
    matrix_strategies: Optional[Dict[str, str]] = Field(default=None, alias="matrixStrategies")

    @field_validator("matrix_strategies")
    @classmethod
    def keys_are_strategy_keys(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if v is None:
            return v
        bad = [k for k in v if parse_strategy_key(k) is None]
        if bad:
            raise ValueError(f"Invalid matrix strategy keys: {', '.join(sorted(bad))}")
        return v

    def as_text(self, category: str) -> str:
        return "\n".join(getattr(self, category))
