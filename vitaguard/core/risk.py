"""
Risk Analysis Base Types

Data contracts shared by both analysis strategies (Gemini and the local
fallback engine) and consumed by the HTTP layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import datetime
from enum import Enum
from typing import Any, Dict, Sequence, Tuple


class RiskLevel(str, Enum):
    """Overall risk tier derived from the 0-100 risk score."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class CategoryRisk(str, Enum):
    """Per-category label. Note the top tier is "Elevated", not "High"."""
    LOW = "Low"
    MODERATE = "Moderate"
    ELEVATED = "Elevated"


class HealthCategory(str, Enum):
    CARDIOVASCULAR = "Cardiovascular"
    RESPIRATORY = "Respiratory"
    METABOLIC = "Metabolic"


# Fixed report order of the category breakdown
CATEGORY_ORDER: Tuple[HealthCategory, ...] = (
    HealthCategory.CARDIOVASCULAR,
    HealthCategory.RESPIRATORY,
    HealthCategory.METABOLIC,
)


class AnalysisSource(str, Enum):
    """Which strategy produced a RiskAnalysis."""
    GEMINI = "gemini"
    FALLBACK = "fallback"


# ── Thresholds ────────────────────────────────────────────────────────────────

LOW_RISK_CEILING = 16        # score < 16 → Low
MODERATE_RISK_CEILING = 35   # 16 ≤ score ≤ 35 → Moderate, above → High

CATEGORY_ELEVATED_FLOOR = 40   # score > 40 → Elevated
CATEGORY_MODERATE_FLOOR = 20   # score > 20 → Moderate

# Score bands per source; the Gemini band is narrower on purpose
FALLBACK_SCORE_RANGE = (0, 95)
GEMINI_SCORE_RANGE = (5, 75)
CATEGORY_SCORE_RANGE = (0, 100)

MAX_LIST_ITEMS = 4


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def classify_risk_level(score: int) -> RiskLevel:
    """Map an overall risk score to its tier. Used for every source."""
    if score < LOW_RISK_CEILING:
        return RiskLevel.LOW
    if score <= MODERATE_RISK_CEILING:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def classify_category_risk(score: int) -> CategoryRisk:
    if score > CATEGORY_ELEVATED_FLOOR:
        return CategoryRisk.ELEVATED
    if score > CATEGORY_MODERATE_FLOOR:
        return CategoryRisk.MODERATE
    return CategoryRisk.LOW


@dataclass(frozen=True)
class CategoryDetail:
    """Sub-score for one body system."""
    category: HealthCategory
    risk: CategoryRisk
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "risk": self.risk.value,
            "score": self.score,
        }


@dataclass(frozen=True)
class RiskAnalysis:
    """
    Result of analysing one questionnaire.

    Constructed once per submission and never mutated. ``risk_level`` is
    always derived from ``risk_score`` by the caller that builds it, through
    :func:`classify_risk_level`.
    """
    risk_score: int
    risk_level: RiskLevel
    summary: str
    recommendations: Tuple[str, ...]
    tips: Tuple[str, ...]
    diet_options: Tuple[str, ...]
    details: Tuple[CategoryDetail, ...]
    source: AnalysisSource
    user_name: str = "User"
    date: str = field(default_factory=lambda: datetime.date.today().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Serialise with the wire field names the UI and Gemini share."""
        return {
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level.value,
            "summary": self.summary,
            "recommendations": list(self.recommendations),
            "tips": list(self.tips),
            "dietOptions": list(self.diet_options),
            "details": [d.to_dict() for d in self.details],
            "source": self.source.value,
            "userName": self.user_name,
            "date": self.date,
        }

    def without_date(self) -> Dict[str, Any]:
        """``to_dict`` minus the environmental date, for reproducibility checks."""
        data = self.to_dict()
        data.pop("date")
        return data


def first_items(items: Sequence[str], limit: int = MAX_LIST_ITEMS) -> Tuple[str, ...]:
    return tuple(items[:limit])
