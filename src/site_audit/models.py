"""Data models for site audit results."""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

REPORT_VERSION = 1

# Display order of the categories in a report.
CATEGORIES = (
    "seo",
    "performance",
    "security",
    "mobile",
    "usability",
    "technologies",
    "social",
)

# Category name -> flat score key on the wire format.
SCORE_KEYS = {
    "seo": "seoScore",
    "performance": "performanceScore",
    "security": "securityScore",
    "mobile": "mobileScore",
    "usability": "usabilityScore",
    "technologies": "technologiesScore",
    "social": "socialScore",
}


class Impact(Enum):
    """How much a failing check hurts the page."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Difficulty(Enum):
    """How hard the remediation is."""
    HARD = "hard"
    MEDIUM = "medium"
    EASY = "easy"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check.

    ``score`` is the check's own 0-100 outcome and is set independently of
    ``passed``. ``how_to_fix`` is the remediation text; a result built with
    only the older short ``recommendation`` gets it copied into
    ``how_to_fix`` on construction.
    """
    passed: bool
    score: int
    title: str
    description: str
    impact: Impact
    difficulty: Difficulty
    explanation: str
    how_to_fix: str = ""
    recommendation: Optional[str] = None
    learn_more_url: Optional[str] = None
    details: tuple[str, ...] = ()

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Check score must be within 0-100, got {self.score}")
        if not self.how_to_fix and self.recommendation:
            object.__setattr__(self, "how_to_fix", self.recommendation)
        if not isinstance(self.details, tuple):
            object.__setattr__(self, "details", tuple(self.details))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "passed": self.passed,
            "score": self.score,
            "title": self.title,
            "description": self.description,
            "impact": self.impact.value,
            "difficulty": self.difficulty.value,
            "explanation": self.explanation,
            "howToFix": self.how_to_fix,
        }
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation
        if self.learn_more_url is not None:
            data["learnMoreUrl"] = self.learn_more_url
        if self.details:
            data["details"] = list(self.details)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResult":
        # Older records carry neither impact nor difficulty.
        return cls(
            passed=bool(data.get("passed", False)),
            score=_clamp(data.get("score", 0)),
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            impact=Impact(data.get("impact", Impact.MEDIUM.value)),
            difficulty=Difficulty(data.get("difficulty", Difficulty.MEDIUM.value)),
            explanation=str(data.get("explanation", "")),
            how_to_fix=str(data.get("howToFix") or ""),
            recommendation=data.get("recommendation"),
            learn_more_url=data.get("learnMoreUrl"),
            details=tuple(str(d) for d in data.get("details") or ()),
        )


@dataclass(frozen=True)
class AnalysisSection:
    """One category's score and its checks in evaluation order."""
    score: int = 0
    checks: tuple[CheckResult, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "checks": [c.to_dict() for c in self.checks]}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AnalysisSection":
        if not data:
            return cls()
        return cls(
            score=_clamp(data.get("score", 0)),
            checks=tuple(CheckResult.from_dict(c) for c in data.get("checks") or ()),
        )


@dataclass(frozen=True)
class Report:
    """Complete audit result for a URL."""
    url: str
    overall_score: int
    sections: Mapping[str, AnalysisSection]
    status_code: Optional[int] = None
    response_time_ms: Optional[int] = None
    version: int = REPORT_VERSION

    def __post_init__(self):
        object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))

    def section(self, category: str) -> AnalysisSection:
        return self.sections.get(category) or AnalysisSection()

    @property
    def seo_score(self) -> int:
        return self.section("seo").score

    @property
    def performance_score(self) -> int:
        return self.section("performance").score

    @property
    def security_score(self) -> int:
        return self.section("security").score

    @property
    def mobile_score(self) -> int:
        return self.section("mobile").score

    @property
    def usability_score(self) -> int:
        return self.section("usability").score

    @property
    def technologies_score(self) -> int:
        return self.section("technologies").score

    @property
    def social_score(self) -> int:
        return self.section("social").score

    @property
    def category_scores(self) -> dict[str, int]:
        return {name: self.section(name).score for name in CATEGORIES}

    @property
    def failed_checks(self) -> list[CheckResult]:
        """Failing checks across all categories, high impact first."""
        order = {Impact.HIGH: 0, Impact.MEDIUM: 1, Impact.LOW: 2}
        failed = [c for name in CATEGORIES for c in self.section(name).checks if not c.passed]
        return sorted(failed, key=lambda c: order[c.impact])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "version": self.version,
            "url": self.url,
            "overallScore": self.overall_score,
        }
        for name in CATEGORIES:
            data[SCORE_KEYS[name]] = self.section(name).score
        data["statusCode"] = self.status_code
        data["responseTimeMs"] = self.response_time_ms
        data["details"] = {name: self.section(name).to_dict() for name in CATEGORIES}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Report":
        return migrate_report(data)


def migrate_report(data: Mapping[str, Any]) -> Report:
    """Read a stored report of any version into the current model.

    A category missing from ``details`` becomes an empty section with a
    score of 0, so consumers never see a hole.
    """
    details = data.get("details") or {}
    sections = {name: AnalysisSection.from_dict(details.get(name)) for name in CATEGORIES}

    overall = data.get("overallScore")
    if overall is None:
        from .scoring import overall_score
        overall = overall_score({name: s.score for name, s in sections.items()})

    return Report(
        url=str(data.get("url", "")),
        overall_score=_clamp(overall),
        sections=sections,
        status_code=data.get("statusCode"),
        response_time_ms=data.get("responseTimeMs"),
        version=REPORT_VERSION,
    )


def _clamp(value: Any) -> int:
    try:
        number = int(math.floor(float(value) + 0.5))
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, number))
