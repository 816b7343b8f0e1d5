"""Category aggregation and report assembly.

Category score is the rounded mean of the check scores in that category
(empty category scores 0), clamped to 0-100. Checks therefore emit their own
0-100 outcome, not a weight or a penalty. The overall score is the rounded
mean of the category scores, unweighted unless weights are given.
"""

import logging
import math
from typing import Mapping, Optional, Sequence

from .models import CATEGORIES, AnalysisSection, CheckResult, Report

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round x.5 up, unlike the builtin's banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp(score: float) -> int:
    return max(0, min(100, round_half_up(score)))


def aggregate(checks: Sequence[CheckResult]) -> int:
    """Rounded mean of check scores; 0 for an empty category."""
    if not checks:
        return 0
    return clamp(sum(c.score for c in checks) / len(checks))


def overall_score(
    category_scores: Mapping[str, int],
    weights: Optional[Mapping[str, float]] = None,
) -> int:
    """Rounded (weighted) mean across all known categories.

    Categories absent from ``category_scores`` count as 0.
    """
    scores = {name: category_scores.get(name, 0) for name in CATEGORIES}
    if weights is None:
        return clamp(sum(scores.values()) / len(scores))

    unknown = set(weights) - set(CATEGORIES)
    if unknown:
        raise ValueError(f"Unknown categories in weights: {', '.join(sorted(unknown))}")
    if any(w < 0 for w in weights.values()):
        raise ValueError("Category weights must not be negative")
    total_weight = sum(weights.get(name, 0.0) for name in CATEGORIES)
    if total_weight <= 0:
        raise ValueError("Category weights must not all be zero")
    return clamp(sum(scores[name] * weights.get(name, 0.0) for name in CATEGORIES) / total_weight)


def assemble(
    url: str,
    results: Mapping[str, Sequence[CheckResult]],
    *,
    weights: Optional[Mapping[str, float]] = None,
    status_code: Optional[int] = None,
    response_time_ms: Optional[int] = None,
) -> Report:
    """Build the final report from per-category check results."""
    sections = {
        name: AnalysisSection(score=aggregate(results.get(name, ())), checks=tuple(results.get(name, ())))
        for name in CATEGORIES
    }
    overall = overall_score({name: s.score for name, s in sections.items()}, weights)

    logger.info(
        "Scores for %s: overall=%d %s",
        url,
        overall,
        " ".join(f"{name}={s.score}" for name, s in sections.items()),
    )
    return Report(
        url=url,
        overall_score=overall,
        sections=sections,
        status_code=status_code,
        response_time_ms=response_time_ms,
    )
