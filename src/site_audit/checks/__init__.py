"""Audit checks, grouped by category."""

from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Iterable, Optional, Sequence, Union
from urllib.parse import urlparse

import httpx

from ..models import CheckResult, Difficulty, Impact
from ..parser import Document, parse


@dataclass(frozen=True)
class PageContext:
    """Everything a check may look at. One per analysis, never mutated."""
    document: Document
    headers: httpx.Headers
    elapsed_ms: int
    html_size: int
    url: str
    html: str

    @classmethod
    def from_html(
        cls,
        url: str,
        html: str,
        headers: Optional[dict] = None,
        elapsed_ms: int = 0,
        html_size: Optional[int] = None,
    ) -> "PageContext":
        return cls(
            document=parse(html),
            headers=httpx.Headers(headers or {}),
            elapsed_ms=elapsed_ms,
            html_size=len(html.encode("utf-8")) if html_size is None else html_size,
            url=url,
            html=html,
        )

    @property
    def hostname(self) -> str:
        return (urlparse(self.url).hostname or "").lower()

    @cached_property
    def html_lower(self) -> str:
        return self.html.lower()


def make_check(
    passed: bool,
    score: int,
    title: str,
    description: str,
    impact: str,
    difficulty: str,
    explanation: str,
    how_to_fix: str,
    recommendation: Optional[str] = None,
    details: Iterable[str] = (),
    learn_more_url: Optional[str] = None,
) -> CheckResult:
    return CheckResult(
        passed=passed,
        score=score,
        title=title,
        description=description,
        impact=Impact(impact),
        difficulty=Difficulty(difficulty),
        explanation=explanation,
        how_to_fix=how_to_fix,
        recommendation=recommendation,
        details=tuple(details),
        learn_more_url=learn_more_url,
    )


CheckOutput = Union[CheckResult, Sequence[CheckResult]]
Check = Callable[[PageContext], CheckOutput]

from .seo import SEO_CHECKS  # noqa: E402
from .performance import PERFORMANCE_CHECKS  # noqa: E402
from .security import SECURITY_CHECKS  # noqa: E402
from .mobile import MOBILE_CHECKS  # noqa: E402
from .usability import USABILITY_CHECKS  # noqa: E402
from .technologies import TECHNOLOGY_CHECKS  # noqa: E402
from .social import SOCIAL_CHECKS  # noqa: E402

# Category -> checks, in report order.
CATALOG: tuple[tuple[str, tuple[Check, ...]], ...] = (
    ("seo", SEO_CHECKS),
    ("performance", PERFORMANCE_CHECKS),
    ("security", SECURITY_CHECKS),
    ("mobile", MOBILE_CHECKS),
    ("usability", USABILITY_CHECKS),
    ("technologies", TECHNOLOGY_CHECKS),
    ("social", SOCIAL_CHECKS),
)


def run_category(checks: Sequence[Check], page: PageContext) -> list[CheckResult]:
    """Run checks in declaration order, flattening multi-result checks."""
    results: list[CheckResult] = []
    for check in checks:
        output = check(page)
        if isinstance(output, CheckResult):
            results.append(output)
        else:
            results.extend(output)
    return results


def run_checks(page: PageContext) -> dict[str, list[CheckResult]]:
    """Run the whole catalog against one page."""
    return {category: run_category(checks, page) for category, checks in CATALOG}


__all__ = [
    "CATALOG",
    "Check",
    "PageContext",
    "make_check",
    "run_category",
    "run_checks",
]
