"""Main auditor that runs all checks."""

import logging
from typing import Mapping, Optional

import httpx

from .checks import PageContext, run_checks
from .config import Settings, get_settings
from .fetcher import FetchResult, fetch, normalize_url, validate_url
from .models import Report
from .parser import parse
from .scoring import assemble

logger = logging.getLogger(__name__)


def build_report(
    page: PageContext,
    *,
    weights: Optional[Mapping[str, float]] = None,
    status_code: Optional[int] = None,
) -> Report:
    """Score an already fetched page. Pure: same page in, same report out."""
    return assemble(
        page.url,
        run_checks(page),
        weights=weights,
        status_code=status_code,
        response_time_ms=page.elapsed_ms,
    )


def page_from_fetch(fetched: FetchResult) -> PageContext:
    return PageContext(
        document=parse(fetched.body),
        headers=fetched.headers,
        elapsed_ms=fetched.elapsed_ms,
        html_size=fetched.size,
        url=fetched.url,
        html=fetched.body,
    )


def analyze(
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
    weights: Optional[Mapping[str, float]] = None,
) -> Report:
    """Run a complete audit on a URL.

    Args:
        url: The URL to audit; a bare domain gets ``https://``
        client: httpx client to fetch with (tests pass a mock transport)
        timeout: Request timeout in seconds
        settings: Engine settings; read from the environment when omitted
        weights: Optional per-category weights for the overall score

    Returns:
        Fully scored Report

    Raises:
        ValidationError: bad URL or local host, before any network access
        FetchError: the page could not be retrieved
    """
    url = validate_url(normalize_url(url))
    settings = settings or get_settings()

    fetched = fetch(url, client=client, timeout=timeout, settings=settings)
    return build_report(page_from_fetch(fetched), weights=weights, status_code=fetched.status)
