"""Single-page HTTP fetch with URL validation."""

import ipaddress
import logging
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import httpx

from .config import Settings, get_settings
from .errors import FetchError, ValidationError

logger = logging.getLogger(__name__)

BLOCKED_HOSTS = {"localhost", "127.0.0.1"}


@dataclass(frozen=True)
class FetchResult:
    """What came back from the server."""
    url: str
    final_url: str
    status: int
    headers: httpx.Headers
    body: str
    size: int  # bytes
    elapsed_ms: int


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    url = url.strip()
    if not url.startswith(("http://", "https://")) and "://" not in url:
        url = "https://" + url
    return url


def _is_loopback(host: str) -> bool:
    if host in BLOCKED_HOSTS or host.endswith(".localhost"):
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def validate_url(url: str) -> str:
    """Reject URLs we will not fetch. Returns the URL unchanged.

    Raises:
        ValidationError: malformed URL, unsupported scheme, or a loopback host
    """
    try:
        parsed = urlparse(url)
        host = (parsed.hostname or "").lower()
        parsed.port  # raises on out-of-range ports
    except ValueError as e:
        raise ValidationError(f"Malformed URL: {e}", url=url) from e

    if parsed.scheme not in ("http", "https"):
        raise ValidationError(f"Unsupported URL scheme: {parsed.scheme or '(none)'}", url=url)
    if not host:
        raise ValidationError("URL has no host", url=url)
    if any(ch.isspace() for ch in host):
        raise ValidationError("URL host contains whitespace", url=url)
    try:
        httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValidationError(f"Malformed URL: {e}", url=url) from e
    if _is_loopback(host):
        logger.warning("Refusing to audit local address %s", url)
        raise ValidationError("Analysis of local networks is not supported.", url=url)
    return url


def fetch(
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> FetchResult:
    """Fetch a page once, no retries.

    Args:
        url: Absolute http(s) URL, already validated
        client: Client to use instead of a fresh one (left open)
        timeout: Request timeout in seconds, overrides settings
        settings: Engine settings; read from the environment when omitted

    Returns:
        FetchResult with the fully read body and the elapsed time

    Raises:
        FetchError: on timeout or any transport failure
    """
    settings = settings or get_settings()
    timeout = settings.http_timeout if timeout is None else timeout

    logger.info("Fetching %s", url)
    start_time = time.perf_counter()

    try:
        if client is None:
            with httpx.Client(
                headers=settings.request_headers,
                timeout=timeout,
                follow_redirects=settings.follow_redirects,
            ) as own_client:
                response = own_client.get(url)
        else:
            response = client.get(
                url,
                headers=settings.request_headers,
                timeout=timeout,
                follow_redirects=settings.follow_redirects,
            )
    except httpx.TimeoutException as e:
        logger.warning("Timeout fetching %s", url)
        raise FetchError(url, f"Timeout after {timeout}s") from e
    except httpx.HTTPError as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise FetchError(url, str(e) or e.__class__.__name__) from e

    # httpx.Client.get reads the whole body before returning.
    elapsed_ms = int((time.perf_counter() - start_time) * 1000)

    if response.status_code >= 400:
        logger.warning("%s answered HTTP %d, auditing the returned body", url, response.status_code)

    result = FetchResult(
        url=url,
        final_url=str(response.url),
        status=response.status_code,
        headers=response.headers,
        body=response.text,
        size=len(response.content),
        elapsed_ms=elapsed_ms,
    )
    logger.info(
        "Fetched %s: HTTP %d, %d bytes in %dms", result.final_url, result.status, result.size, elapsed_ms
    )
    return result
