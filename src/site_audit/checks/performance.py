"""Performance checks based on the single fetch."""

from ..models import CheckResult
from . import PageContext, make_check

FAST_RESPONSE_MS = 500
SLOW_RESPONSE_MS = 1000
SMALL_PAGE_BYTES = 50 * 1024
LARGE_PAGE_BYTES = 150 * 1024


def check_response_time(page: PageContext) -> CheckResult:
    """Full-body response time: <500ms fast, <1000ms acceptable."""
    ms = page.elapsed_ms
    if ms < FAST_RESPONSE_MS:
        return make_check(
            True, 100, "Server Response Time", f"Fast: {ms}ms", "high", "hard",
            "Server response time is a key metric for user experience and SEO.",
            "Great job! Keep monitoring response times.",
        )
    if ms < SLOW_RESPONSE_MS:
        return make_check(
            False, 75, "Server Response Time", f"Acceptable: {ms}ms", "high", "hard",
            "Response time is acceptable but could be better.",
            "Optimize database queries, install a caching plugin, or upgrade your hosting plan.",
        )
    return make_check(
        False, 0, "Server Response Time", f"Slow: {ms}ms", "high", "hard",
        "Slow server response times frustrate users and hurt rankings.",
        "Enable page caching, optimize backend code, use a CDN, or upgrade server resources.",
        recommendation="Optimize server backend or use caching.",
    )


def check_page_size(page: PageContext) -> CheckResult:
    size = page.html_size
    kb = f"{size / 1024:.1f}KB"
    if size < SMALL_PAGE_BYTES:
        return make_check(
            True, 100, "Page Size", f"Small: {kb}", "medium", "medium",
            "Smaller pages load faster and use less data.",
            "Excellent work keeping page size down.",
        )
    if size < LARGE_PAGE_BYTES:
        return make_check(
            False, 80, "Page Size", f"Medium: {kb}", "medium", "medium",
            "Page size is reasonable.",
            "Monitor size as you add more content.",
        )
    return make_check(
        False, 0, "Page Size", f"Large: {kb}", "medium", "medium",
        "Large HTML files take longer to download and parse.",
        "Minify HTML, remove inline CSS/JS, and clean up code.",
        recommendation="Minify HTML/CSS/JS.",
    )


def check_compression(page: PageContext) -> CheckResult:
    encoding = page.headers.get("content-encoding", "").lower()
    if "gzip" in encoding or "br" in encoding:
        return make_check(
            True, 100, "Compression", "Compression enabled.", "high", "hard",
            "Compression significantly reduces the size of files sent from your server.",
            "Great! Gzip or Brotli is active.",
            details=[encoding],
        )
    return make_check(
        False, 0, "Compression", "Compression not detected", "high", "hard",
        "Text-based resources (HTML, CSS, JS) should be compressed to save bandwidth. "
        "This is usually a server config.",
        "**Nginx:**\n```nginx\ngzip on;\n"
        "gzip_types text/plain text/css application/json application/javascript;\n```\n\n"
        "**Apache:**\n```apache\n<IfModule mod_deflate.c>\n"
        "  AddOutputFilterByType DEFLATE text/html text/plain text/xml text/css application/javascript\n"
        "</IfModule>\n```",
        recommendation="Enable Gzip/Brotli.",
    )


def _unminified(url: str, extension: str) -> bool:
    url = url.lower()
    return extension in url and ".min." not in url and "cdn" not in url


def check_minification(page: PageContext) -> CheckResult:
    """Heuristic: local .js/.css assets without ``.min.`` in the name."""
    candidates = []
    for script in page.document.select("script[src]"):
        src = (script.get("src") or "").strip()
        if _unminified(src, ".js"):
            candidates.append(src)
    for link in page.document.select('link[rel~="stylesheet" i][href]'):
        href = (link.get("href") or "").strip()
        if _unminified(href, ".css"):
            candidates.append(href)

    if not candidates:
        return make_check(
            True, 100, "Asset Minification", "All detected assets appear minified.", "medium", "medium",
            "Minification removes whitespace and comments from code files to reduce size.",
            "Keep using build tools that auto-minify your assets.",
        )
    return make_check(
        False, 60, "Asset Minification", f"{len(candidates)} assets potentially not minified.", "medium", "medium",
        "Minified files download faster.",
        "**How to fix:**\n"
        "If using **Webpack/Vite**: run the production `build` command (e.g. `npm run build`), "
        "which minifies automatically.\n"
        "If using raw CSS/JS: run the files through a minifier before deploying.",
        recommendation="Minify your CSS and JS assets.",
        details=candidates[:5],
    )


PERFORMANCE_CHECKS = (
    check_response_time,
    check_page_size,
    check_compression,
    check_minification,
)
