"""Transport and response-header security checks."""

from urllib.parse import urlparse

from ..models import CheckResult
from . import PageContext, make_check


def check_https(page: PageContext) -> CheckResult:
    if urlparse(page.url).scheme.lower() == "https":
        return make_check(
            True, 100, "SSL/HTTPS", "Secure connection used.", "high", "hard",
            "HTTPS encrypts data between the user's browser and your server, ensuring privacy and security.",
            "Your site is secure.",
        )
    return make_check(
        False, 0, "SSL/HTTPS", "Insecure connection (HTTP)", "high", "hard",
        "Search engines penalize non-secure sites and browsers show users a 'Not Secure' warning.",
        "Install a free SSL certificate from **Let's Encrypt** or put the site behind a proxy "
        "such as **Cloudflare** that terminates SSL for you.",
        recommendation="Enable HTTPS.",
        learn_more_url="https://letsencrypt.org/getting-started/",
    )


def _header_check(header, title, impact, difficulty, passed_text, failed_text,
                  explanation, how_to_fix, recommendation):
    """Build a presence check for one response header."""

    def check(page: PageContext) -> CheckResult:
        value = page.headers.get(header)
        if value:
            return make_check(
                True, 100, title, passed_text, impact, difficulty,
                explanation, "Configuration is good.",
                details=[f"{header}: {value}"],
            )
        return make_check(
            False, 0, title, failed_text, impact, difficulty,
            explanation, how_to_fix,
            recommendation=recommendation,
        )

    check.__name__ = "check_" + header.replace("-", "_")
    check.__doc__ = f"``{header}`` response header present."
    return check


check_strict_transport_security = _header_check(
    "strict-transport-security", "HSTS", "medium", "hard",
    "HSTS header present.", "HSTS header missing",
    "HSTS tells browsers to only talk to your site over HTTPS, preventing downgrade attacks.",
    "Add this header to your server response:\n`Strict-Transport-Security: max-age=31536000; includeSubDomains`",
    "Enable HSTS.",
)

check_x_frame_options = _header_check(
    "x-frame-options", "X-Frame-Options", "medium", "medium",
    "Clickjacking protection present.", "Clickjacking protection missing",
    "This header stops other sites from embedding yours in an iframe to trick users.",
    "Add this header:\n`X-Frame-Options: SAMEORIGIN`",
    "Add X-Frame-Options header.",
)

check_x_content_type_options = _header_check(
    "x-content-type-options", "X-Content-Type-Options", "low", "easy",
    "MIME sniffing protection present.", "MIME sniffing protection missing",
    "Prevents browsers from interpreting files as a different MIME type than the one declared.",
    "Add this header:\n`X-Content-Type-Options: nosniff`",
    "Add X-Content-Type-Options header.",
)


SECURITY_CHECKS = (
    check_https,
    check_strict_transport_security,
    check_x_frame_options,
    check_x_content_type_options,
)
