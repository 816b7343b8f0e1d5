"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SiteAuditBot/1.0; +http://siteaudit.io/bot)"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Engine settings."""
    http_timeout: float = field(default_factory=lambda: float(os.getenv("SITE_AUDIT_TIMEOUT", "15")))
    user_agent: str = field(default_factory=lambda: os.getenv("SITE_AUDIT_USER_AGENT", DEFAULT_USER_AGENT))
    follow_redirects: bool = field(default_factory=lambda: _env_bool("SITE_AUDIT_FOLLOW_REDIRECTS", True))
    log_level: str = field(default_factory=lambda: os.getenv("SITE_AUDIT_LOG_LEVEL", "WARNING").upper())

    @property
    def request_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
