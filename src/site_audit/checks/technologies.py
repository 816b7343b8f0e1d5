"""Technology detection. Informational only: every result passes."""

from dataclasses import dataclass

from ..models import CheckResult
from . import PageContext, make_check


@dataclass(frozen=True)
class Technology:
    """One detectable technology and the markers that reveal it."""
    title: str
    label: str
    explanation: str
    how_to_fix: str
    markers: tuple[str, ...]
    impact: str = "medium"
    difficulty: str = "medium"
    scan_scripts: bool = True

    def matches(self, html_lower: str, script_sources: str) -> bool:
        for marker in self.markers:
            if marker in html_lower:
                return True
            if self.scan_scripts and marker in script_sources:
                return True
        return False


TECHNOLOGIES = (
    Technology("Framework", "React", "Modern JS library for building UIs.", "No action needed.", ("react",)),
    Technology("Framework", "Vue.js", "Progressive JS framework.", "No action needed.", ("vue",)),
    Technology("Framework", "Angular", "Platform for building web apps.", "No action needed.", ("angular",)),
    Technology("Library", "jQuery", "Legacy JS library.",
               "Consider migrating to modern vanilla JS if possible.", ("jquery",),
               impact="low", difficulty="easy"),
    Technology("UI Framework", "Bootstrap", "CSS framework.", "No action needed.", ("bootstrap",), impact="low"),
    Technology("CSS Framework", "Tailwind CSS", "Utility-first CSS framework.", "No action needed.",
               ("tailwindcss",), impact="low", scan_scripts=False),
    Technology("Analytics", "Google Analytics", "Traffic tracking tool.", "No action needed.",
               ("google-analytics", "gtag"), difficulty="easy", scan_scripts=False),
    Technology("Analytics", "Facebook Pixel", "Conversion tracking tool.", "No action needed.",
               ("facebook-pixel", "fbevents"), difficulty="easy", scan_scripts=False),
)


def check_server(page: PageContext) -> list[CheckResult]:
    server = page.headers.get("server", "").strip()
    if not server:
        return []
    return [make_check(
        True, 100, "Server", f"Server: {server}", "low", "hard",
        "The web server software used.", "Information only.",
        details=[server],
    )]


def detect_technologies(page: PageContext) -> list[CheckResult]:
    scripts = " ".join(
        (script.get("src") or "") for script in page.document.find_all("script")
    ).lower()
    html_lower = page.html_lower

    return [
        make_check(
            True, 100, tech.title, f"{tech.label} detected", tech.impact, tech.difficulty,
            tech.explanation, tech.how_to_fix,
        )
        for tech in TECHNOLOGIES
        if tech.matches(html_lower, scripts)
    ]


def check_technologies(page: PageContext) -> list[CheckResult]:
    results = check_server(page) + detect_technologies(page)
    if results:
        return results
    # Keeps an all-informational category from scoring 0.
    return [make_check(
        True, 100, "Technologies", "No technologies detected", "low", "easy",
        "Server software, frameworks and analytics are detected from headers and page source.",
        "Information only.",
    )]


TECHNOLOGY_CHECKS = (check_technologies,)
