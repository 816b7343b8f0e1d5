"""Social presence checks."""

from ..models import CheckResult
from . import PageContext, make_check

SOCIAL_DOMAINS = (
    "facebook.com",
    "twitter.com",
    "x.com",
    "linkedin.com",
    "instagram.com",
    "youtube.com",
    "tiktok.com",
    "github.com",
    "threads.net",
    "discord.com",
)


def find_social_domains(page: PageContext) -> list[str]:
    """Allow-listed domains linked from the page, in first-seen order."""
    found: list[str] = []
    for link in page.document.find_all("a"):
        href = (link.get("href") or "").lower()
        if not href:
            continue
        for domain in SOCIAL_DOMAINS:
            if domain in href and domain not in found:
                found.append(domain)
    return found


def check_social_accounts(page: PageContext) -> CheckResult:
    found = find_social_domains(page)
    if found:
        return make_check(
            True, 100, "Social Accounts", f"Found links to: {', '.join(found)}", "medium", "easy",
            "Social media drives traffic and builds brand authority.",
            "Great, you are linking to social profiles.",
            details=found,
        )
    return make_check(
        False, 0, "Social Accounts", "No social media links found", "medium", "easy",
        "Social signals are indirect ranking factors.",
        "Add links to your active social media profiles in the header or footer.",
        recommendation="Link your social media profiles.",
    )


def check_open_graph(page: PageContext) -> CheckResult:
    og_title = page.document.select_one('meta[property="og:title" i]')
    if og_title is not None:
        return make_check(
            True, 100, "Open Graph", "Open Graph tags present.", "medium", "easy",
            "Open Graph tags control how your content is displayed when shared on social media.",
            "Implementation is correct.",
            details=[(og_title.get("content") or "").strip()] if og_title.get("content") else [],
            learn_more_url="https://ogp.me/",
        )
    return make_check(
        False, 0, "Open Graph", "Open Graph tags missing", "medium", "easy",
        "Without OG tags, social networks guess which image and title to use.",
        "Add these tags to `<head>`:\n```html\n"
        '<meta property="og:title" content="Your Title">\n'
        '<meta property="og:description" content="Description">\n'
        '<meta property="og:image" content="https://example.com/thumb.jpg">\n```',
        recommendation="Add OG tags for better sharing.",
        learn_more_url="https://ogp.me/",
    )


SOCIAL_CHECKS = (
    check_social_accounts,
    check_open_graph,
)
