"""Usability checks."""

import re

from ..models import CheckResult
from . import PageContext, make_check

PHONE_PATTERN = re.compile(r"(\+\d{1,2}\s?)?1?-?\.?\s?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}")


def check_favicon(page: PageContext) -> CheckResult:
    icon = page.document.select_one('link[rel*="icon" i]')
    if icon is not None:
        return make_check(
            True, 100, "Favicon", "Favicon found.", "low", "easy",
            "Favicons help users identify your tab in their browser.",
            "Favicon is present.",
            details=[(icon.get("href") or "").strip()] if icon.get("href") else [],
        )
    return make_check(
        False, 0, "Favicon", "Favicon missing", "low", "easy",
        "Missing favicons look unprofessional and make it hard to find tabs.",
        "Add a link to your icon in `<head>`:\n```html\n"
        '<link rel="icon" type="image/x-icon" href="/favicon.ico">\n```',
        recommendation="Add a favicon.",
    )


def check_language(page: PageContext) -> CheckResult:
    html = page.document.find("html")
    lang = (html.get("lang") or "").strip() if html is not None else ""
    if lang:
        return make_check(
            True, 100, "Language", f"Language specified: {lang}", "medium", "easy",
            "Declaring a language helps screen readers and translation tools.",
            "Language is correctly set.",
        )
    return make_check(
        False, 0, "Language", "Language attribute missing", "medium", "easy",
        "Without a language attribute, browsers and tools assume a default (often English) which might be wrong.",
        'Update your opening HTML tag:\n```html\n<html lang="en">\n```',
        recommendation="Specify language in html tag.",
    )


def check_print_friendly(page: PageContext) -> CheckResult:
    """Optional: a missing print stylesheet is not penalized."""
    has_print = bool(page.document.select('link[media*="print" i]')) or "@media print" in page.html_lower
    if has_print:
        return make_check(
            True, 100, "Print Friendly", "Print stylesheet detected.", "low", "medium",
            "Print stylesheets ensure your page looks good when printed (hiding navs, adjusting colors).",
            "Print optimization is active.",
        )
    return make_check(
        True, 100, "Print Friendly", "No print stylesheet found (optional)", "low", "medium",
        "Not strictly required, but good for articles and recipes.",
        "Add a print block to your CSS:\n```css\n@media print {\n"
        "  nav, footer, .ad { display: none; }\n"
        "  body { color: black; background: white; }\n}\n```",
    )


def check_contact_info(page: PageContext) -> CheckResult:
    """Optional: pages may rely on a contact form instead."""
    phone = PHONE_PATTERN.search(page.html)
    email = EMAIL_PATTERN.search(page.html)
    if phone or email:
        found = [m.group(0).strip() for m in (phone, email) if m]
        return make_check(
            True, 100, "Contact Info", "Contact information found.", "medium", "easy",
            "Displaying contact info builds trust and helps local SEO.",
            "Contact info is visible.",
            details=found,
        )
    return make_check(
        True, 100, "Contact Info", "No phone or email detected directly.", "medium", "easy",
        "Clear contact info improves trust.",
        "Ensure a phone number or email address is visible if applicable.",
    )


USABILITY_CHECKS = (
    check_favicon,
    check_language,
    check_print_friendly,
    check_contact_info,
)
