"""Mobile-friendliness checks."""

from ..models import CheckResult
from . import PageContext, make_check


def check_viewport(page: PageContext) -> CheckResult:
    viewport = page.document.meta("viewport")
    if "width=device-width" in viewport.lower().replace(" ", ""):
        return make_check(
            True, 100, "Viewport", "Mobile viewport tag present.", "high", "easy",
            "The viewport tag tells browsers how to adjust dimensions and scaling for mobile devices.",
            "Mobile optimization is active.",
            details=[viewport],
        )
    return make_check(
        False, 0, "Viewport", "Viewport tag missing/incorrect", "high", "easy",
        "Without a viewport tag, mobile browsers render the desktop version and shrink it down, "
        "making it unreadable.",
        "Add this inside `<head>`:\n```html\n"
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n```',
        recommendation="Add width=device-width viewport tag.",
        details=[viewport] if viewport else [],
    )


MOBILE_CHECKS = (check_viewport,)
