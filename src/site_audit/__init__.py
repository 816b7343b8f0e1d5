"""site-audit - heuristic single-page website audit."""

__version__ = "0.1.0"

from .auditor import analyze, build_report
from .errors import AuditError, FetchError, ValidationError
from .models import AnalysisSection, CheckResult, Report, migrate_report

__all__ = [
    "__version__",
    "analyze",
    "build_report",
    "AuditError",
    "FetchError",
    "ValidationError",
    "AnalysisSection",
    "CheckResult",
    "Report",
    "migrate_report",
]
