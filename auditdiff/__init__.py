"""auditdiff: minimal before/after diffs for audit trails.

    calculate_diff({"name": "John", "age": 30}, {"name": "John", "age": 31})
    → {"age": 31}

The diff reports what changed or was added, correlates list items by their
``key``/``id`` fields, and never raises: on failure the new state is
returned in full.  :class:`AuditLogger` embeds such diffs into JSON audit
records and writes them to a logging backend.
"""

from auditdiff.audit import AuditLogger, build_audit_logger
from auditdiff.diff import ABSENT, calculate_diff
from auditdiff.models import AuditInput, AuditLevel, AuditType

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "AuditInput",
    "AuditLevel",
    "AuditLogger",
    "AuditType",
    "__version__",
    "build_audit_logger",
    "calculate_diff",
]
