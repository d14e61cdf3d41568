"""Audit sinks: where serialized audit records are written.

AuditSink      -- ABC every backend implements.
LoggingSink    -- stdlib ``logging`` logger, with caller-location support.
StructlogSink  -- structlog logger, payload attached as an event field.

The backend is chosen when the AuditLogger is built; sinks never inspect
the logging framework at runtime.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import structlog

from auditdiff.models.audit import AuditLevel

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_STDLIB_LEVELS: dict[AuditLevel, int] = {
    AuditLevel.TRACE: TRACE,
    AuditLevel.DEBUG: logging.DEBUG,
    AuditLevel.INFO: logging.INFO,
    AuditLevel.WARN: logging.WARNING,
    AuditLevel.ERROR: logging.ERROR,
}

_STRUCTLOG_METHODS: dict[AuditLevel, str] = {
    AuditLevel.TRACE: "debug",
    AuditLevel.DEBUG: "debug",
    AuditLevel.INFO: "info",
    AuditLevel.WARN: "warning",
    AuditLevel.ERROR: "error",
}


class AuditSink(ABC):
    """Abstract base class for audit record backends.

    ``emit`` should not raise; return ``False`` when the record could not
    be written.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier used in diagnostics."""

    @abstractmethod
    def emit(self, level: AuditLevel, message: str, stacklevel: int = 1) -> bool:
        """Write one serialized audit record.

        Args:
            level:      Record severity.
            message:    The JSON document.
            stacklevel: How many frames above the caller of ``emit`` the
                        audited call site sits.  Only meaningful for backends
                        that record caller location.
        """


class LoggingSink(AuditSink):
    """Writes audit records through a stdlib logger.

    Args:
        logger:         Target logger (or its name).
        include_caller: Point the record's location (``pathname``,
                        ``lineno``, ``funcName``) at the audited call site
                        instead of at this sink.
    """

    def __init__(self, logger: logging.Logger | str = "auditdiff.audit", include_caller: bool = True) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._include_caller = include_caller

    @property
    def name(self) -> str:
        return "logging"

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def emit(self, level: AuditLevel, message: str, stacklevel: int = 1) -> bool:
        # +1 skips this frame
        frames = stacklevel + 1 if self._include_caller else 1
        self._logger.log(_STDLIB_LEVELS[level], message, stacklevel=frames)
        return True


class StructlogSink(AuditSink):
    """Writes audit records as ``audit_event`` entries on a structlog logger."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger(component="audit")

    @property
    def name(self) -> str:
        return "structlog"

    def emit(self, level: AuditLevel, message: str, stacklevel: int = 1) -> bool:
        method = getattr(self._logger, _STRUCTLOG_METHODS[level])
        method("audit_event", audit_level=level.value, payload=message)
        return True
