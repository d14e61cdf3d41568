"""Audit record data structures and enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class AuditLevel(StrEnum):
    """Severity of an audit record."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str | None) -> AuditLevel:
        """Case-insensitive lookup; unknown or missing levels become INFO."""
        if value is None:
            return cls.INFO
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.INFO


class AuditType(StrEnum):
    """Log stream an audit record belongs to."""

    AUDIT_LOGGING = "audit_logging"
    METRICS = "metrics"
    TRACING = "tracing"

    @classmethod
    def sanitize(cls, value: str | None) -> AuditType:
        """Map free-form type text onto the three supported streams."""
        if value is None:
            return cls.AUDIT_LOGGING
        normalized = value.lower().strip()
        if "audit" in normalized:
            return cls.AUDIT_LOGGING
        if "metric" in normalized:
            return cls.METRICS
        if "trace" in normalized or "tracing" in normalized:
            return cls.TRACING
        return cls.AUDIT_LOGGING


@dataclass
class AuditInput:
    """What the caller knows about an audited action.

    ``updated_data`` is embedded verbatim into the payload attributes; use
    :meth:`AuditLogger.log_change` to fill it with a before/after diff.
    """

    user_id: str | None = None
    user_name: str | None = None
    action: str | None = None
    resource: str | None = None
    resource_id: str | None = None
    ip: str | None = None
    service: str | None = None
    tenant_id: str | None = None
    updated_data: object = None
    type: str | None = None
    level: str | None = None


@dataclass(frozen=True)
class AuditLogPayload:
    """The JSON document written for one audit record."""

    timestamp: str  # ISO-8601 UTC, millisecond precision
    type: AuditType
    level: AuditLevel
    user_id: str | None = None
    user_name: str | None = None
    action: str | None = None  # e.g. "CREATE", "UPDATE", "LOGIN_SUCCESS"
    resource: str | None = None  # e.g. "Team", "UserProfile"
    resource_id: str | None = None
    source_ip_address: str | None = None
    attributes: dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for JSON encoding."""
        return {
            "timestamp": self.timestamp,
            "type": self.type.value,
            "level": self.level.value,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "action": self.action,
            "resource": self.resource,
            "resource_id": self.resource_id,
            "source_ip_address": self.source_ip_address,
            "attributes": self.attributes,
        }
