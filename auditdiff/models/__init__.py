"""Core data structures for auditdiff."""

from auditdiff.models.audit import AuditInput, AuditLevel, AuditLogPayload, AuditType
from auditdiff.models.config import (
    AuditConfig,
    AuditDiffConfig,
    LogConfig,
    SinkKind,
    WebhookConfig,
)

__all__ = [
    "AuditConfig",
    "AuditDiffConfig",
    "AuditInput",
    "AuditLevel",
    "AuditLogPayload",
    "AuditType",
    "LogConfig",
    "SinkKind",
    "WebhookConfig",
]
