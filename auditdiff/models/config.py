"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class SinkKind(StrEnum):
    """Backend an AuditLogger writes to."""

    LOGGING = "logging"
    STRUCTLOG = "structlog"
    WEBHOOK = "webhook"


@dataclass
class AuditConfig:
    """Audit record defaults and sink selection."""

    service: str = ""
    tenant_id: str = ""
    sink: SinkKind = SinkKind.LOGGING
    logger_name: str = "auditdiff.audit"
    include_caller: bool = True


@dataclass
class WebhookConfig:
    """HTTP collector settings for the webhook sink."""

    url: str = ""
    timeout_seconds: float = 10.0


@dataclass
class LogConfig:
    """Diagnostics logging configuration."""

    level: str = "info"


@dataclass
class AuditDiffConfig:
    """Top-level auditdiff configuration."""

    audit: AuditConfig = field(default_factory=AuditConfig)
    webhook: WebhookConfig = field(default_factory=WebhookConfig)
    log: LogConfig = field(default_factory=LogConfig)
