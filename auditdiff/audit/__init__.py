"""Audit record writing for auditdiff.

Exports:
    AuditLogger        -- Builds the JSON payload for an AuditInput and writes
                          it to a sink without ever raising.
    AuditSink          -- Abstract base for all sink implementations.
    LoggingSink        -- stdlib logging sink with caller-location metadata.
    StructlogSink      -- structlog sink.
    WebhookSink        -- JSON POST sink.
    build_payload      -- Envelope builder used by AuditLogger.
    build_audit_logger -- Factory used with :func:`auditdiff.config.load_config`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from auditdiff.audit.logger import AuditLogger, build_payload, serialize_payload
from auditdiff.audit.sinks import AuditSink, LoggingSink, StructlogSink
from auditdiff.audit.webhook import WebhookSink
from auditdiff.models.config import SinkKind
from auditdiff.observability.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from auditdiff.models.config import AuditDiffConfig

_log = get_logger("audit")

__all__ = [
    "AuditLogger",
    "AuditSink",
    "LoggingSink",
    "StructlogSink",
    "WebhookSink",
    "build_audit_logger",
    "build_payload",
    "serialize_payload",
]


def build_audit_logger(config: AuditDiffConfig) -> AuditLogger:
    """Build an AuditLogger writing to the sink selected in *config*.

    Empty ``service``/``tenant_id`` settings mean "no default": the
    attribute is then only present when the input sets it.  Diagnostics are
    configured at ``config.log.level`` first.
    """
    setup_logging(config.log.level)
    audit = config.audit
    sink: AuditSink
    if audit.sink is SinkKind.WEBHOOK:
        sink = WebhookSink(url=config.webhook.url, timeout=config.webhook.timeout_seconds)
    elif audit.sink is SinkKind.STRUCTLOG:
        sink = StructlogSink()
    else:
        sink = LoggingSink(logger=audit.logger_name, include_caller=audit.include_caller)

    _log.info("audit_sink_selected", sink=sink.name)
    return AuditLogger(
        sink=sink,
        service=audit.service or None,
        tenant_id=audit.tenant_id or None,
    )
