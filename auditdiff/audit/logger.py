"""Audit logger: turns an AuditInput into a JSON record and writes it.

build_payload     -- Builds the AuditLogPayload envelope for an input.
serialize_payload -- Renders a payload as JSON text.
AuditLogger       -- Builds, serializes and emits records through a sink.
                     Never raises; failures are logged and reported as False.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import UTC, datetime

from auditdiff.audit.sinks import AuditSink, LoggingSink
from auditdiff.diff.engine import calculate_diff
from auditdiff.diff.values import ABSENT, ValueConversionError, to_value
from auditdiff.models.audit import AuditInput, AuditLevel, AuditLogPayload, AuditType
from auditdiff.observability.logging import get_logger

_logger = get_logger("audit.logger")

# Frames between AuditLogger._write and the audited call site: _write, log/log_change, caller
_CALLER_STACKLEVEL = 3


def _format_timestamp(now: datetime) -> str:
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(audit_input: AuditInput, now: datetime | None = None) -> AuditLogPayload:
    """Build the payload envelope for *audit_input*.

    ``service`` and ``tenantId`` attributes are only present when set;
    ``updated_data`` is always present and is ``{}`` when there is nothing
    to report.
    """
    attributes: dict[str, object] = {}
    if audit_input.service is not None:
        attributes["service"] = audit_input.service
    if audit_input.tenant_id is not None:
        attributes["tenantId"] = audit_input.tenant_id

    updated = audit_input.updated_data
    attributes["updated_data"] = {} if updated is None or updated is ABSENT else updated

    return AuditLogPayload(
        timestamp=_format_timestamp(now or datetime.now(tz=UTC)),
        type=AuditType.sanitize(audit_input.type),
        level=AuditLevel.parse(audit_input.level),
        user_id=audit_input.user_id,
        user_name=audit_input.user_name,
        action=audit_input.action,
        resource=audit_input.resource,
        resource_id=audit_input.resource_id,
        source_ip_address=audit_input.ip,
        attributes=attributes,
    )


def serialize_payload(payload: AuditLogPayload) -> str:
    """Render *payload* as compact JSON.

    Raises:
        ValueConversionError: if ``updated_data`` holds an object with no
            JSON representation.
    """
    return json.dumps(to_value(payload.to_dict()), ensure_ascii=False)


class AuditLogger:
    """Writes audit records to a sink.

    Args:
        sink:      Backend to write to.  Defaults to a LoggingSink on the
                   ``auditdiff.audit`` logger.
        service:   Default ``service`` attribute for inputs that leave it unset.
        tenant_id: Default ``tenantId`` attribute for inputs that leave it unset.
    """

    def __init__(
        self,
        sink: AuditSink | None = None,
        service: str | None = None,
        tenant_id: str | None = None,
    ) -> None:
        self._sink = sink or LoggingSink()
        self._service = service
        self._tenant_id = tenant_id

    @property
    def sink(self) -> AuditSink:
        return self._sink

    def log(self, audit_input: AuditInput) -> bool:
        """Build, serialize and write one audit record.

        Returns:
            True  -- the sink accepted the record.
            False -- the record was dropped (already logged).
        """
        return self._write(audit_input)

    def log_change(self, audit_input: AuditInput, before: object, after: object) -> bool:
        """Write an audit record whose ``updated_data`` is the diff of *before* and *after*."""
        try:
            audit_input = dataclasses.replace(audit_input, updated_data=calculate_diff(before, after))
        except Exception as exc:
            _logger.error("audit_logging_failed", error=str(exc), error_type=type(exc).__name__)
            return False
        return self._write(audit_input)

    def _write(self, audit_input: AuditInput) -> bool:
        try:
            payload = build_payload(self._apply_defaults(audit_input))
        except Exception as exc:
            _logger.error("audit_logging_failed", error=str(exc), error_type=type(exc).__name__)
            return False

        try:
            message = serialize_payload(payload)
        except (ValueConversionError, TypeError, ValueError, RecursionError) as exc:
            _logger.error(
                "audit_serialization_failed",
                action=payload.action,
                resource=payload.resource,
                resource_id=payload.resource_id,
                error=str(exc),
            )
            return False

        try:
            return self._sink.emit(payload.level, message, stacklevel=_CALLER_STACKLEVEL)
        except Exception as exc:
            _logger.error("audit_sink_failed", sink=self._sink.name, error=str(exc))
            return False

    def _apply_defaults(self, audit_input: AuditInput) -> AuditInput:
        return dataclasses.replace(
            audit_input,
            service=audit_input.service if audit_input.service is not None else self._service,
            tenant_id=audit_input.tenant_id if audit_input.tenant_id is not None else self._tenant_id,
        )
