"""Generic JSON webhook sink.

POSTs each serialized audit record to an HTTP collector.  The body is the
audit JSON document exactly as other sinks would log it.
"""

from __future__ import annotations

import httpx

from auditdiff.audit.sinks import AuditSink
from auditdiff.models.audit import AuditLevel
from auditdiff.observability.logging import get_logger

_log = get_logger("audit.webhook")


class WebhookSink(AuditSink):
    """Delivers audit records by POSTing them to a configurable URL.

    Args:
        url:     Full endpoint URL (must be HTTPS in production).
        headers: Optional extra headers (e.g. Authorization).
        timeout: HTTP request timeout in seconds. Defaults to 10.
        client:  Pre-built ``httpx.Client``; one is created per request
                 when omitted.
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not url:
            raise ValueError("Webhook url must not be empty")
        self._url = url
        self._headers = headers or {}
        self._timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        return "webhook"

    def emit(self, level: AuditLevel, message: str, stacklevel: int = 1) -> bool:
        """POST *message* to the configured endpoint.

        Returns True on 2xx response, False otherwise.
        """
        request_headers = {
            "Content-Type": "application/json",
            "X-Audit-Level": level.value,
            **self._headers,
        }

        try:
            if self._client is not None:
                response = self._client.post(self._url, content=message, headers=request_headers)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.post(self._url, content=message, headers=request_headers)
        except httpx.TimeoutException:
            _log.warning("webhook_request_timeout", url=self._url)
            return False
        except httpx.HTTPError as exc:
            _log.warning("webhook_http_error", error=str(exc), url=self._url)
            return False

        if response.is_success:
            return True
        _log.warning(
            "webhook_non_2xx_response",
            status_code=response.status_code,
            body=response.text[:200],
        )
        return False
