"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from auditdiff.models.config import (
    AuditConfig,
    AuditDiffConfig,
    LogConfig,
    SinkKind,
    WebhookConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"AUDITDIFF_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_float(key: str, default: float, min_val: float | None = None, max_val: float | None = None) -> float:
    val = float(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_sink(value: str) -> SinkKind:
    try:
        return SinkKind(value.strip().lower())
    except ValueError:
        valid = {kind.value for kind in SinkKind}
        raise ValueError(f"Invalid audit sink: {value}. Must be one of {valid}") from None


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> AuditDiffConfig:
    """Load configuration from AUDITDIFF_* environment variables."""
    sink = _validate_sink(_env("SINK", SinkKind.LOGGING.value))
    webhook_url = _env("WEBHOOK_URL", "")
    if sink is SinkKind.WEBHOOK and not webhook_url:
        raise ValueError("AUDITDIFF_WEBHOOK_URL is required when AUDITDIFF_SINK=webhook")

    return AuditDiffConfig(
        audit=AuditConfig(
            service=_env("SERVICE", ""),
            tenant_id=_env("TENANT_ID", ""),
            sink=sink,
            logger_name=_env("LOGGER_NAME", "auditdiff.audit"),
            include_caller=_env_bool("INCLUDE_CALLER", True),
        ),
        webhook=WebhookConfig(
            url=webhook_url,
            timeout_seconds=_env_float("WEBHOOK_TIMEOUT", 10.0, min_val=1.0, max_val=60.0),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
