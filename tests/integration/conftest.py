"""Shared fixtures for auditdiff integration tests.

Provides realistic before/after resource states and an AuditLogger wired to
a real stdlib logger so tests can exercise the full diff → payload → sink
pipeline.
"""

from __future__ import annotations

import logging

import pytest

from auditdiff.audit import AuditLogger, LoggingSink
from auditdiff.models import AuditInput

AUDIT_LOGGER_NAME = "auditdiff.integration"


def make_team(**overrides: object) -> dict[str, object]:
    """Build a team resource with sensible defaults for testing."""
    team: dict[str, object] = {
        "id": "team-42",
        "name": "EFCX",
        "description": None,
        "settings": {
            "timezone": "UTC",
            "notifications": {"email": True, "sms": False},
        },
        "members": [
            {"id": "u1", "role": "owner", "active": True},
            {"id": "u2", "role": "viewer", "active": True},
        ],
        "config": [
            {"key": "TIMEOUT", "value": 100},
            {"key": "RETRY", "value": 3},
        ],
        "tags": ["support", "emea"],
    }
    team.update(overrides)
    return team


def make_input(action: str = "UPDATE", **overrides: object) -> AuditInput:
    values: dict[str, object] = {
        "user_id": "admin-1",
        "user_name": "Admin",
        "action": action,
        "resource": "Team",
        "resource_id": "team-42",
        "ip": "10.0.0.8",
    }
    values.update(overrides)
    return AuditInput(**values)  # type: ignore[arg-type]


@pytest.fixture
def audit_logger(caplog: pytest.LogCaptureFixture) -> AuditLogger:
    caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
    return AuditLogger(
        sink=LoggingSink(logger=AUDIT_LOGGER_NAME),
        service="unified_admin",
        tenant_id="expertflow",
    )
