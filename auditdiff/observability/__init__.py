"""Diagnostics for auditdiff: structlog configuration and component loggers."""
