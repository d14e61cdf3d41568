"""Entry point for `python -m auditdiff`.

Usage:
    python -m auditdiff diff before.json after.json
    uv run python -m auditdiff diff before.json after.json
"""

from __future__ import annotations

from auditdiff.cli import cli

cli()
