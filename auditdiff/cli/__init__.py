"""auditdiff command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``auditdiff`` script).
"""

from auditdiff.cli.main import cli

__all__ = ["cli"]
