"""CLI logging setup: plain %(message)s format on stdout."""

import logging
import sys

from defender_installer.redact import SecretRedactingFilter


def setup_cli_logging():
    """Configure root logger with plain message format for the installer.

    Produces output identical to print(), so log lines interleave cleanly
    with the interactive prompts.
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(SecretRedactingFilter())
    root.addHandler(handler)
