"""Logging setup for budget.

User-facing output goes through rich consoles in the command modules;
this only routes diagnostic log records to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Send budget's log records to stderr via rich.

    Args:
        verbose: Show debug records instead of warnings only.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False, log_time_format="[%X]")
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("budget")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
