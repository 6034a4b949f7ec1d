"""Logging for the export package.

Only the package's own logger hierarchy is configured, so embedding
applications keep control of the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Parent of every module logger in this package, e.g. "src.wp_export"
PACKAGE_LOGGER = __name__.rsplit(".utils", 1)[0]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log records go to stderr so PO output on stdout stays clean
console = Console(stderr=True)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str | Path] = None,
    use_rich: bool = True,
) -> logging.Logger:
    """Configure logging for the export package.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file receiving the same records
        use_rich: Whether to render console records with rich

    Returns:
        The package logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    if use_rich:
        console_handler: logging.Handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
    else:
        console_handler = logging.StreamHandler(console.file)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package (pass ``__name__``)."""
    return logging.getLogger(name)
