"""Logging configuration for swiftfw.

User-facing output goes through rich consoles; this only wires up the
``swiftfw`` logger used for diagnostics and warnings.
"""

import logging
import sys

VERBOSE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Configure the swiftfw logger.

    Args:
        verbose: Log debug messages with timestamps and module names
    """
    level = logging.DEBUG if verbose else logging.WARNING
    log_format = VERBOSE_FORMAT if verbose else SIMPLE_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))

    logger = logging.getLogger("swiftfw")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
