"""
Console and file logging for the design patterns demo.

Every demo line (stage, payment confirmation, book title) is an INFO record.
``CONSOLE_FORMAT`` prints the bare message, so stdout reads as plain demo
output; ``VERBOSE_FORMAT`` (``--verbose``) adds timestamp, logger name and
level for tracing which component produced each line. Diagnostics are logged
at DEBUG and only show up with ``--log-level DEBUG``.
"""

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = '%(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None, fmt: str = CONSOLE_FORMAT):
    """
    Set up logging for the design patterns demo.

    Args:
        level: Logging level.
        log_file: Optional path to a log file.
        fmt: Log record format.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=handlers
    )
