"""
Logging setup for the bacon_number CLI.

The root logger carries the configured base level (``BACON_LOG_LEVEL``) and a
single stderr handler, so query output on stdout stays clean. The
``bacon_number`` package logger inherits that level unless a separate package
level is given, which is how ``--log-level`` turns on BFS tracing without also
turning up every library logger in the process.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "bacon_number"

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """Map a level name like ``"debug"`` to its logging constant, falling back to INFO."""
    resolved = getattr(logging, level.strip().upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        handler = RichHandler(
            console=Console(file=sys.stderr),
            show_path=False,
            rich_tracebacks=True,
            markup=False,  # Actor and movie names may contain brackets
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logging(
    level: str = "INFO",
    use_rich: bool = True,
    package_level: Optional[str] = None,
) -> None:
    """
    Configure the root handler and the bacon_number package logger.

    Args:
        level: Base level for every logger (DEBUG, INFO, WARNING, ERROR)
        use_rich: Render through Rich instead of plain timestamped lines
        package_level: Level for bacon_number modules only; when omitted the
            package follows ``level``
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Loggers do the filtering, so a verbose package level reaches the handler
    root_logger.addHandler(_build_handler(use_rich))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_level:
        package_logger.setLevel(resolve_level(package_level))
    else:
        package_logger.setLevel(logging.NOTSET)

    logging.getLogger(__name__).debug(
        f"Logging configured: level={level}, package_level={package_level}, rich={use_rich}"
    )


def setup_dev_logging(level: str = "DEBUG") -> None:
    """Rich output with BFS tracing from the package and INFO from everything else."""
    setup_logging(level="INFO", use_rich=True, package_level=level)


def setup_prod_logging(level: str = "INFO") -> None:
    """Setup for batch runs with plain, grep-friendly output."""
    setup_logging(level=level, use_rich=False)
