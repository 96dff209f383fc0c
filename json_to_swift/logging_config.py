"""Logging setup for json_to_swift.

Modules obtain their logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "json_to_swift"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a RichHandler writing to stderr to the package logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Avoid stacking handlers when called more than once
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
