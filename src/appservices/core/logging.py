"""Logging configuration for the client and the CLI."""

import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure process-wide logging.

    Level is DEBUG when `debug` is True, otherwise INFO.
    Output goes to stdout.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(log_level if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
