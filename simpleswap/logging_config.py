"""structlog setup shared by the API server and scripts."""

import logging
import os

import structlog


def configure_logging(level: int | str | None = None) -> None:
    """Install the console processor chain.

    Args:
        level: Logging level name or number. Defaults to the
            SIMPLESWAP_LOG_LEVEL environment variable, then INFO.
    """
    if level is None:
        level = os.environ.get("SIMPLESWAP_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
