"""Loguru-based logging configuration.

A single stderr sink is installed on first use. The format depends on the
runtime environment: colourised for development, JSON for production and
plain text for tests.
"""

import sys
import typing as t

from loguru import logger as _logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

DEVELOPMENT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's handlers with one sink suited to the environment."""
    global _configured

    _logger.remove()
    _logger.configure(extra={"name": "signpost"})

    match environment:
        case Environment.PRODUCTION:
            _logger.add(sys.stderr, level=level.value, serialize=True)
        case Environment.DEVELOPMENT:
            _logger.add(
                sys.stderr, level=level.value, format=DEVELOPMENT_FORMAT, colorize=True
            )
        case _:
            _logger.add(
                sys.stderr, level=level.value, format=PLAIN_FORMAT, colorize=False
            )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def is_configured() -> bool:
    return _configured


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return _logger.bind(name=name)


def reset_logging() -> None:
    """Drop all sinks and forget configuration. Intended for tests."""
    global _configured

    _logger.remove()
    _configured = False
