"""Structured logging configuration using structlog.

Binds the current match and team side to every log event so that decisions
taken by the home and away bots can be told apart in a shared log stream.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from courtgrid.config import settings
from courtgrid.geometry.primitives import TeamPlace

_match_id: ContextVar[str | None] = ContextVar("match_id", default=None)
_team_place: ContextVar[TeamPlace | None] = ContextVar("team_place", default=None)


def set_match_context(
    match_id: str | None = None,
    place: TeamPlace | None = None,
) -> None:
    """Set match identifiers for the current context.

    Args:
        match_id: Identifier of the match being played.
        place: Side the current bot plays on.
    """
    if match_id is not None:
        _match_id.set(match_id)
    if place is not None:
        _team_place.set(place)


def clear_match_context() -> None:
    """Clear all match context variables."""
    _match_id.set(None)
    _team_place.set(None)


def _add_match_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add match identifiers to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    match_id = _match_id.get()
    place = _team_place.get()

    if match_id is not None:
        event_dict["match_id"] = match_id
    if place is not None:
        event_dict["team_place"] = place.value

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_match_context,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must follow later reconfiguration.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
