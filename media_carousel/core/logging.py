"""Structured logging for the gallery, built on structlog.

Development runs get colored console lines, production runs JSON lines.
Every event logged while a player handles an operation carries that
player's id and kind, including events from the engine, the pane cache
and the router, which hold no reference to the player.

Usage:
    from media_carousel.core.logging import configure_logging, get_logger

    configure_logging(development=True)
    logger = get_logger(__name__)
    logger.info("pane_created", locator="/media/a.mp4")
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from os import getenv
from typing import cast

import structlog
from structlog.types import Processor

# Stdlib loggers that stay at WARNING whatever the gallery's level
_QUIET_LOGGERS = ("asyncio",)


def _build_processors(development: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return processors


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Route gallery events through structlog onto stdout.

    Args:
        development: Console output if True, JSON if False. Defaults to
            the ENVIRONMENT variable (anything but "production" is
            development).
        log_level: DEBUG, INFO, WARNING or ERROR. Defaults to the
            LOG_LEVEL variable, then INFO. Unknown names mean INFO.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"
    level_name = (log_level or getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=_build_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a gallery module, usually get_logger(__name__)."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


@contextmanager
def player_context(player_id: str, media_type: str) -> Iterator[None]:
    """Tag every event logged inside the block with the player's identity.

    Nested blocks for another player restore the outer tags on exit.

    Example:
        with player_context(player.id, "video"):
            engine.scroll_to(2)  # scroll_committed carries player_id
    """
    with structlog.contextvars.bound_contextvars(
        player_id=player_id, media_type=media_type
    ):
        yield
