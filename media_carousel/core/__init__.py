"""Core gallery logic.

This module contains the renderer-agnostic parts of the player: the item
store, the pane cache, the carousel engine and the input router.
"""

from media_carousel.core.carousel_logic import CarouselEngine, CarouselState
from media_carousel.core.config import PlayerOptions
from media_carousel.core.errors import (
    ConfigurationError,
    GalleryError,
    UnsupportedPlayerError,
)
from media_carousel.core.events import DeletionNotice, DeletionNotifier
from media_carousel.core.items import GalleryItem, ItemStore, truncate_title
from media_carousel.core.logging import configure_logging, get_logger, player_context
from media_carousel.core.player import Player, resolve_media_type
from media_carousel.core.render_cache import Pane, RenderCache, document_subtype
from media_carousel.core.router import (
    ClickTarget,
    InputKind,
    InteractionRouter,
    PointerEvent,
)

__all__ = [
    # Carousel
    "CarouselEngine",
    "CarouselState",
    # Configuration
    "PlayerOptions",
    # Errors
    "ConfigurationError",
    "GalleryError",
    "UnsupportedPlayerError",
    # Events
    "DeletionNotice",
    "DeletionNotifier",
    # Items
    "GalleryItem",
    "ItemStore",
    "truncate_title",
    # Logging
    "configure_logging",
    "get_logger",
    "player_context",
    # Player
    "Player",
    "resolve_media_type",
    # Render cache
    "Pane",
    "RenderCache",
    "document_subtype",
    # Input
    "ClickTarget",
    "InputKind",
    "InteractionRouter",
    "PointerEvent",
]
