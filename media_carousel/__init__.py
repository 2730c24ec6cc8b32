"""In-page media gallery with a pageable thumbnail strip."""

from media_carousel.core import (
    ClickTarget,
    ConfigurationError,
    DeletionNotice,
    GalleryError,
    GalleryItem,
    InputKind,
    Player,
    PlayerOptions,
    PointerEvent,
    UnsupportedPlayerError,
)
from media_carousel.ports import MediaType, PlayerContainer, SourceImage

__version__ = "1.0.0"

__all__ = [
    "ClickTarget",
    "ConfigurationError",
    "DeletionNotice",
    "GalleryError",
    "GalleryItem",
    "InputKind",
    "MediaType",
    "Player",
    "PlayerContainer",
    "PlayerOptions",
    "PointerEvent",
    "SourceImage",
    "UnsupportedPlayerError",
]
