"""Ports (interfaces) for the gallery.

This module contains Protocol definitions for the page-side collaborators
the core calls into: rendering, animation and lightboxing.
"""

from media_carousel.ports.rendering import (
    Animator,
    Lightbox,
    MediaType,
    PaneSpec,
    PlayerContainer,
    Renderer,
    SourceImage,
)

__all__ = [
    # Data classes
    "MediaType",
    "PaneSpec",
    "PlayerContainer",
    "SourceImage",
    # Protocols
    "Animator",
    "Lightbox",
    "Renderer",
]
