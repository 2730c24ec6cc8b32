"""Adapters for the rendering ports.

This module contains a headless renderer and the strip animators.
"""

from media_carousel.adapters.animators import AsyncioAnimator, InstantAnimator
from media_carousel.adapters.factory import create_animator
from media_carousel.adapters.memory_renderer import MemoryRenderer, PaneNode, ThumbnailNode

__all__ = [
    "AsyncioAnimator",
    "InstantAnimator",
    "MemoryRenderer",
    "PaneNode",
    "ThumbnailNode",
    "create_animator",
]
