"""Type-dispatched pane cache.

Each player shows one media type. The pane builder for that type is picked
once at construction; activation then reuses the pane already bound to an
item's resource locator or asks the renderer for a new one. At most one
pane is visible at a time and hidden panes are kept for revisits.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from media_carousel.core.config import PlayerOptions
from media_carousel.core.items import GalleryItem
from media_carousel.core.logging import get_logger
from media_carousel.ports.rendering import Lightbox, MediaType, PaneSpec, Renderer

logger = get_logger(__name__)

_EXTENSION_RE = re.compile(r".+?\.([^.]+)$")

IMAGE_PANE_CLASSES = "materialboxed responsive-img"
VIDEO_FALLBACK_TEXT = "Video unavailable"


@dataclass
class Pane:
    """A live pane owned by the cache."""

    spec: PaneSpec
    handle: Any
    visible: bool = True

    @property
    def locator(self) -> str:
        return self.spec.locator


# =============================================================================
# Pane builders
# =============================================================================

SpecBuilder = Callable[[GalleryItem, PlayerOptions, str], PaneSpec | None]


def document_subtype(item: GalleryItem) -> str:
    """Explicit subtype, else the locator's trailing extension, else ''."""
    if item.subtype:
        return item.subtype
    match = _EXTENSION_RE.match(item.object_src)
    return match.group(1) if match else ""


def image_pane_spec(item: GalleryItem, options: PlayerOptions, origin: str) -> PaneSpec | None:
    return PaneSpec(
        media_type=MediaType.IMAGE,
        tag="img",
        locator=item.src,
        attrs={"class": IMAGE_PANE_CLASSES, "src": item.src},
    )


def video_pane_spec(item: GalleryItem, options: PlayerOptions, origin: str) -> PaneSpec | None:
    if not item.object_src:
        return None
    return PaneSpec(
        media_type=MediaType.VIDEO,
        tag="video",
        locator=item.object_src,
        attrs={
            "src": item.object_src,
            "controls": "controls",
            "poster": item.src,
            "preload": "metadata",
            "controlsList": "nodownload",
            "text": VIDEO_FALLBACK_TEXT,
        },
    )


def book_pane_spec(item: GalleryItem, options: PlayerOptions, origin: str) -> PaneSpec | None:
    subtype = document_subtype(item)
    if not item.object_src or not subtype:
        return None

    if subtype.lower() == "pdf":
        src = item.object_src
    else:
        src = f"{options.document_viewer_url}?url={origin}{item.object_src}&embedded=true"

    return PaneSpec(
        media_type=MediaType.BOOK,
        tag="iframe",
        locator=item.object_src,
        attrs={"src": src, "allowfullscreen": "true"},
    )


SPEC_BUILDERS: dict[MediaType, SpecBuilder] = {
    MediaType.IMAGE: image_pane_spec,
    MediaType.VIDEO: video_pane_spec,
    MediaType.BOOK: book_pane_spec,
}


# =============================================================================
# Cache
# =============================================================================


class RenderCache:
    """Maps resource locators to live panes for one player."""

    def __init__(
        self,
        media_type: MediaType,
        renderer: Renderer,
        options: PlayerOptions,
        *,
        origin: str = "",
        lightbox: Lightbox | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            media_type: The player's kind; selects the pane builder.
            renderer: Creates and toggles the panes.
            options: Player options (document viewer URL).
            origin: Page origin for wrapped document URLs.
            lightbox: Optional capability attached to new image panes.
        """
        self.media_type = media_type
        self._build_spec = SPEC_BUILDERS[media_type]
        self._renderer = renderer
        self._options = options
        self._origin = origin
        self._lightbox = lightbox
        self._panes: dict[str, Pane] = {}
        self._current: GalleryItem | None = None
        self._fullscreen_added = False

    @property
    def current(self) -> GalleryItem | None:
        """The item whose thumbnail carries the "current" marker."""
        return self._current

    @property
    def panes(self) -> tuple[Pane, ...]:
        return tuple(self._panes.values())

    def visible_panes(self) -> list[Pane]:
        return [pane for pane in self._panes.values() if pane.visible]

    def pane_for(self, locator: str) -> Pane | None:
        return self._panes.get(locator)

    def activate(self, item: GalleryItem) -> Pane | None:
        """Show the pane for an item, creating it on first activation.

        Returns:
            The visible pane, or None when the item cannot be rendered
            (missing resource locator or unknown document subtype). A
            failed activation changes nothing.
        """
        spec = self._build_spec(item, self._options, self._origin)
        if spec is None:
            logger.info(
                "activation_skipped",
                item_id=item.id,
                media_type=self.media_type.value,
                reason="missing_locator" if not item.object_src else "unknown_subtype",
            )
            return None

        existing = self._panes.get(spec.locator)
        if item is self._current and existing is not None and existing.visible:
            return existing

        self._show_exclusively(item)

        if existing is not None:
            self._renderer.set_pane_visible(existing.handle, True)
            existing.visible = True
            logger.debug("pane_reused", locator=spec.locator)
            return existing

        pane = Pane(spec=spec, handle=self._renderer.create_pane(spec))
        self._panes[spec.locator] = pane
        logger.debug("pane_created", locator=spec.locator, tag=spec.tag)

        if self.media_type is MediaType.IMAGE and self._lightbox is not None:
            self._lightbox.attach(pane.handle)
        if self.media_type is MediaType.BOOK and not self._fullscreen_added:
            self._renderer.add_fullscreen_control()
            self._fullscreen_added = True

        return pane

    def _show_exclusively(self, item: GalleryItem) -> None:
        for pane in self._panes.values():
            if pane.visible:
                self._renderer.set_pane_visible(pane.handle, False)
                pane.visible = False
        self._renderer.mark_current(item)
        self._current = item

    def release(self, item: GalleryItem) -> bool:
        """Drop an item being deleted: purge its pane and its current marker.

        Returns:
            True if a live pane was removed.
        """
        if item is self._current:
            self._current = None
        return self.purge(item.resource_locator)

    def purge(self, locator: str) -> bool:
        """Remove the live pane bound to a locator, if any."""
        pane = self._panes.pop(locator, None)
        if pane is None:
            return False
        self._renderer.remove_pane(pane.handle)
        logger.debug("pane_purged", locator=locator)
        return True

    def clear(self) -> None:
        """Remove every pane, as on a full rebuild."""
        for locator in list(self._panes):
            self.purge(locator)
        self._current = None
