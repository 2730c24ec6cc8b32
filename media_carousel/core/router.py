"""Translate raw pointer and wheel input into carousel operations.

Clicks on a thumbnail select it, clicks on its removal control delete it
and clicks on the strip background page left or right when they land in
an edge zone. Wheel input is turned into a strip click at either end of
the viewport.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from media_carousel.core.carousel_logic import CarouselEngine
from media_carousel.core.items import GalleryItem, ItemStore
from media_carousel.core.logging import get_logger
from media_carousel.ports.rendering import Renderer

logger = get_logger(__name__)


class InputKind(Enum):
    """What an input event was classified as."""

    SELECT = auto()
    PAGE_LEFT = auto()
    PAGE_RIGHT = auto()
    DELETE = auto()
    JUMP_START = auto()
    JUMP_END = auto()
    IGNORED = auto()


class ClickTarget(Enum):
    """Which part of the strip a click landed on."""

    STRIP = auto()
    THUMBNAIL = auto()
    DELETE_CONTROL = auto()
    OTHER = auto()


@dataclass(frozen=True)
class PointerEvent:
    """A click inside the thumbnail strip.

    Attributes:
        target: Element kind under the pointer.
        offset: Horizontal offset within the viewport, px.
        item: The item owning the thumbnail or removal control, if any.
    """

    target: ClickTarget
    offset: float = 0.0
    item: GalleryItem | None = None


class InteractionRouter:
    """Routes input events of one player."""

    def __init__(
        self,
        store: ItemStore,
        engine: CarouselEngine,
        renderer: Renderer,
        edge_zone_width: float,
        *,
        on_select: Callable[[GalleryItem], object],
        on_delete: Callable[[GalleryItem], object],
    ) -> None:
        """Initialize the router.

        Args:
            store: Items of the player.
            engine: Carousel engine to page with.
            renderer: Source of the viewport width.
            edge_zone_width: Width of the paging zone at each edge, px.
            on_select: Called with the item of a clicked thumbnail.
            on_delete: Called with the item of a clicked removal control.
        """
        self._store = store
        self._engine = engine
        self._renderer = renderer
        self.edge_zone_width = edge_zone_width
        self._on_select = on_select
        self._on_delete = on_delete
        self.enabled = True

    @property
    def scrollable(self) -> bool:
        """Whether the thumbnails overflow the viewport."""
        return bool(len(self._store)) and (
            self._store.total_width > self._renderer.viewport_width()
        )

    def classify(self, event: PointerEvent) -> InputKind:
        if event.target is ClickTarget.THUMBNAIL and event.item is not None:
            return InputKind.SELECT
        if event.target is ClickTarget.DELETE_CONTROL and event.item is not None:
            return InputKind.DELETE
        if event.target is ClickTarget.STRIP:
            return self.classify_offset(event.offset)
        return InputKind.IGNORED

    def classify_offset(self, offset: float) -> InputKind:
        """Classify a strip background click by its horizontal offset."""
        if not self.scrollable:
            return InputKind.IGNORED

        if offset <= self.edge_zone_width:
            return InputKind.PAGE_LEFT
        if offset >= self._renderer.viewport_width() - self.edge_zone_width:
            return InputKind.PAGE_RIGHT
        return InputKind.IGNORED

    def click(self, event: PointerEvent) -> InputKind:
        """Handle a click inside the strip.

        Returns:
            The classification the event was handled as.
        """
        kind = self.classify(event)
        if kind is InputKind.SELECT:
            self._on_select(event.item)
        elif kind is InputKind.DELETE:
            self._on_delete(event.item)
        elif kind in (InputKind.PAGE_LEFT, InputKind.PAGE_RIGHT):
            self.page(event.offset)
        return kind

    def wheel(self, delta_y: float) -> InputKind:
        """Handle wheel input over the strip.

        Upward intent pages from the left edge zone, downward intent from
        the right edge zone.

        Returns:
            JUMP_START or JUMP_END when the strip moved, else IGNORED.
        """
        if not self.enabled:
            return InputKind.IGNORED

        if delta_y < 0:
            kind, offset = InputKind.JUMP_START, 0.0
        else:
            kind, offset = InputKind.JUMP_END, self._renderer.viewport_width()

        if self.page(offset) is None:
            return InputKind.IGNORED
        return kind

    def page(self, offset: float) -> float | None:
        """Apply the edge-zone paging policy for a click at offset.

        A move to the left that does not change the visible offset is
        repeated from the new position, so a click always shows movement
        while there is somewhere to go.

        Returns:
            The committed offset, or None if nothing moved.
        """
        result: float | None = None
        while True:
            kind = self.classify_offset(offset)
            start_position = self._engine.position
            position = start_position

            if kind is InputKind.PAGE_LEFT:
                if self._engine.has_prev:
                    position -= 1
                    self._engine.trailing_correction = 0.0
            elif kind is InputKind.PAGE_RIGHT:
                if not self._engine.trailing_correction and self._engine.has_next:
                    position += 1
            else:
                logger.debug("paging_ignored", offset=offset)
                return result

            if position == start_position:
                logger.debug("paging_at_boundary", kind=kind.name, position=position)
                return result

            start_scroll = self._engine.scroll_offset
            result = self._engine.scroll_to(position)

            if result == start_scroll and position < start_position and start_scroll:
                logger.debug("paging_repeated", position=position, scroll=result)
                continue
            return result
