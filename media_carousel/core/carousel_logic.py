"""Carousel positioning logic - renderer agnostic.

Offsets are anchored on cumulative thumbnail widths rather than fixed page
sizes, so thumbnails may have any width. When paging forward brings the
tail of the strip fully into view, the offset is shortened by the
"trailing correction" so the last thumbnail's right edge rests on the
viewport's right edge instead of leaving empty space after it.

State is committed synchronously; the strip animation is handed to the
Animator and never awaited.
"""

from dataclasses import dataclass

from media_carousel.core.items import ItemStore
from media_carousel.core.logging import get_logger
from media_carousel.ports.rendering import Animator, Renderer

logger = get_logger(__name__)


@dataclass
class CarouselState:
    """Positional state of the thumbnail strip.

    Attributes:
        position: Index of the item the strip is anchored on, -1 when empty.
        prev_scroll: Offset committed by the last scroll, px.
        trailing_correction: Amount the last forward scroll was shortened
            by to stop at the tail, px. 0 when not resting at the tail.
    """

    position: int = -1
    prev_scroll: float = 0.0
    trailing_correction: float = 0.0

    @property
    def at_tail(self) -> bool:
        return self.trailing_correction > 0


class CarouselEngine:
    """Computes and commits strip offsets for one player."""

    def __init__(
        self,
        store: ItemStore,
        renderer: Renderer,
        animator: Animator,
        duration_ms: int = 400,
    ) -> None:
        self._store = store
        self._renderer = renderer
        self._animator = animator
        self._duration_ms = duration_ms
        self.state = CarouselState()

    @property
    def position(self) -> int:
        return self.state.position

    @property
    def scroll_offset(self) -> float:
        return self.state.prev_scroll

    @property
    def trailing_correction(self) -> float:
        return self.state.trailing_correction

    @trailing_correction.setter
    def trailing_correction(self, value: float) -> None:
        self.state.trailing_correction = value

    @property
    def has_next(self) -> bool:
        return self._store.has_index(self.state.position + 1)

    @property
    def has_prev(self) -> bool:
        return self.state.position > 0 and self._store.has_index(self.state.position - 1)

    def scroll_to(self, index: int) -> float | None:
        """Anchor the strip on the item at index.

        Args:
            index: Index of an existing item.

        Returns:
            The committed offset, or None if index is out of range.
        """
        if not self._store.has_index(index):
            logger.debug("scroll_ignored", index=index, items=len(self._store))
            return None

        scroll, correction = self._offset_for(index, self.state.prev_scroll)
        return self._commit(index, scroll, correction)

    def reflow(self) -> float | None:
        """Re-anchor after the item set changed.

        Clamps the position into range and recomputes the offset from the
        current widths as if paging from the start of the strip, so a
        shortened tail is corrected again. An empty store resets the strip.
        """
        if not len(self._store):
            self.reset()
            return None

        if self._store.total_width <= self._renderer.viewport_width():
            # Everything fits; the strip rests at its start.
            return self._commit(0, 0.0, 0.0)

        index = min(max(self.state.position, 0), len(self._store) - 1)
        scroll, correction = self._offset_for(index, 0.0)
        return self._commit(index, scroll, correction)

    def reset(self) -> None:
        """Return to the unscrolled state, anchored on the first item if any."""
        start = self.state.prev_scroll
        self.state = CarouselState(position=0 if len(self._store) else -1)
        if start:
            self._animator.animate(
                -start, 0.0, self._duration_ms, self._renderer.set_strip_offset
            )

    def _offset_for(self, index: int, prev_scroll: float) -> tuple[float, float]:
        """Offset and trailing correction for anchoring on index."""
        scroll = self._store.width_before(index)
        if scroll <= prev_scroll:
            return scroll, 0.0

        view_width = self._store.width_from(index)
        viewport = self._renderer.viewport_width()
        if view_width <= viewport:
            correction = viewport - view_width
            return scroll - correction, correction
        return scroll, 0.0

    def _commit(self, index: int, scroll: float, correction: float) -> float:
        start = self.state.prev_scroll
        self.state.position = index
        self.state.prev_scroll = scroll
        self.state.trailing_correction = correction

        logger.debug(
            "scroll_committed",
            position=index,
            scroll=scroll,
            trailing_correction=correction,
        )

        self._animator.animate(
            -start, -scroll, self._duration_ms, self._renderer.set_strip_offset
        )
        return scroll
