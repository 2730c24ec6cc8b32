"""Tests for carousel positioning logic."""

import pytest

from media_carousel.adapters.memory_renderer import MemoryRenderer
from media_carousel.core.carousel_logic import CarouselEngine, CarouselState
from media_carousel.core.items import GalleryItem, ItemStore
from media_carousel.ports.rendering import MediaType
from tests.mocks.rendering import RecordingAnimator


def make_engine(
    widths: list[float], viewport: float = 250
) -> tuple[CarouselEngine, ItemStore, MemoryRenderer, RecordingAnimator]:
    store = ItemStore()
    for n, width in enumerate(widths):
        store.append(
            GalleryItem(src=f"/{n}.jpg", media_type=MediaType.IMAGE, thumbnail_width=width)
        )
    renderer = MemoryRenderer(viewport_width=viewport)
    animator = RecordingAnimator()
    engine = CarouselEngine(store, renderer, animator, duration_ms=400)
    engine.reset()
    return engine, store, renderer, animator


class TestCarouselState:
    def test_empty_state(self):
        state = CarouselState()
        assert state.position == -1
        assert state.prev_scroll == 0
        assert not state.at_tail

    def test_at_tail(self):
        assert CarouselState(position=2, trailing_correction=50).at_tail


class TestScrollTo:
    def test_reset_anchors_on_first_item(self):
        engine, *_ = make_engine([100, 100, 100])
        assert engine.position == 0
        assert engine.scroll_offset == 0

    def test_commits_position_and_offset(self):
        """After a successful scroll, position and offset match the result."""
        engine, *_ = make_engine([100, 100, 100, 100, 100])
        for index in (1, 3, 0, 4, 2):
            result = engine.scroll_to(index)
            assert engine.position == index
            assert engine.scroll_offset == result

    def test_offset_is_sum_of_preceding_widths(self):
        engine, *_ = make_engine([50, 200, 80, 120, 300])
        assert engine.scroll_to(1) == 50
        assert engine.scroll_to(2) == 250
        assert engine.trailing_correction == 0

    def test_tail_correction_for_last_item(self):
        """[100, 100, 100] in a 250px viewport rests 50px in."""
        engine, *_ = make_engine([100, 100, 100])
        assert engine.scroll_to(2) == 50
        assert engine.trailing_correction == 150

    def test_tail_correction_puts_last_edge_on_viewport_edge(self):
        widths = [50, 200, 80, 120]
        engine, store, renderer, _ = make_engine(widths)
        scroll = engine.scroll_to(2)
        tail_width = store.width_from(2)
        assert scroll == store.width_before(2) - (renderer.viewport_width() - tail_width)
        assert sum(widths) - scroll == renderer.viewport_width()

    def test_forward_without_reaching_tail_has_no_correction(self):
        engine, *_ = make_engine([100] * 6)
        assert engine.scroll_to(2) == 200
        assert engine.trailing_correction == 0

    def test_backward_resets_correction(self):
        engine, *_ = make_engine([100, 100, 100, 100])
        engine.scroll_to(3)
        assert engine.trailing_correction == 150
        assert engine.scroll_to(1) == 100
        assert engine.trailing_correction == 0

    def test_out_of_range_is_noop(self):
        engine, _, _, animator = make_engine([100, 100, 100])
        engine.scroll_to(1)
        calls = animator.call_count
        assert engine.scroll_to(3) is None
        assert engine.scroll_to(-1) is None
        assert engine.position == 1
        assert animator.call_count == calls

    def test_empty_store(self):
        engine, *_ = make_engine([])
        assert engine.position == -1
        assert engine.scroll_to(0) is None

    def test_animates_from_previous_offset(self):
        engine, _, renderer, animator = make_engine([100] * 6)
        engine.scroll_to(2)
        engine.scroll_to(4)
        assert animator.last.start == -200
        assert animator.last.end == -350
        assert animator.last.duration_ms == 400
        assert renderer.strip_offset == -350

    def test_has_next_and_prev(self):
        engine, *_ = make_engine([100, 100, 100])
        assert engine.has_next
        assert not engine.has_prev
        engine.scroll_to(2)
        assert not engine.has_next
        assert engine.has_prev


class TestReflow:
    def test_clamps_position_after_tail_removal(self):
        engine, store, _, _ = make_engine([100] * 4)
        engine.scroll_to(3)
        store.remove(store[3])
        assert engine.reflow() == 50
        assert engine.position == 2
        assert engine.trailing_correction == 150

    def test_recorrects_tail_after_removal(self):
        """Removing an item after the anchor pulls the strip back to the edge."""
        engine, store, _, _ = make_engine([100] * 4)
        engine.scroll_to(1)
        assert engine.scroll_offset == 100
        store.remove(store[3])
        assert engine.reflow() == 50
        assert engine.trailing_correction == 50

    def test_everything_fits_rests_at_start(self):
        engine, store, renderer, _ = make_engine([100] * 4)
        engine.scroll_to(3)
        store.remove(store[0])
        store.remove(store[0])
        assert engine.reflow() == 0
        assert engine.position == 0
        assert engine.trailing_correction == 0
        assert renderer.strip_offset == 0

    def test_empty_store_resets(self):
        engine, store, renderer, _ = make_engine([100] * 4)
        engine.scroll_to(2)
        store.clear()
        assert engine.reflow() is None
        assert engine.position == -1
        assert engine.scroll_offset == 0
        assert renderer.strip_offset == 0


@pytest.mark.parametrize(
    ("widths", "viewport", "index", "expected"),
    [
        ([100, 100, 100], 250, 1, 50),
        ([100, 100, 100], 400, 1, -100),
        ([120, 80, 60, 300], 250, 3, 260),
        ([120, 80, 60, 300], 250, 2, 200),
    ],
)
def test_scroll_from_rest(widths, viewport, index, expected):
    engine, *_ = make_engine(widths, viewport)
    assert engine.scroll_to(index) == expected
