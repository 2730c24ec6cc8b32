"""Shared pytest fixtures for media-carousel tests."""

from collections.abc import Callable, Iterator

import pytest
import structlog

from media_carousel.adapters.memory_renderer import MemoryRenderer
from media_carousel.core.player import Player
from media_carousel.ports.rendering import PlayerContainer, SourceImage
from tests.mocks.rendering import RecordingAnimator, RecordingLightbox
from tests.mocks.sources import make_images

# Configure pytest-asyncio for the asyncio animator tests
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def renderer() -> MemoryRenderer:
    """Provide a headless renderer: 250px viewport, 100px thumbnails."""
    return MemoryRenderer(viewport_width=250, thumbnail_width=100)


@pytest.fixture
def animator() -> RecordingAnimator:
    return RecordingAnimator()


@pytest.fixture
def lightbox() -> RecordingLightbox:
    return RecordingLightbox()


@pytest.fixture
def make_player(
    renderer: MemoryRenderer, animator: RecordingAnimator
) -> Callable[..., Player]:
    """Provide a factory building players on the shared renderer.

    Example:
        def test_paging(make_player):
            player = make_player(count=5)
            player.scroll_to(2)
    """

    def factory(
        count: int = 3,
        kind: str = "image",
        extra_classes: set[str] | None = None,
        images: list[SourceImage] | None = None,
        **kwargs,
    ) -> Player:
        container = PlayerContainer(
            classes={kind, *(extra_classes or set())},
            images=images if images is not None else make_images(count, kind),
            origin="https://example.com",
        )
        kwargs.setdefault("animator", animator)
        return Player(container, renderer, **kwargs)

    return factory


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
