"""The gallery player.

A Player is built on a container holding thumbnail images. It adopts them
into an ordered item store, shows one full pane at a time in its viewing
area and pages the thumbnail strip when the strip's edges are clicked.

Example:
    from media_carousel import Player, PlayerContainer, SourceImage
    from media_carousel.adapters import MemoryRenderer

    container = PlayerContainer(
        classes={"video"},
        images=[SourceImage(src="/thumbs/a.jpg", object_src="/media/a.mp4")],
    )
    player = Player(container, MemoryRenderer(viewport_width=600))
    player.subscribe(lambda notice: forms.drop(notice.field_name))
"""

from __future__ import annotations

import functools
import secrets
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from media_carousel.adapters.animators import InstantAnimator
from media_carousel.core.carousel_logic import CarouselEngine
from media_carousel.core.config import CLONE_CLASS, NO_ACTIVE_CLASS, PlayerOptions
from media_carousel.core.errors import UnsupportedPlayerError
from media_carousel.core.events import DeletionListener, DeletionNotice, DeletionNotifier
from media_carousel.core.items import GalleryItem, ItemStore
from media_carousel.core.logging import get_logger, player_context
from media_carousel.core.render_cache import Pane, RenderCache
from media_carousel.core.router import InputKind, InteractionRouter, PointerEvent
from media_carousel.ports.rendering import (
    Animator,
    Lightbox,
    MediaType,
    PlayerContainer,
    Renderer,
    SourceImage,
)

logger = get_logger(__name__)

PLAYER_CLASS = "player"
PLAYER_ID_BYTES = 6  # 12 hex characters

# Checked in this order when a container carries several kind classes
_KIND_PRECEDENCE = (MediaType.VIDEO, MediaType.IMAGE, MediaType.BOOK)


def resolve_media_type(classes: Iterable[str]) -> MediaType:
    """Pick the player kind from the container classes.

    Raises:
        UnsupportedPlayerError: If none of the kind classes is present.
    """
    classes = frozenset(classes)
    for media_type in _KIND_PRECEDENCE:
        if media_type.value in classes:
            return media_type
    raise UnsupportedPlayerError(classes)


def _in_player_context(method):
    """Run a Player method with the player's identity bound to the log context."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with player_context(self._id, self.media_type.value):
            return method(self, *args, **kwargs)

    return wrapper


class Player:
    """Media gallery with a pageable thumbnail strip."""

    def __init__(
        self,
        container: PlayerContainer,
        renderer: Renderer,
        options: PlayerOptions | Mapping[str, Any] | None = None,
        *,
        animator: Animator | None = None,
        lightbox: Lightbox | None = None,
    ) -> None:
        """Build the player and adopt the container's images.

        Args:
            container: Element the player is built on.
            renderer: Creates the visual nodes.
            options: Player options or a mapping merged over the defaults.
            animator: Runs strip transitions. Defaults to jumping straight
                to the final offset.
            lightbox: Optional zoom capability for image panes.

        Raises:
            ConfigurationError: If the options are invalid.
            UnsupportedPlayerError: If the container has no kind class.
        """
        if not isinstance(options, PlayerOptions):
            options = PlayerOptions.from_mapping(options)

        self.options = options
        self.container = container
        self.media_type = resolve_media_type(container.classes)
        self.activate = NO_ACTIVE_CLASS not in container.classes
        self._id = secrets.token_hex(PLAYER_ID_BYTES)

        self._placeholder: SourceImage | None = next(
            (img for img in container.images if options.image_stop_class in img.classes),
            None,
        )

        self._renderer = renderer
        container.classes.add(PLAYER_CLASS)
        renderer.mount(self._id, options)

        self._store = ItemStore()
        self._cache = RenderCache(
            self.media_type,
            renderer,
            options,
            origin=container.origin,
            lightbox=lightbox,
        )
        self._engine = CarouselEngine(
            self._store,
            renderer,
            animator or InstantAnimator(),
            options.animation_duration_ms,
        )
        self._router = InteractionRouter(
            self._store,
            self._engine,
            renderer,
            options.edge_zone_width,
            on_select=self.select,
            on_delete=self.delete_item,
        )
        self._notifier = DeletionNotifier()

        self.update()

    @property
    def id(self) -> str:
        """Unique identifier of this player instance."""
        return self._id

    @property
    def items(self) -> tuple[GalleryItem, ...]:
        return self._store.items

    @property
    def active_item(self) -> GalleryItem | None:
        """The item whose pane is shown."""
        return self._cache.current

    @property
    def position(self) -> int:
        """Index the strip is anchored on, -1 when empty."""
        return self._engine.position

    @property
    def scroll_offset(self) -> float:
        return self._engine.scroll_offset

    @property
    def trailing_correction(self) -> float:
        return self._engine.trailing_correction

    @property
    def total_width(self) -> float:
        return self._store.total_width

    @property
    def panes(self) -> tuple[Pane, ...]:
        return self._cache.panes

    @property
    def router(self) -> InteractionRouter:
        return self._router

    def subscribe(self, listener: DeletionListener) -> Callable[[], None]:
        """Receive a DeletionNotice for every deleted item."""
        return self._notifier.subscribe(listener)

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    @_in_player_context
    def scroll_to(self, index: int) -> float | None:
        """Anchor the thumbnail strip on the item at index."""
        return self._engine.scroll_to(index)

    @_in_player_context
    def select(self, item: GalleryItem) -> Pane | None:
        """Show the item's pane and mark its thumbnail current.

        Returns:
            The visible pane, or None if the item cannot be rendered.
        """
        if item not in self._store:
            return None

        pane = self._cache.activate(item)
        if pane is not None and self._placeholder is not None:
            self._renderer.set_placeholder_visible(False)
        return pane

    @_in_player_context
    def add_item(
        self,
        image: SourceImage,
        activate: bool = False,
        source_name: str = "",
    ) -> GalleryItem | None:
        """Adopt an image as a new item at the end of the strip.

        Args:
            image: The thumbnail image to adopt.
            activate: Select the new item right away.
            source_name: Field identifier overriding the image's own.

        Returns:
            The new item, or None if the image sits in a clone region.
        """
        if image.in_clone or CLONE_CLASS in image.classes:
            logger.debug("item_skipped_clone", src=image.src)
            return None

        item = GalleryItem.from_source(image, self.media_type, source_name)
        item.thumbnail_width = self._renderer.mount_thumbnail(item)
        index = self._store.append(item)
        if self._engine.position < 0:
            self._engine.reset()

        logger.debug("item_added", item_id=item.id, index=index, width=item.thumbnail_width)

        if activate:
            self.select(item)
        return item

    @_in_player_context
    def delete_item(self, item: GalleryItem) -> None:
        """Remove an item, its thumbnail and any pane bound to its resource.

        If the item was shown, the item now at its index (else the one
        before it) is shown instead. Listeners receive a DeletionNotice.
        """
        if item not in self._store:
            return

        was_active = self._cache.current is item
        locator = item.resource_locator

        self._renderer.unmount_thumbnail(item)
        index = self._store.remove(item)
        self._cache.release(item)

        if was_active:
            self._repair_selection(index)

        if not len(self._store):
            self._renderer.mark_current(None)
            if self._placeholder is not None:
                self._renderer.set_placeholder_visible(True)

        self._engine.reflow()

        logger.info("item_deleted", item_id=item.id, index=index, locator=locator)
        self._notifier.emit(
            DeletionNotice(resource_locator=locator, field_name=item.display_name)
        )

    @_in_player_context
    def update(self) -> None:
        """Rebuild the gallery from the container's current images."""
        for item in self._store.clear():
            self._renderer.unmount_thumbnail(item)
        self._cache.clear()
        self._renderer.mark_current(None)
        self._engine.reset()

        stop_class = self.options.image_stop_class
        for image in list(self.container.images):
            if stop_class in image.classes:
                continue
            if self.add_item(image) is not None:
                self.container.images.remove(image)

        self._store.recompute_width()
        self._engine.reset()

        logger.info(
            "gallery_rebuilt",
            items=len(self._store),
            total_width=self._store.total_width,
        )

        if self.activate and len(self._store):
            self.select(self._store[0])

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    @_in_player_context
    def click(self, event: PointerEvent) -> InputKind:
        return self._router.click(event)

    @_in_player_context
    def wheel(self, delta_y: float) -> InputKind:
        return self._router.wheel(delta_y)

    def _repair_selection(self, index: int | None) -> None:
        if index is None:
            return
        if self._store.has_index(index):
            self.select(self._store[index])
        elif self._store.has_index(index - 1):
            self.select(self._store[index - 1])
