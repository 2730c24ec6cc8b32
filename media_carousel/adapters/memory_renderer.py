"""Headless renderer keeping the player's nodes in memory.

Useful for tests and for driving the gallery where no page is attached
(e.g. computing strip state on the server). Every node the core asks for
is recorded with its visibility so the result can be inspected or
serialized with snapshot().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING, Any

from media_carousel.ports.rendering import PaneSpec

if TYPE_CHECKING:
    from media_carousel.core.config import PlayerOptions
    from media_carousel.core.items import GalleryItem


@dataclass
class ThumbnailNode:
    """A thumbnail on the strip."""

    item_id: str
    src: str
    title: str
    width: float
    current: bool = False


@dataclass
class PaneNode:
    """A pane in the viewing area."""

    id: int
    spec: PaneSpec
    visible: bool = True

    @property
    def src(self) -> str:
        return self.spec.attrs.get("src", "")


@dataclass
class MountInfo:
    player_id: str
    main_wrapper_class: str
    image_wrapper_class: str
    strip_classes: list[str] = field(default_factory=list)


class MemoryRenderer:
    """Renderer that records nodes instead of drawing them."""

    def __init__(
        self,
        viewport_width: float = 600.0,
        thumbnail_width: float | Callable[[GalleryItem], float] = 100.0,
    ) -> None:
        """Initialize the renderer.

        Args:
            viewport_width: Visible width of the thumbnail strip, px.
            thumbnail_width: Width reported for every new thumbnail, or a
                callable computing it per item.
        """
        self._viewport_width = viewport_width
        self._thumbnail_width = thumbnail_width
        self._pane_ids = count(1)
        self.mount_info: MountInfo | None = None
        self.thumbnails: dict[str, ThumbnailNode] = {}
        self.panes: list[PaneNode] = []
        self.placeholder_visible: bool | None = None
        self.strip_offset: float = 0.0
        self.fullscreen_controls = 0

    # Renderer protocol

    def mount(self, player_id: str, options: PlayerOptions) -> None:
        self.mount_info = MountInfo(
            player_id=player_id,
            main_wrapper_class=options.main_wrapper_class,
            image_wrapper_class=options.image_wrapper_class,
            strip_classes=[options.image_wrapper_class, player_id],
        )

    def viewport_width(self) -> float:
        return self._viewport_width

    def mount_thumbnail(self, item: GalleryItem) -> float:
        if callable(self._thumbnail_width):
            width = float(self._thumbnail_width(item))
        else:
            width = float(self._thumbnail_width)
        self.thumbnails[item.id] = ThumbnailNode(
            item_id=item.id, src=item.src, title=item.title, width=width
        )
        return width

    def unmount_thumbnail(self, item: GalleryItem) -> None:
        self.thumbnails.pop(item.id, None)

    def mark_current(self, item: GalleryItem | None) -> None:
        for node in self.thumbnails.values():
            node.current = item is not None and node.item_id == item.id

    def set_strip_offset(self, offset: float) -> None:
        self.strip_offset = offset

    def create_pane(self, spec: PaneSpec) -> Any:
        node = PaneNode(id=next(self._pane_ids), spec=spec)
        self.panes.append(node)
        return node

    def set_pane_visible(self, handle: Any, visible: bool) -> None:
        handle.visible = visible

    def remove_pane(self, handle: Any) -> None:
        self.panes = [pane for pane in self.panes if pane is not handle]

    def set_placeholder_visible(self, visible: bool) -> None:
        self.placeholder_visible = visible

    def add_fullscreen_control(self) -> None:
        self.fullscreen_controls += 1

    # Inspection

    def resize(self, viewport_width: float) -> None:
        """Change the strip's visible width."""
        self._viewport_width = viewport_width

    def visible_panes(self) -> list[PaneNode]:
        return [pane for pane in self.panes if pane.visible]

    def current_thumbnail(self) -> ThumbnailNode | None:
        return next((node for node in self.thumbnails.values() if node.current), None)

    def snapshot(self) -> dict[str, Any]:
        """Plain-dict view of every recorded node."""
        return {
            "player_id": self.mount_info.player_id if self.mount_info else None,
            "viewport_width": self._viewport_width,
            "strip_offset": self.strip_offset,
            "placeholder_visible": self.placeholder_visible,
            "thumbnails": [
                {
                    "item_id": node.item_id,
                    "src": node.src,
                    "title": node.title,
                    "width": node.width,
                    "current": node.current,
                }
                for node in self.thumbnails.values()
            ],
            "panes": [
                {
                    "id": pane.id,
                    "tag": pane.spec.tag,
                    "locator": pane.spec.locator,
                    "attrs": dict(pane.spec.attrs),
                    "visible": pane.visible,
                }
                for pane in self.panes
            ],
        }
