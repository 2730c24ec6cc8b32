"""Rendering protocols and page-side value types.

The gallery core never touches concrete visual nodes. It talks to the page
through the Protocols below; implementations can drive a browser DOM, a
desktop toolkit or a headless model (see media_carousel.adapters).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from media_carousel.core.config import PlayerOptions
    from media_carousel.core.items import GalleryItem

# =============================================================================
# Data Classes
# =============================================================================


class MediaType(str, Enum):
    """Kind of media a player shows. Doubles as the container class name."""

    IMAGE = "image"
    VIDEO = "video"
    BOOK = "book"


@dataclass
class SourceImage:
    """A thumbnail image found in the player container before adoption.

    Attributes:
        src: Thumbnail URL (possibly URI-encoded).
        title: Title attribute of the image.
        object_src: Full resource URL for videos and documents.
        type: Explicit document subtype (e.g. "pdf", "docx").
        name: Form field identifier reported back on deletion.
        classes: Class names carried by the image.
        in_clone: Whether the image sits inside a "clone" region.
    """

    src: str
    title: str = ""
    object_src: str = ""
    type: str = ""
    name: str = ""
    classes: frozenset[str] = frozenset()
    in_clone: bool = False


@dataclass
class PlayerContainer:
    """The page element a player is built on.

    Attributes:
        classes: Class names of the container; one of them selects the
            player kind, "no-active" disables auto-activation.
        images: Images not yet adopted. Adoption removes them from the list.
        origin: Page origin used to build document-viewer URLs.
    """

    classes: set[str] = field(default_factory=set)
    images: list[SourceImage] = field(default_factory=list)
    origin: str = ""


@dataclass(frozen=True)
class PaneSpec:
    """Everything a renderer needs to build one pane.

    Attributes:
        media_type: Pane category.
        tag: Element kind ("img", "video" or "iframe").
        locator: Resource locator the pane is bound to.
        attrs: Element attributes (src included).
    """

    media_type: MediaType
    tag: str
    locator: str
    attrs: dict[str, str] = field(default_factory=dict)


# =============================================================================
# Protocols
# =============================================================================


class Renderer(Protocol):
    """Creates and mutates the visual nodes of one player."""

    def mount(self, player_id: str, options: PlayerOptions) -> None:
        """Create the viewing area and the thumbnail strip."""
        ...

    def viewport_width(self) -> float:
        """Current visible width of the thumbnail strip, px."""
        ...

    def mount_thumbnail(self, item: GalleryItem) -> float:
        """Append a thumbnail for the item to the strip.

        Returns:
            The measured width of the new thumbnail, px.
        """
        ...

    def unmount_thumbnail(self, item: GalleryItem) -> None:
        """Remove the item's thumbnail from the strip."""
        ...

    def mark_current(self, item: GalleryItem | None) -> None:
        """Move the "current" marker to the item's thumbnail (None clears it)."""
        ...

    def set_strip_offset(self, offset: float) -> None:
        """Translate every thumbnail horizontally by the given offset, px."""
        ...

    def create_pane(self, spec: PaneSpec) -> Any:
        """Build a visible pane, append it to the viewing area, return its handle."""
        ...

    def set_pane_visible(self, handle: Any, visible: bool) -> None:
        ...

    def remove_pane(self, handle: Any) -> None:
        ...

    def set_placeholder_visible(self, visible: bool) -> None:
        """Show or hide the "empty gallery" placeholder."""
        ...

    def add_fullscreen_control(self) -> None:
        """Add a button that requests fullscreen for the visible document."""
        ...


class Animator(Protocol):
    """Runs the visual strip transition.

    Implementations must not block: the carousel state is committed before
    the animation starts and a new call may supersede a running one.
    """

    def animate(
        self,
        start: float,
        end: float,
        duration_ms: int,
        apply: Callable[[float], None],
    ) -> None:
        """Move from start to end, calling apply with each intermediate offset.

        The last call to apply must carry the end value.
        """
        ...


class Lightbox(Protocol):
    """Optional zoom-on-click capability for image panes."""

    def attach(self, handle: Any) -> None:
        ...
