"""Gallery items and their ordered store.

The store owns item order (left-to-right on the strip) and the width
bookkeeping the carousel needs. Offsets are always summed from the current
widths so they never drift; only the total is maintained incrementally.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from urllib.parse import unquote
from uuid import uuid4

from media_carousel.core.config import TITLE_MAX_LENGTH
from media_carousel.ports.rendering import MediaType, SourceImage


# Escapes of URI delimiters stay encoded, so a decoded src still parses
# into the same path, query and fragment.
_RESERVED_ESCAPE = re.compile(r"(%(?:2[346BbCcFf]|3[AaBbDdFf]|40))")


def decode_uri(uri: str) -> str:
    """Decode percent-escapes in a URL except those of reserved delimiters."""
    parts = _RESERVED_ESCAPE.split(uri)
    # Odd indexes hold the captured reserved escapes
    return "".join(part if i % 2 else unquote(part) for i, part in enumerate(parts))


def truncate_title(title: str, limit: int = TITLE_MAX_LENGTH) -> str:
    """Shorten a title for display, marking the cut with an ellipsis."""
    if len(title) > limit:
        return title[:limit] + "..."
    return title


@dataclass(eq=False)
class GalleryItem:
    """One entry of the gallery.

    Items compare by identity: two items may share a resource locator.

    Attributes:
        src: Thumbnail URL, URI-decoded.
        media_type: Kind of pane the item renders into.
        object_src: Full resource URL (videos and documents).
        subtype: Explicit document subtype, empty when not given.
        display_name: Field identifier reported on deletion.
        title: Display title, already truncated.
        thumbnail_width: Measured width of the thumbnail, px.
        id: Opaque identity, stable for the item's lifetime.
    """

    src: str
    media_type: MediaType
    object_src: str = ""
    subtype: str = ""
    display_name: str = ""
    title: str = ""
    thumbnail_width: float = 0.0
    id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def resource_locator(self) -> str:
        """The key of the item's full-resolution resource."""
        if self.media_type is MediaType.IMAGE:
            return self.src
        return self.object_src or self.src

    @classmethod
    def from_source(
        cls,
        image: SourceImage,
        media_type: MediaType,
        display_name: str = "",
    ) -> GalleryItem:
        """Adopt a page image as a gallery item.

        Args:
            image: The source thumbnail.
            media_type: The owning player's kind.
            display_name: Overrides the image's own field name when given.
        """
        return cls(
            src=decode_uri(image.src),
            media_type=media_type,
            object_src=image.object_src,
            subtype=image.type,
            display_name=display_name or image.name,
            title=truncate_title(image.title),
        )


class ItemStore:
    """Ordered collection of gallery items."""

    def __init__(self) -> None:
        self._items: list[GalleryItem] = []
        self._total_width: float = 0.0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[GalleryItem]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> GalleryItem:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    @property
    def items(self) -> tuple[GalleryItem, ...]:
        return tuple(self._items)

    @property
    def total_width(self) -> float:
        return self._total_width

    def has_index(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def index_of(self, item: GalleryItem) -> int | None:
        for index, existing in enumerate(self._items):
            if existing is item:
                return index
        return None

    def append(self, item: GalleryItem) -> int:
        """Add an item at the end of the strip.

        Returns:
            The index of the new item.
        """
        self._items.append(item)
        self._total_width += item.thumbnail_width
        return len(self._items) - 1

    def remove(self, item: GalleryItem) -> int | None:
        """Remove an item by identity.

        Returns:
            The index the item occupied, or None if it was not stored.
        """
        index = self.index_of(item)
        if index is None:
            return None
        del self._items[index]
        self._total_width -= item.thumbnail_width
        return index

    def clear(self) -> list[GalleryItem]:
        """Drop every item, returning them in strip order."""
        removed = self._items
        self._items = []
        self._total_width = 0.0
        return removed

    def recompute_width(self) -> float:
        """Resum the total width from the current thumbnails."""
        self._total_width = sum(item.thumbnail_width for item in self._items)
        return self._total_width

    def width_before(self, index: int) -> float:
        """Sum of thumbnail widths strictly before index."""
        return sum(item.thumbnail_width for item in self._items[:index])

    def width_from(self, index: int) -> float:
        """Sum of thumbnail widths at and after index."""
        return sum(item.thumbnail_width for item in self._items[index:])
