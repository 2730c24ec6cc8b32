"""Deletion notifications.

Deleting an item is the only change reported outside the player, so that
forms can drop the matching upload reference.
"""

from collections.abc import Callable
from dataclasses import dataclass

from media_carousel.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeletionNotice:
    """Emitted after an item was deleted.

    Attributes:
        resource_locator: Locator of the deleted item's resource.
        field_name: Field identifier the item was adopted with.
    """

    resource_locator: str
    field_name: str


DeletionListener = Callable[[DeletionNotice], None]


class DeletionNotifier:
    """Fan-out of deletion notices to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[DeletionListener] = []

    def subscribe(self, listener: DeletionListener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, notice: DeletionNotice) -> None:
        logger.debug(
            "deletion_notice",
            resource_locator=notice.resource_locator,
            field_name=notice.field_name,
            listeners=len(self._listeners),
        )
        for listener in list(self._listeners):
            listener(notice)
