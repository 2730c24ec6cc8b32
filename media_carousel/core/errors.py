"""Exception hierarchy for the gallery.

Runtime operations (activation, paging, deletion) never raise: a missing
resource or an out-of-range index is a silent no-op. Exceptions are
reserved for construction-time misconfiguration.

Example:
    from media_carousel.core.errors import ConfigurationError

    try:
        options = PlayerOptions.from_mapping({"scrollButtonsWidth": -5})
    except ConfigurationError as ex:
        logger.error("bad_player_options", error=str(ex))
"""


class GalleryError(Exception):
    """Base class for all gallery errors."""


class ConfigurationError(GalleryError):
    """Invalid player options.

    Attributes:
        original_error: The underlying validation error, if any.
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error

    @classmethod
    def from_exception(cls, ex: Exception) -> "ConfigurationError":
        """Create a ConfigurationError from an existing exception."""
        return cls(message=str(ex), original_error=ex)


class UnsupportedPlayerError(GalleryError):
    """The container does not declare a known player kind.

    Attributes:
        classes: The container classes that were inspected.
    """

    def __init__(self, classes: frozenset[str]) -> None:
        super().__init__(
            "Container must carry one of the classes 'video', 'image' or 'book'; "
            f"got {sorted(classes)!r}"
        )
        self.classes = classes
