"""Player options.

Options are accepted either by their snake_case field names or by the
camelCase names used in page markup (``mainWrapperClass``,
``scrollButtonsWidth``...). Unspecified or falsy values fall back to the
defaults below.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from media_carousel.core.errors import ConfigurationError

# Container classes that select the player kind / disable auto-activation
NO_ACTIVE_CLASS = "no-active"
CLONE_CLASS = "clone"

TITLE_MAX_LENGTH = 50


class PlayerOptions(BaseModel):
    """Configuration for a single player instance."""

    style_file_path: str = "player.css"
    main_wrapper_class: str = "main-wrapper"
    image_wrapper_class: str = "image-wrapper"
    scroll_buttons_width: int = Field(50, ge=0, description="Edge zone width, px")
    scroll_buttons_padding: int = Field(10, ge=0, description="Edge zone tolerance, px")
    image_stop_class: str = "no-image"
    animation_duration_ms: int = Field(400, ge=0)
    document_viewer_url: str = "https://docs.google.com/viewer"

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_mapping(cls, cnf: Mapping[str, Any] | None = None) -> "PlayerOptions":
        """Merge a user mapping over the defaults.

        Args:
            cnf: Options keyed by field name or camelCase alias. Falsy
                values are treated as unspecified.

        Returns:
            The validated options.

        Raises:
            ConfigurationError: If a value fails validation.
        """
        supplied = {key: value for key, value in (cnf or {}).items() if value}
        try:
            return cls.model_validate(supplied)
        except ValidationError as ex:
            raise ConfigurationError.from_exception(ex) from ex

    @property
    def edge_zone_width(self) -> int:
        return self.scroll_buttons_width
