"""Mock implementations for testing."""

from tests.mocks.rendering import AnimationCall, RecordingAnimator, RecordingLightbox
from tests.mocks.sources import make_images

__all__ = ["AnimationCall", "RecordingAnimator", "RecordingLightbox", "make_images"]
