"""Animator factory.

Supported backends:
- "instant": apply the final offset at once (default)
- "asyncio": tween on the running event loop

Example:
    animator = create_animator("asyncio", frame_interval_ms=16)
"""

from __future__ import annotations

from media_carousel.adapters.animators import AsyncioAnimator, InstantAnimator

AnimatorType = InstantAnimator | AsyncioAnimator


def create_animator(backend: str = "instant", **kwargs: int) -> AnimatorType:
    """Create an animator for the given backend.

    Args:
        backend: "instant" or "asyncio".
        **kwargs: Backend-specific options:
            - frame_interval_ms: Frame spacing for the "asyncio" backend.

    Returns:
        An animator instance.

    Raises:
        ValueError: If the backend is not supported.
    """
    if backend == "instant":
        return InstantAnimator()

    if backend == "asyncio":
        return AsyncioAnimator(**kwargs)

    raise ValueError(
        f"Unsupported animator backend: {backend!r}. Supported backends: 'instant', 'asyncio'"
    )
