"""Strip animators.

InstantAnimator applies the final offset at once. AsyncioAnimator tweens
the offset on the running event loop as a fire-and-forget task; a new
transition cancels the one in flight and starts from the committed offset,
so superseded transitions may jump visually.
"""

import asyncio
import math
from collections.abc import Callable

from media_carousel.core.logging import get_logger

logger = get_logger(__name__)

FRAME_INTERVAL_MS = 16


def _report_failure(task: asyncio.Task[None]) -> None:
    # Retrieving the exception here keeps asyncio from reporting it again
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("tween_failed", error=str(error), exc_info=error)


class InstantAnimator:
    """Jumps straight to the end offset."""

    def animate(
        self,
        start: float,
        end: float,
        duration_ms: int,
        apply: Callable[[float], None],
    ) -> None:
        apply(end)


class AsyncioAnimator:
    """Linear tween driven by asyncio.

    Without a running event loop the end offset is applied immediately.
    """

    def __init__(self, frame_interval_ms: int = FRAME_INTERVAL_MS) -> None:
        if frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be positive")
        self.frame_interval_ms = frame_interval_ms
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def animate(
        self,
        start: float,
        end: float,
        duration_ms: int,
        apply: Callable[[float], None],
    ) -> None:
        self.cancel()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            apply(end)
            return

        if duration_ms <= 0 or start == end:
            apply(end)
            return

        self._task = loop.create_task(self._tween(start, end, duration_ms, apply))
        self._task.add_done_callback(_report_failure)

    def cancel(self) -> None:
        """Stop the transition in flight, leaving the offset where it is."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.debug("tween_superseded")
        self._task = None

    async def wait(self) -> None:
        """Wait for the transition in flight to finish."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _tween(
        self,
        start: float,
        end: float,
        duration_ms: int,
        apply: Callable[[float], None],
    ) -> None:
        steps = max(1, math.ceil(duration_ms / self.frame_interval_ms))
        for step in range(1, steps + 1):
            await asyncio.sleep(self.frame_interval_ms / 1000)
            if step == steps:
                apply(end)
            else:
                apply(start + (end - start) * step / steps)
