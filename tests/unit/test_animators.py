"""Tests for strip animators."""

import asyncio

import pytest
from structlog.testing import capture_logs

from media_carousel.adapters.animators import AsyncioAnimator, InstantAnimator
from media_carousel.adapters.factory import create_animator
from media_carousel.adapters.memory_renderer import MemoryRenderer
from media_carousel.core.player import Player
from media_carousel.ports.rendering import PlayerContainer
from tests.mocks.sources import make_images


class TestInstantAnimator:
    def test_applies_end_only(self):
        applied: list[float] = []
        InstantAnimator().animate(0, -200, 400, applied.append)
        assert applied == [-200]


class TestAsyncioAnimator:
    def test_without_loop_applies_end(self):
        applied: list[float] = []
        AsyncioAnimator().animate(0, -200, 400, applied.append)
        assert applied == [-200]

    def test_rejects_non_positive_frame_interval(self):
        with pytest.raises(ValueError):
            AsyncioAnimator(frame_interval_ms=0)

    @pytest.mark.asyncio
    async def test_tweens_linearly(self):
        animator = AsyncioAnimator(frame_interval_ms=10)
        applied: list[float] = []
        animator.animate(0, -300, 30, applied.append)
        assert applied == []
        assert animator.running

        await animator.wait()

        assert applied == [-100, -200, -300]
        assert not animator.running

    @pytest.mark.asyncio
    async def test_zero_duration_applies_immediately(self):
        animator = AsyncioAnimator()
        applied: list[float] = []
        animator.animate(0, -300, 0, applied.append)
        assert applied == [-300]
        assert not animator.running

    @pytest.mark.asyncio
    async def test_new_transition_supersedes_running_one(self):
        animator = AsyncioAnimator(frame_interval_ms=5)
        first: list[float] = []
        second: list[float] = []
        animator.animate(0, -1000, 10_000, first.append)
        animator.animate(-100, -200, 10, second.append)

        await animator.wait()

        assert -1000 not in first
        assert second[-1] == -200

    @pytest.mark.asyncio
    async def test_failing_apply_is_logged(self):
        def broken(offset: float) -> None:
            raise RuntimeError("strip detached")

        animator = AsyncioAnimator(frame_interval_ms=5)
        with capture_logs() as logs:
            animator.animate(0, -100, 10, broken)
            with pytest.raises(RuntimeError, match="strip detached"):
                await animator.wait()
            await asyncio.sleep(0)

        failures = [entry for entry in logs if entry["event"] == "tween_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["error"] == "strip detached"

    @pytest.mark.asyncio
    async def test_state_committed_before_animation_ends(self):
        """The player's position is final while the strip is still moving."""
        animator = AsyncioAnimator(frame_interval_ms=5)
        renderer = MemoryRenderer(viewport_width=250, thumbnail_width=100)
        container = PlayerContainer(classes={"image"}, images=make_images(5))
        player = Player(container, renderer, animator=animator)

        assert player.scroll_to(2) == 200
        assert player.position == 2
        assert renderer.strip_offset == 0

        await animator.wait()
        assert renderer.strip_offset == -200


class TestCreateAnimator:
    def test_instant(self):
        assert isinstance(create_animator(), InstantAnimator)

    def test_asyncio(self):
        animator = create_animator("asyncio", frame_interval_ms=8)
        assert isinstance(animator, AsyncioAnimator)
        assert animator.frame_interval_ms == 8

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unsupported animator backend"):
            create_animator("css")
