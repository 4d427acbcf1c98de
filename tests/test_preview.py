"""Tests for the blinking preview task and its controller."""

from __future__ import annotations

import asyncio

import pytest

from conftest import drain
from typeahead.display import Frame
from typeahead.preview import PreviewController, PreviewTask


class TestPreviewTask:
    def test_frames_alternate_candidate_first(self) -> None:
        task = PreviewTask("tes", "ting", asyncio.Queue(), 0.2, generation=4)

        assert task.frames == (Frame("testing", 4), Frame("tes", 4))

    @pytest.mark.asyncio
    async def test_emits_alternating_frames(self) -> None:
        queue: asyncio.Queue = asyncio.Queue()
        task = PreviewTask("tes", "t", queue, 0.01, generation=1)

        task.start()
        await asyncio.sleep(0.08)
        await task.cancel()

        texts = [f.text for f in drain(queue)]
        assert len(texts) >= 3
        assert texts[:3] == ["test", "tes", "test"]

    @pytest.mark.asyncio
    async def test_cancel_waits_for_stop(self) -> None:
        queue: asyncio.Queue = asyncio.Queue()
        task = PreviewTask("a", "b", queue, 0.01, generation=1)

        task.start()
        await asyncio.sleep(0.03)
        await task.cancel()

        assert not task.running
        emitted = queue.qsize()
        await asyncio.sleep(0.05)
        assert queue.qsize() == emitted

    @pytest.mark.asyncio
    async def test_cancel_before_first_tick_emits_nothing(self) -> None:
        queue: asyncio.Queue = asyncio.Queue()
        task = PreviewTask("a", "b", queue, 10.0, generation=1)

        task.start()
        await task.cancel()

        assert queue.empty()
        assert task.frames_emitted == 0

    @pytest.mark.asyncio
    async def test_cancel_while_blocked_on_full_queue(self) -> None:
        """A producer stuck on a full queue still stops and never adds a frame."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        task = PreviewTask("a", "b", queue, 0.0, generation=1)

        task.start()
        await asyncio.sleep(0.02)
        assert queue.full()

        await task.cancel()

        assert not task.running
        assert drain(queue) == [Frame("ab", 1)]

    @pytest.mark.asyncio
    async def test_cannot_start_twice(self) -> None:
        task = PreviewTask("a", "b", asyncio.Queue(), 10.0, generation=1)
        task.start()

        with pytest.raises(RuntimeError):
            task.start()
        await task.cancel()


class TestPreviewController:
    @pytest.mark.asyncio
    async def test_spawn_increments_generation(self) -> None:
        controller = PreviewController(asyncio.Queue(), 10.0)

        first = await controller.spawn("a", "b")
        second = await controller.spawn("a", "c")

        assert (first.generation, second.generation) == (1, 2)
        assert controller.generation == 2
        assert controller.active is second
        await controller.cancel()

    @pytest.mark.asyncio
    async def test_spawn_stops_previous_task(self) -> None:
        controller = PreviewController(asyncio.Queue(), 0.01)

        first = await controller.spawn("a", "b")
        await asyncio.sleep(0.03)
        second = await controller.spawn("a", "c")

        assert not first.running
        assert second.running
        await controller.cancel()
        assert controller.active is None

    @pytest.mark.asyncio
    async def test_no_cross_talk_after_respawn(self) -> None:
        """Once a respawn returns, only the new generation reaches the queue."""
        queue: asyncio.Queue = asyncio.Queue()
        controller = PreviewController(queue, 0.005)

        for _ in range(20):
            await controller.spawn("tes", "t")
            await asyncio.sleep(0.012)
            new = await controller.spawn("tes", "ter")
            drain(queue)  # frames queued before the old task stopped

            await asyncio.sleep(0.03)
            generations = {f.generation for f in drain(queue)}
            assert generations <= {new.generation}

        await controller.cancel()

    @pytest.mark.asyncio
    async def test_rapid_respawns_leave_one_task(self) -> None:
        queue: asyncio.Queue = asyncio.Queue()
        controller = PreviewController(queue, 0.001)

        tasks = [await controller.spawn("x", str(i)) for i in range(50)]

        assert [t.running for t in tasks].count(True) == 1
        assert tasks[-1].running
        await controller.cancel()

    @pytest.mark.asyncio
    async def test_cancel_without_active_is_noop(self) -> None:
        controller = PreviewController(asyncio.Queue(), 0.01)
        await controller.cancel()  # Should not raise
        assert controller.active is None
