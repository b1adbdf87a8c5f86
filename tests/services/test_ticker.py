import asyncio
import pytest
from mind_it.models.activity import ActivityKind
from mind_it.services.session_recorder import SessionRecorder
from mind_it.services.ticker import SessionTicker

@pytest.mark.asyncio
async def test_ticks_drive_recorder():
    """Test that a live tick source advances the running session"""
    recorder = SessionRecorder()
    ticker = SessionTicker(interval_seconds=0.01)
    recorder.start(ActivityKind.BREATHING)
    ticker.start(recorder.tick)

    await asyncio.sleep(0.1)
    ticker.cancel()
    record = recorder.complete()

    assert record.duration_seconds >= 1
    assert ticker.is_active is False

@pytest.mark.asyncio
async def test_cancel_stops_ticks():
    ticks = []
    ticker = SessionTicker(interval_seconds=0.01)
    ticker.start(lambda: ticks.append(1))
    await asyncio.sleep(0.05)
    ticker.cancel()
    count = len(ticks)

    await asyncio.sleep(0.05)
    assert len(ticks) == count

@pytest.mark.asyncio
async def test_restart_keeps_single_source():
    """Test that starting again replaces the previous tick source"""
    first, second = [], []
    ticker = SessionTicker(interval_seconds=0.01)
    ticker.start(lambda: first.append(1))
    ticker.start(lambda: second.append(1))
    await asyncio.sleep(0.05)
    ticker.cancel()

    assert first == []
    assert second

@pytest.mark.asyncio
async def test_failing_callback_keeps_ticking():
    calls = []

    def on_tick():
        calls.append(1)
        raise RuntimeError("boom")

    ticker = SessionTicker(interval_seconds=0.01)
    ticker.start(on_tick)
    await asyncio.sleep(0.05)
    assert ticker.is_active is True
    ticker.cancel()
    assert len(calls) > 1

def test_cancel_is_idempotent():
    ticker = SessionTicker()
    ticker.cancel()
    ticker.cancel()
    assert ticker.is_active is False
