"""Unit tests for the SSE and logging notifiers."""

import asyncio
import json
import logging

import pytest

from classroom_admin.infrastructure.notifications import (
    CompositeNotifier,
    LoggingNotifier,
    SSENotifier,
)


def _parse(event: str) -> tuple[str, dict]:
    event_line, data_line = event.strip().split("\n")
    return event_line.removeprefix("event: "), json.loads(data_line.removeprefix("data: "))


@pytest.mark.asyncio
async def test_sse_notifier_delivers_toasts_to_subscribers():
    notifier = SSENotifier()
    stream = notifier.subscribe()
    first = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    assert notifier.client_count == 1

    await notifier.error("due_date_c: required")
    event_type, data = _parse(await first)

    assert event_type == "toast"
    assert data == {"level": "error", "message": "due_date_c: required"}

    await notifier.success("Activity created successfully")
    _, data = _parse(await stream.__anext__())
    assert data == {"level": "success", "message": "Activity created successfully"}

    await notifier.shutdown()
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()
    assert notifier.client_count == 0


@pytest.mark.asyncio
async def test_sse_notifier_drops_client_with_full_queue():
    notifier = SSENotifier(queue_size=1)
    stream = notifier.subscribe()
    pending = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)

    await notifier.success("one")
    assert _parse(await pending)[1]["message"] == "one"

    await notifier.success("two")
    await notifier.success("three")

    assert notifier.client_count == 0
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()


@pytest.mark.asyncio
async def test_broadcast_without_subscribers_is_a_no_op():
    notifier = SSENotifier()
    await notifier.error("nobody listening")
    assert notifier.client_count == 0


@pytest.mark.asyncio
async def test_logging_notifier_writes_levels(caplog):
    notifier = LoggingNotifier()

    with caplog.at_level(logging.INFO, logger="classroom_admin.notifications"):
        await notifier.success("Teacher created successfully")
        await notifier.error("Failed to load teachers")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.INFO, "✅ Teacher created successfully") in levels
    assert (logging.WARNING, "❌ Failed to load teachers") in levels


@pytest.mark.asyncio
async def test_composite_notifier_fans_out(notifier):
    other = type(notifier)()
    composite = CompositeNotifier(notifier, other)

    await composite.success("ok")
    await composite.error("bad")

    assert notifier.messages == [("success", "ok"), ("error", "bad")]
    assert other.messages == notifier.messages
