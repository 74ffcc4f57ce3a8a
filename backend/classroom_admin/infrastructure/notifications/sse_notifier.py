"""SSE notifier: pushes toast notifications to every connected UI client."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator

from classroom_admin.application.interfaces import Notifier

logger = logging.getLogger(__name__)


class SSENotifier(Notifier):
    """Broadcasts ``toast`` events over Server-Sent Events.

    Each connected client gets its own bounded asyncio.Queue. A client
    whose queue fills up is disconnected rather than blocking the sender.
    """

    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._queues: list[asyncio.Queue[str | None]] = []

    async def success(self, message: str) -> None:
        await self.broadcast("toast", {"level": "success", "message": message})

    async def error(self, message: str) -> None:
        await self.broadcast("toast", {"level": "error", "message": message})

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Yield formatted SSE strings until the client disconnects."""
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._queue_size)
        self._queues.append(queue)
        try:
            while True:
                event = await queue.get()
                if event is None:
                    break
                yield event
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    async def broadcast(self, event_type: str, data: dict[str, str]) -> None:
        sse_message = f"event: {event_type}\ndata: {json.dumps(data)}\n\n"

        for queue in list(self._queues):
            try:
                queue.put_nowait(sse_message)
            except asyncio.QueueFull:
                logger.warning("SSE client queue full, disconnecting")
                self._queues.remove(queue)
                self._close(queue)

    async def shutdown(self) -> None:
        """Disconnect all connected clients."""
        for queue in self._queues:
            self._close(queue)
        self._queues.clear()

    @property
    def client_count(self) -> int:
        return len(self._queues)

    @staticmethod
    def _close(queue: asyncio.Queue[str | None]) -> None:
        # Make room for the sentinel on a full queue.
        while queue.full():
            queue.get_nowait()
        queue.put_nowait(None)
