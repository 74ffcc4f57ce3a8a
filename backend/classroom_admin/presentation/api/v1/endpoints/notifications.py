"""Toast notification stream for the admin UI."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from classroom_admin.infrastructure.dependencies import get_sse_notifier
from classroom_admin.infrastructure.notifications import SSENotifier

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/stream")
async def notification_stream(
    sse: SSENotifier = Depends(get_sse_notifier),
) -> StreamingResponse:
    """SSE endpoint for toast notifications.

    Clients connect via EventSource and receive 'toast' events with
    ``{"level": "success" | "error", "message": ...}`` payloads.
    """
    return StreamingResponse(
        sse.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
