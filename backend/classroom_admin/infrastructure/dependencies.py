"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from classroom_admin.application.interfaces import Notifier, RecordTransport
from classroom_admin.application.services import RemoteResourceClient
from classroom_admin.config import get_settings
from classroom_admin.domain.resources import get_resource
from classroom_admin.infrastructure.apper import ApperRecordTransport
from classroom_admin.infrastructure.notifications import (
    CompositeNotifier,
    LoggingNotifier,
    SSENotifier,
)


@lru_cache
def get_sse_notifier() -> SSENotifier:
    """Process-wide SSE broadcaster shared by every request."""
    return SSENotifier()


def get_record_transport() -> RecordTransport:
    """Provides the Apper transport configured from settings."""
    settings = get_settings()
    return ApperRecordTransport(
        project_id=settings.apper_project_id,
        public_key=settings.apper_public_key,
        base_url=settings.apper_base_url,
        timeout=settings.apper_timeout_seconds,
    )


def get_notifier(sse: SSENotifier = Depends(get_sse_notifier)) -> Notifier:
    """Toasts go to the log and to every connected UI client."""
    return CompositeNotifier(LoggingNotifier(), sse)


def resource_client_provider(resource_name: str):
    """Build a dependency yielding a RemoteResourceClient for a registered resource.

    Unknown names raise UnknownResourceError when the provider is built.
    """
    descriptor = get_resource(resource_name)

    async def _provide(
        transport: RecordTransport = Depends(get_record_transport),
        notifier: Notifier = Depends(get_notifier),
    ) -> AsyncGenerator[RemoteResourceClient, None]:
        yield RemoteResourceClient(descriptor, transport, notifier)

    _provide.__name__ = f"get_{descriptor.name}_client"
    return _provide


get_activity_client = resource_client_provider("activity")
get_teacher_client = resource_client_provider("teacher")
