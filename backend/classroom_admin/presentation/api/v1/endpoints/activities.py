"""Activity CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from classroom_admin.application.schemas import (
    ActivityCreate,
    ActivityListResponse,
    ActivityUpdate,
    BatchDeleteRequest,
)
from classroom_admin.application.services import RecordFilter, RemoteResourceClient
from classroom_admin.config import Settings, get_settings
from classroom_admin.domain.entities import PageInfo, QueryOptions
from classroom_admin.domain.exceptions import MalformedInputError
from classroom_admin.domain.resources import ACTIVITY
from classroom_admin.infrastructure.dependencies import get_activity_client
from classroom_admin.presentation.api.v1.outcome_responses import unwrap

router = APIRouter(prefix="/activities", tags=["Activities"])

_FACETS = ("status_c", "priority_c")


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    search: str | None = Query(None, description="Search name, subject and description"),
    status_filter: str | None = Query(None, alias="status", description="Exact status or 'all'"),
    priority: str | None = Query(None, description="Exact priority or 'all'"),
    limit: int = Query(100, ge=1),
    offset: int = Query(0, ge=0),
    settings: Settings = Depends(get_settings),
    client: RemoteResourceClient = Depends(get_activity_client),
) -> ActivityListResponse:
    """List activities, newest first, narrowed by search and facet filters."""
    if limit > settings.max_page_limit:
        raise MalformedInputError("limit", f"must not exceed {settings.max_page_limit}")
    outcome = await client.list(
        options=QueryOptions(
            order_by=ACTIVITY.default_order,
            page=PageInfo(limit=limit, offset=offset),
        )
    )
    records = unwrap(outcome, ACTIVITY)

    matched = RecordFilter(ACTIVITY).apply(
        records,
        search=search,
        facets={"status_c": status_filter, "priority_c": priority},
    )
    return ActivityListResponse(
        records=matched,
        total_count=len(matched),
        facets={name: RecordFilter.facet_values(records, name) for name in _FACETS},
    )


@router.get("/{record_id}")
async def get_activity(
    record_id: int,
    client: RemoteResourceClient = Depends(get_activity_client),
) -> dict:
    """Retrieve a single activity by ID."""
    return unwrap(await client.get(record_id), ACTIVITY)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_activity(
    data: ActivityCreate,
    client: RemoteResourceClient = Depends(get_activity_client),
) -> dict:
    """Create a new activity."""
    return unwrap(await client.create(data.to_payload()), ACTIVITY)


@router.put("/{record_id}")
async def update_activity(
    record_id: int,
    data: ActivityUpdate,
    client: RemoteResourceClient = Depends(get_activity_client),
) -> dict:
    """Update an existing activity."""
    return unwrap(await client.update(record_id, data.to_payload()), ACTIVITY)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(
    record_id: int,
    client: RemoteResourceClient = Depends(get_activity_client),
) -> None:
    """Delete an activity by ID."""
    unwrap(await client.delete([record_id]), ACTIVITY)


@router.post("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activities(
    data: BatchDeleteRequest,
    client: RemoteResourceClient = Depends(get_activity_client),
) -> None:
    """Delete several activities in one call."""
    unwrap(await client.delete(data.ids), ACTIVITY)
