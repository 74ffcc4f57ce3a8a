"""Teacher CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from classroom_admin.application.schemas import (
    BatchDeleteRequest,
    TeacherCreate,
    TeacherListResponse,
    TeacherUpdate,
)
from classroom_admin.application.services import RecordFilter, RemoteResourceClient
from classroom_admin.config import Settings, get_settings
from classroom_admin.domain.entities import PageInfo, QueryOptions
from classroom_admin.domain.exceptions import MalformedInputError
from classroom_admin.domain.resources import TEACHER
from classroom_admin.infrastructure.dependencies import get_teacher_client
from classroom_admin.presentation.api.v1.outcome_responses import unwrap

router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=TeacherListResponse)
async def list_teachers(
    search: str | None = Query(None, description="Search name, email and department"),
    department: str | None = Query(None, description="Exact department or 'all'"),
    limit: int = Query(100, ge=1),
    offset: int = Query(0, ge=0),
    settings: Settings = Depends(get_settings),
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> TeacherListResponse:
    """List teachers alphabetically, narrowed by search and department."""
    if limit > settings.max_page_limit:
        raise MalformedInputError("limit", f"must not exceed {settings.max_page_limit}")
    outcome = await client.list(
        options=QueryOptions(
            order_by=TEACHER.default_order,
            page=PageInfo(limit=limit, offset=offset),
        )
    )
    records = unwrap(outcome, TEACHER)

    matched = RecordFilter(TEACHER).apply(
        records, search=search, facets={"department_c": department}
    )
    return TeacherListResponse(
        records=matched,
        total_count=len(matched),
        facets={"department_c": RecordFilter.facet_values(records, "department_c")},
    )


@router.get("/{record_id}")
async def get_teacher(
    record_id: int,
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> dict:
    """Retrieve a single teacher by ID."""
    return unwrap(await client.get(record_id), TEACHER)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_teacher(
    data: TeacherCreate,
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> dict:
    """Create a new teacher."""
    return unwrap(await client.create(data.to_payload()), TEACHER)


@router.put("/{record_id}")
async def update_teacher(
    record_id: int,
    data: TeacherUpdate,
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> dict:
    """Update an existing teacher."""
    return unwrap(await client.update(record_id, data.to_payload()), TEACHER)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    record_id: int,
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> None:
    """Delete a teacher by ID."""
    unwrap(await client.delete([record_id]), TEACHER)


@router.post("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teachers(
    data: BatchDeleteRequest,
    client: RemoteResourceClient = Depends(get_teacher_client),
) -> None:
    """Delete several teachers in one call."""
    unwrap(await client.delete(data.ids), TEACHER)
