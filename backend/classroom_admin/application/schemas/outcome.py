"""Pydantic DTOs shared by every resource endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class FailureReasonSchema(BaseModel):
    field_label: str | None = None
    message: str


class FailedRecordSchema(BaseModel):
    record: dict[str, Any] | None = None
    reasons: list[FailureReasonSchema] = Field(default_factory=list)


class PartialFailureResponse(BaseModel):
    """Body of a 422 response when the remote rejected records."""

    detail: str
    succeeded: list[dict[str, Any]] = Field(default_factory=list)
    failed: list[FailedRecordSchema] = Field(default_factory=list)


class BatchDeleteRequest(BaseModel):
    ids: list[int] = Field(..., min_length=1)
