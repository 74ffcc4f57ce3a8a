"""Pydantic DTOs (Data Transfer Objects) for the Activity feature."""

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

ActivityStatus = Literal["Not Started", "In Progress", "Completed", "On Hold", "Cancelled"]
ActivityPriority = Literal["Low", "Normal", "High"]


class ActivityCreate(BaseModel):
    """Schema for creating an activity: mirrors the activity form."""

    Name: str = Field(..., min_length=1, max_length=255, examples=["Essay"])
    subject_c: str = Field(..., min_length=1, max_length=255, examples=["English"])
    description_c: str = ""
    status_c: ActivityStatus = "Not Started"
    priority_c: ActivityPriority = "Normal"
    due_date_c: date
    Tags: str = Field("", examples=["homework, research"])

    model_config = {"str_strip_whitespace": True}

    @field_validator("Tags", mode="before")
    @classmethod
    def _join_tags(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(str(tag).strip() for tag in value if str(tag).strip())
        return value

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ActivityUpdate(ActivityCreate):
    """Schema for updating an activity: the form always submits every field."""


class ActivityListResponse(BaseModel):
    records: list[dict[str, Any]]
    total_count: int
    facets: dict[str, list[str]] = Field(default_factory=dict)
