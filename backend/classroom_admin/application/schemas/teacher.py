"""Pydantic DTOs for the Teacher feature."""

from typing import Any

from pydantic import BaseModel, Field


class TeacherCreate(BaseModel):
    """Schema for creating a teacher. All fields are required."""

    name_c: str = Field(..., min_length=1, max_length=255, examples=["Ada Lovelace"])
    email_c: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        examples=["ada@school.edu"],
    )
    department_c: str = Field(..., min_length=1, max_length=255, examples=["Mathematics"])

    model_config = {"str_strip_whitespace": True}

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class TeacherUpdate(TeacherCreate):
    """Schema for updating a teacher: full replacement of the form fields."""


class TeacherListResponse(BaseModel):
    records: list[dict[str, Any]]
    total_count: int
    facets: dict[str, list[str]] = Field(default_factory=dict)
