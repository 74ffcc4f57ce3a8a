"""Transport envelopes: what the hosted data service hands back.

These mirror the response shape of the hosted SDK and are only ever
seen by the resource client; callers receive an OperationOutcome.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WriteOperation(str, Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass
class FieldError:
    """A field-level validation error on one submitted record."""

    field_label: str
    message: str


@dataclass
class RecordResult:
    """Per-record result inside a batch write or delete."""

    success: bool
    data: dict[str, Any] | None = None
    message: str | None = None
    errors: list[FieldError] = field(default_factory=list)


@dataclass
class QueryEnvelope:
    success: bool
    data: list[dict[str, Any]] | None = None
    message: str | None = None


@dataclass
class RecordEnvelope:
    success: bool
    data: dict[str, Any] | None = None
    message: str | None = None


@dataclass
class WriteEnvelope:
    """Outer response of a create, update or delete call.

    ``results`` is None when the service omitted per-record results.
    """

    success: bool
    results: list[RecordResult] | None = None
    message: str | None = None
