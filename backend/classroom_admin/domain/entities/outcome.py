"""Operation outcomes: the uniform result of every resource client call."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

Record = dict[str, Any]


@dataclass(frozen=True)
class FailureReason:
    """A single human-readable reason a record was rejected."""

    message: str
    field_label: str | None = None

    def __str__(self) -> str:
        if self.field_label:
            return f"{self.field_label}: {self.message}"
        return self.message


@dataclass(frozen=True)
class FailedRecord:
    """A record the remote refused, with every reason it gave."""

    record: Record | None
    reasons: list[FailureReason] = field(default_factory=list)


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """A single-record lookup found no row. Not an error."""

    record_id: int

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class PartialFailure:
    """One or more records in a write were rejected by the remote."""

    succeeded: list[Record] = field(default_factory=list)
    failed: list[FailedRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False

    @property
    def reasons(self) -> list[FailureReason]:
        """All reasons across every failed record, in order."""
        return [reason for failed in self.failed for reason in failed.reasons]


@dataclass(frozen=True)
class FatalFailure:
    """The call could not complete at all."""

    message: str

    @property
    def ok(self) -> bool:
        return False


OperationOutcome = Union[Success[T], PartialFailure, FatalFailure]
LookupOutcome = Union[Success[T], NotFound, FatalFailure]
