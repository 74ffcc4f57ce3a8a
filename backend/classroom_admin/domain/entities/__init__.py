from .envelope import (
    FieldError,
    QueryEnvelope,
    RecordEnvelope,
    RecordResult,
    WriteEnvelope,
    WriteOperation,
)
from .outcome import (
    FailedRecord,
    FailureReason,
    FatalFailure,
    LookupOutcome,
    NotFound,
    OperationOutcome,
    PartialFailure,
    Record,
    Success,
)
from .query import FieldFilter, OrderBy, PageInfo, QueryOptions, SortDirection
from .resource import ResourceDescriptor

__all__ = [
    "FieldError",
    "QueryEnvelope",
    "RecordEnvelope",
    "RecordResult",
    "WriteEnvelope",
    "WriteOperation",
    "FailedRecord",
    "FailureReason",
    "FatalFailure",
    "LookupOutcome",
    "NotFound",
    "OperationOutcome",
    "PartialFailure",
    "Record",
    "Success",
    "FieldFilter",
    "OrderBy",
    "PageInfo",
    "QueryOptions",
    "SortDirection",
    "ResourceDescriptor",
]
