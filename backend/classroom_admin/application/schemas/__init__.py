from .activity import ActivityCreate, ActivityUpdate, ActivityListResponse
from .teacher import TeacherCreate, TeacherUpdate, TeacherListResponse
from .outcome import (
    BatchDeleteRequest,
    FailedRecordSchema,
    FailureReasonSchema,
    PartialFailureResponse,
)

__all__ = [
    "ActivityCreate",
    "ActivityUpdate",
    "ActivityListResponse",
    "TeacherCreate",
    "TeacherUpdate",
    "TeacherListResponse",
    "BatchDeleteRequest",
    "FailedRecordSchema",
    "FailureReasonSchema",
    "PartialFailureResponse",
]
