"""Maps OperationOutcome values onto HTTP responses."""

from typing import Any

from fastapi import HTTPException, status

from classroom_admin.application.schemas import (
    FailedRecordSchema,
    FailureReasonSchema,
    PartialFailureResponse,
)
from classroom_admin.domain.entities import (
    FatalFailure,
    NotFound,
    PartialFailure,
    ResourceDescriptor,
    Success,
)


def unwrap(outcome: Any, descriptor: ResourceDescriptor) -> Any:
    """Return the payload of a Success or raise the matching HTTPException."""
    if isinstance(outcome, Success):
        return outcome.data

    if isinstance(outcome, NotFound):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{descriptor.label} with id '{outcome.record_id}' not found",
        )

    if isinstance(outcome, PartialFailure):
        body = PartialFailureResponse(
            detail="; ".join(str(reason) for reason in outcome.reasons),
            succeeded=outcome.succeeded,
            failed=[
                FailedRecordSchema(
                    record=failed.record,
                    reasons=[
                        FailureReasonSchema(
                            field_label=reason.field_label, message=reason.message
                        )
                        for reason in failed.reasons
                    ],
                )
                for failed in outcome.failed
            ],
        )
        raise HTTPException(
            status_code=422,
            detail=body.model_dump(),
        )

    if isinstance(outcome, FatalFailure):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=outcome.message)

    raise TypeError(f"Unexpected outcome {outcome!r}")
