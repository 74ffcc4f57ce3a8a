"""Generic CRUD client for one hosted table.

Wraps the RecordTransport port with field projection, ordering, paging
and whitelisting of writeable fields, and turns every transport response
into an OperationOutcome. Failures are reported once to the caller (as an
outcome) and once to the user (as a notification).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from classroom_admin.application.interfaces import Notifier, RecordTransport
from classroom_admin.domain.entities import (
    FailedRecord,
    FailureReason,
    FatalFailure,
    LookupOutcome,
    NotFound,
    OperationOutcome,
    PartialFailure,
    QueryOptions,
    Record,
    RecordResult,
    ResourceDescriptor,
    Success,
    WriteEnvelope,
    WriteOperation,
)
from classroom_admin.domain.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

NO_RESULT = "no result"


def coerce_identifier(value: Any) -> int:
    """Coerce a record identifier to a positive int or raise MalformedInputError."""
    if isinstance(value, bool):
        raise MalformedInputError("id", f"{value!r} is not an integer")
    if isinstance(value, int):
        identifier = value
    elif isinstance(value, float) and value.is_integer():
        identifier = int(value)
    elif isinstance(value, str) and _is_ascii_digits(value.strip()):
        identifier = int(value.strip())
    else:
        raise MalformedInputError("id", f"{value!r} is not an integer")

    if identifier <= 0:
        raise MalformedInputError("id", f"{identifier} is not positive")
    return identifier


class RemoteResourceClient:
    """Uniform list/get/create/update/delete access to one remote resource.

    The descriptor is fixed at construction; the client holds no other
    state, so concurrent calls on one instance are independent.
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        transport: RecordTransport,
        notifier: Notifier,
    ):
        self._descriptor = descriptor
        self._transport = transport
        self._notifier = notifier

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self._descriptor

    # ── Reads ────────────────────────────────────────────────────────

    async def list(
        self,
        fields: Sequence[str] | None = None,
        options: QueryOptions | None = None,
    ) -> OperationOutcome[list[Record]]:
        """Fetch records, ordered and paged as requested.

        Without ``options`` the descriptor's default ordering and page apply.
        """
        projection = self._projection(fields, self._descriptor.read_fields)
        if options is None:
            options = QueryOptions(
                order_by=self._descriptor.default_order,
                page=self._descriptor.default_page,
            )
        if options.page is not None:
            if options.page.limit <= 0:
                raise MalformedInputError("page.limit", "must be greater than 0")
            if options.page.offset < 0:
                raise MalformedInputError("page.offset", "must not be negative")

        fallback = f"Failed to load {self._descriptor.plural_label.lower()}"
        try:
            envelope = await self._transport.query(
                self._descriptor.table_name,
                projection,
                order_by=options.order_by,
                page=options.page,
                filters=options.filters,
            )
        except Exception:
            logger.exception("Error fetching %s", self._descriptor.plural_label.lower())
            return await self._fatal(fallback)

        if not envelope.success:
            logger.error(
                "Failed to fetch %s: %s",
                self._descriptor.plural_label.lower(),
                envelope.message,
            )
            return await self._fatal(envelope.message or fallback)

        records = list(envelope.data or [])
        logger.debug("Fetched %d %s record(s)", len(records), self._descriptor.name)
        return Success(records)

    async def get(
        self, record_id: Any, fields: Sequence[str] | None = None
    ) -> LookupOutcome[Record]:
        """Fetch one record. A missing row is NotFound, not a failure."""
        identifier = coerce_identifier(record_id)
        projection = self._projection(fields, self._descriptor.project_detail())

        fallback = f"Failed to load {self._descriptor.label.lower()}"
        try:
            envelope = await self._transport.query_one(
                self._descriptor.table_name, identifier, projection
            )
        except Exception:
            logger.exception(
                "Error fetching %s %d", self._descriptor.label.lower(), identifier
            )
            return await self._fatal(fallback)

        if not envelope.success:
            logger.error(
                "Failed to fetch %s %d: %s",
                self._descriptor.label.lower(),
                identifier,
                envelope.message,
            )
            return await self._fatal(envelope.message or fallback)

        if not envelope.data:
            return NotFound(identifier)
        return Success(envelope.data)

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, payload: Mapping[str, Any]) -> OperationOutcome[Record]:
        """Create one record from the writeable subset of ``payload``."""
        record = self._writeable(payload)
        return await self._write(record, WriteOperation.CREATE)

    async def update(
        self, record_id: Any, payload: Mapping[str, Any]
    ) -> OperationOutcome[Record]:
        """Update one record; ``record_id`` becomes its identifier field."""
        identifier = coerce_identifier(record_id)
        record = {self._descriptor.id_field: identifier, **self._writeable(payload)}
        return await self._write(record, WriteOperation.UPDATE)

    async def delete(self, ids: Sequence[Any]) -> OperationOutcome[bool]:
        """Delete one or more records in a single call."""
        if isinstance(ids, (str, bytes)) or not ids:
            raise MalformedInputError("ids", "at least one identifier is required")
        identifiers = [coerce_identifier(i) for i in ids]
        submitted = [{self._descriptor.id_field: i} for i in identifiers]

        label = self._descriptor.label.lower()
        fallback = f"Failed to delete {label}"
        try:
            envelope = await self._transport.remove(
                self._descriptor.table_name, identifiers
            )
        except Exception:
            logger.exception("Error deleting %s %s", label, identifiers)
            return await self._fatal(fallback)

        outcome = await self._partition(envelope, submitted, verb="delete")
        if isinstance(outcome, Success):
            await self._notify_success(f"{self._descriptor.label} deleted successfully")
            return Success(True)
        return outcome

    async def _write(
        self, record: Record, operation: WriteOperation
    ) -> OperationOutcome[Record]:
        verb = operation.value
        label = self._descriptor.label.lower()
        try:
            envelope = await self._transport.write(
                self._descriptor.table_name, [record], operation=operation
            )
        except Exception:
            logger.exception("Error during %s of %s", verb, label)
            return await self._fatal(f"Failed to {verb} {label}")

        outcome = await self._partition(envelope, [record], verb=verb)
        if isinstance(outcome, Success):
            await self._notify_success(f"{self._descriptor.label} {verb}d successfully")
        return outcome

    async def _partition(
        self, envelope: WriteEnvelope, submitted: list[Record], *, verb: str
    ) -> OperationOutcome[Record]:
        """Split per-record results into succeeded and failed.

        Returns Success(first succeeded record) when nothing failed; the
        caller emits the success notification.
        """
        label = self._descriptor.label.lower()
        if not envelope.success:
            logger.error("Failed to %s %s: %s", verb, label, envelope.message)
            return await self._fatal(envelope.message or f"Failed to {verb} {label}")

        results = envelope.results or []
        succeeded = [r for r in results if r.success]
        failed = [
            (index, r) for index, r in enumerate(results) if not r.success
        ]

        if failed:
            logger.error("Failed to %s %d %s record(s)", verb, len(failed), label)
            failed_records = [
                FailedRecord(
                    record=result.data or _submitted_at(submitted, index),
                    reasons=_reasons(result, f"Failed to {verb} {label}"),
                )
                for index, result in failed
            ]
            outcome = PartialFailure(
                succeeded=[r.data or {} for r in succeeded],
                failed=failed_records,
            )
            for reason in outcome.reasons:
                await self._notify_error(str(reason))
            return outcome

        if succeeded:
            return Success(succeeded[0].data or {})

        logger.error("%s of %s returned no results", verb, label)
        return await self._fatal(NO_RESULT)

    # ── Helpers ──────────────────────────────────────────────────────

    def _projection(
        self, fields: Sequence[str] | None, default: Sequence[str]
    ) -> list[str]:
        projection = list(default if fields is None else fields)
        if not projection:
            raise MalformedInputError("fields", "at least one field is required")
        if any(not isinstance(f, str) or not f.strip() for f in projection):
            raise MalformedInputError("fields", "field names must be non-empty strings")
        return projection

    def _writeable(self, payload: Mapping[str, Any]) -> Record:
        """Keep whitelisted fields only; unknown keys are dropped silently."""
        record: Record = {}
        for name in self._descriptor.writeable_fields:
            value = payload.get(name)
            if value is None and name in self._descriptor.field_defaults:
                value = self._descriptor.field_defaults[name]
            if value is not None or name in payload:
                record[name] = value
        return record

    async def _fatal(self, message: str) -> FatalFailure:
        await self._notify_error(message)
        return FatalFailure(message)

    async def _notify_error(self, message: str) -> None:
        try:
            await self._notifier.error(message)
        except Exception:
            logger.exception("Notifier failed to deliver error: %s", message)

    async def _notify_success(self, message: str) -> None:
        try:
            await self._notifier.success(message)
        except Exception:
            logger.exception("Notifier failed to deliver success: %s", message)


def _submitted_at(submitted: list[Record], index: int) -> Record | None:
    if index < len(submitted):
        return submitted[index]
    return None


def _reasons(result: RecordResult, fallback: str) -> list[FailureReason]:
    """Every reason a record failed; never empty."""
    reasons = [
        FailureReason(message=error.message, field_label=error.field_label)
        for error in result.errors
    ]
    if result.message:
        reasons.append(FailureReason(message=result.message))
    if not reasons:
        reasons.append(FailureReason(message=fallback))
    return reasons


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other scripts int() rejects.
    return text.isascii() and text.isdigit()
