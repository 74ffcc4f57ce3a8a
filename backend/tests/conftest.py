"""Shared fakes for the resource client ports."""

from collections.abc import Sequence
from typing import Any

import pytest

from classroom_admin.application.interfaces import Notifier, RecordTransport
from classroom_admin.domain.entities import (
    FieldFilter,
    OrderBy,
    PageInfo,
    QueryEnvelope,
    RecordEnvelope,
    RecordResult,
    SortDirection,
    WriteEnvelope,
    WriteOperation,
)


class FakeRecordTransport(RecordTransport):
    """In-memory hosted table. Records every call it receives.

    Set ``envelope_failure`` to make every call return a non-success
    envelope, ``raise_error`` to make every call raise, and
    ``rejections[id]`` (or ``rejections[None]`` for creates) to make a
    write of that record come back failed.
    """

    def __init__(self, rows: list[dict[str, Any]] | None = None):
        self.rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1
        for row in rows or []:
            self._insert(dict(row))
        self.calls: list[tuple[str, str, Any]] = []
        self.envelope_failure: str | None = None
        self.raise_error: Exception | None = None
        self.rejections: dict[int | None, RecordResult] = {}
        self.omit_results = False

    def _insert(self, row: dict[str, Any]) -> dict[str, Any]:
        row.setdefault("Id", self._next_id)
        self._next_id = max(self._next_id, row["Id"]) + 1
        self.rows[row["Id"]] = row
        return row

    def _check(self) -> None:
        if self.raise_error is not None:
            raise self.raise_error

    async def query(
        self,
        table_name: str,
        fields: Sequence[str],
        *,
        order_by: OrderBy | None = None,
        page: PageInfo | None = None,
        filters: Sequence[FieldFilter] | None = None,
    ) -> QueryEnvelope:
        self.calls.append(("query", table_name, {"fields": list(fields), "order_by": order_by, "page": page}))
        self._check()
        if self.envelope_failure:
            return QueryEnvelope(success=False, message=self.envelope_failure)

        rows = list(self.rows.values())
        if order_by is not None:
            rows.sort(
                key=lambda r: r.get(order_by.field),
                reverse=order_by.direction is SortDirection.DESC,
            )
        if page is not None:
            rows = rows[page.offset : page.offset + page.limit]
        projected = [
            {"Id": r["Id"], **{f: r.get(f) for f in fields}} for r in rows
        ]
        # The hosted service omits ``data`` when there are no rows.
        return QueryEnvelope(success=True, data=projected or None)

    async def query_one(
        self, table_name: str, record_id: int, fields: Sequence[str]
    ) -> RecordEnvelope:
        self.calls.append(("query_one", table_name, record_id))
        self._check()
        if self.envelope_failure:
            return RecordEnvelope(success=False, message=self.envelope_failure)
        row = self.rows.get(record_id)
        if row is None:
            return RecordEnvelope(success=True, data=None)
        return RecordEnvelope(
            success=True, data={"Id": record_id, **{f: row.get(f) for f in fields}}
        )

    async def write(
        self,
        table_name: str,
        records: Sequence[dict[str, Any]],
        *,
        operation: WriteOperation,
    ) -> WriteEnvelope:
        self.calls.append((operation.value, table_name, [dict(r) for r in records]))
        self._check()
        if self.envelope_failure:
            return WriteEnvelope(success=False, message=self.envelope_failure)
        if self.omit_results:
            return WriteEnvelope(success=True, results=[])

        results = []
        for record in records:
            rejection = self.rejections.get(record.get("Id"))
            if rejection is not None:
                results.append(rejection)
            elif operation is WriteOperation.CREATE:
                results.append(RecordResult(success=True, data=self._insert(dict(record))))
            else:
                row = self.rows[record["Id"]]
                row.update(record)
                results.append(RecordResult(success=True, data=dict(row)))
        return WriteEnvelope(success=True, results=results)

    async def remove(self, table_name: str, ids: Sequence[int]) -> WriteEnvelope:
        self.calls.append(("remove", table_name, list(ids)))
        self._check()
        if self.envelope_failure:
            return WriteEnvelope(success=False, message=self.envelope_failure)

        results = []
        for record_id in ids:
            if self.rows.pop(record_id, None) is None:
                results.append(
                    RecordResult(success=False, message=f"Record {record_id} does not exist")
                )
            else:
                results.append(RecordResult(success=True))
        return WriteEnvelope(success=True, results=results)


class RecordingNotifier(Notifier):
    """Collects notifications as (level, message) tuples."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    async def success(self, message: str) -> None:
        self.messages.append(("success", message))

    async def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def errors(self) -> list[str]:
        return [m for level, m in self.messages if level == "error"]

    @property
    def successes(self) -> list[str]:
        return [m for level, m in self.messages if level == "success"]


@pytest.fixture
def transport() -> FakeRecordTransport:
    return FakeRecordTransport()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
