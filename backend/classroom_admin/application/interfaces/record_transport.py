"""Abstract transport interface (port) for the hosted tabular-data service.

Each hosted backend (Apper today) implements this interface in the
infrastructure layer. Implementations may raise on network or protocol
errors; the resource client turns those into outcomes.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from classroom_admin.domain.entities import (
    FieldFilter,
    OrderBy,
    PageInfo,
    QueryEnvelope,
    RecordEnvelope,
    WriteEnvelope,
    WriteOperation,
)


class RecordTransport(ABC):
    """Port: defines what the application layer needs from a hosted table service."""

    @abstractmethod
    async def query(
        self,
        table_name: str,
        fields: Sequence[str],
        *,
        order_by: OrderBy | None = None,
        page: PageInfo | None = None,
        filters: Sequence[FieldFilter] | None = None,
    ) -> QueryEnvelope:
        """Fetch rows of a table projected onto ``fields``."""
        ...

    @abstractmethod
    async def query_one(
        self, table_name: str, record_id: int, fields: Sequence[str]
    ) -> RecordEnvelope:
        """Fetch a single row by identifier."""
        ...

    @abstractmethod
    async def write(
        self,
        table_name: str,
        records: Sequence[dict[str, Any]],
        *,
        operation: WriteOperation,
    ) -> WriteEnvelope:
        """Create or update a batch of records."""
        ...

    @abstractmethod
    async def remove(self, table_name: str, ids: Sequence[int]) -> WriteEnvelope:
        """Delete a batch of records by identifier."""
        ...
