"""Read-side query options: ordering, paging and remote filters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderBy:
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageInfo:
    limit: int
    offset: int = 0


@dataclass(frozen=True)
class FieldFilter:
    """A server-side predicate on one field.

    ``operator`` is passed through to the hosted service untouched
    (e.g. ``"EqualTo"``, ``"Contains"``).
    """

    field: str
    operator: str
    values: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class QueryOptions:
    """Options for a list call. Every option is optional."""

    order_by: OrderBy | None = None
    page: PageInfo | None = None
    filters: list[FieldFilter] | None = None
