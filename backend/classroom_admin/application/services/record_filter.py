"""In-memory search and facet filtering over already-fetched records."""

from collections.abc import Iterable, Mapping
from typing import Any

from classroom_admin.domain.entities import Record, ResourceDescriptor

# Facet value that disables a facet filter, as sent by the UI's select boxes.
ALL = "all"


def parse_tags(value: Any) -> list[str]:
    """Split a comma-joined tag string into trimmed, non-empty tags."""
    if not value:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, (list, tuple)):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    return []


class RecordFilter:
    """Filters a resource's records by free-text search and exact facets.

    Search is case-insensitive and matches a substring of any of the
    descriptor's search fields; records missing a field never match on it.
    """

    def __init__(self, descriptor: ResourceDescriptor):
        self._search_fields = descriptor.search_fields

    def apply(
        self,
        records: Iterable[Record],
        *,
        search: str | None = None,
        facets: Mapping[str, str | None] | None = None,
    ) -> list[Record]:
        term = (search or "").strip().lower()
        active = {
            name: value
            for name, value in (facets or {}).items()
            if value is not None and value != ALL
        }
        return [
            record
            for record in records
            if self.matches_search(record, term)
            and all(record.get(name) == value for name, value in active.items())
        ]

    def matches_search(self, record: Record, term: str) -> bool:
        if not term:
            return True
        for name in self._search_fields:
            value = record.get(name)
            if isinstance(value, str) and term in value.lower():
                return True
        return False

    @staticmethod
    def facet_values(records: Iterable[Record], field: str) -> list[str]:
        """Distinct, sorted, non-empty values of ``field``."""
        return sorted({str(r[field]) for r in records if r.get(field)})
