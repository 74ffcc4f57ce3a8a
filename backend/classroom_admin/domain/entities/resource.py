"""Domain entity: describes one remote table and its field whitelists."""

from dataclasses import dataclass, field
from typing import Any

from .query import OrderBy, PageInfo


@dataclass(frozen=True)
class ResourceDescriptor:
    """Identifies a remote table and how records of it are read and written.

    A descriptor is fixed for the lifetime of the client built from it.
    ``label`` is the human name used in notifications ("Activity").
    ``id_field`` is the server-managed identifier, only ever sent on update.
    """

    name: str
    table_name: str
    label: str
    writeable_fields: tuple[str, ...]
    read_fields: tuple[str, ...]
    detail_fields: tuple[str, ...] = ()
    search_fields: tuple[str, ...] = ()
    field_defaults: dict[str, Any] = field(default_factory=dict)
    default_order: OrderBy | None = None
    default_page: PageInfo | None = None
    id_field: str = "Id"

    @property
    def plural_label(self) -> str:
        if self.label.endswith("y"):
            return self.label[:-1] + "ies"
        return self.label + "s"

    def project_detail(self) -> tuple[str, ...]:
        """Fields fetched for a single-record lookup."""
        return self.detail_fields or self.read_fields
