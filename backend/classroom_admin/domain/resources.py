"""Resource registry: one descriptor per remote table the admin UI manages."""

from classroom_admin.domain.entities import (
    OrderBy,
    PageInfo,
    ResourceDescriptor,
    SortDirection,
)
from classroom_admin.domain.exceptions import UnknownResourceError

DEFAULT_PAGE = PageInfo(limit=100, offset=0)

ACTIVITY = ResourceDescriptor(
    name="activity",
    table_name="activity_c",
    label="Activity",
    writeable_fields=(
        "Name",
        "subject_c",
        "description_c",
        "status_c",
        "priority_c",
        "due_date_c",
        "Tags",
    ),
    read_fields=(
        "Name",
        "Tags",
        "subject_c",
        "description_c",
        "status_c",
        "priority_c",
        "due_date_c",
        "CreatedOn",
        "ModifiedOn",
    ),
    detail_fields=(
        "Name",
        "Tags",
        "subject_c",
        "description_c",
        "status_c",
        "priority_c",
        "due_date_c",
    ),
    search_fields=("Name", "subject_c", "description_c"),
    field_defaults={"Tags": ""},
    default_order=OrderBy("ModifiedOn", SortDirection.DESC),
    default_page=DEFAULT_PAGE,
)

TEACHER = ResourceDescriptor(
    name="teacher",
    table_name="teacher_c",
    label="Teacher",
    writeable_fields=("name_c", "email_c", "department_c"),
    read_fields=("Id", "name_c", "email_c", "department_c"),
    search_fields=("name_c", "email_c", "department_c"),
    default_order=OrderBy("name_c", SortDirection.ASC),
    default_page=DEFAULT_PAGE,
)

_REGISTRY: dict[str, ResourceDescriptor] = {
    descriptor.name: descriptor for descriptor in (ACTIVITY, TEACHER)
}


def get_resource(name: str) -> ResourceDescriptor:
    """Look up a descriptor by resource name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownResourceError(name) from None


def all_resources() -> list[ResourceDescriptor]:
    return list(_REGISTRY.values())
