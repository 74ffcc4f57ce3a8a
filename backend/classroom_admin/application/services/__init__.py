from .record_filter import RecordFilter, parse_tags
from .resource_client import RemoteResourceClient, coerce_identifier

__all__ = [
    "RecordFilter",
    "RemoteResourceClient",
    "coerce_identifier",
    "parse_tags",
]
