from .notifier import Notifier
from .record_transport import RecordTransport

__all__ = [
    "Notifier",
    "RecordTransport",
]
