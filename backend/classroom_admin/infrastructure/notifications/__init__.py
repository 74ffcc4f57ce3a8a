from .logging_notifier import CompositeNotifier, LoggingNotifier
from .sse_notifier import SSENotifier

__all__ = ["CompositeNotifier", "LoggingNotifier", "SSENotifier"]
