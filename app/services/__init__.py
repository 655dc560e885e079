from .notifier import NotificationSink

__all__ = ["NotificationSink"]
