"""Interface definitions for the notifier adapters."""

from .i_status_provider import IStatusProvider, ClientRecord
from .i_notification_sink import INotificationSink
from .i_messaging_provider import IMessagingProvider
from .i_log_sink import ILogSink

__all__ = [
    'IStatusProvider',
    'ClientRecord',
    'INotificationSink',
    'IMessagingProvider',
    'ILogSink',
]
