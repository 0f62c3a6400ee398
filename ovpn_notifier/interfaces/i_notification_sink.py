"""Notification sink interface (adapter pattern)."""

from typing import Protocol

from .i_status_provider import ClientRecord


class INotificationSink(Protocol):
    """Interface for connect/disconnect/alert notifications.

    Calls are fire-and-forget: implementations log and swallow their own
    delivery failures.
    """

    async def notify_connected(self, record: ClientRecord) -> None:
        """Client appeared in the roster."""
        ...

    async def notify_disconnected(self, record: ClientRecord) -> None:
        """Client left the roster (last known record)."""
        ...

    async def alert(self, message: str) -> None:
        """Free-text alert."""
        ...
