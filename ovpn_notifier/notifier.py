"""Notification sink over a messaging provider."""

from .formatting import connected_message, disconnected_message
from .interfaces import ClientRecord, IMessagingProvider, ILogSink


class MessageNotifier:
    """Formats client events and pushes them through a messaging provider.

    Delivery failures are logged and swallowed; they never reach the
    controller.
    """

    def __init__(self, messaging: IMessagingProvider, logger: ILogSink):
        self.messaging = messaging
        self.logger = logger

    async def notify_connected(self, record: ClientRecord) -> None:
        """Send client-connected message."""
        self.logger.log("info", f"Client {record.identity} connected")
        await self.alert(connected_message(record))

    async def notify_disconnected(self, record: ClientRecord) -> None:
        """Send client-disconnected message."""
        self.logger.log("info", f"Client {record.identity} disconnected")
        await self.alert(disconnected_message(record))

    async def alert(self, message: str) -> None:
        """Send free-text message."""
        try:
            await self.messaging.send_message(message)
        except Exception as e:
            self.logger.log(
                "error", f"error sending message: {message} ({e})"
            )
