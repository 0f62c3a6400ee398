"""Messaging provider interface (adapter pattern)."""

from typing import Protocol


class IMessagingProvider(Protocol):
    """Interface for push-notification delivery."""

    async def send_message(self, text: str) -> None:
        """Deliver text message. Raises on delivery failure."""
        ...
