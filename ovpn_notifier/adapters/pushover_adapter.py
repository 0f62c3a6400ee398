"""Pushover HTTP API adapter."""

import asyncio
import requests

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


class PushoverAdapter:
    """Adapter for Pushover message API."""

    def __init__(self, token: str, user_key: str, timeout: float = 10):
        self.token = token
        self.user_key = user_key
        self.timeout = timeout

    def _post(self, text: str) -> None:
        """Send message synchronously. Raises requests.RequestException."""
        resp = requests.post(
            PUSHOVER_URL,
            data={
                "token": self.token,
                "user": self.user_key,
                "message": text
            },
            timeout=self.timeout
        )
        resp.raise_for_status()

    async def send_message(self, text: str) -> None:
        """Send text message."""
        await asyncio.to_thread(self._post, text)
