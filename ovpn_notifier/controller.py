"""Reconciliation controller: poll, diff, notify, escalate."""

import asyncio
from typing import Optional

from .exceptions import StartupError, StatusProtocolError
from .formatting import failure_alert_message
from .interfaces import (
    ClientRecord,
    IStatusProvider,
    INotificationSink,
    ILogSink
)
from .roster import RosterStore

CRITICAL_FAILURE_COUNT = 3


class ReconciliationController:
    """Tracks connected clients of one OpenVPN server across ticks.

    Owns the roster and the consecutive-failure counter. ``update()``
    must not be called concurrently with itself.
    """

    def __init__(
        self,
        status: IStatusProvider,
        sink: INotificationSink,
        logger: ILogSink,
        threshold: int = CRITICAL_FAILURE_COUNT,
        realert_every: int = 0,
        roster: Optional[RosterStore] = None
    ):
        if threshold < 1:
            raise ValueError("threshold must be at least 1")
        if realert_every < 0:
            raise ValueError("realert_every must not be negative")

        self.status = status
        self.sink = sink
        self.logger = logger
        self.threshold = threshold
        self.realert_every = realert_every
        self.roster = roster if roster is not None else RosterStore()
        self.failed_calls = 0

    async def _poll(self) -> dict[str, ClientRecord]:
        return await asyncio.to_thread(self.status.fetch_clients)

    async def seed(self) -> None:
        """Adopt the current roster without notifying.

        Raises StartupError if the server cannot be polled.
        """
        try:
            clients = await self._poll()
        except StatusProtocolError as e:
            raise StartupError(
                f"could not get initial clients from openvpn server: {e}"
            ) from e

        self.roster.replace(clients)
        self.logger.log("info", f"Initial roster: {len(clients)} clients")

    def _should_alert(self) -> bool:
        """Edge-triggered at the threshold, optionally repeating past it."""
        if self.failed_calls == self.threshold:
            return True
        if self.realert_every and self.failed_calls > self.threshold:
            return (self.failed_calls - self.threshold) % self.realert_every == 0
        return False

    async def _on_failure(self, error: StatusProtocolError) -> None:
        self.failed_calls += 1
        self.logger.log(
            "error",
            f"failed call to openvpn server {error}, "
            f"failed count: {self.failed_calls}"
        )
        if self._should_alert():
            self.logger.log(
                "warn", f"Escalating after {self.failed_calls} failures"
            )
            await self.sink.alert(failure_alert_message(self.failed_calls))

    async def update(self) -> None:
        """Run one tick."""
        try:
            new_clients = await self._poll()
        except StatusProtocolError as e:
            await self._on_failure(e)
            return

        self.failed_calls = 0
        disconnected, connected = self.roster.diff(new_clients)
        self.roster.replace(new_clients)

        for client in disconnected:
            await self.sink.notify_disconnected(client)

        for client in connected:
            await self.sink.notify_connected(client)
