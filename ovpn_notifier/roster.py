"""In-memory roster of connected clients."""

from typing import Optional

from .interfaces import ClientRecord


class RosterStore:
    """Who was connected at the last successful poll.

    The mapping is replaced wholesale on every successful poll, never
    patched. Diffs are returned sorted by identity.
    """

    def __init__(self, clients: Optional[dict[str, ClientRecord]] = None):
        self._clients: dict[str, ClientRecord] = dict(clients or {})

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, identity: str) -> bool:
        return identity in self._clients

    def snapshot(self) -> dict[str, ClientRecord]:
        """Copy of the current roster."""
        return dict(self._clients)

    def diff(
        self, new_clients: dict[str, ClientRecord]
    ) -> tuple[list[ClientRecord], list[ClientRecord]]:
        """Return (disconnected, connected) against a freshly polled roster.

        Disconnected carries the old records, connected the new ones.
        Identities in both rosters produce nothing.
        """
        disconnected = [
            self._clients[name]
            for name in sorted(self._clients)
            if name not in new_clients
        ]
        connected = [
            new_clients[name]
            for name in sorted(new_clients)
            if name not in self._clients
        ]
        return disconnected, connected

    def replace(self, new_clients: dict[str, ClientRecord]) -> None:
        self._clients = dict(new_clients)
