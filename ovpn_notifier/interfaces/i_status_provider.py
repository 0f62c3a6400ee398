"""Status provider interface (adapter pattern)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class ClientRecord:
    """One connected OpenVPN session as seen at poll time."""
    identity: str
    network_address: str
    connected_since: datetime
    bytes_received: float
    bytes_sent: float


class IStatusProvider(Protocol):
    """Interface for fetching the connected-client roster."""

    def fetch_clients(self) -> dict[str, ClientRecord]:
        """Return roster keyed by identity. Raises StatusProtocolError."""
        ...
