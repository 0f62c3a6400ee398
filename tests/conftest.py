"""Shared fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from ovpn_notifier.interfaces import ClientRecord

START = datetime(2019, 1, 1, 1, 0, 0, tzinfo=timezone.utc)


def make_record(name: str, address: str = "10.0.0.5", received: float = 100,
                sent: float = 200) -> ClientRecord:
    return ClientRecord(
        identity=name,
        network_address=address,
        connected_since=START,
        bytes_received=received,
        bytes_sent=sent,
    )


@pytest.fixture
def sink():
    sink = Mock()
    sink.notify_connected = AsyncMock()
    sink.notify_disconnected = AsyncMock()
    sink.alert = AsyncMock()
    return sink


@pytest.fixture
def logger():
    return Mock()
