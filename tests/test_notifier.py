"""Unit tests for the message notifier and message formatting."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from ovpn_notifier.formatting import (
    disconnected_message,
    failure_alert_message,
    format_bytes,
    format_duration,
)
from ovpn_notifier.notifier import MessageNotifier
from tests.conftest import START, make_record


def test_format_duration_seconds():
    assert format_duration(timedelta(seconds=10)) == "10.0 seconds"


def test_format_duration_minutes():
    assert format_duration(timedelta(minutes=10)) == "10.0 minutes"


def test_format_duration_hours():
    assert format_duration(timedelta(hours=10)) == "10.0 hours"


def test_format_bytes():
    """Decimal units with trimmed decimals."""
    assert format_bytes(0) == "0 B"
    assert format_bytes(100) == "100 B"
    assert format_bytes(1500) == "1.5 kB"
    assert format_bytes(2_000_000) == "2 MB"
    assert format_bytes(1_234_567_890) == "1.23 GB"


def test_disconnected_message():
    """Disconnect text includes traffic and session length."""
    record = make_record("alice", received=1500, sent=2_000_000)

    text = disconnected_message(record, now=START + timedelta(minutes=90))

    assert text == (
        "client alice has disconnected. They received 1.5 kB of data and "
        "sent 2 MB of data. Their session lasted approximately 1.5 hours"
    )


def test_failure_alert_message():
    assert failure_alert_message(3) == (
        "3 consecutive failed calls to openvpn server, "
        "please check the error logs"
    )


@pytest.mark.asyncio
async def test_notify_connected_sends_message():
    """Connect notification names client and address."""
    messaging = Mock()
    messaging.send_message = AsyncMock()
    logger = Mock()

    notifier = MessageNotifier(messaging, logger)
    await notifier.notify_connected(make_record("alice", address="10.0.0.5"))

    messaging.send_message.assert_awaited_once()
    text = messaging.send_message.call_args[0][0]
    assert text.startswith("client alice has connected from ip address 10.0.0.5 on ")
    assert text.endswith(" local time")


@pytest.mark.asyncio
async def test_notify_disconnected_sends_message():
    """Disconnect notification is delivered."""
    messaging = Mock()
    messaging.send_message = AsyncMock()

    notifier = MessageNotifier(messaging, Mock())
    await notifier.notify_disconnected(make_record("bob"))

    text = messaging.send_message.call_args[0][0]
    assert text.startswith("client bob has disconnected.")


@pytest.mark.asyncio
async def test_delivery_failure_is_swallowed():
    """Transport errors are logged, never raised."""
    messaging = Mock()
    messaging.send_message = AsyncMock(side_effect=ConnectionError("down"))
    logger = Mock()

    notifier = MessageNotifier(messaging, logger)
    await notifier.alert("3 consecutive failed calls")

    logger.log.assert_called_once()
    level, message = logger.log.call_args[0]
    assert level == "error"
    assert "down" in message
