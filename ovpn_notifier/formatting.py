"""Message text for connect/disconnect/alert notifications."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from .interfaces import ClientRecord

BYTE_UNITS = ["B", "kB", "MB", "GB", "TB", "PB"]


def format_bytes(num: float) -> str:
    """Decimal byte units, e.g. 1500 -> '1.5 kB'."""
    sign = "-" if num < 0 else ""
    num = abs(num)
    unit = 0
    while num >= 1000 and unit < len(BYTE_UNITS) - 1:
        num /= 1000
        unit += 1
    value = f"{num:.2f}".rstrip("0").rstrip(".")
    return f"{sign}{value} {BYTE_UNITS[unit]}"


def format_duration(duration: timedelta) -> str:
    """Approximate session length in seconds, minutes or hours."""
    num_seconds = int(duration.total_seconds())
    units = "seconds"
    value = float(num_seconds)
    if num_seconds >= 3600:
        value = num_seconds / 3600.0
        units = "hours"
    elif num_seconds >= 60:
        value = num_seconds / 60.0
        units = "minutes"
    return f"{value:.1f} {units}"


def connected_message(record: ClientRecord) -> str:
    since = record.connected_since.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"client {record.identity} has connected from ip address "
        f"{record.network_address} on {since} local time"
    )


def disconnected_message(
    record: ClientRecord, now: Optional[datetime] = None
) -> str:
    now = now or datetime.now(timezone.utc)
    duration = now - record.connected_since
    return (
        f"client {record.identity} has disconnected. "
        f"They received {format_bytes(record.bytes_received)} of data "
        f"and sent {format_bytes(record.bytes_sent)} of data. "
        f"Their session lasted approximately {format_duration(duration)}"
    )


def failure_alert_message(failures: int) -> str:
    return (
        f"{failures} consecutive failed calls to openvpn server, "
        "please check the error logs"
    )
