"""OpenVPN management interface status protocol.

Request is the literal ``status`` command. The response is a series of
newline-terminated lines closed by a line ending in ``END``. Only lines
tagged ``CLIENT_LIST`` are read; their tab-separated fields are taken by
fixed position:

    0  CLIENT_LIST
    1  common name (identity)
    2  real address, ``host:port``
    5  bytes received
    6  bytes sent
    8  connected since, epoch seconds
"""

from datetime import datetime, timezone
from typing import Optional

from .exceptions import MalformedRecordError
from .interfaces import ClientRecord, ILogSink

STATUS_COMMAND = "status\n"
ENDING = "END"
START_LINE = "CLIENT_LIST"
UNDEF = "UNDEF"

# Field positions in a CLIENT_LIST line
FIELD_NAME = 1
FIELD_ADDRESS = 2
FIELD_BYTES_RECEIVED = 5
FIELD_BYTES_SENT = 6
FIELD_CONNECTED_SINCE = 8

MALFORMED_ABORT = "abort"
MALFORMED_SKIP = "skip"
MALFORMED_POLICIES = (MALFORMED_ABORT, MALFORMED_SKIP)


def is_complete(line: str) -> bool:
    """Check whether a complete response line carries the END sentinel."""
    return line.rstrip().endswith(ENDING)


def parse_client(line: str) -> ClientRecord:
    """Build a ClientRecord from one CLIENT_LIST line.

    Raises MalformedRecordError on missing fields, non-numeric counters
    or an unparsable timestamp.
    """
    fields = line.rstrip("\r").split("\t")
    try:
        name = fields[FIELD_NAME]
        address = fields[FIELD_ADDRESS].split(":")[0]
        bytes_received = float(fields[FIELD_BYTES_RECEIVED])
        bytes_sent = float(fields[FIELD_BYTES_SENT])
        timestamp = int(fields[FIELD_CONNECTED_SINCE])
        connected_since = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except IndexError:
        raise MalformedRecordError(
            f"client line has {len(fields)} fields, "
            f"expected at least {FIELD_CONNECTED_SINCE + 1}",
            line=line,
        )
    except (ValueError, OverflowError, OSError) as e:
        raise MalformedRecordError(f"bad client field: {e}", line=line)

    if not name:
        raise MalformedRecordError("client line has empty name", line=line)

    return ClientRecord(
        identity=name,
        network_address=address,
        connected_since=connected_since,
        bytes_received=bytes_received,
        bytes_sent=bytes_sent,
    )


def parse_status_output(
    output: str,
    malformed: str = MALFORMED_ABORT,
    logger: Optional[ILogSink] = None,
) -> dict[str, ClientRecord]:
    """Parse a full status response into a roster keyed by identity.

    With ``malformed="abort"`` the first bad client line fails the whole
    poll; with ``"skip"`` bad lines are logged and dropped. UNDEF rows
    never enter the roster. Later duplicates overwrite earlier ones.
    """
    if malformed not in MALFORMED_POLICIES:
        raise ValueError(f"unknown malformed-line policy: {malformed}")

    clients: dict[str, ClientRecord] = {}
    for line in output.split("\n"):
        if not line.startswith(START_LINE):
            continue

        try:
            client = parse_client(line)
        except MalformedRecordError as e:
            if malformed == MALFORMED_ABORT:
                raise
            if logger:
                logger.log("warn", f"Skipping malformed client line: {e}")
            continue

        if client.identity == UNDEF:
            continue
        clients[client.identity] = client

    return clients
