"""OpenVPN management interface adapter (plain TCP status query)."""

import socket
from typing import Optional

from ..exceptions import StatusProtocolError
from ..interfaces import ClientRecord, ILogSink
from ..protocol import (
    MALFORMED_ABORT,
    STATUS_COMMAND,
    is_complete,
    parse_status_output,
)


class OpenVPNManagementAdapter:
    """Adapter for the OpenVPN management interface."""

    def __init__(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = 10.0,
        malformed: str = MALFORMED_ABORT,
        logger: Optional[ILogSink] = None
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.malformed = malformed
        self.logger = logger

    @property
    def endpoint(self) -> str:
        return f"{self.host}:{self.port}"

    def _read_status(self, sock: socket.socket) -> str:
        """Read whole lines until one ends with END. EOF before it is an error."""
        lines = []
        pending = b""
        while True:
            chunk = sock.recv(65536)
            if not chunk:
                raise StatusProtocolError(
                    f"connection to {self.endpoint} closed before END",
                    endpoint=self.endpoint
                )
            *complete, pending = (pending + chunk).split(b"\n")
            for raw in complete:
                line = raw.decode("ascii", errors="replace")
                lines.append(line)
                if is_complete(line):
                    return "\n".join(lines) + "\n"

    def query_status(self) -> str:
        """Send ``status`` and return the raw response text."""
        try:
            sock = socket.create_connection(
                (self.host, self.port), timeout=self.timeout
            )
        except OSError as e:
            raise StatusProtocolError(
                f"cannot connect to {self.endpoint}: {e}",
                endpoint=self.endpoint
            )

        with sock:
            try:
                sock.sendall(STATUS_COMMAND.encode("ascii"))
            except OSError as e:
                raise StatusProtocolError(
                    f"write to {self.endpoint} failed: {e}",
                    endpoint=self.endpoint
                )

            try:
                return self._read_status(sock)
            except OSError as e:
                raise StatusProtocolError(
                    f"read from {self.endpoint} failed: {e}",
                    endpoint=self.endpoint
                )

    def fetch_clients(self) -> dict[str, ClientRecord]:
        """Poll the server and return the roster keyed by identity."""
        output = self.query_status()
        clients = parse_status_output(output, self.malformed, self.logger)
        if self.logger:
            self.logger.log(
                "debug", f"{len(clients)} clients on {self.endpoint}"
            )
        return clients
