"""Error taxonomy for the notifier."""


class NotifierError(Exception):
    """Base exception for all notifier errors."""


class ConfigError(NotifierError):
    """Invalid or missing configuration."""


class StatusProtocolError(NotifierError):
    """Management interface poll failed (connect, write, read or parse)."""

    def __init__(self, message: str, endpoint: str = ""):
        self.endpoint = endpoint
        super().__init__(message)


class MalformedRecordError(StatusProtocolError):
    """A CLIENT_LIST line could not be parsed."""

    def __init__(self, message: str, line: str = ""):
        self.line = line
        super().__init__(message)


class StartupError(NotifierError):
    """Initial poll failed, no baseline roster could be established."""
