"""Log sink interface (adapter pattern)."""

from typing import Protocol


class ILogSink(Protocol):
    """Interface for notifier log output.

    Levels are ``debug``, ``info``, ``warn`` and ``error``. Implementations
    may drop entries below a configured level.
    """

    def log(self, level: str, message: str) -> None:
        """Write one log entry at the given level."""
        ...
