"""Stdout logging adapter."""

import sys
from datetime import datetime

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


class StdoutAdapter:
    """Adapter for stdout logging. Errors go to stderr."""

    def __init__(self, level: str = "info"):
        self.threshold = LEVELS.get(level, LEVELS["info"])

    def log(self, level: str, message: str) -> None:
        """Write log entry to stdout."""
        if LEVELS.get(level, LEVELS["info"]) < self.threshold:
            return

        timestamp = datetime.now().isoformat()
        stream = sys.stderr if level == "error" else sys.stdout
        print(f"[{timestamp}] {level.upper()}: {message}", file=stream)
