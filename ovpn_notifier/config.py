"""Configuration management.

Environment variables provide the values, command-line flags override them.
"""

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from . import __version__
from .exceptions import ConfigError
from .protocol import MALFORMED_ABORT, MALFORMED_POLICIES

# OpenVPN management interface
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5555
DEFAULT_TIMEOUT = 10.0

# Polling
DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_FAILURE_THRESHOLD = 3
DEFAULT_REALERT_EVERY = 0

NOTIFIERS = ("pushover", "telegram")
LOG_LEVELS = ("debug", "info", "warn", "error")


@dataclass(frozen=True)
class Config:
    """Resolved process configuration."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    failure_threshold: int = DEFAULT_FAILURE_THRESHOLD
    realert_every: int = DEFAULT_REALERT_EVERY
    malformed_lines: str = MALFORMED_ABORT
    notifier: str = "pushover"
    pushover_token: str = ""
    pushover_user_key: str = ""
    bot_token: str = ""
    chat_id: str = ""
    log_level: str = "info"

    def summary(self) -> str:
        """One-line description with secrets left out."""
        return (
            f"server={self.host}:{self.port} notifier={self.notifier} "
            f"interval={self.poll_interval}s threshold={self.failure_threshold} "
            f"realert_every={self.realert_every} "
            f"malformed_lines={self.malformed_lines}"
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ovpn-notifier",
        description="Sends notifications with client updates from an openvpn server",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-t", "--token", help="Pushover application token")
    parser.add_argument("-u", "--user_key", help="Pushover user key")
    parser.add_argument("-s", "--server", help="Address of openvpn server")
    parser.add_argument("-p", "--port", help="Management port for openvpn server")
    parser.add_argument("-i", "--interval", help="Seconds between polls")
    parser.add_argument("-n", "--notifier", choices=NOTIFIERS)
    return parser


def _to_int(name: str, value: str, minimum: int) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if number < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {number}")
    return number


def _to_float(name: str, value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


def _validate(config: Config) -> None:
    """Reject incomplete notifier credentials (early return pattern)."""
    if config.notifier not in NOTIFIERS:
        raise ConfigError(f"NOTIFIER must be one of {', '.join(NOTIFIERS)}")

    if config.malformed_lines not in MALFORMED_POLICIES:
        raise ConfigError(
            f"MALFORMED_LINES must be one of {', '.join(MALFORMED_POLICIES)}"
        )

    if config.log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

    if not 0 < config.port < 65536:
        raise ConfigError(f"port out of range: {config.port}")

    if config.notifier == "pushover":
        if not config.pushover_token:
            raise ConfigError("PUSHOVER_TOKEN not set")
        if not config.pushover_user_key:
            raise ConfigError("PUSHOVER_USER_KEY not set")
        return

    if not config.bot_token:
        raise ConfigError("BOT_TOKEN not set")
    if not config.chat_id:
        raise ConfigError("CHAT_ID not set")
    if not config.chat_id.lstrip("-").isdigit():
        raise ConfigError(f"CHAT_ID must be numeric, got {config.chat_id!r}")


def load_config(argv: Optional[Sequence[str]] = None) -> Config:
    """Read environment and command-line flags. Raises ConfigError."""
    args = _build_parser().parse_args(argv)
    env = os.environ

    port = args.port or env.get("OPENVPN_PORT", str(DEFAULT_PORT))
    interval = args.interval or env.get(
        "POLL_INTERVAL", str(DEFAULT_POLL_INTERVAL)
    )

    config = Config(
        host=args.server or env.get("OPENVPN_HOST", DEFAULT_HOST),
        port=_to_int("port", port, minimum=1),
        timeout=_to_float(
            "OPENVPN_TIMEOUT", env.get("OPENVPN_TIMEOUT", str(DEFAULT_TIMEOUT))
        ),
        poll_interval=_to_float("interval", interval),
        failure_threshold=_to_int(
            "FAILURE_THRESHOLD",
            env.get("FAILURE_THRESHOLD", str(DEFAULT_FAILURE_THRESHOLD)),
            minimum=1,
        ),
        realert_every=_to_int(
            "REALERT_EVERY",
            env.get("REALERT_EVERY", str(DEFAULT_REALERT_EVERY)),
            minimum=0,
        ),
        malformed_lines=env.get("MALFORMED_LINES", MALFORMED_ABORT).lower(),
        notifier=(args.notifier or env.get("NOTIFIER", "pushover")).lower(),
        pushover_token=args.token or env.get("PUSHOVER_TOKEN", ""),
        pushover_user_key=args.user_key or env.get("PUSHOVER_USER_KEY", ""),
        bot_token=env.get("BOT_TOKEN", ""),
        chat_id=env.get("CHAT_ID", ""),
        log_level=env.get("LOG_LEVEL", "info").lower(),
    )
    _validate(config)
    return config
