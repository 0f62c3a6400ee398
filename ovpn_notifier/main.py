"""OpenVPN Notifier - Main Entry Point."""

import asyncio
import sys
from typing import Optional, Sequence

from .adapters import (
    OpenVPNManagementAdapter,
    PushoverAdapter,
    TelegramBotAdapter,
    StdoutAdapter
)
from .config import Config, load_config
from .controller import ReconciliationController
from .exceptions import ConfigError, StartupError
from .interfaces import IMessagingProvider
from .notifier import MessageNotifier


def build_messaging(config: Config) -> IMessagingProvider:
    """Pick the push-notification transport."""
    if config.notifier == "telegram":
        return TelegramBotAdapter(
            bot_token=config.bot_token,
            chat_id=int(config.chat_id)
        )
    return PushoverAdapter(
        token=config.pushover_token,
        user_key=config.pushover_user_key
    )


def build_controller(config: Config) -> ReconciliationController:
    """Mount adapters around the controller."""
    logger = StdoutAdapter(level=config.log_level)
    status = OpenVPNManagementAdapter(
        host=config.host,
        port=config.port,
        timeout=config.timeout,
        malformed=config.malformed_lines,
        logger=logger
    )
    notifier = MessageNotifier(build_messaging(config), logger)
    return ReconciliationController(
        status,
        notifier,
        logger,
        threshold=config.failure_threshold,
        realert_every=config.realert_every
    )


async def run(controller: ReconciliationController, interval: float) -> None:
    """Seed the roster, then poll forever."""
    await controller.seed()
    controller.logger.log("info", "Polling for client updates")
    while True:
        await controller.update()
        await asyncio.sleep(interval)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main notifier initialization."""
    try:
        config = load_config(argv)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    controller = build_controller(config)
    controller.logger.log("info", "Starting OpenVPN notifier")
    controller.logger.log("info", config.summary())

    try:
        asyncio.run(run(controller, config.poll_interval))
    except StartupError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        controller.logger.log("info", "Stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
