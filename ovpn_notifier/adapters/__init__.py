"""Adapter implementations for the notifier."""

from .openvpn_management_adapter import OpenVPNManagementAdapter
from .pushover_adapter import PushoverAdapter
from .telegram_bot_adapter import TelegramBotAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'OpenVPNManagementAdapter',
    'PushoverAdapter',
    'TelegramBotAdapter',
    'StdoutAdapter',
]
