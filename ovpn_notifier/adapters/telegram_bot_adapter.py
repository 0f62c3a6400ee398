"""Telegram Bot API adapter."""

from telegram import Bot


class TelegramBotAdapter:
    """Adapter for Telegram Bot API, bound to a single chat."""

    def __init__(self, bot_token: str, chat_id: int):
        self.bot = Bot(token=bot_token)
        self.chat_id = chat_id

    async def send_message(self, text: str) -> None:
        """Send text message."""
        await self.bot.send_message(chat_id=self.chat_id, text=text)
