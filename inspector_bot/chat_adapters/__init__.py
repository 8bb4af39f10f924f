"""Chat platform integrations."""

from .i_chat_adapter import IChatAdapter
from .telegram_adapter import TelegramChatAdapter, parse_update

__all__ = ["IChatAdapter", "TelegramChatAdapter", "parse_update"]
