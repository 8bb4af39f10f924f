"""Chat adapter abstraction."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.models import DeliveryReceipt


class IChatAdapter(abc.ABC):
    """Abstraction for chat platform integrations (Telegram, etc.)."""

    @abc.abstractmethod
    async def send_message(self, chat_id: int, text: str) -> DeliveryReceipt:
        """Send a message to a chat.

        Raises:
            DeliveryError: when the platform cannot be reached or rejects
                the message.
        """
