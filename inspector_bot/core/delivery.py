"""Sends rendered messages to the chat transport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from .errors import TransportError
from .models import DeliveryMode, DeliveryReceipt, DeliverySummary

if TYPE_CHECKING:
    from ..chat_adapters.i_chat_adapter import IChatAdapter

LOGGER = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "\n-------------\n"


class DeliveryCoordinator:
    """Delivers single replies and batches with continue-on-error semantics."""

    def __init__(
        self,
        chat_adapter: IChatAdapter,
        mode: DeliveryMode = DeliveryMode.PER_ITEM,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self._chat_adapter = chat_adapter
        self._mode = DeliveryMode(mode)
        self._separator = separator

    @property
    def mode(self) -> DeliveryMode:
        return self._mode

    async def deliver_one(self, chat_id: int, text: str) -> DeliveryReceipt:
        """Single attempt; TransportError propagates to the caller."""
        return await self._chat_adapter.send_message(chat_id, text)

    async def deliver_batch(self, chat_id: int, messages: Sequence[str]) -> DeliverySummary:
        if self._mode == DeliveryMode.JOINED:
            payloads = [self._separator.join(messages)] if messages else []
        else:
            payloads = list(messages)

        LOGGER.info("Delivering %s message(s) to chat %s (%s)", len(payloads), chat_id, self._mode.value)
        summary = DeliverySummary()
        for text in payloads:
            summary.attempted += 1
            try:
                await self._chat_adapter.send_message(chat_id, text)
            except TransportError as exc:
                # No need to break the loop, just continue to the next one.
                LOGGER.error("Error publishing message to chat %s: %s", chat_id, exc)
                summary.errors.append(str(exc))
                continue
            summary.sent += 1
        return summary

    async def notify_error(self, chat_id: int, text: str) -> bool:
        """Best-effort error notice; transport failures are logged only."""

        try:
            await self._chat_adapter.send_message(chat_id, text)
        except TransportError as exc:
            LOGGER.warning("Failed to notify chat %s about an error: %s", chat_id, exc)
            return False
        return True
