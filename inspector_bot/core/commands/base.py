"""Common utilities for command handlers."""

from __future__ import annotations

import logging

from ..delivery import DeliveryCoordinator
from ..errors import InspectorBotError
from .context import CommandContext

LOGGER = logging.getLogger(__name__)


class BaseCommandHandler:
    """Provides helper methods for replying to the chat."""

    def __init__(self, delivery: DeliveryCoordinator) -> None:
        self._delivery = delivery

    async def _reply(self, context: CommandContext, text: str) -> None:
        await self._delivery.deliver_one(context.chat_id, text)

    async def _report_error(self, context: CommandContext, exc: InspectorBotError) -> str:
        """Tell the chat what went wrong and return the HTTP diagnostic."""

        LOGGER.warning("Command %r in chat %s failed: %s", context.text, context.chat_id, exc)
        await self._delivery.notify_error(context.chat_id, str(exc))
        return f"invalid input {context.text} with error {exc}"
