"""Telegram Bot API adapter."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from .i_chat_adapter import IChatAdapter
from ..core.errors import DeliveryError, InvalidUpdate
from ..core.models import ChatEvent, DeliveryReceipt

LOGGER = logging.getLogger(__name__)

TELEGRAM_API_BASE_URL = "https://api.telegram.org"
SEND_MESSAGE_METHOD = "sendMessage"


def parse_update(payload: Dict[str, Any]) -> ChatEvent:
    """Decode an incoming webhook update into a ChatEvent.

    Only `message.text` and `message.chat.id` are required; anything else
    (edited messages, callbacks, media without captions) is rejected.
    """

    if not isinstance(payload, dict):
        raise InvalidUpdate("update payload must be a JSON object")

    message = payload.get("message")
    if not isinstance(message, dict):
        raise InvalidUpdate("update carries no message")

    chat = message.get("chat")
    chat_id = chat.get("id") if isinstance(chat, dict) else None
    if isinstance(chat_id, bool) or not isinstance(chat_id, int):
        raise InvalidUpdate("message carries no chat id")

    text = message.get("text")
    if not isinstance(text, str):
        raise InvalidUpdate("message carries no text")

    update_id = payload.get("update_id")
    return ChatEvent(
        chat_id=chat_id,
        text=text,
        update_id=update_id if isinstance(update_id, int) else None,
        username=chat.get("username"),
    )


class TelegramChatAdapter(IChatAdapter):
    """Sends messages through the Bot API `sendMessage` method."""

    def __init__(
        self,
        bot_token: str,
        *,
        base_url: str = TELEGRAM_API_BASE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not bot_token:
            raise ValueError("bot_token is required")
        self._bot_token = bot_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def _endpoint(self) -> str:
        return f"{self._base_url}/bot{self._bot_token}/{SEND_MESSAGE_METHOD}"

    async def send_message(self, chat_id: int, text: str) -> DeliveryReceipt:
        return await asyncio.to_thread(self._send_message_sync, chat_id, text)

    def _send_message_sync(self, chat_id: int, text: str) -> DeliveryReceipt:
        LOGGER.debug("Sending %s character(s) to chat_id %s", len(text), chat_id)
        try:
            response = self._session.post(
                self._endpoint(),
                data={"chat_id": str(chat_id), "text": text},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            # The exception text can embed the request URL, which carries the token.
            LOGGER.error("Error when posting text to chat %s: %s", chat_id, type(exc).__name__)
            raise DeliveryError(f"could not reach Telegram: {type(exc).__name__}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok or not body.get("ok", False):
            description = body.get("description") or response.reason or "unknown error"
            LOGGER.error("Telegram rejected message to chat %s: %s %s", chat_id, response.status_code, description)
            raise DeliveryError(f"Telegram API error {response.status_code}: {description}")

        LOGGER.debug("Body of Telegram response: %s", body)
        result = body.get("result") or {}
        return DeliveryReceipt(chat_id=chat_id, message_id=result.get("message_id"), raw=body)
