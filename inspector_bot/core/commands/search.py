"""Handler for the `/search` command."""

from __future__ import annotations

import logging

from ..errors import InspectorBotError
from ..rendering import ResponseRenderer
from .base import BaseCommandHandler
from .context import CommandContext
from .parser import extract_params

LOGGER = logging.getLogger(__name__)


class SearchCommandHandler(BaseCommandHandler):
    """Looks up a single repository and replies with its card."""

    def __init__(self, *, search_service, renderer: ResponseRenderer, delivery) -> None:
        super().__init__(delivery)
        self._search_service = search_service
        self._renderer = renderer

    async def handle_search(self, context: CommandContext) -> str:
        try:
            query = extract_params(context.text)
            LOGGER.info(
                "Searching repository %s (lang=%r, author=%r) for chat %s",
                query.repo_name,
                query.language,
                query.author,
                context.chat_id,
            )
            record = await self._search_service.find_repository(query)
            text = self._renderer.render(record)
            await self._delivery.deliver_one(context.chat_id, text)
        except InspectorBotError as exc:
            return await self._report_error(context, exc)

        LOGGER.info("Sent repository %s to chat %s", record.full_name, context.chat_id)
        return "repository sent to chat"
