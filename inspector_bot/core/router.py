"""Routes Telegram webhook updates to command handlers."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Dict

from ..chat_adapters.telegram_adapter import parse_update
from .commands.catalog import CatalogCommandHandler
from .commands.context import CommandContext
from .commands.dispatcher import CommandDispatcher
from .commands.search import SearchCommandHandler
from .commands.trending import TrendingCommandHandler
from .delivery import DeliveryCoordinator
from .errors import InvalidUpdate
from .models import ChatEvent, TrendingPeriod
from .rendering import ResponseRenderer
from .selection import ResultSelector

LOGGER = logging.getLogger(__name__)

CommandHandler = Callable[[CommandContext], Awaitable[str]]


class Router:
    """Central orchestrator translating chat events into command runs.

    Each call is independent: the router holds collaborators, never
    per-request state.
    """

    def __init__(
        self,
        *,
        search_service,
        delivery: DeliveryCoordinator,
        selector: ResultSelector,
        renderer: ResponseRenderer,
        period: TrendingPeriod = TrendingPeriod.DAILY,
        dispatcher: CommandDispatcher | None = None,
    ) -> None:
        self._command_dispatcher = dispatcher or CommandDispatcher()
        self._search_commands = SearchCommandHandler(
            search_service=search_service,
            renderer=renderer,
            delivery=delivery,
        )
        self._trending_commands = TrendingCommandHandler(
            search_service=search_service,
            selector=selector,
            renderer=renderer,
            delivery=delivery,
            period=period,
        )
        self._catalog_commands = CatalogCommandHandler(
            dispatcher=self._command_dispatcher,
            delivery=delivery,
        )
        self._command_handlers: Dict[str, CommandHandler] = {
            "search.repository": self._search_commands.handle_search,
            "trending.list": self._trending_commands.handle_trending,
            "catalog.help": self._catalog_commands.handle_help,
        }

    async def handle_update(self, payload: Dict[str, Any]) -> str:
        """Handle one decoded webhook payload; returns the HTTP response text."""

        try:
            event = parse_update(payload)
        except InvalidUpdate as exc:
            LOGGER.info("Ignoring update: %s", exc)
            return f"ignored update: {exc}"
        return await self.handle_event(event)

    async def handle_event(self, event: ChatEvent) -> str:
        text = event.text.strip()
        LOGGER.info(
            "Incoming request from chat %s (username %s): %s",
            event.chat_id,
            event.username,
            text,
        )

        spec = self._command_dispatcher.match(text)
        if spec is None:
            LOGGER.info("Invalid command: %s", text)
            return ""

        handler = self._command_handlers.get(spec.handler_id)
        if not handler:
            LOGGER.error("No handler registered for command %s (%s)", spec.token, spec.handler_id)
            return f"no handler for {spec.token}"

        context = CommandContext(event=replace(event, text=text))
        return await handler(context)
