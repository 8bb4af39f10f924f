"""Handler for the `/trend` command."""

from __future__ import annotations

import logging

from ..errors import InspectorBotError, NoResults
from ..models import TrendingPeriod
from ..rendering import ResponseRenderer
from ..selection import NO_TRENDING_MESSAGE, ResultSelector
from .base import BaseCommandHandler
from .context import CommandContext
from .parser import TREND_COMMAND, strip_command

LOGGER = logging.getLogger(__name__)


class TrendingCommandHandler(BaseCommandHandler):
    """Fetches trending repositories and delivers a shuffled sample."""

    def __init__(
        self,
        *,
        search_service,
        selector: ResultSelector,
        renderer: ResponseRenderer,
        delivery,
        period: TrendingPeriod = TrendingPeriod.DAILY,
    ) -> None:
        super().__init__(delivery)
        self._search_service = search_service
        self._selector = selector
        self._renderer = renderer
        self._period = TrendingPeriod(period)

    async def handle_trending(self, context: CommandContext) -> str:
        try:
            topic = strip_command(context.text, TREND_COMMAND)
            LOGGER.info("Sanitized trending topic: %r", topic)
            candidates = await self._search_service.find_trending(self._period, topic)
            batch = self._selector.select(candidates)
        except InspectorBotError as exc:
            return await self._report_error(context, exc)

        rendered = self._renderer.render_batch(batch)
        if not rendered.messages:
            return await self._report_error(context, NoResults(NO_TRENDING_MESSAGE))

        LOGGER.info(
            "Rendered %s of %s repo(s) for chat %s",
            len(rendered.messages),
            len(batch),
            context.chat_id,
        )
        summary = await self._delivery.deliver_batch(context.chat_id, rendered.messages)
        if summary.all_sent:
            LOGGER.info("Successfully distributed to chat id %s", context.chat_id)
        else:
            LOGGER.warning("Partial delivery to chat %s: %s", context.chat_id, summary.describe())
        return summary.describe()
