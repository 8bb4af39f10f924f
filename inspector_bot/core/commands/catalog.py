"""Handler for catalog-style commands (help)."""

from __future__ import annotations

from ..errors import TransportError
from .base import BaseCommandHandler
from .context import CommandContext
from .dispatcher import CommandDispatcher


class CatalogCommandHandler(BaseCommandHandler):
    """Lists the supported commands."""

    def __init__(self, *, dispatcher: CommandDispatcher, delivery) -> None:
        super().__init__(delivery)
        self._dispatcher = dispatcher

    async def handle_help(self, context: CommandContext) -> str:
        try:
            await self._reply(context, "\n".join(self._dispatcher.build_help_lines()))
        except TransportError as exc:
            return await self._report_error(context, exc)
        return "help sent to chat"
