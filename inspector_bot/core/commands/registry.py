"""Central registry of supported chat commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .parser import SEARCH_COMMAND, SEARCH_USAGE, TREND_COMMAND


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing a single supported chat command."""

    token: str
    handler_id: str
    usage: str
    description: str
    aliases: Tuple[str, ...] = ()

    @property
    def all_tokens(self) -> Tuple[str, ...]:
        return (self.token, *self.aliases)

    def alias_display(self) -> str:
        """Return formatted alias hint for help output."""
        if not self.aliases:
            return ""
        rendered = ", ".join(self.aliases)
        return f" (aliases: {rendered})"


def _build_specs() -> Tuple[CommandSpec, ...]:
    # Order matters: the dispatcher picks the first token that prefixes the text.
    return (
        CommandSpec(
            token=SEARCH_COMMAND,
            handler_id="search.repository",
            usage=SEARCH_USAGE,
            description="Look up a single GitHub repository.",
        ),
        CommandSpec(
            token=TREND_COMMAND,
            handler_id="trending.list",
            usage=f"{TREND_COMMAND} <topic>",
            description="Show a random sample of today's trending repositories.",
        ),
        CommandSpec(
            token="/help",
            handler_id="catalog.help",
            usage="/help",
            description="Show this command list.",
            aliases=("/start",),
        ),
    )


COMMAND_SPECS: Tuple[CommandSpec, ...] = _build_specs()


def iter_command_specs() -> Sequence[CommandSpec]:
    """Return the immutable list of command specs in match order."""
    return COMMAND_SPECS
