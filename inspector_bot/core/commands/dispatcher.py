"""Command classification backed by the central registry."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .registry import CommandSpec, iter_command_specs


class CommandDispatcher:
    """Maps the leading command token of a message to its spec."""

    def __init__(self, specs: Optional[Sequence[CommandSpec]] = None) -> None:
        self._specs: Sequence[CommandSpec] = tuple(specs or iter_command_specs())
        self._prefixes: Tuple[Tuple[str, CommandSpec], ...] = tuple(
            (token, spec) for spec in self._specs for token in spec.all_tokens
        )

    @property
    def specs(self) -> Sequence[CommandSpec]:
        return self._specs

    def match(self, text: str) -> Optional[CommandSpec]:
        """Return the spec whose token prefixes `text`, if any."""

        for token, spec in self._prefixes:
            if text.startswith(token):
                return spec
        return None

    def build_help_lines(self) -> list[str]:
        """Render help text for all commands."""

        lines = ["Available commands:"]
        for spec in self._specs:
            lines.append(f"- {spec.usage} – {spec.description}{spec.alias_display()}")
        lines.append("")
        lines.append("Qualifiers for /search may appear in any order.")
        return lines
