"""Shared data passed to command handlers."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import ChatEvent


@dataclass(frozen=True)
class CommandContext:
    event: ChatEvent

    @property
    def chat_id(self) -> int:
        return self.event.chat_id

    @property
    def text(self) -> str:
        return self.event.text
