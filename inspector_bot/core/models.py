"""Domain models for inspector-bot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import MissingRepoName, TemplateFieldMissing


class TrendingPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def days(self) -> int:
        return {"daily": 1, "weekly": 7, "monthly": 30}[self.value]


class DeliveryMode(str, Enum):
    PER_ITEM = "per_item"
    JOINED = "joined"


@dataclass(frozen=True)
class ChatEvent:
    chat_id: int
    text: str
    update_id: Optional[int] = None
    username: Optional[str] = None


@dataclass(frozen=True)
class SearchQuery:
    repo_name: str
    language: str = ""
    author: str = ""

    def __post_init__(self) -> None:
        if not self.repo_name:
            raise MissingRepoName("repository name must not be empty")


@dataclass(frozen=True)
class RepoRecord:
    full_name: Optional[str]
    description: Optional[str]
    owner_login: Optional[str]
    stargazers_count: Optional[int]
    html_url: Optional[str]
    language: Optional[str] = None

    @property
    def name(self) -> str:
        if not self.full_name:
            return ""
        return self.full_name.rsplit("/", 1)[-1]


@dataclass
class RenderedBatch:
    messages: List[str] = field(default_factory=list)
    failures: List[Tuple[RepoRecord, TemplateFieldMissing]] = field(default_factory=list)


@dataclass(frozen=True)
class DeliveryReceipt:
    chat_id: int
    message_id: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DeliverySummary:
    attempted: int = 0
    sent: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.attempted - self.sent

    @property
    def all_sent(self) -> bool:
        return self.attempted > 0 and self.failed == 0

    def describe(self) -> str:
        if self.all_sent:
            return "all repos sent to chat"
        return (
            f"sent {self.sent} of {self.attempted} message(s) to chat; "
            f"errors: {'; '.join(self.errors) or 'none'}"
        )
