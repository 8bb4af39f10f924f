"""Shared fixtures for inspector-bot tests."""

from __future__ import annotations

import random
from typing import List

import pytest

from inspector_bot.core.delivery import DeliveryCoordinator
from inspector_bot.core.errors import DeliveryError, RepositoryNotFound
from inspector_bot.core.models import DeliveryMode, DeliveryReceipt, RepoRecord
from inspector_bot.core.rendering import ResponseRenderer
from inspector_bot.core.router import Router
from inspector_bot.core.selection import ResultSelector


def make_record(name: str, owner: str = "octo", stars: int = 10, **overrides) -> RepoRecord:
    fields = dict(
        full_name=f"{owner}/{name}",
        description=f"{name} description",
        owner_login=owner,
        stargazers_count=stars,
        html_url=f"https://github.com/{owner}/{name}",
        language="Go",
    )
    fields.update(overrides)
    return RepoRecord(**fields)


class FakeChatAdapter:
    """Captures messages sent to the chat; fails on demand."""

    def __init__(self) -> None:
        self.messages: list[dict] = []
        self.fail_on: set[int] = set()
        self.fail_when_contains: list[str] = []
        self._calls = 0

    async def send_message(self, chat_id: int, text: str) -> DeliveryReceipt:
        index = self._calls
        self._calls += 1
        if index in self.fail_on or any(token in text for token in self.fail_when_contains):
            raise DeliveryError(f"Telegram API error 400: send #{index} rejected")
        print(f"\n CHAT {chat_id} <- {text!r}")
        self.messages.append({"chat_id": chat_id, "text": text})
        return DeliveryReceipt(chat_id=chat_id, message_id=index)

    @property
    def calls(self) -> int:
        return self._calls


class StubSearchService:
    """In-memory stand-in for the GitHub search client."""

    def __init__(self) -> None:
        self.repositories: dict[str, RepoRecord] = {}
        self.trending: List[RepoRecord] = []
        self.repository_calls: list = []
        self.trending_calls: list = []
        self.error: Exception | None = None

    async def find_repository(self, query):
        self.repository_calls.append(query)
        if self.error:
            raise self.error
        try:
            return self.repositories[query.repo_name]
        except KeyError:
            raise RepositoryNotFound(f"repository {query.repo_name} not found") from None

    async def find_trending(self, period, topic=""):
        self.trending_calls.append((period, topic))
        if self.error:
            raise self.error
        return list(self.trending)


@pytest.fixture
def chat_adapter() -> FakeChatAdapter:
    return FakeChatAdapter()


@pytest.fixture
def search_service() -> StubSearchService:
    return StubSearchService()


@pytest.fixture
def delivery(chat_adapter) -> DeliveryCoordinator:
    return DeliveryCoordinator(chat_adapter, mode=DeliveryMode.PER_ITEM)


@pytest.fixture
def renderer() -> ResponseRenderer:
    return ResponseRenderer()


@pytest.fixture
def selector() -> ResultSelector:
    return ResultSelector(5, rng=random.Random(1234))


@pytest.fixture
def router(search_service, delivery, selector, renderer) -> Router:
    return Router(
        search_service=search_service,
        delivery=delivery,
        selector=selector,
        renderer=renderer,
    )


@pytest.fixture
def record_factory():
    """Build RepoRecords with sensible defaults."""
    return make_record
