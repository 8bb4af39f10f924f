"""Repository search backed by the GitHub search API."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, timedelta
from itertools import islice
from typing import Any, Callable, List, Optional

import requests
from github import Auth, Github, GithubException

from ..core.errors import RepositoryNotFound, SearchServiceError
from ..core.models import RepoRecord, SearchQuery, TrendingPeriod

LOGGER = logging.getLogger(__name__)

DEFAULT_CANDIDATE_LIMIT = 30
# Only the first page is inspected when looking for an exact name match.
EXACT_MATCH_WINDOW = 10


def build_repository_query(query: SearchQuery) -> str:
    parts = [f"{query.repo_name} in:name"]
    if query.language:
        parts.append(f"language:{query.language}")
    if query.author:
        parts.append(f"user:{query.author}")
    return " ".join(parts)


def build_trending_query(period: TrendingPeriod, topic: str, today: Optional[date] = None) -> str:
    since = (today or date.today()) - timedelta(days=period.days)
    parts = [topic] if topic else []
    parts.append(f"created:>{since.isoformat()}")
    return " ".join(parts)


class GitHubSearchClient:
    """Wrapper around PyGithub that exposes async search helpers."""

    def __init__(
        self,
        token: Optional[str],
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._token = token
        self._client = Github(auth=Auth.Token(token)) if token else Github()
        self._candidate_limit = candidate_limit
        self._today = today

    def is_authenticated(self) -> bool:
        return bool(self._token)

    async def find_repository(self, query: SearchQuery) -> RepoRecord:
        return await asyncio.to_thread(self._find_repository_sync, query)

    async def find_trending(self, period: TrendingPeriod, topic: str = "") -> List[RepoRecord]:
        return await asyncio.to_thread(self._find_trending_sync, period, topic)

    def _find_repository_sync(self, query: SearchQuery) -> RepoRecord:
        search = build_repository_query(query)
        LOGGER.info("Searching GitHub repositories: %s", search)
        candidates = self._search(search, EXACT_MATCH_WINDOW)
        if not candidates:
            raise RepositoryNotFound(f"repository {query.repo_name} not found")

        wanted = query.repo_name.lower()
        for record in candidates:
            if record.name.lower() == wanted:
                return record
        return candidates[0]

    def _find_trending_sync(self, period: TrendingPeriod, topic: str) -> List[RepoRecord]:
        search = build_trending_query(period, topic, self._today())
        LOGGER.info("Searching GitHub trending repositories: %s", search)
        return self._search(search, self._candidate_limit)

    def _search(self, search: str, limit: int) -> List[RepoRecord]:
        try:
            results = self._client.search_repositories(query=search, sort="stars", order="desc")
            return [self._to_record(repo) for repo in islice(results, limit)]
        except GithubException as exc:
            message = exc.data.get("message") if isinstance(exc.data, dict) else exc.data
            raise SearchServiceError(f"GitHub search failed ({exc.status}): {message}") from exc
        except requests.RequestException as exc:
            raise SearchServiceError(f"GitHub search failed: {exc}") from exc

    def _to_record(self, repo: Any) -> RepoRecord:
        owner = getattr(repo, "owner", None)
        return RepoRecord(
            full_name=getattr(repo, "full_name", None),
            description=getattr(repo, "description", None),
            owner_login=getattr(owner, "login", None),
            stargazers_count=getattr(repo, "stargazers_count", None),
            html_url=getattr(repo, "html_url", None),
            language=getattr(repo, "language", None),
        )
