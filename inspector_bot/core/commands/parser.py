"""Parameter extraction for chat commands."""

from __future__ import annotations

import re

from ..errors import InvalidCommand, MissingRepoName
from ..models import SearchQuery

SEARCH_COMMAND = "/search"
TREND_COMMAND = "/trend"

REPO_PATTERN = re.compile(r"^/search\s([A-Za-z0-9\-_]+)\s*.*")
LANG_PATTERN = re.compile(r"^/search\s.*\s+lang:(\w*)", re.ASCII)
AUTHOR_PATTERN = re.compile(r"^/search\s.*\s+author:([A-Za-z0-9\-_]+)")

SEARCH_USAGE = f"{SEARCH_COMMAND} <repository> [lang:<language>] [author:<author>]"


def extract_params(text: str) -> SearchQuery:
    """Parse a `/search` command into a structured query.

    The repository name is mandatory. `lang:` and `author:` are optional and
    matched independently, so they may appear in either order:

      /search dblab lang:go author:danvergara
      /search dblab author:danvergara lang:go
    """

    normalized = text.strip()

    match = REPO_PATTERN.search(normalized)
    if not match:
        raise MissingRepoName(f"repository name not found in {normalized!r}; usage: {SEARCH_USAGE}")

    return SearchQuery(
        repo_name=match.group(1),
        language=_optional_param(LANG_PATTERN, normalized),
        author=_optional_param(AUTHOR_PATTERN, normalized),
    )


def _optional_param(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def strip_command(text: str, command: str) -> str:
    """Return the free text following a command token."""

    if len(text) < len(command):
        raise InvalidCommand(f"invalid command: {text}")
    if text.startswith(command):
        text = text[len(command) :]
    return text.strip()
