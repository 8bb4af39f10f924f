"""GitHub integration helpers."""

from .client import GitHubSearchClient

__all__ = ["GitHubSearchClient"]
