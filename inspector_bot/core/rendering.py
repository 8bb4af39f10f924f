"""Template rendering for repository records."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from string import Template
from typing import Iterable

from .errors import ConfigError, TemplateFieldMissing
from .models import RenderedBatch, RepoRecord

LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """
  $full_name: $description
  Author: $owner_login
  ⭐: $stargazers_count
  $html_url
"""

TEMPLATE_FIELDS = frozenset(
    ("full_name", "description", "owner_login", "stargazers_count", "html_url", "language")
)

# GitHub returns null for these when the repository leaves them blank.
NULLABLE_TEXT_FIELDS = frozenset(("description", "language"))


class ResponseRenderer:
    """Turns a RepoRecord into chat text, refusing to emit partial output."""

    def __init__(self, template: str = DEFAULT_TEMPLATE) -> None:
        self._template = Template(template)
        if any(match.group("invalid") is not None for match in self._template.pattern.finditer(template)):
            raise ConfigError("Invalid placeholder in template; use $$ for a literal dollar sign")
        unknown = set(_placeholders(self._template)) - TEMPLATE_FIELDS
        if unknown:
            raise ConfigError(f"Unknown template field(s): {', '.join(sorted(unknown))}")

    @classmethod
    def from_file(cls, path: Path) -> "ResponseRenderer":
        try:
            return cls(Path(path).read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Failed to read template {path}: {exc}") from exc

    def render(self, record: RepoRecord) -> str:
        values = {}
        for key, value in asdict(record).items():
            if value is None and key in NULLABLE_TEXT_FIELDS:
                value = ""
            if value is not None:
                values[key] = value
        try:
            return self._template.substitute(values)
        except KeyError as exc:
            raise TemplateFieldMissing(exc.args[0], record.full_name) from exc

    def render_batch(self, records: Iterable[RepoRecord]) -> RenderedBatch:
        """Render each record independently; failures are logged and skipped."""

        batch = RenderedBatch()
        for record in records:
            try:
                batch.messages.append(self.render(record))
            except TemplateFieldMissing as exc:
                LOGGER.warning("Skipping repository %s: %s", record.full_name, exc)
                batch.failures.append((record, exc))
        return batch


def _placeholders(template: Template) -> list[str]:
    names = []
    for match in template.pattern.finditer(template.template):
        name = match.group("named") or match.group("braced")
        if name:
            names.append(name)
    return names
