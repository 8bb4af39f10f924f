"""Custom exception hierarchy for inspector-bot."""


class InspectorBotError(Exception):
    """Base error type."""


class ConfigError(InspectorBotError):
    pass


class InvalidUpdate(InspectorBotError):
    """Raised when a webhook payload carries no usable message."""
    pass


class InvalidCommand(InspectorBotError):
    pass


class MissingRepoName(InvalidCommand):
    """Raised when a `/search` command has no repository token."""
    pass


class NoResults(InspectorBotError):
    pass


class TemplateFieldMissing(InspectorBotError):
    """Raised when a record lacks a field referenced by the template."""

    def __init__(self, field: str, record_name: str | None = None) -> None:
        self.field = field
        self.record_name = record_name
        target = record_name or "repository"
        super().__init__(f"{target} is missing the '{field}' field")


class TransportError(InspectorBotError):
    pass


class SearchServiceError(TransportError):
    pass


class RepositoryNotFound(SearchServiceError):
    pass


class DeliveryError(TransportError):
    pass
