"""Core domain logic for inspector-bot."""

from .config import Config, TrendingSettings, WebhookSettings, load_config
from .errors import (
    ConfigError,
    DeliveryError,
    InspectorBotError,
    InvalidCommand,
    InvalidUpdate,
    MissingRepoName,
    NoResults,
    RepositoryNotFound,
    SearchServiceError,
    TemplateFieldMissing,
    TransportError,
)
from .models import (
    ChatEvent,
    DeliveryMode,
    DeliveryReceipt,
    DeliverySummary,
    RenderedBatch,
    RepoRecord,
    SearchQuery,
    TrendingPeriod,
)
from .delivery import DeliveryCoordinator
from .rendering import ResponseRenderer
from .selection import ResultSelector

__all__ = [
    "Config",
    "TrendingSettings",
    "WebhookSettings",
    "load_config",
    "InspectorBotError",
    "ConfigError",
    "InvalidUpdate",
    "InvalidCommand",
    "MissingRepoName",
    "NoResults",
    "TemplateFieldMissing",
    "TransportError",
    "SearchServiceError",
    "RepositoryNotFound",
    "DeliveryError",
    "ChatEvent",
    "SearchQuery",
    "RepoRecord",
    "RenderedBatch",
    "DeliveryReceipt",
    "DeliverySummary",
    "DeliveryMode",
    "TrendingPeriod",
    "DeliveryCoordinator",
    "ResponseRenderer",
    "ResultSelector",
]
