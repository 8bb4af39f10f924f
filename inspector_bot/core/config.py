"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .models import DeliveryMode, TrendingPeriod

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.inspector-bot").expanduser()
ENV_FILE_NAME = ".env"
SETTINGS_FILE = "settings.yaml"


@dataclass
class WebhookSettings:
    host: str = "0.0.0.0"
    port: int = 8080
    path: str = "/webhook"


@dataclass
class TrendingSettings:
    cap: int = 5
    period: TrendingPeriod = TrendingPeriod.DAILY
    candidate_limit: int = 30
    delivery_mode: DeliveryMode = DeliveryMode.PER_ITEM
    shuffle: bool = True
    seed: Optional[int] = None


@dataclass
class Config:
    telegram_bot_token: str
    github_token: str | None = None
    webhook: WebhookSettings = field(default_factory=WebhookSettings)
    trending: TrendingSettings = field(default_factory=TrendingSettings)
    template_path: Path | None = None
    config_dir: Path | None = None


def resolve_config_dir(config_dir: Path | str | None) -> Path | None:
    """Resolve the directory holding .env and settings.yaml.

    An explicit directory must exist; the default one is optional.
    """
    if config_dir is None:
        if DEFAULT_CONFIG_DIR.is_dir():
            return DEFAULT_CONFIG_DIR.resolve()
        LOGGER.info("No config directory at %s; relying on shell environment.", DEFAULT_CONFIG_DIR)
        return None

    target = Path(config_dir).expanduser().resolve()
    if not target.exists():
        raise ConfigError(f"Config directory {target} does not exist.")
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load inspector-bot configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    settings: Dict[str, Any] = {}
    if root is not None:
        _load_env_file(root / ENV_FILE_NAME)
        settings = _load_settings(root / SETTINGS_FILE)

    template_path = settings.get("template_path")
    if template_path:
        template_path = Path(template_path).expanduser()
        if not template_path.is_absolute() and root is not None:
            template_path = (root / template_path).resolve()

    return Config(
        telegram_bot_token=_require_bot_token(),
        github_token=os.getenv("GITHUB_TOKEN") or None,
        webhook=_parse_webhook(settings.get("webhook")),
        trending=_parse_trending(settings.get("trending")),
        template_path=template_path or None,
        config_dir=root,
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _require_bot_token() -> str:
    # GITHUB_BOT_TOKEN is the name used by earlier deployments.
    value = os.getenv("TELEGRAM_BOT_TOKEN") or os.getenv("GITHUB_BOT_TOKEN")
    if not value:
        raise ConfigError("TELEGRAM_BOT_TOKEN is not set")
    return value


def _load_settings(path: Path) -> Dict[str, Any]:
    if not path.exists():
        LOGGER.info("No %s found at %s; using defaults.", SETTINGS_FILE, path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {SETTINGS_FILE} structure at {path}")
    return data


def _section(raw: Any, name: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{name} must be a mapping")
    return raw


def _parse_webhook(raw: Any) -> WebhookSettings:
    cfg = _section(raw, "webhook")
    defaults = WebhookSettings()
    port_raw = os.getenv("PORT") or cfg.get("port", defaults.port)
    path = str(cfg.get("path", defaults.path))
    if not path.startswith("/"):
        raise ConfigError(f"webhook.path must start with '/': {path}")
    return WebhookSettings(
        host=str(cfg.get("host", defaults.host)),
        port=_positive_int(port_raw, "webhook.port"),
        path=path,
    )


def _parse_trending(raw: Any) -> TrendingSettings:
    cfg = _section(raw, "trending")
    defaults = TrendingSettings()

    try:
        period = TrendingPeriod(str(cfg.get("period", defaults.period.value)).lower())
    except ValueError as exc:
        raise ConfigError(f"Unsupported trending.period: {cfg.get('period')}") from exc

    try:
        delivery_mode = DeliveryMode(str(cfg.get("delivery_mode", defaults.delivery_mode.value)).lower())
    except ValueError as exc:
        raise ConfigError(f"Unsupported trending.delivery_mode: {cfg.get('delivery_mode')}") from exc

    shuffle = cfg.get("shuffle", defaults.shuffle)
    if not isinstance(shuffle, bool):
        raise ConfigError(f"trending.shuffle must be true or false, got {shuffle!r}")

    seed = cfg.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"trending.seed must be an integer, got {seed!r}")

    return TrendingSettings(
        cap=_positive_int(cfg.get("cap", defaults.cap), "trending.cap"),
        period=period,
        candidate_limit=_positive_int(cfg.get("candidate_limit", defaults.candidate_limit), "trending.candidate_limit"),
        delivery_mode=delivery_mode,
        shuffle=shuffle,
        seed=seed,
    )


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}") from exc
    if number < 1:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return number
