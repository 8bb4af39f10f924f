"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import random
from typing import Sequence

from aiohttp import web

from .chat_adapters import TelegramChatAdapter
from .core import (
    Config,
    ConfigError,
    DeliveryCoordinator,
    ResponseRenderer,
    ResultSelector,
    load_config,
)
from .core.router import Router
from .github import GitHubSearchClient
from .server import create_app

LOGGER = logging.getLogger(__name__)


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="inspector-bot",
        description="Telegram bot answering /search and /trend with GitHub repositories",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory containing .env and settings.yaml (default: ~/.inspector-bot)",
    )
    parser.add_argument("--host", help="Override the webhook bind address")
    parser.add_argument("--port", type=int, help="Override the webhook port")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config_dir)
        app = build_app(config)
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    logging.getLogger().setLevel(log_level)

    host = args.host or config.webhook.host
    port = args.port or config.webhook.port
    LOGGER.info("Listening for Telegram updates on %s:%s%s", host, port, config.webhook.path)
    web.run_app(app, host=host, port=port, print=None)
    LOGGER.info("Shutdown complete")
    return 0


def build_router(config: Config) -> Router:
    """Wire the pipeline collaborators from configuration."""

    trending = config.trending
    renderer = (
        ResponseRenderer.from_file(config.template_path)
        if config.template_path
        else ResponseRenderer()
    )
    search_service = GitHubSearchClient(config.github_token, candidate_limit=trending.candidate_limit)
    if not search_service.is_authenticated():
        LOGGER.warning("GITHUB_TOKEN is not set; GitHub search runs unauthenticated with a low rate limit.")

    return Router(
        search_service=search_service,
        delivery=DeliveryCoordinator(TelegramChatAdapter(config.telegram_bot_token), mode=trending.delivery_mode),
        selector=ResultSelector(trending.cap, rng=random.Random(trending.seed), shuffle=trending.shuffle),
        renderer=renderer,
        period=trending.period,
    )


def build_app(config: Config) -> web.Application:
    return create_app(build_router(config), config.webhook.path)


if __name__ == "__main__":
    raise SystemExit(cli())
