"""aiohttp application exposing the Telegram webhook."""

from __future__ import annotations

import json
import logging

from aiohttp import web

from .core.router import Router

LOGGER = logging.getLogger(__name__)

ROUTER_KEY = web.AppKey("router", Router)


def create_app(router: Router, webhook_path: str = "/webhook") -> web.Application:
    app = web.Application()
    app[ROUTER_KEY] = router
    app.router.add_post(webhook_path, handle_webhook)
    app.router.add_get("/healthz", handle_health)
    return app


async def handle_webhook(request: web.Request) -> web.Response:
    """Always acknowledge with 200 so Telegram does not redeliver the update."""

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        LOGGER.error("Error parsing update: %s", exc)
        return web.Response(text="could not decode update")

    router = request.app[ROUTER_KEY]
    try:
        body = await router.handle_update(payload)
    except Exception:  # pragma: no cover - defensive
        LOGGER.exception("Unhandled error while processing update")
        return web.Response(text="an internal error has occurred")
    return web.Response(text=body)


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})
