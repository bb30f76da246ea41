"""Relay HTTP application.

Endpoints:
  GET  /         - NIP-11 document for ``Accept: application/nostr+json``,
                   landing page otherwise
  GET  /health   - Health check
  GET  /metrics  - Prometheus text exposition

The websocket transport is provided by the host relay, which reads the
admission policy from ``app["policy"]``.
"""

from __future__ import annotations

import logging

from aiohttp import web

from qubestr.core.enums import EventKind
from qubestr.core.relay_info import RelayInfo
from qubestr.observability import metrics
from qubestr.observability.logger import new_trace_id
from qubestr.validation.pipeline import RelayPolicy

logger = logging.getLogger(__name__)

NOSTR_JSON = "application/nostr+json"

_LANDING_PAGE = (
    "<h1>Qubestr Nostr Relay</h1>\n"
    "<p>Specialized relay for hyperqube custom events "
    f"(kinds {EventKind.HYPER_SIGNAL.value} and {EventKind.QUBE_MANAGER.value})</p>"
)


def create_relay_app(policy: RelayPolicy, info: RelayInfo) -> web.Application:
    """Create the aiohttp web application for the relay."""
    app = web.Application(middlewares=[trace_middleware])
    app["policy"] = policy
    app["info"] = info

    app.router.add_get("/", handle_index)
    app.router.add_get("/health", handle_health)
    app.router.add_get("/metrics", handle_metrics)

    return app


@web.middleware
async def trace_middleware(request: web.Request, handler):
    """Give every request its own trace_id for log correlation."""
    new_trace_id()
    return await handler(request)


async def handle_index(request: web.Request) -> web.Response:
    """GET / - relay information or landing page."""
    if NOSTR_JSON in request.headers.get("Accept", ""):
        info: RelayInfo = request.app["info"]
        response = web.json_response(info.to_document(), content_type=NOSTR_JSON)
        # NIP-11 requires CORS for browser clients
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET"
        return response
    return web.Response(text=_LANDING_PAGE, content_type="text/html")


async def handle_health(request: web.Request) -> web.Response:
    """GET /health - simple health check."""
    policy: RelayPolicy = request.app["policy"]
    return web.json_response({
        "status": "ok",
        "event_hooks": len(policy.event_hooks),
        "filter_hooks": len(policy.filter_hooks),
    })


async def handle_metrics(request: web.Request) -> web.Response:
    """GET /metrics - Prometheus scrape endpoint."""
    body, content_type = metrics.render_latest()
    # aiohttp rejects charset inside content_type; pass the raw header instead
    return web.Response(body=body, headers={"Content-Type": content_type})
