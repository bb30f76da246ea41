"""Application bootstrap.

Loads configuration, builds the admission policy and serves the relay
HTTP application.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aiohttp import web

from .core.config import Settings, load_settings
from .core.relay_info import RelayInfo
from .observability import metrics
from .observability.logger import setup_logging
from .server.app import create_relay_app
from .validation.pipeline import build_relay_policy

logger = logging.getLogger(__name__)


def build_app(settings: Settings) -> web.Application:
    """Wire policy, relay information and metrics into the HTTP app."""
    roster = settings.roster
    policy = build_relay_policy(roster)
    metrics.set_relay_info(len(roster))
    info = RelayInfo(pubkey=settings.relay_admin_pubkey)
    return create_relay_app(policy, info)


def run(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> None:
    """Main entry point. Load config, set up logging, serve until interrupted."""
    settings = load_settings(config_path=config_path, overrides=overrides)
    setup_logging(settings.log_level, settings.log_format)

    app = build_app(settings)

    logger.info(
        "Starting Qubestr relay on %s (store %s, query limit %d, keep recent %s)",
        settings.listen_addr,
        settings.redacted_database_url,
        settings.db_query_limit,
        settings.db_keep_recent_events,
    )
    web.run_app(app, host=settings.host, port=settings.port, print=None)
