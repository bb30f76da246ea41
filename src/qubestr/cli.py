"""CLI entry point for the relay."""

from __future__ import annotations

import json
import sys

import click

from .core.context import RequestContext
from .core.errors import QubestrError


def _print_outcome(outcome) -> None:
    click.echo(json.dumps({"reject": outcome.reject, "reason": outcome.reason}))


@click.group()
def main() -> None:
    """Qubestr: a Nostr relay for HyperQube node management."""


@main.command()
@click.option("--config", default=None, help="TOML config file path")
@click.option("--host", default=None, help="Listen host override")
@click.option("--port", default=None, type=int, help="Listen port override")
def serve(config: str | None, host: str | None, port: int | None) -> None:
    """Serve the relay HTTP endpoints."""
    from .main import run

    overrides: dict = {}
    if host:
        overrides["host"] = host
    if port:
        overrides["port"] = port

    run(config_path=config, overrides=overrides)


@main.command("check-event")
@click.argument("event_file", type=click.File("r"))
@click.option("--authed", default="", help="Pubkey the connection is authenticated as")
@click.option("--config", default=None, help="TOML config file path")
def check_event(event_file, authed: str, config: str | None) -> None:
    """Run the event admission chain on a JSON event (use - for stdin).

    Exits with status 1 when the event is rejected.
    """
    from .core.config import load_settings
    from .core.events import NostrEvent
    from .validation.pipeline import build_relay_policy

    try:
        settings = load_settings(config_path=config)
        event = NostrEvent.from_json(event_file.read())
    except QubestrError as exc:
        raise click.ClickException(str(exc)) from exc

    policy = build_relay_policy(settings.roster)
    outcome = policy.reject_event(RequestContext(authed_pubkey=authed), event)
    _print_outcome(outcome)
    if outcome.reject:
        sys.exit(1)


@main.command("check-filter")
@click.argument("filter_json", default="{}")
@click.option("--authed", default="", help="Pubkey the connection is authenticated as")
def check_filter(filter_json: str, authed: str) -> None:
    """Run the filter admission chain on a JSON filter.

    Exits with status 1 when the filter is rejected.
    """
    from .core.events import NostrFilter
    from .validation.filter_gate import require_auth
    from .validation.pipeline import RelayPolicy

    try:
        nostr_filter = NostrFilter.from_json(filter_json)
    except QubestrError as exc:
        raise click.ClickException(str(exc)) from exc

    policy = RelayPolicy(filter_hooks=[require_auth])
    outcome = policy.reject_filter(RequestContext(authed_pubkey=authed), nostr_filter)
    _print_outcome(outcome)
    if outcome.reject:
        sys.exit(1)


@main.command()
@click.option("--config", default=None, help="TOML config file path")
def info(config: str | None) -> None:
    """Print the NIP-11 relay information document."""
    from .core.config import load_settings
    from .core.relay_info import RelayInfo

    settings = load_settings(config_path=config)
    doc = RelayInfo(pubkey=settings.relay_admin_pubkey).to_document()
    click.echo(json.dumps(doc, indent=2))
