"""Shared fixtures for the qubestr test suite."""

from __future__ import annotations

import pytest

from qubestr.core.context import RequestContext
from qubestr.core.enums import EventKind
from qubestr.core.events import NostrEvent
from qubestr.core.roster import AuthorizationRoster

_PUBLISHER_KEY = "a" * 64
_OUTSIDER_KEY = "b" * 64
_NODE_KEY = "c" * 64


# ---------------------------------------------------------------------------
# Keys and contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def publisher_key() -> str:
    """Key listed in the authorization roster."""
    return _PUBLISHER_KEY


@pytest.fixture
def outsider_key() -> str:
    """Authenticated key that is not in the roster."""
    return _OUTSIDER_KEY


@pytest.fixture
def node_key() -> str:
    """Key of a node manager reporting status."""
    return _NODE_KEY


@pytest.fixture
def roster() -> AuthorizationRoster:
    return AuthorizationRoster.from_keys([_PUBLISHER_KEY])


@pytest.fixture
def anon_ctx() -> RequestContext:
    return RequestContext()


@pytest.fixture
def publisher_ctx() -> RequestContext:
    return RequestContext(authed_pubkey=_PUBLISHER_KEY)


@pytest.fixture
def outsider_ctx() -> RequestContext:
    return RequestContext(authed_pubkey=_OUTSIDER_KEY)


@pytest.fixture
def node_ctx() -> RequestContext:
    return RequestContext(authed_pubkey=_NODE_KEY)


# ---------------------------------------------------------------------------
# Tag sets
# ---------------------------------------------------------------------------

@pytest.fixture
def signal_tags():
    """Factory: fully valid HyperSignal tag set for an action."""

    def _build(action: str = "upgrade") -> list[list[str]]:
        tags = [
            ["d", "hyperqube"],
            ["version", "v1.4.0"],
            ["hash", "9f2c" * 16],
            ["network", "mainnet"],
            ["action", action],
        ]
        if action == "reboot":
            tags.append(["genesis_url", "https://example.org/genesis.json"])
            tags.append(["required_by", "1735689600"])
        return tags

    return _build


@pytest.fixture
def manager_tags():
    """Factory: fully valid QubeManager tag set for a status."""

    def _build(status: str = "success") -> list[list[str]]:
        tags = [
            ["a", f"33321:{_PUBLISHER_KEY}:hyperqube"],
            ["version", "v1.4.0"],
            ["network", "mainnet"],
            ["action", "upgrade"],
            ["status", status],
            ["node_id", "node-07"],
            ["action_at", "1735689000"],
        ]
        if status == "failure":
            tags.append(["error", "binary checksum mismatch"])
        return tags

    return _build


@pytest.fixture
def without_tag():
    """Factory: copy of a tag list with every *name* tag removed."""

    def _drop(tags: list[list[str]], name: str) -> list[list[str]]:
        return [t for t in tags if t[0] != name]

    return _drop


@pytest.fixture
def replace_tag():
    """Factory: copy of a tag list with *name* tags set to *value*."""

    def _replace(tags: list[list[str]], name: str, value: str) -> list[list[str]]:
        return [[name, value] if t[0] == name else t for t in tags]

    return _replace


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@pytest.fixture
def make_event():
    """Factory: build a NostrEvent with sensible defaults."""

    def _build(
        kind: int,
        tags: list | None = None,
        content: str = "Upgrade to v1.4.0 scheduled",
        pubkey: str = _PUBLISHER_KEY,
    ) -> NostrEvent:
        return NostrEvent(
            id="e" * 64,
            pubkey=pubkey,
            created_at=1735689000,
            kind=int(kind),
            tags=tags if tags is not None else [],
            content=content,
            sig="f" * 128,
        )

    return _build


@pytest.fixture
def signal_event(make_event, signal_tags) -> NostrEvent:
    return make_event(EventKind.HYPER_SIGNAL, signal_tags())


@pytest.fixture
def manager_event(make_event, manager_tags) -> NostrEvent:
    return make_event(
        EventKind.QUBE_MANAGER,
        manager_tags(),
        content="Node upgraded to v1.4.0",
        pubkey=_NODE_KEY,
    )
