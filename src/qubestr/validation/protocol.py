"""Admission hook protocols.

The host relay holds two ordered lists of hooks, one for events and one
for filters.  Any callable with the matching signature qualifies; plain
functions and small callable objects are used interchangeably.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from qubestr.core.context import RequestContext
from qubestr.core.events import NostrEvent, NostrFilter

from .models import ValidationOutcome


@runtime_checkable
class IEventHook(Protocol):
    """Decides whether a freshly received event may be stored.

    Called once per event before persistence.  A rejected event is
    neither stored nor broadcast, and ``reason`` goes back to the
    publisher.  Hooks must be pure: no shared state, no blocking I/O.
    """

    def __call__(
        self, ctx: RequestContext, event: NostrEvent
    ) -> ValidationOutcome: ...


@runtime_checkable
class IFilterHook(Protocol):
    """Decides whether a subscription filter may run against the store."""

    def __call__(
        self, ctx: RequestContext, filter: NostrFilter
    ) -> ValidationOutcome: ...
