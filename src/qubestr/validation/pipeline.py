"""RelayPolicy - ordered admission hook chains for the host relay.

Usage::

    policy = build_relay_policy(settings.roster)
    outcome = policy.reject_event(ctx, event)
    if outcome.reject:
        # discard the event, send outcome.reason back to the publisher
        ...

Each chain is evaluated in order and stops at the first rejection.
"""

from __future__ import annotations

import logging

from qubestr.core.context import RequestContext
from qubestr.core.enums import AdmissionOutcome, EventKind
from qubestr.core.events import NostrEvent, NostrFilter
from qubestr.core.roster import AuthorizationRoster
from qubestr.observability import metrics

from .filter_gate import require_auth
from .hyper_signal import HyperSignalValidator
from .kind_gate import validate_kind
from .models import ValidationOutcome
from .protocol import IEventHook, IFilterHook
from .qube_manager import validate_qube_manager_event

logger = logging.getLogger(__name__)


class RelayPolicy:
    """Holds the event and filter hook chains.

    Stateless apart from the hook lists, which are fixed at
    construction, so one instance is shared by every connection.
    """

    def __init__(
        self,
        event_hooks: list[IEventHook] | None = None,
        filter_hooks: list[IFilterHook] | None = None,
    ) -> None:
        self._event_hooks: tuple[IEventHook, ...] = tuple(event_hooks or ())
        self._filter_hooks: tuple[IFilterHook, ...] = tuple(filter_hooks or ())

    @property
    def event_hooks(self) -> tuple[IEventHook, ...]:
        return self._event_hooks

    @property
    def filter_hooks(self) -> tuple[IFilterHook, ...]:
        return self._filter_hooks

    def reject_event(self, ctx: RequestContext, event: NostrEvent) -> ValidationOutcome:
        """Run the event chain; the first rejecting hook decides."""
        outcome = _first_rejection(self._event_hooks, ctx, event)
        metrics.record_event(event.kind, _label(outcome))
        return outcome

    def reject_filter(self, ctx: RequestContext, filter: NostrFilter) -> ValidationOutcome:
        """Run the filter chain; the first rejecting hook decides."""
        outcome = _first_rejection(self._filter_hooks, ctx, filter)
        metrics.record_filter(_label(outcome))
        return outcome


def _first_rejection(hooks, ctx, item) -> ValidationOutcome:
    for hook in hooks:
        outcome = hook(ctx, item)
        if outcome.reject:
            return outcome
    return ValidationOutcome.accepted()


def _label(outcome: ValidationOutcome) -> str:
    if outcome.reject:
        return AdmissionOutcome.REJECTED.value
    return AdmissionOutcome.ACCEPTED.value


def build_relay_policy(roster: AuthorizationRoster) -> RelayPolicy:
    """Wire the default chains: kind gate, HyperSignal, QubeManager; auth for reads."""
    if len(roster) == 0:
        logger.warning(
            "Authorization roster is empty; all Kind %d events will be rejected",
            EventKind.HYPER_SIGNAL.value,
        )
    return RelayPolicy(
        event_hooks=[
            validate_kind,
            HyperSignalValidator(roster),
            validate_qube_manager_event,
        ],
        filter_hooks=[require_auth],
    )
