"""HyperSignal (kind 33321) validator.

HyperSignal events announce a network-wide action (upgrade or reboot)
to HyperQube node managers.  Only authenticated publishers listed in
the ``AuthorizationRoster`` may emit them.

Rules, first failure wins:

1. publisher is authenticated
2. publisher is in the roster
3. ``d`` tag equals ``hyperqube``
4. ``version``, ``hash``, ``network`` and ``action`` tags are present
5. ``action`` is ``upgrade`` or ``reboot``
6. ``reboot`` carries ``genesis_url`` and ``required_by``
7. content is non-empty
"""

from __future__ import annotations

from qubestr.core.context import RequestContext
from qubestr.core.enums import HYPERQUBE_DOMAIN, EventKind, SignalAction
from qubestr.core.events import NostrEvent
from qubestr.core.roster import AuthorizationRoster

from .models import ValidationOutcome
from .reject import reject_event
from .tags import get_tag_value, has_tag, has_tag_with_value

REQUIRED_TAGS = ("version", "hash", "network", "action")
REBOOT_TAGS = ("genesis_url", "required_by")
SIGNAL_ACTIONS = frozenset(a.value for a in SignalAction)

_KIND = EventKind.HYPER_SIGNAL.value


class HyperSignalValidator:
    """Event hook enforcing the HyperSignal rules.

    Parameters
    ----------
    roster:
        Public keys allowed to publish this kind.  Injected at
        construction; never re-read from the environment.
    """

    def __init__(self, roster: AuthorizationRoster) -> None:
        self._roster = roster

    @property
    def roster(self) -> AuthorizationRoster:
        return self._roster

    def __call__(self, ctx: RequestContext, event: NostrEvent) -> ValidationOutcome:
        if event.kind != _KIND:
            return ValidationOutcome.accepted()

        if not ctx.is_authenticated:
            return reject_event(
                event,
                f"auth-required: publishing Kind {_KIND} requires authentication",
            )

        if ctx.authed_pubkey not in self._roster:
            return reject_event(
                event,
                "restricted: your public key is not authorized "
                f"to publish Kind {_KIND} events",
            )

        if not has_tag_with_value(event, "d", HYPERQUBE_DOMAIN):
            return reject_event(
                event,
                f"hyperqube: missing required 'd' tag with value '{HYPERQUBE_DOMAIN}'",
            )

        for name in REQUIRED_TAGS:
            if not has_tag(event, name):
                return reject_event(
                    event, f"hyperqube: missing required '{name}' tag"
                )

        action = get_tag_value(event, "action")
        if action not in SIGNAL_ACTIONS:
            return reject_event(
                event,
                "hyperqube: 'action' tag must be either 'upgrade' or 'reboot'",
            )

        if action == SignalAction.REBOOT.value and not all(
            has_tag(event, name) for name in REBOOT_TAGS
        ):
            return reject_event(
                event,
                "hyperqube: 'reboot' action requires "
                "'genesis_url' and 'required_by' tags",
            )

        if not event.content:
            return reject_event(
                event, "hyperqube: content must be a human-readable string"
            )

        return ValidationOutcome.accepted()
