"""QubeManager (kind 3333) validator.

QubeManager events are status reports published by node managers after
acting on a HyperSignal.  Any authenticated key may publish them; there
is no roster check for this kind.
"""

from __future__ import annotations

from qubestr.core.context import RequestContext
from qubestr.core.enums import HYPERQUBE_DOMAIN, EventKind, ManagerStatus
from qubestr.core.events import NostrEvent

from .hyper_signal import SIGNAL_ACTIONS
from .models import ValidationOutcome
from .reject import reject_event
from .tags import get_tag_value, has_tag

REQUIRED_TAGS = ("a", "version", "network", "action", "status", "node_id", "action_at")
MANAGER_STATUSES = frozenset(s.value for s in ManagerStatus)

PUBKEY_HEX_LENGTH = 64

_KIND = EventKind.QUBE_MANAGER.value
_SIGNAL_KIND = str(EventKind.HYPER_SIGNAL.value)


def is_signal_reference(value: str) -> bool:
    """True if *value* is ``<signal kind>:<64-char pubkey>:hyperqube``.

    The pubkey segment is checked for length only.
    """
    parts = value.split(":")
    return (
        len(parts) == 3
        and parts[0] == _SIGNAL_KIND
        and len(parts[1]) == PUBKEY_HEX_LENGTH
        and parts[2] == HYPERQUBE_DOMAIN
    )


def validate_qube_manager_event(
    ctx: RequestContext, event: NostrEvent
) -> ValidationOutcome:
    """Event hook enforcing the QubeManager rules; first failure wins."""
    if event.kind != _KIND:
        return ValidationOutcome.accepted()

    if not ctx.is_authenticated:
        return reject_event(
            event, f"auth-required: publishing Kind {_KIND} requires authentication"
        )

    for name in REQUIRED_TAGS:
        if not has_tag(event, name):
            return reject_event(event, f"qube-manager: missing required '{name}' tag")

    if not is_signal_reference(get_tag_value(event, "a")):
        return reject_event(
            event,
            "qube-manager: invalid 'a' tag format "
            f"(should be '{_SIGNAL_KIND}:<64_hex_pubkey>:{HYPERQUBE_DOMAIN}')",
        )

    if get_tag_value(event, "action") not in SIGNAL_ACTIONS:
        return reject_event(
            event, "qube-manager: 'action' tag must be either 'upgrade' or 'reboot'"
        )

    status = get_tag_value(event, "status")
    if status not in MANAGER_STATUSES:
        return reject_event(
            event, "qube-manager: 'status' tag should be 'success' or 'failure'"
        )

    if status == ManagerStatus.FAILURE.value and not has_tag(event, "error"):
        return reject_event(event, "qube-manager: 'failure' status requires 'error' tag")

    if not event.content:
        return reject_event(event, "qube-manager: content must be a human-readable string")

    return ValidationOutcome.accepted()
