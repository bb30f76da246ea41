"""Kind gate: first hook in the event chain."""

from __future__ import annotations

from qubestr.core.context import RequestContext
from qubestr.core.enums import SUPPORTED_KINDS
from qubestr.core.events import NostrEvent

from .models import ValidationOutcome


def validate_kind(ctx: RequestContext, event: NostrEvent) -> ValidationOutcome:
    """Reject every kind this relay does not serve.

    Deliberately silent: unsupported kinds are common and not logged.
    """
    if event.kind not in SUPPORTED_KINDS:
        return ValidationOutcome.rejected(f"unsupported kind: {event.kind}")
    return ValidationOutcome.accepted()
