"""Filter access gate: reads require an authenticated connection."""

from __future__ import annotations

from qubestr.core.context import RequestContext
from qubestr.core.events import NostrFilter

from .models import ValidationOutcome


def require_auth(ctx: RequestContext, filter: NostrFilter) -> ValidationOutcome:
    """Reject every filter from an unauthenticated connection.

    Filter content is not inspected.
    """
    if not ctx.is_authenticated:
        return ValidationOutcome.rejected(
            "auth-required: this relay requires authentication to read events"
        )
    return ValidationOutcome.accepted()
