"""Rejection helper shared by the kind validators."""

from __future__ import annotations

import logging

from qubestr.core.events import NostrEvent

from .models import ValidationOutcome

logger = logging.getLogger(__name__)


def reject_event(event: NostrEvent, reason: str) -> ValidationOutcome:
    """Log the rejection and return the matching outcome."""
    logger.info(
        "Event rejected. ID: %s, Kind: %d, Pubkey: %s, Reason: %s",
        event.id,
        event.kind,
        event.pubkey,
        reason,
    )
    return ValidationOutcome.rejected(reason)
