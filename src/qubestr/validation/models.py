"""Admission decision model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValidationOutcome(BaseModel):
    """Result of one admission hook.

    ``reason`` is empty when the item is accepted.  Otherwise it is a
    short message prefixed with a category token (``auth-required:``,
    ``restricted:``, ``hyperqube:``, ...) returned verbatim to the client.
    """

    model_config = ConfigDict(frozen=True)

    reject: bool = False
    reason: str = ""

    @classmethod
    def accepted(cls) -> ValidationOutcome:
        return _ACCEPTED

    @classmethod
    def rejected(cls, reason: str) -> ValidationOutcome:
        return cls(reject=True, reason=reason)

    @property
    def prefix(self) -> str:
        """Category token of the reason (text before the first colon)."""
        head, sep, _ = self.reason.partition(":")
        return head if sep else ""


_ACCEPTED = ValidationOutcome()
