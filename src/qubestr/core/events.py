"""Wire models for Nostr events and subscription filters (NIP-01).

Both models are immutable once parsed.  Tags are accepted loosely:
a tag with too few elements or non-string elements still parses, and
the tag helpers in ``validation.tags`` treat it as "not found".
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
)

from .errors import EventParseError


class NostrEvent(BaseModel):
    """A signed event as received from a publisher.

    Signature verification happens in the host relay before any
    admission hook runs, so ``sig`` is carried but never checked here.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    pubkey: str = ""
    created_at: int = 0
    kind: StrictInt
    tags: tuple[Any, ...] = ()
    content: str = ""
    sig: str = ""

    @field_validator("tags", mode="before")
    @classmethod
    def _freeze_tags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(
                tuple(tag) if isinstance(tag, list) else tag for tag in value
            )
        return value

    @classmethod
    def from_json(cls, raw: str | bytes) -> NostrEvent:
        """Decode a JSON event object.

        Raises:
            EventParseError: If the payload is not a valid event object.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise EventParseError(f"invalid event payload: {exc}") from exc


class NostrFilter(BaseModel):
    """A subscription filter.

    Tag queries (``#e``, ``#p``, ``#d``...) are kept as extra fields.
    Admission never inspects filter content; the model exists so the
    host can hand over a typed object.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    ids: list[str] | None = None
    authors: list[str] | None = None
    kinds: list[int] | None = None
    since: int | None = None
    until: int | None = None
    limit: int | None = Field(default=None, ge=0)

    @property
    def tag_queries(self) -> dict[str, list[str]]:
        """Return the ``#<name>`` tag constraints keyed by tag name."""
        extra = self.model_extra or {}
        return {k[1:]: v for k, v in extra.items() if k.startswith("#")}

    @classmethod
    def from_json(cls, raw: str | bytes) -> NostrFilter:
        """Decode a JSON filter object.

        Raises:
            EventParseError: If the payload is not a valid filter object.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise EventParseError(f"invalid filter payload: {exc}") from exc
