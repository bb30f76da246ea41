"""AuthorizationRoster: public keys allowed to publish HyperSignal events."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationRoster(BaseModel):
    """Immutable set of authorized public keys.

    Built once at startup and shared read-only by every connection.
    """

    model_config = ConfigDict(frozen=True)

    pubkeys: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def from_csv(cls, raw: str) -> AuthorizationRoster:
        """Parse a comma-separated key list.

        Entries are compared verbatim (no whitespace trimming); empty
        entries are dropped, so ``""`` yields a roster that authorizes
        nobody.
        """
        return cls.from_keys(raw.split(","))

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> AuthorizationRoster:
        return cls(pubkeys=frozenset(k for k in keys if k))

    def __contains__(self, pubkey: object) -> bool:
        return pubkey in self.pubkeys

    def __len__(self) -> int:
        return len(self.pubkeys)
