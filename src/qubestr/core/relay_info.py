"""Relay information document (NIP-11)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import EventKind

SOFTWARE = "qubestr"
SOFTWARE_VERSION = "0.1.0"

RELAY_NAME = "Qubestr: A Specialized Nostr Relay for HyperQube Network"
RELAY_DESCRIPTION = (
    "Supports HyperQube's custom events "
    f"(kinds {EventKind.HYPER_SIGNAL.value} and {EventKind.QUBE_MANAGER.value}) "
    "for managing HyperQube nodes."
)


class RelayLimitation(BaseModel):
    auth_required: bool = True
    restricted_writes: bool = True


class RelayInfo(BaseModel):
    """NIP-11 document served to clients asking for ``application/nostr+json``."""

    name: str = RELAY_NAME
    description: str = RELAY_DESCRIPTION
    pubkey: str = ""
    supported_nips: list[int] = Field(default_factory=lambda: [1, 11, 33, 42])
    software: str = SOFTWARE
    version: str = SOFTWARE_VERSION
    limitation: RelayLimitation = Field(default_factory=RelayLimitation)

    def to_document(self) -> dict:
        """Serialize for the wire, omitting an unset admin pubkey."""
        doc = self.model_dump()
        if not doc["pubkey"]:
            del doc["pubkey"]
        return doc
