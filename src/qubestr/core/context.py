"""RequestContext: per-connection state handed to every admission hook.

The host relay builds one context per request from its session state.
Hooks read it and never mutate it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RequestContext(BaseModel):
    """Identity bound to the current connection.

    ``authed_pubkey`` is set once the NIP-42 challenge has succeeded;
    an empty string means the connection is unauthenticated.
    """

    model_config = ConfigDict(frozen=True)

    authed_pubkey: str = ""
    remote_addr: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.authed_pubkey != ""
