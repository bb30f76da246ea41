"""HTTP surface of the relay: NIP-11 document, landing page, metrics."""

from qubestr.server.app import create_relay_app

__all__ = ["create_relay_app"]
