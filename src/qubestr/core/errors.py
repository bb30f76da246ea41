"""Custom exception hierarchy for the relay.

Admission decisions never raise: a rejected event or filter is a
``ValidationOutcome``, not an exception.  These errors cover the
surrounding process (configuration, offline tooling).
"""


class QubestrError(Exception):
    """Base exception for all relay errors."""


# --- Configuration ---
class ConfigError(QubestrError):
    """Invalid or missing configuration."""


# --- Events ---
class EventParseError(QubestrError):
    """Raw payload could not be decoded into an event or filter."""
