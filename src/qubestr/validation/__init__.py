"""Admission policy for the HyperQube relay.

Public API
----------
Models:
    ValidationOutcome

Hooks:
    IEventHook, IFilterHook,
    validate_kind, HyperSignalValidator, validate_qube_manager_event,
    require_auth

Pipeline:
    RelayPolicy, build_relay_policy

Tag helpers:
    has_tag, has_tag_with_value, get_tag_value
"""

from qubestr.validation.filter_gate import require_auth
from qubestr.validation.hyper_signal import HyperSignalValidator
from qubestr.validation.kind_gate import validate_kind
from qubestr.validation.models import ValidationOutcome
from qubestr.validation.pipeline import RelayPolicy, build_relay_policy
from qubestr.validation.protocol import IEventHook, IFilterHook
from qubestr.validation.qube_manager import (
    is_signal_reference,
    validate_qube_manager_event,
)
from qubestr.validation.tags import get_tag_value, has_tag, has_tag_with_value

__all__ = [
    # Models
    "ValidationOutcome",
    # Protocol
    "IEventHook",
    "IFilterHook",
    # Hooks
    "HyperSignalValidator",
    "require_auth",
    "validate_kind",
    "validate_qube_manager_event",
    # Pipeline
    "RelayPolicy",
    "build_relay_policy",
    # Helpers
    "get_tag_value",
    "has_tag",
    "has_tag_with_value",
    "is_signal_reference",
]
