"""Enumerations used across the relay."""

from enum import Enum, IntEnum


class EventKind(IntEnum):
    """Event kinds accepted by this relay.

    The numeric values are the single source for every kind check,
    including the kind prefix inside QubeManager ``a`` references.
    """

    HYPER_SIGNAL = 33321
    QUBE_MANAGER = 3333


class SignalAction(str, Enum):
    UPGRADE = "upgrade"
    REBOOT = "reboot"


class ManagerStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class AdmissionOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# Discriminator value carried in the ``d`` tag of HyperSignal events and
# the third segment of QubeManager ``a`` references.
HYPERQUBE_DOMAIN = "hyperqube"

SUPPORTED_KINDS = frozenset(int(k) for k in EventKind)
