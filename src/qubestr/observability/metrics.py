"""Prometheus metrics for admission decisions.

Exposed by the relay HTTP app on ``GET /metrics``.
"""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Info, generate_latest

from qubestr.core.enums import SUPPORTED_KINDS
from qubestr.core.relay_info import SOFTWARE_VERSION

OTHER_KIND_LABEL = "other"

# ---------------------------------------------------------------------------
# System metrics
# ---------------------------------------------------------------------------

RELAY_INFO = Info("qubestr_relay", "Relay build information")

# ---------------------------------------------------------------------------
# Admission metrics
# ---------------------------------------------------------------------------

EVENTS_TOTAL = Counter(
    "qubestr_events_total",
    "Events evaluated by the admission chain",
    ["kind", "outcome"],
)

FILTERS_TOTAL = Counter(
    "qubestr_filters_total",
    "Subscription filters evaluated by the admission chain",
    ["outcome"],
)


def set_relay_info(roster_size: int) -> None:
    RELAY_INFO.info({
        "version": SOFTWARE_VERSION,
        "roster_size": str(roster_size),
    })


def kind_label(kind: int) -> str:
    """Bound the ``kind`` label: client-chosen kinds all share ``other``."""
    if kind in SUPPORTED_KINDS:
        return str(int(kind))
    return OTHER_KIND_LABEL


def record_event(kind: int, outcome: str) -> None:
    EVENTS_TOTAL.labels(kind=kind_label(kind), outcome=outcome).inc()


def record_filter(outcome: str) -> None:
    FILTERS_TOTAL.labels(outcome=outcome).inc()


def render_latest() -> tuple[bytes, str]:
    """Current registry in the text exposition format, with its content type."""
    return generate_latest(), CONTENT_TYPE_LATEST
