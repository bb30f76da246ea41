"""Read-only tag lookups over a ``NostrEvent``.

Matching is exact and case-sensitive on element 0 (name) and element 1
(value).  Tags that are too short or are not sequences are skipped, and
absence is reported as ``False`` / ``""`` rather than raised.
"""

from __future__ import annotations

from qubestr.core.events import NostrEvent


def _is_tag(tag: object) -> bool:
    return isinstance(tag, (tuple, list))


def has_tag(event: NostrEvent, name: str) -> bool:
    """True if any tag is named *name*."""
    return any(_is_tag(tag) and len(tag) > 0 and tag[0] == name for tag in event.tags)


def has_tag_with_value(event: NostrEvent, name: str, value: str) -> bool:
    """True if any tag is named *name* and its primary value equals *value*."""
    return any(
        _is_tag(tag) and len(tag) > 1 and tag[0] == name and tag[1] == value
        for tag in event.tags
    )


def get_tag_value(event: NostrEvent, name: str) -> str:
    """Primary value of the first *name* tag carrying one, else ``""``."""
    for tag in event.tags:
        if _is_tag(tag) and len(tag) > 1 and tag[0] == name:
            value = tag[1]
            return value if isinstance(value, str) else ""
    return ""
