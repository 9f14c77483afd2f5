"""Chronological ordering of timeline events."""

from __future__ import annotations

import operator
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.github.models import Event

_CREATED_AT = operator.attrgetter("created_at")


def sort_events(events: cabc.Iterable[Event]) -> list[Event]:
    """Return events ordered oldest first.

    ``sorted`` is stable, so events sharing a ``created_at`` keep the order
    in which GitHub listed them.
    """
    return sorted(events, key=_CREATED_AT)
