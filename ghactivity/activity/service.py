"""Timeline summary pipeline: order, group, render."""

from __future__ import annotations

import typing as typ

from .grouping import group_events
from .ordering import sort_events
from .rendering import render_groups

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.github.models import Event


def summarise_activity(events: cabc.Iterable[Event]) -> str:
    """Return the rendered summary for events in any order.

    Examples
    --------
    >>> summarise_activity([])
    'Specified user has no public activity'

    """
    return render_groups(group_events(sort_events(events)))
