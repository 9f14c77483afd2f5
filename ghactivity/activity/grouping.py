"""Grouping of consecutive events that share a type and an actor.

A group is a maximal run of adjacent events with the same ``type`` and
``actor.login``. Groups partition the input: joining them in order gives the
original sequence back.

Usage
-----
>>> groups = group_events(sort_events(events))
>>> [(group.event_type, len(group)) for group in groups]
[('PushEvent', 2), ('WatchEvent', 1)]

"""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.github.models import Event


def _group_key(event: Event) -> tuple[str, str]:
    return (event.type, event.actor.login)


@dataclasses.dataclass(frozen=True, slots=True)
class EventGroup:
    """Non-empty run of consecutive events with a shared type and actor."""

    events: tuple[Event, ...]

    def __post_init__(self) -> None:
        """Reject empty runs and runs mixing types or actors."""
        if not self.events:
            msg = "EventGroup requires at least one event"
            raise ValueError(msg)
        key = _group_key(self.events[0])
        if any(_group_key(event) != key for event in self.events[1:]):
            msg = f"EventGroup events must all share type/actor {key!r}"
            raise ValueError(msg)

    @property
    def first(self) -> Event:
        """Return the earliest event in the run."""
        return self.events[0]

    @property
    def event_type(self) -> str:
        """Return the type tag shared by every event in the run."""
        return self.first.type

    @property
    def actor_login(self) -> str:
        """Return the login shared by every event in the run."""
        return self.first.actor.login

    def __len__(self) -> int:
        """Return the number of events in the run."""
        return len(self.events)

    def __iter__(self) -> cabc.Iterator[Event]:
        """Iterate over the events in order."""
        return iter(self.events)


def group_events(events: cabc.Iterable[Event]) -> list[EventGroup]:
    """Partition ordered events into maximal same-type, same-actor runs.

    Parameters
    ----------
    events
        Events in chronological order, typically from ``sort_events``.

    Returns
    -------
    list[EventGroup]
        Runs in input order. Empty input yields an empty list, which the
        renderer reports as "no public activity".

    """
    groups: list[EventGroup] = []
    current: list[Event] = []
    for event in events:
        if current and _group_key(event) != _group_key(current[-1]):
            groups.append(EventGroup(tuple(current)))
            current = []
        current.append(event)
    if current:
        groups.append(EventGroup(tuple(current)))
    return groups
