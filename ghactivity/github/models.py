"""Typed models for GitHub public timeline events.

Only the fields used for rendering summaries are declared; ``msgspec``
ignores anything else GitHub sends.

Usage
-----
Decode a response body:

>>> import msgspec
>>> body = b'[{"type": "WatchEvent", "actor": {"login": "bob"},'
... b' "repo": {"name": "r1"}, "created_at": "2024-01-01T00:00:00Z"}]'
>>> [event] = msgspec.json.decode(body, type=list[Event])
>>> event.actor.login
'bob'

"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime

import msgspec


class Actor(msgspec.Struct, kw_only=True, frozen=True):
    """Account that performed the event."""

    login: str


class Repo(msgspec.Struct, kw_only=True, frozen=True):
    """Repository the event happened in, as ``owner/name``."""

    name: str


class Commit(msgspec.Struct, kw_only=True, frozen=True):
    """Commit carried by a push payload."""

    sha: str


class Payload(msgspec.Struct, kw_only=True, frozen=True):
    """Event-type specific details.

    Attributes
    ----------
    ref : str, optional
        Git ref touched by create/delete/push events.
    ref_type : str, optional
        Kind of ref (``branch``, ``tag`` or ``repository``).
    commits : tuple[Commit, ...], optional
        Commits included in a push; empty or ``None`` for other event types.
    action : str, optional
        Verb reported by action-bearing events (``opened``, ``closed``...).

    """

    ref: str | None = None
    ref_type: str | None = None
    commits: tuple[Commit, ...] | None = ()
    action: str | None = None


class Event(msgspec.Struct, kw_only=True, frozen=True):
    """One record from a user's public activity feed.

    ``payload`` is ``None`` when GitHub omits it or sends ``null``.
    """

    type: str
    actor: Actor
    repo: Repo
    created_at: dt.datetime
    payload: Payload | None = None


__all__ = ["Actor", "Commit", "Event", "Payload", "Repo"]
