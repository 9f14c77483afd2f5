"""GitHub public events client and models."""

from __future__ import annotations

from .client import GitHubEventsClient, GitHubEventsConfig, decode_events
from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .models import Actor, Commit, Event, Payload, Repo

__all__ = [
    "Actor",
    "Commit",
    "Event",
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "GitHubResponseShapeError",
    "Payload",
    "Repo",
    "decode_events",
]
