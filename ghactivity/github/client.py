"""GitHub REST client for a user's public events feed."""

from __future__ import annotations

import dataclasses
import os
import typing as typ

import httpx
import msgspec

from ghactivity.logging import get_logger, log_info

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .models import Event

if typ.TYPE_CHECKING:
    import types

logger = get_logger(__name__)

_DEFAULT_API_URL = "https://api.github.com"
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_USER_AGENT = "github-activity/0.1"


class _ErrorBody(msgspec.Struct):
    """Error document GitHub returns alongside non-2xx responses."""

    message: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for the GitHub events API client."""

    api_url: str = _DEFAULT_API_URL
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    @staticmethod
    def _parse_positive_float(env_var: str, default: float) -> float:
        """Read a positive float env var, falling back to a default."""
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError as exc:
            raise GitHubConfigError.invalid_value(env_var, raw, "a number") from exc
        if value <= 0:
            raise GitHubConfigError.invalid_value(env_var, raw, "positive")
        return value

    @classmethod
    def from_env(cls) -> GitHubEventsConfig:
        """Build configuration from environment variables.

        Reads ``GHACTIVITY_API_URL``, ``GHACTIVITY_TIMEOUT_S`` and
        ``GHACTIVITY_USER_AGENT``; unset or blank variables keep their
        defaults.

        Raises
        ------
        GitHubConfigError
            If ``GHACTIVITY_TIMEOUT_S`` is not a positive number.

        """
        api_url = os.environ.get("GHACTIVITY_API_URL", "").strip()
        user_agent = os.environ.get("GHACTIVITY_USER_AGENT", "").strip()
        return cls(
            api_url=(api_url or _DEFAULT_API_URL).rstrip("/"),
            timeout_s=cls._parse_positive_float(
                "GHACTIVITY_TIMEOUT_S", _DEFAULT_TIMEOUT_S
            ),
            user_agent=user_agent or _DEFAULT_USER_AGENT,
        )

    def events_url(self, username: str) -> str:
        """Return the public events URL for ``username``."""
        return f"{self.api_url}/users/{username}/events"


def _error_detail(response: httpx.Response) -> str | None:
    """Extract GitHub's error message from a failed response, if any."""
    try:
        return msgspec.json.decode(response.content, type=_ErrorBody).message
    except msgspec.DecodeError:
        return response.reason_phrase or None


def decode_events(body: bytes) -> list[Event]:
    """Decode a JSON array of events; a ``null`` body decodes to no events.

    Raises
    ------
    GitHubResponseShapeError
        If the body is not valid JSON or does not match the event shape.

    """
    try:
        events = msgspec.json.decode(body, type=list[Event] | None)
    except msgspec.DecodeError as exc:
        raise GitHubResponseShapeError.invalid_body(exc, body) from exc
    return events or []


class GitHubEventsClient:
    """Synchronous client that fetches one page of public events."""

    def __init__(
        self,
        config: GitHubEventsConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        self._config = config or GitHubEventsConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self._config.timeout_s,
            headers={
                "User-Agent": self._config.user_agent,
                "Accept": "application/vnd.github+json",
            },
        )

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubEventsClient:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        self.close()

    def fetch_user_events(self, username: str) -> list[Event]:
        """Return the user's public events in the order GitHub lists them.

        Parameters
        ----------
        username
            GitHub login whose public timeline is requested.

        Returns
        -------
        list[Event]
            Decoded events; not guaranteed to be chronological.

        Raises
        ------
        GitHubConfigError
            If ``username`` is blank.
        GitHubAPIError
            If the request cannot be sent or GitHub answers with a non-2xx
            status.
        GitHubResponseShapeError
            If the response body cannot be decoded.

        """
        if not username.strip():
            raise GitHubConfigError.empty_username()

        url = self._config.events_url(username)
        log_info(logger, "Fetching public events for %s from %s", username, url)
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise GitHubAPIError.transport_failure(url, exc) from exc

        if not response.is_success:
            raise GitHubAPIError.http_error(
                response.status_code, _error_detail(response)
            )

        events = decode_events(response.content)
        log_info(logger, "Fetched %d public events for %s", len(events), username)
        return events
