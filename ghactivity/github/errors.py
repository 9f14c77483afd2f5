"""GitHub events API errors."""

from __future__ import annotations

# Longest response excerpt quoted back in decode errors
_BODY_PREVIEW_LIMIT = 100


class GitHubAPIError(RuntimeError):
    """Raised when the events request fails or GitHub returns an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(
        cls, status_code: int, detail: str | None = None
    ) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses."""
        message = f"GitHub events HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        return cls(message, status_code=status_code)

    @classmethod
    def transport_failure(cls, url: str, reason: object) -> GitHubAPIError:
        """Return an error for requests that never produced a response."""
        return cls(f"GitHub events request to {url} failed: {reason}")


class GitHubResponseShapeError(RuntimeError):
    """Raised when the events response body cannot be decoded."""

    @classmethod
    def invalid_body(cls, reason: object, body: bytes) -> GitHubResponseShapeError:
        """Return an error for a body that is not a JSON array of events."""
        preview = body[:_BODY_PREVIEW_LIMIT].decode("utf-8", errors="replace")
        return cls(f"GitHub events response is not valid: {reason} ({preview!r})")


class GitHubConfigError(ValueError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def invalid_value(cls, env_var: str, raw: str, expected: str) -> GitHubConfigError:
        """Return an error for an environment variable with a bad value."""
        return cls(f"{env_var} must be {expected}, got: {raw!r}")

    @classmethod
    def empty_username(cls) -> GitHubConfigError:
        """Return an error when no username is supplied."""
        return cls("GitHub username must be non-empty")
