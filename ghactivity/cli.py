"""Print a summary of a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import sys

from ghactivity.activity import summarise_activity
from ghactivity.config import CliConfig
from ghactivity.github import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubEventsClient,
    GitHubResponseShapeError,
)
from ghactivity.logging import (
    configure_logging,
    format_log_message,
    get_logger,
    log_exception,
    log_warning,
)

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="github-activity", description=__doc__)
    parser.add_argument("username", help="GitHub login to summarise")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Fetch, summarise and print one user's public activity.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when configuration or the fetch fails.
        A wrong argument count exits with status 2 before any request.

    """
    args = _build_parser().parse_args(argv)
    username: str = args.username

    try:
        config = CliConfig.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    normalized_level, invalid_level = configure_logging(config.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GHACTIVITY_LOG_LEVEL %r, falling back to %s",
            config.log_level,
            normalized_level,
        )

    try:
        with GitHubEventsClient(config.github) as client:
            events = client.fetch_user_events(username)
    except (GitHubAPIError, GitHubResponseShapeError, GitHubConfigError) as exc:
        log_exception(
            logger,
            format_log_message("Fetching activity for %s failed: %s", username, exc),
            exc,
        )
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(summarise_activity(events))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
