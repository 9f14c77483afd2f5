"""Process configuration for the ``github-activity`` command.

Usage
-----
Load configuration from environment variables:

>>> import os
>>> os.environ["GHACTIVITY_LOG_LEVEL"] = "info"
>>> config = CliConfig.from_env()
>>> config.log_level
'info'

"""

from __future__ import annotations

import dataclasses as dc
import os

from ghactivity.github.client import GitHubEventsConfig
from ghactivity.logging import DEFAULT_LOG_LEVEL


@dc.dataclass(frozen=True, slots=True)
class CliConfig:
    """Settings resolved once at start-up and passed down explicitly.

    Attributes
    ----------
    log_level
        Raw femtologging level name; normalised when logging is configured.
    github
        Events API client settings.

    """

    log_level: str = DEFAULT_LOG_LEVEL
    github: GitHubEventsConfig = dc.field(default_factory=GitHubEventsConfig)

    @classmethod
    def from_env(cls) -> CliConfig:
        """Create configuration from environment variables.

        Reads ``GHACTIVITY_LOG_LEVEL`` plus the variables documented on
        :meth:`GitHubEventsConfig.from_env`.

        Raises
        ------
        ValueError
            If a GitHub client setting is malformed.

        """
        log_level = os.environ.get("GHACTIVITY_LOG_LEVEL", "").strip()
        return cls(
            log_level=log_level or DEFAULT_LOG_LEVEL,
            github=GitHubEventsConfig.from_env(),
        )
