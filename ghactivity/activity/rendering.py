"""Plain-text rendering of grouped timeline events.

Each event type maps to a :class:`RenderRule`. Aggregate rules collapse a
whole group into one line built from its first event; per-event rules emit a
line for every event in the group. Groups whose type has no rule produce no
output.

Usage
-----
>>> print(render_groups(group_events(sort_events(events))))
- alice pushed 3 commits (octo/demo)
- alice starred octo/other

"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing as typ

from ghactivity.github.models import Payload

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.github.models import Event

    from .grouping import EventGroup

NO_ACTIVITY_MESSAGE = "Specified user has no public activity"

_EMPTY_PAYLOAD = Payload()


class RenderMode(enum.StrEnum):
    """How a rule turns a group into lines."""

    AGGREGATE = "aggregate"
    PER_EVENT = "per_event"


def _template_fields(event: Event, *, count: int) -> dict[str, object]:
    payload = event.payload or _EMPTY_PAYLOAD
    return {
        "login": event.actor.login,
        "repo": event.repo.name,
        "count": count,
        "commits": len(payload.commits or ()),
        "ref_type": payload.ref_type or "",
        "action": payload.action or "",
    }


@dataclasses.dataclass(frozen=True, slots=True)
class RenderRule:
    """Line template and rendering mode for one event type.

    Attributes
    ----------
    mode
        ``AGGREGATE`` renders one line per group, ``PER_EVENT`` one line per
        event.
    template
        ``str.format`` template. Available fields are ``login``, ``repo``,
        ``count`` (group size), ``commits`` (commits in the event's push
        payload), ``ref_type`` and ``action``.

    """

    mode: RenderMode
    template: str

    def render(self, group: EventGroup) -> list[str]:
        """Return the lines this rule produces for ``group``."""
        if self.mode is RenderMode.AGGREGATE:
            fields = _template_fields(group.first, count=len(group))
            return [self.template.format_map(fields)]
        return [
            self.template.format_map(_template_fields(event, count=1))
            for event in group
        ]


def _aggregate(template: str) -> RenderRule:
    return RenderRule(RenderMode.AGGREGATE, template)


def _per_event(template: str) -> RenderRule:
    return RenderRule(RenderMode.PER_EVENT, template)


# PushEvent reports the first push's commit count, not a sum over the group.
RENDER_RULES: cabc.Mapping[str, RenderRule] = types.MappingProxyType({
    "CommitCommentEvent": _aggregate(
        "- {login} commented commit {count} times ({repo})"
    ),
    "CreateEvent": _per_event("- {login} created a {ref_type} ({repo})"),
    "DeleteEvent": _per_event("- {login} deleted a {ref_type} ({repo})"),
    "ForkEvent": _per_event("- {login} forked {repo}"),
    "GollumEvent": _aggregate("- {login} updated wiki {count} times ({repo})"),
    "IssueCommentEvent": _per_event(
        "- {login} {action} comment on some issue({repo})"
    ),
    "IssueEvent": _per_event("- {login} {action} an issue ({repo})"),
    "MemberEvent": _per_event("- {login} {action} collaboration ({repo})"),
    "PublicEvent": _per_event("- {login} {action} {repo}"),
    "PullRequestEvent": _per_event("- {login} {action} pull request ({repo})"),
    "PullRequestReviewEvent": _per_event(
        "- {login} {action} pull request review ({repo})"
    ),
    "PullRequestReviewCommentEvent": _per_event(
        "- {login} {action} pull request review comment ({repo})"
    ),
    "PullRequestReviewThreadEvent": _per_event(
        "- {login} {action} comment thread on pull request ({repo})"
    ),
    "PushEvent": _aggregate("- {login} pushed {commits} commits ({repo})"),
    "ReleaseEvent": _per_event("- {login} {action} {repo}"),
    "SponsorshipEvent": _per_event(
        "- {login} {action} sponsorship listing on {repo}"
    ),
    "WatchEvent": _per_event("- {login} starred {repo}"),
})


def render_rule_for(event_type: str) -> RenderRule | None:
    """Return the rule for ``event_type``, or ``None`` when it is not rendered."""
    return RENDER_RULES.get(event_type)


def render_group(group: EventGroup) -> list[str]:
    """Return the summary lines for one group; unknown types yield none."""
    rule = render_rule_for(group.event_type)
    if rule is None:
        return []
    return rule.render(group)


def render_groups(groups: cabc.Sequence[EventGroup]) -> str:
    """Render every group, in order, as newline-separated summary lines.

    Parameters
    ----------
    groups
        Output of ``group_events``.

    Returns
    -------
    str
        Summary lines joined with ``\\n`` and without a trailing newline, or
        :data:`NO_ACTIVITY_MESSAGE` when there are no groups.

    """
    if not groups:
        return NO_ACTIVITY_MESSAGE
    lines: list[str] = []
    for group in groups:
        lines.extend(render_group(group))
    return "\n".join(lines)


__all__ = [
    "NO_ACTIVITY_MESSAGE",
    "RENDER_RULES",
    "RenderMode",
    "RenderRule",
    "render_group",
    "render_groups",
    "render_rule_for",
]
