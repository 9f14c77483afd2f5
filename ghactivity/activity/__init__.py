"""Ordering, grouping and rendering of public timeline events."""

from __future__ import annotations

from .grouping import EventGroup, group_events
from .ordering import sort_events
from .rendering import (
    NO_ACTIVITY_MESSAGE,
    RENDER_RULES,
    RenderMode,
    RenderRule,
    render_group,
    render_groups,
    render_rule_for,
)
from .service import summarise_activity

__all__ = [
    "NO_ACTIVITY_MESSAGE",
    "RENDER_RULES",
    "EventGroup",
    "RenderMode",
    "RenderRule",
    "group_events",
    "render_group",
    "render_groups",
    "render_rule_for",
    "sort_events",
    "summarise_activity",
]
