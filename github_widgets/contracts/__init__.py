"""
Contracts shared by every layer. Import types from here, never from
another layer's implementation.
"""

from .base import (
    ErrorCode, WidgetError, MissingRequiredField, InvalidDateFormat,
    InvalidParameter, ForbiddenParameter, UpstreamNotFound, UpstreamError,
    ConfigurationError, Point, Margin,
)
from .layout import (
    Interval, LaneAssignment, TimeScale, VerticalAnchor, LabelPlacement,
    StageTiming, ItemTiming, AnimationPlan, StrokePath, LabelBlock,
    ItemLayout, TimelineLayout,
)
from .activity import (
    GitHubUser, ContributionDay, ContributionTotals, ContributionWindow,
    ActivitySeries, AxisLabel, TickMark, ActivityGeometry,
)
from .repositories import Repository, StarredRepositories

__all__ = [
    "ErrorCode", "WidgetError", "MissingRequiredField", "InvalidDateFormat",
    "InvalidParameter", "ForbiddenParameter", "UpstreamNotFound",
    "UpstreamError", "ConfigurationError", "Point", "Margin",
    "Interval", "LaneAssignment", "TimeScale", "VerticalAnchor",
    "LabelPlacement", "StageTiming", "ItemTiming", "AnimationPlan",
    "StrokePath", "LabelBlock", "ItemLayout", "TimelineLayout",
    "GitHubUser", "ContributionDay", "ContributionTotals",
    "ContributionWindow", "ActivitySeries", "AxisLabel", "TickMark",
    "ActivityGeometry", "Repository", "StarredRepositories",
]
