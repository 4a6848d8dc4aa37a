"""
Engine Orchestration Module

Coordinates the layers for each widget request while keeping their
boundaries intact.

LAYER FLOW:
===========
1. Ingestion: request text -> rows / logos / ActivitySeries / StarredRepositories
2. Layout:    rows + now -> TimelineLayout, days -> ActivityGeometry
3. Render:    layout -> SVG text
4. Storage:   SVG text cached by normalized request key

Errors are raised as WidgetError subclasses and never cached.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import os
from typing import Mapping, Optional, Tuple

from .contracts.base import ConfigurationError, ForbiddenParameter, MissingRequiredField
from .contracts.layout import TimelineLayout
from .ingestion import (
    GitHubClient, LogoResolver, parse_animation_duration, parse_top, read_experience_csv, require_csv_text,
    validate_username,
)
from .ingestion.github import GITHUB_GRAPHQL_URL
from .layout import ActivityConfig, LayoutConfig, compute_activity_geometry, compute_timeline_layout, parse_intervals
from .render import THEMES, get_theme, render_activity_svg, render_most_starred_svg, render_timeline_svg
from .storage import ResponseCache, activity_cache_key, most_starred_cache_key, timeline_cache_key
from .temporal import LogicalClock, default_window, parse_date_range

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class CacheConfig:
    max_entries: int = 100
    ttl_ms: float = 3_600_000


@dataclass
class LogoConfig:
    timeout: float = 5.0
    user_agent: str = "GitHubWidgets/1.0"
    allow_local_files: bool = False


@dataclass
class GitHubConfig:
    token: Optional[str] = None
    api_url: str = GITHUB_GRAPHQL_URL
    locked_user: Optional[str] = None
    timeout: float = 30.0


@dataclass
class WidgetConfig:
    """Unified configuration for every widget."""
    layout: LayoutConfig = None
    activity: ActivityConfig = None
    cache: CacheConfig = None
    logos: LogoConfig = None
    github: GitHubConfig = None
    timeline_theme: str = "timeline"
    activity_theme: str = "radical"
    most_starred_theme: str = "radical"

    def __post_init__(self):
        self.layout = self.layout or LayoutConfig()
        self.activity = self.activity or ActivityConfig()
        self.cache = self.cache or CacheConfig()
        self.logos = self.logos or LogoConfig()
        self.github = self.github or GitHubConfig()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> WidgetConfig:
        """Build from environment variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        return cls(
            cache=CacheConfig(
                max_entries=int(env.get("CACHE_MAX_SIZE", "100")),
                ttl_ms=float(env.get("CACHE_TTL_MS", "3600000")),
            ),
            logos=LogoConfig(
                timeout=float(env.get("LOGO_FETCH_TIMEOUT", "5.0")),
                allow_local_files=env.get("LOGO_ALLOW_LOCAL_FILES", "").lower() in ("1", "true", "yes"),
            ),
            github=GitHubConfig(
                token=env.get("GITHUB_TOKEN") or None,
                api_url=env.get("GITHUB_API_URL") or GITHUB_GRAPHQL_URL,
                locked_user=env.get("LOCK_GITHUB_USER") or None,
            ),
        )


# =============================================================================
# SERVICE
# =============================================================================

class WidgetService:
    """
    Renders widgets on demand.

    One instance serves every request. The clock, GitHub client, logo
    resolver and cache are injectable; each defaults from the config.
    """

    def __init__(
        self,
        config: Optional[WidgetConfig] = None,
        clock: Optional[LogicalClock] = None,
        github_client: Optional[GitHubClient] = None,
        logo_resolver: Optional[LogoResolver] = None,
        cache: Optional[ResponseCache[str]] = None,
    ):
        self._config = config or WidgetConfig()
        self._clock = clock or LogicalClock.live()
        self._github_client = github_client
        self._logos = logo_resolver or LogoResolver(
            timeout=self._config.logos.timeout,
            user_agent=self._config.logos.user_agent,
            allow_local_files=self._config.logos.allow_local_files,
        )
        self._cache = cache or ResponseCache(
            max_entries=self._config.cache.max_entries,
            ttl_ms=self._config.cache.ttl_ms,
        )

    @property
    def config(self) -> WidgetConfig:
        return self._config

    @property
    def cache(self) -> ResponseCache[str]:
        return self._cache

    # =========================================================================
    # EXPERIENCE TIMELINE
    # =========================================================================

    async def timeline_layout(self, csv_text: Optional[str], include_dates: bool = True) -> TimelineLayout:
        """Validate, parse, resolve logos and lay out. Nothing is cached."""
        rows = read_experience_csv(csv_text)
        intervals = parse_intervals(rows)
        config = replace(
            self._config.layout,
            include_start_dates=include_dates,
            include_end_dates=include_dates,
        )
        logos = await self._logos.resolve_all(intervals) if config.embed_logos else {}
        return compute_timeline_layout(intervals, self._clock.now(), config, logos)

    async def render_experience_timeline(
        self,
        csv_text: Optional[str],
        include_dates: bool = True,
    ) -> Tuple[str, bool]:
        """
        Render the experience timeline.

        Returns:
            (svg, cache_hit)
        """
        key = timeline_cache_key(require_csv_text(csv_text), include_dates)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, True

        layout = await self.timeline_layout(csv_text, include_dates)
        svg = render_timeline_svg(layout, get_theme(self._config.timeline_theme))
        self._cache.set(key, svg)
        return svg, False

    # =========================================================================
    # CONTRIBUTIONS ACTIVITY
    # =========================================================================

    def resolve_login(self, user_name: Optional[str]) -> str:
        """Apply the locked-user rule, then validate the login."""
        locked = self._config.github.locked_user
        if locked:
            if user_name:
                raise ForbiddenParameter(
                    "Username parameter is not allowed when LOCK_GITHUB_USER is configured"
                )
            logger.info("Using locked GitHub user: %s", locked)
            return validate_username(locked)

        if not user_name:
            raise MissingRequiredField("userName query parameter is required", field="userName")
        return validate_username(user_name)

    def _client(self) -> GitHubClient:
        if self._github_client is not None:
            return self._github_client
        token = self._config.github.token
        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable is not configured")
        self._github_client = GitHubClient(
            token,
            api_url=self._config.github.api_url,
            timeout=self._config.github.timeout,
        )
        return self._github_client

    async def render_activity(
        self,
        user_name: Optional[str],
        range_text: Optional[str] = None,
    ) -> Tuple[str, bool]:
        """
        Render the contributions chart.

        Returns:
            (svg, cache_hit)
        """
        login = self.resolve_login(user_name)
        window = parse_date_range(range_text) if range_text else None

        key = activity_cache_key(
            login,
            window.start_text if window else None,
            window.end_text if window else None,
        )
        cached = self._cache.get(key)
        if cached is not None:
            return cached, True

        client = self._client()
        if window is None:
            window = default_window(self._clock.now())
        series = await client.fetch_activity(login, window)

        geometry = compute_activity_geometry(series.days, self._config.activity) if series.days else None
        svg = render_activity_svg(series, geometry, get_theme(self._config.activity_theme))
        self._cache.set(key, svg)
        return svg, False

    # =========================================================================
    # MOST STARRED REPOSITORIES
    # =========================================================================

    async def render_most_starred(
        self,
        user_name: Optional[str],
        top: Optional[str] = None,
        title: Optional[str] = None,
        theme: Optional[str] = None,
        animation_duration: Optional[str] = None,
    ) -> Tuple[str, bool]:
        """
        Render the most starred repositories cards.

        `top` and `animation_duration` arrive as query text and are
        validated here. Unknown theme names fall back to the default.

        Returns:
            (svg, cache_hit)
        """
        login = self.resolve_login(user_name)
        count = parse_top(top)
        duration = parse_animation_duration(animation_duration)
        theme_name = theme if theme in THEMES else self._config.most_starred_theme

        key = most_starred_cache_key(login, count, title, theme_name, duration)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, True

        starred = await self._client().fetch_most_starred(login, count)
        svg = render_most_starred_svg(starred, title, get_theme(theme_name), duration)
        self._cache.set(key, svg)
        return svg, False
