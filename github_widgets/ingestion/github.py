"""
GitHub GraphQL Client

Fetches a user's contribution calendar and most starred repositories
through the GraphQL API.

PRINCIPLES:
===========
1. HTTP and GraphQL failures surface as UpstreamError
2. An unknown login surfaces as UpstreamNotFound
3. Days come back sorted by date
"""

from __future__ import annotations
from datetime import date
import logging
import re
from typing import Any, Dict, List, Optional

import httpx

from ..contracts.activity import (
    ActivitySeries, ContributionDay, ContributionTotals, ContributionWindow, GitHubUser,
)
from ..contracts.base import InvalidParameter, MissingRequiredField, UpstreamError, UpstreamNotFound
from ..contracts.repositories import Repository, StarredRepositories
from ..temporal.dates import window_bounds_iso

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

# 1-39 chars, alphanumeric or hyphen, no leading or trailing hyphen
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-]{0,37}[a-zA-Z0-9])?$")

USER_QUERY = """
query ($login: String!) {
  user(login: $login) {
    login
    name
  }
}
"""

CONTRIBUTIONS_QUERY = """
query ($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
      totalCommitContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      totalIssueContributions
      restrictedContributionsCount
    }
  }
}
"""

MOST_STARRED_QUERY = """
query ($login: String!, $top: Int!) {
  user(login: $login) {
    repositories(first: $top, orderBy: {field: STARGAZERS, direction: DESC}, ownerAffiliations: OWNER) {
      nodes {
        name
        description
        stargazerCount
        forkCount
        owner {
          login
        }
      }
    }
  }
}
"""


def build_days(calendar: Dict[str, Any]) -> List[ContributionDay]:
    """Flatten calendar weeks into date-sorted days."""
    days = []
    for week in calendar.get("weeks") or []:
        for day in week.get("contributionDays") or []:
            days.append(ContributionDay(
                day=date.fromisoformat(day["date"]),
                count=int(day["contributionCount"]),
            ))
    days.sort(key=lambda d: d.day)
    return days


def build_totals(collection: Dict[str, Any]) -> ContributionTotals:
    calendar = collection.get("contributionCalendar") or {}
    return ContributionTotals(
        commits=collection.get("totalCommitContributions") or 0,
        pull_requests=collection.get("totalPullRequestContributions") or 0,
        issues=collection.get("totalIssueContributions") or 0,
        reviews=collection.get("totalPullRequestReviewContributions") or 0,
        total=(calendar.get("totalContributions") or 0)
        + (collection.get("restrictedContributionsCount") or 0),
    )


def build_repositories(nodes: List[Dict[str, Any]]) -> List[Repository]:
    """Keep GitHub's order (stars descending); null counts become 0."""
    return [
        Repository(
            owner=(node.get("owner") or {}).get("login", ""),
            name=node["name"],
            description=node.get("description"),
            stars=node.get("stargazerCount") or 0,
            forks=node.get("forkCount") or 0,
        )
        for node in nodes
        if node
    ]


class GitHubClient:
    """Thin async GraphQL client. One AsyncClient per call."""

    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_GRAPHQL_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token = token
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    async def run_query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    self._api_url,
                    json={"query": query, "variables": variables},
                    headers={
                        "Authorization": f"bearer {self._token}",
                        "Accept": "application/json",
                    },
                )
            except httpx.HTTPError as e:
                logger.error("GitHub request failed: %s", e)
                raise UpstreamError(f"GitHub API request failed: {e}") from e

        if response.is_error:
            raise UpstreamError(f"GitHub API HTTP {response.status_code}: {response.text}")

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(f"GitHub API returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise UpstreamError("GitHub API returned an unexpected payload")

        if payload.get("errors"):
            raise UpstreamError(f"GitHub GraphQL error: {payload['errors']}")
        return payload.get("data") or {}

    async def fetch_user(self, login: str) -> GitHubUser:
        data = await self.run_query(USER_QUERY, {"login": login})
        user = data.get("user")
        if not user:
            raise UpstreamNotFound(f'User "{login}" not found')
        return GitHubUser(login=user["login"], name=user.get("name"))

    async def fetch_activity(self, login: str, window: ContributionWindow) -> ActivitySeries:
        user = await self.fetch_user(login)

        start_iso, end_iso = window_bounds_iso(window)
        data = await self.run_query(
            CONTRIBUTIONS_QUERY,
            {"login": login, "from": start_iso, "to": end_iso},
        )
        collection = (data.get("user") or {}).get("contributionsCollection")
        if not collection or not collection.get("contributionCalendar"):
            raise UpstreamError("No contribution calendar returned")

        days = build_days(collection["contributionCalendar"])
        logger.debug("Fetched %d contribution days for %s", len(days), login)

        return ActivitySeries(
            user=user,
            window=window,
            days=tuple(days),
            totals=build_totals(collection),
        )

    async def fetch_most_starred(self, login: str, top: int) -> StarredRepositories:
        """Owned repositories ordered by stars, at most `top`."""
        data = await self.run_query(MOST_STARRED_QUERY, {"login": login, "top": top})
        user = data.get("user")
        if not user:
            raise UpstreamNotFound(f'User "{login}" not found')

        connection = user.get("repositories")
        if not connection or connection.get("nodes") is None:
            raise UpstreamError("No repositories found")

        repositories = build_repositories(connection["nodes"])
        logger.debug("Fetched %d repositories for %s", len(repositories), login)
        return StarredRepositories(login=login, repositories=tuple(repositories[:top]))


def validate_username(login: Optional[str]) -> str:
    """Check a GitHub login and return it unchanged."""
    if not login:
        raise MissingRequiredField("Username is required", field="userName")
    if not USERNAME_PATTERN.match(login):
        raise InvalidParameter("Invalid GitHub username format", field="userName")
    return login
