"""
Service Fixtures

A WidgetService wired to a pinned clock and mock transports, so no test
touches the network or the system clock.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
import json
from typing import Callable, Optional

import httpx

from github_widgets.engine import GitHubConfig, WidgetConfig, WidgetService
from github_widgets.ingestion import GitHubClient, LogoResolver
from github_widgets.temporal import LogicalClock

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

EXPERIENCE_CSV = "\n".join([
    "company,start,end,title,logo,color",
    "Acme,2020-01,2021-06,Engineer,https://logos.example/acme.png,#fe428e",
    "Beta,2020-06,2021-01,Consultant,,",
    "Gamma,2021-07,,Staff Engineer,,",
])


def repository_node(name: str, stars: int, forks: int = 0, description=None, owner: str = "octocat") -> dict:
    return {
        "name": name,
        "description": description,
        "stargazerCount": stars,
        "forkCount": forks,
        "owner": {"login": owner},
    }


REPOSITORY_NODES = [
    repository_node("hello-world", 2500, 1800, "My first repository"),
    repository_node("spoon-knife", 1200, 140000, "This repo is for demonstration purposes only."),
    repository_node("linguist", 310, 42),
    repository_node("octo-app", 12, 1, "A tiny <app> & friends"),
]


def calendar_for(days: int, first: date = date(2024, 1, 1)) -> dict:
    return {
        "totalContributions": days,
        "weeks": [{
            "contributionDays": [
                {"date": (first + timedelta(days=i)).isoformat(), "contributionCount": i % 5}
                for i in range(days)
            ],
        }],
    }


class FakeGitHub:
    """Serves GraphQL answers and records every request body."""

    def __init__(self, users=None, days: int = 30, repos=None):
        self.users = users if users is not None else {"octocat": "The Octocat"}
        self.days = days
        self.repos = repos if repos is not None else REPOSITORY_NODES
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        login = body["variables"]["login"]
        if login not in self.users:
            return httpx.Response(200, json={"data": {"user": None}})
        if "contributionsCollection" in body["query"]:
            collection = {
                "contributionCalendar": calendar_for(self.days),
                "totalCommitContributions": 20,
                "totalPullRequestContributions": 4,
                "totalPullRequestReviewContributions": 2,
                "totalIssueContributions": 1,
                "restrictedContributionsCount": 0,
            }
            return httpx.Response(200, json={"data": {"user": {"contributionsCollection": collection}}})
        if "repositories" in body["query"]:
            nodes = self.repos[:body["variables"]["top"]]
            return httpx.Response(200, json={"data": {"user": {"repositories": {"nodes": nodes}}}})
        return httpx.Response(200, json={"data": {"user": {"login": login, "name": self.users[login]}}})


def logo_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png"})


def build_service(
    github: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    locked_user: Optional[str] = None,
    token: Optional[str] = "token-123",
    with_client: bool = True,
) -> WidgetService:
    config = WidgetConfig(github=GitHubConfig(token=token, locked_user=locked_user))
    client = None
    if with_client:
        client = GitHubClient("token-123", transport=httpx.MockTransport(github or FakeGitHub()))
    return WidgetService(
        config,
        clock=LogicalClock.fixed(NOW),
        github_client=client,
        logo_resolver=LogoResolver(transport=httpx.MockTransport(logo_handler)),
    )
