"""
Repository Contracts

A user's owned repositories, ranked by stars, as fetched from GitHub.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Repository:
    owner: str
    name: str
    description: Optional[str]
    stars: int
    forks: int

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class StarredRepositories:
    """Top repositories of one user, most starred first."""
    login: str
    repositories: Tuple[Repository, ...]

    @property
    def is_empty(self) -> bool:
        return not self.repositories
