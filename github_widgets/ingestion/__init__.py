"""
Ingestion Layer

RESPONSIBILITY: Bring external data into memory, validated
ALLOWED INPUTS: Request text, logo references, GitHub logins, numeric query values
OUTPUTS: Row mappings, logo data URIs, ActivitySeries, StarredRepositories

WHAT THIS LAYER MUST NOT DO:
============================
- Compute layout or geometry
- Serialize SVG
- Let a logo failure fail a render
"""

from .csv_source import read_experience_csv, require_csv_text, EXPERIENCE_FIELDS
from .logos import LogoResolver, to_data_uri
from .github import (
    GitHubClient, build_days, build_totals, build_repositories, validate_username, GITHUB_GRAPHQL_URL,
)
from .params import parse_top, parse_animation_duration

__all__ = [
    'read_experience_csv',
    'require_csv_text',
    'EXPERIENCE_FIELDS',
    'LogoResolver',
    'to_data_uri',
    'GitHubClient',
    'build_days',
    'build_totals',
    'build_repositories',
    'validate_username',
    'GITHUB_GRAPHQL_URL',
    'parse_top',
    'parse_animation_duration',
]
