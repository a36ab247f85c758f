import asyncio
from typing import List

import httpx

from ...outcome import Outcome, Resolved
from ...schemas.project import Contributions, RepositoryInfo
from ..external import github_resolvers

FAILTEXT = "Could not find"
OWNER_PLACEHOLDER = f"{FAILTEXT} owner name"
LANGUAGES_PLACEHOLDER = f"{FAILTEXT} languages"
CONTRIBUTORS_PLACEHOLDER = f"{FAILTEXT} contributors"


def build_repository_info(
    project: str,
    owner: Outcome[str],
    languages: Outcome[List[str]],
    contributors: Outcome[Contributions],
) -> RepositoryInfo:
    """
    Each field takes its resolved value or its own placeholder; a failed
    field never affects the others.
    """
    if isinstance(owner, Resolved):
        owner_name = owner.value
    else:
        owner_name = OWNER_PLACEHOLDER

    if isinstance(languages, Resolved):
        language_names = languages.value
    else:
        language_names = [LANGUAGES_PLACEHOLDER]

    if isinstance(contributors, Resolved):
        top, commits = contributors.value.top_committers, contributors.value.commits
    else:
        top, commits = [CONTRIBUTORS_PLACEHOLDER], 0

    return RepositoryInfo(
        project=project,
        owner=owner_name,
        top_committers=top,
        commits=commits,
        languages=language_names,
    )


async def get_repository_info(client: httpx.AsyncClient, segments: List[str]) -> RepositoryInfo:
    """
    segments is a validated [host, owner, repo] path. The three lookups
    run concurrently and are all awaited before the result is built.
    """
    _, owner, repo = segments
    owner_name, languages, contributors = await asyncio.gather(
        github_resolvers.resolve_owner(client, owner),
        github_resolvers.resolve_languages(client, owner, repo),
        github_resolvers.resolve_contributors(client, owner, repo),
    )
    return build_repository_info(repo, owner_name, languages, contributors)
