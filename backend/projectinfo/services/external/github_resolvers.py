import logging
from typing import List, Tuple

import httpx
from pydantic import ValidationError

from ...outcome import Failed, FailureReason, Outcome, Resolved
from ...schemas.project import (
    ContributorRecord,
    Contributions,
    ErrorEnvelope,
    UserIdentity,
    contributor_list,
    parse_language_payload,
)
from .github_api import (
    CONTRIBUTORS_ENDPOINT,
    LANGUAGES_ENDPOINT,
    USER_ENDPOINT,
    endpoint,
    fetch_json,
)

logger = logging.getLogger(__name__)


def _failed(field: str, url: str, failure: Failed) -> Failed:
    logger.warning("Could not resolve %s from %s (%s)", field, url, failure)
    return failure


def _invalid(e: ValidationError) -> Failed:
    return Failed(FailureReason.MALFORMED_JSON, f"{e.error_count()} validation error(s)")


async def resolve_owner(client: httpx.AsyncClient, owner: str) -> Outcome[str]:
    """
    Display name of a GitHub account: the organization name for
    organizations, the login handle for everyone else.
    """
    url = endpoint(USER_ENDPOINT, owner=owner)
    result = await fetch_json(client, url)
    if isinstance(result, Failed):
        return _failed("owner", url, result)

    try:
        identity = UserIdentity.model_validate(result.value)
    except ValidationError as e:
        return _failed("owner", url, _invalid(e))
    if identity.is_not_found:
        return _failed("owner", url, Failed(FailureReason.NOT_FOUND, identity.message or ""))

    # An organization without a display name resolves to "", not to its login.
    if identity.is_organization:
        return Resolved(identity.name)
    return Resolved(identity.login)


async def resolve_languages(client: httpx.AsyncClient, owner: str, repo: str) -> Outcome[List[str]]:
    url = endpoint(LANGUAGES_ENDPOINT, owner=owner, repo=repo)
    result = await fetch_json(client, url)
    if isinstance(result, Failed):
        return _failed("languages", url, result)

    try:
        payload = parse_language_payload(result.value)
    except ValidationError as e:
        return _failed("languages", url, _invalid(e))
    if isinstance(payload, ErrorEnvelope):
        return _failed("languages", url, Failed(FailureReason.NOT_FOUND, payload.message))
    if not payload:
        return _failed("languages", url, Failed(FailureReason.NO_DATA, "empty language map"))

    return Resolved(list(payload))


def top_committers(records: List[ContributorRecord]) -> Tuple[List[str], int]:
    """
    Logins tied at the highest contribution count, and the sum of all
    contributions. Records are taken in the order given; no sorting is
    assumed.
    """
    total = 0
    top = 0
    winners: List[str] = []
    for record in records:
        total += record.contributions
        if record.contributions == top:
            winners.append(record.login)
        elif record.contributions > top:
            winners = [record.login]
            top = record.contributions
    return winners, total


async def resolve_contributors(client: httpx.AsyncClient, owner: str, repo: str) -> Outcome[Contributions]:
    url = endpoint(CONTRIBUTORS_ENDPOINT, owner=owner, repo=repo)
    result = await fetch_json(client, url)
    if isinstance(result, Failed):
        return _failed("contributors", url, result)

    # An error envelope is an object, not a list, so it fails here too.
    try:
        records = contributor_list.validate_python(result.value)
    except ValidationError as e:
        return _failed("contributors", url, _invalid(e))

    winners, total = top_committers(records)
    return Resolved(Contributions(top_committers=winners, commits=total))
