import logging
from typing import Any, Dict
from urllib.parse import quote

import httpx

from ...config import Settings
from ...outcome import Failed, FailureReason, Outcome, Resolved

logger = logging.getLogger(__name__)

USER_ENDPOINT = "/users/{owner}"
LANGUAGES_ENDPOINT = "/repos/{owner}/{repo}/languages"
CONTRIBUTORS_ENDPOINT = "/repos/{owner}/{repo}/contributors"


def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": "projectinfo-service",
    }


def create_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.GITHUB_API_URL,
        headers=_headers(),
        timeout=settings.UPSTREAM_TIMEOUT,
    )


def _quote_segment(value: str) -> str:
    quoted = quote(value, safe="")
    # "." and ".." would be removed as dot segments when joined to base_url
    if quoted and not quoted.strip("."):
        return quoted.replace(".", "%2E")
    return quoted


def endpoint(template: str, **segments: str) -> str:
    """
    Fill an endpoint template, escaping each path segment so user input
    cannot add or remove path components or add a query string.
    """
    return template.format(**{k: _quote_segment(v) for k, v in segments.items()})


async def fetch_json(client: httpx.AsyncClient, url: str) -> Outcome[Any]:
    """
    Single GET against the upstream API. The status code is not inspected:
    GitHub reports missing resources with a JSON error body that the
    resolvers recognise themselves.
    """
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.debug("GET %s failed: %s", url, e)
        return Failed(FailureReason.NETWORK, str(e) or type(e).__name__)

    if not response.content:
        return Failed(FailureReason.EMPTY_BODY, f"HTTP {response.status_code}")

    try:
        return Resolved(response.json())
    except ValueError as e:
        return Failed(FailureReason.MALFORMED_JSON, str(e))
