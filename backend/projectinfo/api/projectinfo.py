import logging

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response
from pydantic_core import PydanticSerializationError

from ..config import Settings, get_settings
from ..schemas.project import RepositoryInfo
from ..services.analysis import repository_info
from ..utils.path_check import check_path, split_path
from .deps import get_http_client

logger = logging.getLogger(__name__)

router = APIRouter()


def serialize_repository_info(info: RepositoryInfo) -> bytes:
    return info.model_dump_json(by_alias=True).encode("utf-8")


@router.get("/{path:path}")
async def project_info_endpoint(
    path: str,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Owner, languages and top committers for <host>/<owner>/<repo>.
    Lookups that fail upstream come back as placeholder values.
    """
    # 1. Validate the path before touching the upstream API
    segments = split_path(path)
    check = check_path(segments, settings.EXPECTED_HOST)
    if not check.ok:
        logger.info("Rejected path %r: %s", path, check.message)
        return PlainTextResponse(check.message + "\n", status_code=settings.REJECT_STATUS_CODE)

    # 2. Resolve the three fields
    info = await repository_info.get_repository_info(client, segments)

    # 3. Serialize
    try:
        body = serialize_repository_info(info)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error("Failed to serialize result for %s: %s", path, e)
        return PlainTextResponse("Failed to marshal json\n", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(content=body, media_type="application/json")
