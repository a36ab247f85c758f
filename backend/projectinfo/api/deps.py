from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..config import Settings, get_settings
from ..services.external import github_api


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    # One client per request, closed once the response is sent
    async with github_api.create_client(settings) as client:
        yield client
