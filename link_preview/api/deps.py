import httpx
from fastapi import Depends, Request

from link_preview.config import Settings, get_settings
from link_preview.i18n import Localizer
from link_preview.registry import ElementRegistry
from link_preview.services import MetadataService


async def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


async def get_metadata_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> MetadataService:
    return MetadataService(client, settings)


async def get_registry(request: Request) -> ElementRegistry:
    return request.app.state.registry


async def get_localizer(request: Request) -> Localizer:
    return request.app.state.localizer
