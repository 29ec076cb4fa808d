from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from link_preview.api.deps import get_localizer, get_metadata_service, get_registry
from link_preview.component import LinkPreviewCard
from link_preview.i18n import Localizer
from link_preview.registry import ElementRegistry
from link_preview.schemas import Layout, PreviewRead
from link_preview.services import MetadataService
from link_preview.services.metadata import is_web_url

router = APIRouter(prefix="/previews", tags=["previews"])

Href = Annotated[str, Query(min_length=1, description="URL to preview")]


async def load_card(
    href: str,
    layout: Layout,
    locale: Optional[str],
    registry: ElementRegistry,
    service: MetadataService,
    localizer: Localizer,
) -> LinkPreviewCard:
    if not is_web_url(href):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid URL: must start with http:// or https://",
        )
    card = registry.create(
        LinkPreviewCard.tag,
        service=service,
        localizer=localizer,
        layout=layout,
        locale=locale,
    )
    card.request_update(href=href)
    await card.wait()
    return card


@router.get("", response_model=PreviewRead)
async def get_preview(
    href: Href,
    registry: Annotated[ElementRegistry, Depends(get_registry)],
    service: Annotated[MetadataService, Depends(get_metadata_service)],
    localizer: Annotated[Localizer, Depends(get_localizer)],
    layout: Layout = Layout.VERTICAL,
) -> PreviewRead:
    """Resolve metadata for a URL into the card's state."""
    card = await load_card(href, layout, None, registry, service, localizer)
    return PreviewRead(**card.state.model_dump(), layout=card.layout)


@router.get("/card", response_class=HTMLResponse)
async def get_preview_card(
    href: Href,
    registry: Annotated[ElementRegistry, Depends(get_registry)],
    service: Annotated[MetadataService, Depends(get_metadata_service)],
    localizer: Annotated[Localizer, Depends(get_localizer)],
    layout: Layout = Layout.VERTICAL,
    locale: Optional[str] = None,
) -> HTMLResponse:
    """Render the preview card for a URL as an HTML fragment."""
    if locale is not None and localizer.resolve(locale) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported locale {locale!r}; expected one of {localizer.locales}",
        )
    card = await load_card(href, layout, locale, registry, service, localizer)
    return HTMLResponse(card.render())
