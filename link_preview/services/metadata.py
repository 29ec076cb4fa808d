import logging
from typing import Any, Callable, Optional
from urllib.parse import quote, urlparse

import httpx
from pydantic import ValidationError

from link_preview.config import Settings, get_settings
from link_preview.errors import (
    MalformedMetadataError,
    MetadataStatusError,
    MetadataTransportError,
    PreviewError,
)
from link_preview.schemas import MetadataEnvelope, PreviewState

logger = logging.getLogger(__name__)

NO_TITLE = "No Title Available"
NO_DESCRIPTION = "No Description Available"
NO_PREVIEW = "No Preview Available"

INSTITUTION_THEME = "var(--ddd-primary-2)"
DEFAULT_THEME = "var(--ddd-primary-15)"


def default_theme(url: str, domain: str = "psu.edu") -> str:
    """Accent token for ``url``: institutional when it mentions ``domain``."""
    return INSTITUTION_THEME if domain in url else DEFAULT_THEME


def is_web_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def _is_css_token(value: str) -> bool:
    return not any(char in value for char in ";{}")


def _first(
    data: dict[str, Any],
    *keys: str,
    accept: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    # first truthy value wins, so "" and null fall through to the next key
    for key in keys:
        value = data.get(key)
        if not value:
            continue
        text = value if isinstance(value, str) else str(value)
        if accept is None or accept(text):
            return text
        logger.debug("Ignoring unsafe metadata value for %s", key)
    return None


class MetadataService:
    """Fetches website metadata and normalizes it into a PreviewState."""

    def __init__(
        self, client: httpx.AsyncClient, settings: Optional[Settings] = None
    ) -> None:
        self._client = client
        self._settings = settings or get_settings()

    def default_theme(self, url: str) -> str:
        return default_theme(url, self._settings.institution_domain)

    def build_request_url(self, url: str) -> str:
        query = quote(url, safe="") if self._settings.encode_query else url
        return f"{self._settings.metadata_endpoint}?q={query}"

    async def fetch_and_normalize(self, url: str) -> PreviewState:
        """Resolve ``url`` to a populated state.

        Transport failures, non-2xx statuses and malformed bodies all map
        to :meth:`fallback_state`; nothing is raised to the caller.
        """
        try:
            data = await self._fetch_metadata(url)
        except PreviewError as exc:
            logger.warning("Preview failed: %s", exc)
            return self.fallback_state(url)
        return self.normalize(url, data)

    def normalize(self, url: str, data: dict[str, Any]) -> PreviewState:
        return PreviewState(
            source_url=url,
            title=_first(data, "og:title", "title") or NO_TITLE,
            description=_first(data, "description") or NO_DESCRIPTION,
            image=_first(data, "image", "logo", "og:image", accept=is_web_url) or "",
            resolved_link=_first(data, "url", accept=is_web_url) or url,
            theme_color=_first(data, "theme-color", accept=_is_css_token)
            or self.default_theme(url),
        )

    def fallback_state(self, url: str) -> PreviewState:
        return PreviewState(
            source_url=url,
            title=NO_PREVIEW,
            description="",
            image="",
            resolved_link="",
            theme_color=self.default_theme(url),
        )

    async def _fetch_metadata(self, url: str) -> dict[str, Any]:
        try:
            response = await self._client.get(self.build_request_url(url))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise MetadataTransportError(
                str(exc) or exc.__class__.__name__
            ) from exc

        if not response.is_success:
            raise MetadataStatusError(response.status_code)

        try:
            envelope = MetadataEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedMetadataError(
                f"unexpected metadata payload: {exc.error_count()} error(s)"
            ) from exc
        return envelope.data
