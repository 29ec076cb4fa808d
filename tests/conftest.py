import httpx
import pytest

from link_preview.config import Settings
from link_preview.services import MetadataService

ENDPOINT = "https://metadata.test/api/services/website/metadata"


def _json_handler(payload, status_code=200, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def json_handler():
    return _json_handler


@pytest.fixture
def settings():
    return Settings(metadata_service_url=ENDPOINT, institution_domain="psu.edu")


@pytest.fixture
def make_service(settings):
    def factory(handler, **overrides):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), follow_redirects=True
        )
        service_settings = settings.model_copy(update=overrides) if overrides else settings
        return MetadataService(client, service_settings)

    return factory
