from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

import link_preview
from link_preview.api import api_router
from link_preview.config import settings
from link_preview.i18n import Localizer
from link_preview.log import configure_logging
from link_preview.registry import ElementRegistry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    configure_logging(settings.log_level)
    registry = ElementRegistry()
    link_preview.register(registry)
    app.state.registry = registry
    app.state.localizer = Localizer.from_package(settings.default_locale)
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.request_timeout, follow_redirects=True
    )
    yield
    # Shutdown
    await app.state.http_client.aclose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "app": settings.app_name}


def run() -> None:
    uvicorn.run("link_preview.main:app", host="0.0.0.0", port=8000)
