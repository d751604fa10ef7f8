from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from .config import settings
from .http.client import HttpClient
from .services.catalog_service import CatalogService
from .api.routes import init_routes, router

def build_app(http_client: HttpClient | None = None) -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL)

    http = http_client or HttpClient()
    service = CatalogService(http=http)
    init_routes(service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # el cliente HTTP vive lo mismo que la app
        async with http.lifespan():
            yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.include_router(router, prefix="")
    return app

app = build_app()
