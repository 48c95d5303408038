from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chronicler import __version__
from chronicler.api.errors import register_exception_handlers
from chronicler.api.lifespan import lifespan
from chronicler.api.middleware import RequestContextMiddleware
from chronicler.api.routes.distance import router as distance_router
from chronicler.api.routes.health import router as health_router
from chronicler.api.routes.root import router as root_router
from chronicler.api.routes.transliterate import router as transliterate_router
from chronicler.api.routes.upload import router as upload_router
from chronicler.config import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Chronicler API",
        description="Upload two columns of integers and compute the total distance between the sorted lists.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router)
    app.include_router(distance_router)
    app.include_router(upload_router)
    app.include_router(transliterate_router)

    return app
