from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = app.state.settings
    logger.info(
        "Chronicler API starting (max upload %d bytes, extensions %s)",
        settings.max_upload_bytes,
        ", ".join(settings.allowed_extensions),
    )
    yield
    logger.info("Chronicler API stopped")
