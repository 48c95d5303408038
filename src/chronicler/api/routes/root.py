from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from chronicler import __version__

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Chronicler API",
            "description": "Total distance between two sorted integer lists.",
            "version": __version__,
        },
        "links": {
            "self": "/",
            "health": "/api/health",
            "calculate": "/api/distance/calculate",
            "parse": "/api/distance/parse",
            "export": "/api/distance/export",
            "upload": "/api/upload",
            "transliterate": "/api/transliterate",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
