from __future__ import annotations

from fastapi import Request

from chronicler.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the ``Settings`` the application was created with."""
    settings: Settings = request.app.state.settings
    return settings
