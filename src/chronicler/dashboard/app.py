"""Dash application factory."""

from __future__ import annotations

from dash import Dash

from chronicler.config import Settings, get_settings
from chronicler.dashboard.callbacks import register_callbacks
from chronicler.dashboard.layout import build_layout


def create_dashboard(settings: Settings | None = None) -> Dash:
    settings = settings or get_settings()
    app = Dash(__name__, title="Chronicler", suppress_callback_exceptions=True)
    app.layout = build_layout(settings.default_language)
    register_callbacks(app, settings)
    return app
