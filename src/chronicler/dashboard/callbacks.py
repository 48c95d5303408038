"""Dash callback registrations."""

from __future__ import annotations

import logging
from typing import Any

from dash import Dash, Input, Output, State, ctx, dcc, no_update

from chronicler.config import Settings
from chronicler.core.engine import calculate
from chronicler.core.errors import ChroniclerError
from chronicler.core.export import EXPORT_FILENAMES, render_export
from chronicler.core.parser import parse_lists
from chronicler.dashboard.views import decode_upload_contents, pairs_to_figure, result_to_rows, summary_values
from chronicler.i18n import error_message, t
from chronicler.models import CalculationResult

_log = logging.getLogger(__name__)


def register_callbacks(app: Dash, settings: Settings) -> None:
    options = settings.upload_options()
    language = settings.default_language

    @app.callback(
        [
            Output("result-store", "data"),
            Output("upload-status", "children"),
            Output("dashboard-error", "children"),
        ],
        Input("upload", "contents"),
        State("upload", "filename"),
        prevent_initial_call=True,
    )
    def handle_upload(contents: str | None, filename: str | None) -> tuple[Any, str, str]:
        if not contents:
            return None, "", ""
        try:
            text = decode_upload_contents(contents, filename or "", options)
            result = calculate(parse_lists(text, max_bytes=options.max_bytes))
        except ChroniclerError as exc:
            _log.info("Dashboard upload rejected: %s (%s)", exc.message, exc.code)
            return None, "", error_message(exc.kind, language)
        except Exception:
            _log.exception("Dashboard upload failed")
            return None, "", "An unexpected error occurred. Please try again."
        return result.to_wire(), f"{filename}: {t('upload.success', language)}", ""

    @app.callback(
        [
            Output("stat-total", "children"),
            Output("stat-pairs", "children"),
            Output("stat-time", "children"),
            Output("pairs-table", "data"),
            Output("distance-chart", "figure"),
            Output("download-csv-btn", "disabled"),
            Output("download-json-btn", "disabled"),
        ],
        Input("result-store", "data"),
    )
    def show_result(data: dict[str, Any] | None) -> tuple[Any, ...]:
        if not data:
            return "--", "--", "--", [], pairs_to_figure(None), True, True
        result = CalculationResult.model_validate(data)
        summary = summary_values(result)
        return (
            summary["total"],
            summary["pairs"],
            summary["time"],
            result_to_rows(result),
            pairs_to_figure(result),
            False,
            False,
        )

    @app.callback(
        Output("download", "data"),
        [Input("download-csv-btn", "n_clicks"), Input("download-json-btn", "n_clicks")],
        State("result-store", "data"),
        prevent_initial_call=True,
    )
    def download(_csv_clicks: int, _json_clicks: int, data: dict[str, Any] | None) -> Any:
        if not data:
            return no_update
        fmt = "json" if ctx.triggered_id == "download-json-btn" else "csv"
        result = CalculationResult.model_validate(data)
        return dcc.send_string(render_export(result, fmt), EXPORT_FILENAMES[fmt])
