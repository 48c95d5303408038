"""Dash layout: upload area, summary cards, pair table and chart."""

from __future__ import annotations

from dash import dash_table, dcc, html

from chronicler.dashboard.views import TABLE_COLUMNS
from chronicler.i18n import t

_CARD_STYLE = {
    "padding": "12px 20px",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "minWidth": "140px",
    "textAlign": "center",
}


def _stat_card(card_id: str, title: str) -> html.Div:
    return html.Div(
        [
            html.H4(title, style={"margin": "0", "color": "#666", "fontSize": "12px"}),
            html.Div("--", id=card_id, style={"fontSize": "24px", "fontWeight": "bold"}),
        ],
        style=_CARD_STYLE,
    )


def build_layout(language: str = "english") -> html.Div:
    return html.Div(
        [
            dcc.Store(id="result-store"),
            html.H1("Chronicler"),
            html.P(
                "Upload a file with two columns of integers to compute the total distance between the sorted lists.",
                style={"color": "#666", "marginTop": "-10px", "marginBottom": "20px"},
            ),
            dcc.Upload(
                id="upload",
                children=html.Div(t("upload.prompt", language)),
                accept=".txt,text/plain",
                multiple=False,
                style={
                    "width": "100%",
                    "height": "80px",
                    "lineHeight": "80px",
                    "borderWidth": "2px",
                    "borderStyle": "dashed",
                    "borderRadius": "8px",
                    "textAlign": "center",
                    "marginBottom": "12px",
                },
            ),
            html.Div(id="upload-status", style={"color": "#555", "fontSize": "13px", "marginBottom": "8px"}),
            html.Div(id="dashboard-error", style={"color": "red", "marginBottom": "12px"}),
            html.Div(
                [
                    _stat_card("stat-total", t("results.totalDistance", language)),
                    _stat_card("stat-pairs", t("results.pairs", language)),
                    _stat_card("stat-time", t("results.processingTime", language)),
                ],
                style={"display": "flex", "gap": "16px", "marginBottom": "20px", "flexWrap": "wrap"},
            ),
            html.Div(
                [
                    html.Button("Download CSV", id="download-csv-btn", n_clicks=0, disabled=True),
                    html.Button("Download JSON", id="download-json-btn", n_clicks=0, disabled=True),
                    dcc.Download(id="download"),
                ],
                style={"display": "flex", "gap": "10px", "marginBottom": "16px"},
            ),
            dcc.Graph(id="distance-chart", figure={}),
            html.H3(t("results.title", language), style={"marginTop": "24px", "marginBottom": "8px"}),
            dash_table.DataTable(  # type: ignore[attr-defined]
                id="pairs-table",
                columns=TABLE_COLUMNS,
                data=[],
                page_size=20,
                sort_action="native",
                style_table={"overflowX": "auto"},
                style_cell={"textAlign": "right", "padding": "4px 8px", "fontSize": "12px"},
            ),
        ],
        style={"padding": "20px", "fontFamily": "system-ui, sans-serif"},
    )
