"""Pure helpers turning uploads and results into dashboard data."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import plotly.graph_objects as go  # type: ignore[import-untyped]

from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.core.upload import UploadOptions, decode_upload, is_text_content, validate_upload
from chronicler.models import CalculationResult

TABLE_COLUMNS: list[dict[str, str]] = [
    {"name": "Position", "id": "position"},
    {"name": "List 1", "id": "list1Value"},
    {"name": "List 2", "id": "list2Value"},
    {"name": "Distance", "id": "distance"},
]


def decode_upload_contents(
    contents: str,
    filename: str,
    options: UploadOptions | None = None,
) -> str:
    """Decode a ``dcc.Upload`` data URL (``data:<mime>;base64,<payload>``) into text.

    The same size, extension and content-type checks as the HTTP upload
    endpoint apply.
    """
    header, sep, payload = (contents or "").partition(",")
    if not sep or not header.startswith("data:"):
        raise ChroniclerError(ErrorKind.INVALID_FORMAT, "Upload contents are not a data URL")
    content_type = header[len("data:") :].split(";", 1)[0] or None
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ChroniclerError(ErrorKind.INVALID_FORMAT, "Upload contents are not valid base64") from exc

    validate_upload(filename, content_type, len(data), options)
    if not is_text_content(data):
        raise ChroniclerError(ErrorKind.UNSUPPORTED_TYPE, "File appears to be binary, not plain text")
    return decode_upload(data)


def result_to_rows(result: CalculationResult) -> list[dict[str, Any]]:
    """One DataTable row per pair, with 1-based positions."""
    return [
        {
            "position": pair.position + 1,
            "list1Value": pair.value1,
            "list2Value": pair.value2,
            "distance": pair.distance,
        }
        for pair in result.pairs
    ]


def summary_values(result: CalculationResult) -> dict[str, str]:
    return {
        "total": f"{result.total_distance:,}",
        "pairs": f"{result.pair_count:,}",
        "time": f"{result.metadata.processing_time_ms:.3f} ms",
    }


def pairs_to_figure(result: CalculationResult | None, max_bars: int = 200) -> go.Figure:
    """Return a Plotly bar chart of per-pair distances."""
    if result is None or not result.pairs:
        fig = go.Figure()
        fig.update_layout(title="No data", height=300)
        return fig
    pairs = result.pairs[:max_bars]
    fig = go.Figure(
        go.Bar(
            x=[pair.position + 1 for pair in pairs],
            y=[pair.distance for pair in pairs],
            marker_color="#2196F3",
        )
    )
    title = "Distance per Pair"
    if len(pairs) < result.pair_count:
        title += f" (first {len(pairs)} of {result.pair_count})"
    fig.update_layout(
        title=title,
        xaxis_title="Position",
        yaxis_title="Distance",
        height=320,
        margin={"l": 60, "r": 20, "t": 40, "b": 40},
    )
    return fig
