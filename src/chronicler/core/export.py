import csv
import io
import json

from chronicler.models import CalculationResult

CSV_HEADER = ("Position", "List1Value", "List2Value", "Distance")

EXPORT_FILENAMES = {
    "csv": "distance-calculation-results.csv",
    "json": "distance-calculation-results.json",
}

EXPORT_MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}


def to_csv(result: CalculationResult) -> str:
    """Render one row per pair; positions are 1-based in the export."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for pair in result.pairs:
        writer.writerow((pair.position + 1, pair.value1, pair.value2, pair.distance))
    return buffer.getvalue()


def to_json(result: CalculationResult) -> str:
    return json.dumps(result.to_wire(), indent=2)


def render_export(result: CalculationResult, fmt: str) -> str:
    if fmt == "csv":
        return to_csv(result)
    if fmt == "json":
        return to_json(result)
    raise ValueError(f"Unsupported export format '{fmt}'. Supported: {sorted(EXPORT_FILENAMES)}")
