from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from chronicler.api.dependencies import get_settings
from chronicler.api.schemas import CalculateRequest, ParsedListsData, ParseRequest, SuccessResponse
from chronicler.config import Settings
from chronicler.core.engine import calculate_distance
from chronicler.core.export import EXPORT_FILENAMES, EXPORT_MEDIA_TYPES, render_export
from chronicler.core.parser import parse_lists
from chronicler.models import CalculationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/distance", tags=["distance"])


@router.post("/calculate", response_model=SuccessResponse[CalculationResult], response_model_exclude_none=True)
async def calculate(body: CalculateRequest) -> SuccessResponse[CalculationResult]:
    """Sort both lists, pair by position and sum ``|a - b|`` over the pairs."""
    result = calculate_distance(body.list1, body.list2)
    logger.info("Calculated total distance %d for %d pairs", result.total_distance, result.pair_count)
    return SuccessResponse(data=result)


@router.post("/parse", response_model=SuccessResponse[ParsedListsData])
async def parse(
    body: ParseRequest,
    settings: Settings = Depends(get_settings),
) -> SuccessResponse[ParsedListsData]:
    """Parse raw two-column file content server-side."""
    parsed = parse_lists(body.content, max_bytes=settings.max_upload_bytes)
    data = ParsedListsData(list1=list(parsed.list1), list2=list(parsed.list2), row_count=parsed.row_count)
    return SuccessResponse(data=data)


@router.post("/export")
async def export(
    body: CalculateRequest,
    format: Literal["csv", "json"] = Query("csv"),
) -> Response:
    """Calculate and return the result as a downloadable CSV or JSON file."""
    result = calculate_distance(body.list1, body.list2)
    return Response(
        content=render_export(result, format),
        media_type=EXPORT_MEDIA_TYPES[format],
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAMES[format]}"'},
    )
