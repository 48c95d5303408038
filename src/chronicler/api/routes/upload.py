from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from chronicler.api.dependencies import get_settings
from chronicler.api.schemas import SuccessResponse, UploadData, UploadMetadata
from chronicler.config import Settings
from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.core.upload import process_upload

router = APIRouter(tags=["upload"])


@router.post("/api/upload", response_model=SuccessResponse[UploadData])
async def upload(
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse[UploadData]:
    """Upload a ``.txt`` file with two whitespace-separated integer columns."""
    if file is None:
        raise ChroniclerError(ErrorKind.EMPTY_INPUT, "No file uploaded")

    options = settings.upload_options()
    # one byte past the limit is enough to reject oversized files
    data = await file.read(options.max_bytes + 1)
    result = process_upload(file.filename or "", file.content_type, data, options)
    return SuccessResponse(
        data=UploadData(
            file_id=result.file_id,
            list1=list(result.parsed.list1),
            list2=list(result.parsed.list2),
            row_count=result.parsed.row_count,
            metadata=UploadMetadata(filename=result.filename, file_size=result.size),
        )
    )
