from fastapi import APIRouter

from chronicler.api.schemas import SuccessResponse, TransliterateData, TransliterateRequest
from chronicler.core.tengwar import detransliterate, transliterate

router = APIRouter(tags=["i18n"])


@router.post("/api/transliterate", response_model=SuccessResponse[TransliterateData])
async def transliterate_text(body: TransliterateRequest) -> SuccessResponse[TransliterateData]:
    """Latin to Tengwar, or Tengwar back to Latin with ``reverse``."""
    result = detransliterate(body.text) if body.reverse else transliterate(body.text)
    return SuccessResponse(data=TransliterateData(text=body.text, result=result))
