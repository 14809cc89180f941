"""
Purpose:
- POST /api/caption: data-URI image in, canned caption + confidence + timing out.
- Body-shape errors are turned into 400s by the app-level handler in main.py.
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.settings import Settings, get_settings
from ..caption.schema import CaptionRequest, CaptionResponse, ErrorResponse
from ..caption.service import generate_caption, is_image_data_uri

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["caption"])

FORMAT_ERROR = "Invalid image format. Please provide a valid base64 encoded image."
INTERNAL_ERROR = "Internal server error during caption generation"
INTERNAL_HINT = "Please try again or contact support if the problem persists."

@router.post(
    "/caption",
    response_model=CaptionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def caption(payload: CaptionRequest, settings: Settings = Depends(get_settings)):
    if not is_image_data_uri(payload.image):
        logger.info("rejected caption request: image is not a data:image/ URI")
        return JSONResponse(status_code=400, content={"error": FORMAT_ERROR})

    try:
        return await generate_caption(payload.image, settings)
    except Exception:
        logger.exception("Caption generation error")
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR, "message": INTERNAL_HINT},
        )
