"""
Purpose:
- Pydantic models for caption in/out so the API is self-documenting and stable.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import Any, List, Optional

class CaptionRequest(BaseModel):
    # data URI, e.g. "data:image/png;base64,...." (prefix is checked by the route)
    image: StrictStr = Field(..., description="base64 encoded image as a data URI")

class CaptionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    caption: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    processing_time: float = Field(..., ge=0.0, alias="processingTime", description="milliseconds")

class PingResponse(BaseModel):
    message: str

class DemoResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
    details: Optional[List[Any]] = None
    message: Optional[str] = None
