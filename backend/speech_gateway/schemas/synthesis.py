from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SynthesizeBody(BaseModel):
    """POST /synthesize body.  Fields are untyped; domain.speech.validate_request decides validity."""

    text: Any = None
    output_format: Any = Field(default="mp3", alias="format")
    text_type: Any = Field(default="text", alias="textType")


class ErrorResponse(BaseModel):
    error: str
