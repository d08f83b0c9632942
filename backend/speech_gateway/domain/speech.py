"""
Domain models for a single synthesis request.

- OutputFormat: the two audio encodings the gateway hands back
- SynthesisRequest: the normalized, validated shape of a POST body
- AudioResult: the fully buffered audio plus the format it was produced in
- validate_request: body -> SynthesisRequest, raising InvalidInput

Like the rest of the domain layer these are plain dataclasses; the
pydantic model for the HTTP body lives in schemas/.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from speech_gateway.core.errors import InvalidInput


# ---------------------------------------------------------------------------
# Output formats
# ---------------------------------------------------------------------------

class OutputFormat(Enum):
    """
    Audio encodings we ask Polly for.  Raw PCM is not offered.

    MP3        -> audio/mpeg, speech.mp3 (default)
    OGG_VORBIS -> audio/ogg,  speech.ogg
    """
    MP3 = "mp3"
    OGG_VORBIS = "ogg_vorbis"

    @property
    def mime_type(self) -> str:
        return "audio/ogg" if self is OutputFormat.OGG_VORBIS else "audio/mpeg"

    @property
    def extension(self) -> str:
        return "ogg" if self is OutputFormat.OGG_VORBIS else "mp3"

    @classmethod
    def parse(cls, value: Any) -> OutputFormat:
        """Anything other than an exact "ogg_vorbis" falls back to MP3."""
        if value == cls.OGG_VORBIS.value:
            return cls.OGG_VORBIS
        return cls.MP3


DEFAULT_TEXT_TYPE = "text"


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SynthesisRequest:
    text: str
    output_format: OutputFormat = OutputFormat.MP3
    # "text" or "ssml"; not checked here, Polly rejects bad values itself
    text_type: Any = DEFAULT_TEXT_TYPE


@dataclass(frozen=True)
class AudioResult:
    audio: bytes
    output_format: OutputFormat

    @property
    def mime_type(self) -> str:
        return self.output_format.mime_type

    @property
    def filename(self) -> str:
        return f"speech.{self.output_format.extension}"

    def __len__(self) -> int:
        return len(self.audio)


def validate_request(
    text: Any,
    output_format: Any = None,
    text_type: Any = None,
) -> SynthesisRequest:
    """
    Normalize raw body fields into a SynthesisRequest.

    Raises InvalidInput when text is missing, not a string, or only
    whitespace.  The text is forwarded untrimmed.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("text is required in request body")

    return SynthesisRequest(
        text=text,
        output_format=OutputFormat.parse(output_format),
        text_type=DEFAULT_TEXT_TYPE if text_type is None else text_type,
    )
