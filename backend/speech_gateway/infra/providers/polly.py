"""
Amazon Polly provider.

Thin async wrapper around the boto3 Polly client.  Two public calls:

  - synthesize:       SynthesizeSpeech with a fixed voice, language and engine
  - describe_voices:  DescribeVoices for a language code

boto3 is blocking, so each call runs on a worker thread.  Errors from
botocore propagate unchanged; the use cases translate them.
"""

from __future__ import annotations

import asyncio
from typing import Any

import boto3

from speech_gateway.core.logging import logger
from speech_gateway.core.settings import settings
from speech_gateway.domain.speech import SynthesisRequest

# Every synthesis uses Matthew (male, US English) on the neural engine,
# whatever the caller asks for.
VOICE_ID = "Matthew"
LANGUAGE_CODE = "en-US"
ENGINE = "neural"


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class PollyProvider:
    """Holds one boto3 Polly client; safe to share across concurrent requests."""

    def __init__(self, client: Any = None, region: str | None = None) -> None:
        self.region = region or settings.aws_region
        self._client = client or boto3.client("polly", region_name=self.region)

    def build_params(self, request: SynthesisRequest) -> dict[str, Any]:
        return {
            "Text": request.text,
            "VoiceId": VOICE_ID,
            "LanguageCode": LANGUAGE_CODE,
            "OutputFormat": request.output_format.value,
            "Engine": ENGINE,
            "TextType": request.text_type,
        }

    async def synthesize(self, request: SynthesisRequest) -> Any:
        """Call SynthesizeSpeech and return the response's AudioStream."""
        params = self.build_params(request)
        response = await asyncio.to_thread(self._client.synthesize_speech, **params)
        stream = response.get("AudioStream")
        if stream is None:
            raise RuntimeError("Polly returned no audio stream")
        return stream

    async def describe_voices(self, language_code: str = LANGUAGE_CODE) -> list[dict]:
        response = await asyncio.to_thread(
            self._client.describe_voices, LanguageCode=language_code
        )
        return response.get("Voices") or []


# ---------------------------------------------------------------------------
# Process-wide singleton
# ---------------------------------------------------------------------------

_provider: PollyProvider | None = None


def init_provider() -> PollyProvider:
    """Create the shared provider.  Called once from the startup hook."""
    global _provider
    if _provider is None:
        _provider = PollyProvider()
        logger.info("Polly client ready (region=%s)", _provider.region)
    return _provider


def get_provider() -> PollyProvider:
    """FastAPI dependency; tests swap it out via app.dependency_overrides."""
    return init_provider()
