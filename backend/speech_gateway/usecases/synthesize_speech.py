"""
Synthesize-speech use case.

Handles one POST /synthesize:
  1. Send the validated request to Polly (voice/engine/language fixed)
  2. Drain the returned audio stream into memory
  3. Hand back an AudioResult for the response writer

Any failure in steps 1-2 becomes SynthesisFailed carrying the provider's
message.  There is no retry and no partial result.
"""

from __future__ import annotations

import time

from speech_gateway.core.errors import SynthesisFailed, provider_message
from speech_gateway.core.logging import logger
from speech_gateway.domain.speech import AudioResult, SynthesisRequest
from speech_gateway.infra.audio_stream import collect_stream
from speech_gateway.infra.providers.polly import PollyProvider


async def synthesize_speech(provider: PollyProvider, request: SynthesisRequest) -> AudioResult:
    t_start = time.monotonic()
    try:
        stream = await provider.synthesize(request)
        audio = await collect_stream(stream)
    except Exception as e:
        logger.error("SynthesizeSpeech error: %s", e, exc_info=True)
        raise SynthesisFailed(provider_message(e)) from e

    logger.info(
        "Synthesized %d chars -> %d bytes %s in %.0fms",
        len(request.text),
        len(audio),
        request.output_format.value,
        (time.monotonic() - t_start) * 1000,
    )
    return AudioResult(audio=audio, output_format=request.output_format)
