from __future__ import annotations

from speech_gateway.core.errors import VoicesUnavailable, provider_message
from speech_gateway.core.logging import logger
from speech_gateway.infra.providers.polly import LANGUAGE_CODE, PollyProvider


async def list_voices(provider: PollyProvider, language_code: str = LANGUAGE_CODE) -> list[dict]:
    """Polly's voice descriptors for one language, passed through verbatim."""
    try:
        return await provider.describe_voices(language_code)
    except Exception as e:
        logger.error("DescribeVoices error: %s", e, exc_info=True)
        raise VoicesUnavailable(provider_message(e)) from e
