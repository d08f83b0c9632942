from fastapi import APIRouter, Depends
from fastapi.responses import Response

from speech_gateway.core.logging import logger
from speech_gateway.domain.speech import AudioResult, validate_request
from speech_gateway.infra.providers.polly import PollyProvider, get_provider
from speech_gateway.schemas.synthesis import ErrorResponse, SynthesizeBody
from speech_gateway.usecases.list_voices import list_voices
from speech_gateway.usecases.synthesize_speech import synthesize_speech

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def audio_response(result: AudioResult) -> Response:
    """Write the buffered audio as a file download."""
    return Response(
        content=result.audio,
        media_type=result.mime_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "Content-Length": str(len(result)),
        },
    )


@router.get("/voices", responses={500: {"model": ErrorResponse}})
async def get_voices(provider: PollyProvider = Depends(get_provider)):
    return await list_voices(provider)


@router.post("/synthesize", response_class=Response, responses=_ERRORS)
async def post_synthesize(
    body: SynthesizeBody | None = None,
    provider: PollyProvider = Depends(get_provider),
):
    """Always speaks as Matthew (en-US, neural); only format and textType are honored."""
    body = body or SynthesizeBody()
    request = validate_request(body.text, body.output_format, body.text_type)
    logger.info(
        "Synthesize request: %d chars, format=%s, textType=%s",
        len(request.text),
        request.output_format.value,
        request.text_type,
    )
    result = await synthesize_speech(provider, request)
    return audio_response(result)
