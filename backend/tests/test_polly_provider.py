import asyncio
import io

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from botocore.stub import Stubber

from speech_gateway.core.errors import SynthesisFailed, VoicesUnavailable
from speech_gateway.domain.speech import validate_request
from speech_gateway.infra.providers.polly import PollyProvider
from speech_gateway.usecases.list_voices import list_voices
from speech_gateway.usecases.synthesize_speech import synthesize_speech


@pytest.fixture
def polly():
    client = boto3.client(
        "polly",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield PollyProvider(client=client), stubber
        stubber.assert_no_pending_responses()


def _audio_response(data: bytes) -> dict:
    return {
        "AudioStream": StreamingBody(io.BytesIO(data), len(data)),
        "ContentType": "audio/ogg",
        "RequestCharacters": 11,
    }


def test_synthesize_sends_fixed_voice_language_and_engine(polly):
    provider, stubber = polly
    stubber.add_response(
        "synthesize_speech",
        _audio_response(b"OggS-audio"),
        expected_params={
            "Text": "hello world",
            "VoiceId": "Matthew",
            "LanguageCode": "en-US",
            "OutputFormat": "ogg_vorbis",
            "Engine": "neural",
            "TextType": "text",
        },
    )
    result = asyncio.run(synthesize_speech(provider, validate_request("hello world", "ogg_vorbis")))
    assert result.audio == b"OggS-audio"
    assert result.mime_type == "audio/ogg"


def test_synthesize_error_carries_provider_message(polly):
    provider, stubber = polly
    stubber.add_client_error(
        "synthesize_speech",
        service_error_code="InvalidSsmlException",
        service_message="Invalid SSML request",
        http_status_code=400,
    )
    with pytest.raises(SynthesisFailed) as exc_info:
        asyncio.run(synthesize_speech(provider, validate_request("<speak>", text_type="ssml")))
    assert exc_info.value.message == "Invalid SSML request"
    assert isinstance(exc_info.value.__cause__, ClientError)


def test_describe_voices_returns_voice_list(polly):
    provider, stubber = polly
    voices = [{"Id": "Matthew", "Name": "Matthew", "Gender": "Male", "LanguageCode": "en-US"}]
    stubber.add_response("describe_voices", {"Voices": voices}, expected_params={"LanguageCode": "en-US"})
    assert asyncio.run(list_voices(provider)) == voices


def test_describe_voices_without_voices_key_is_empty(polly):
    provider, stubber = polly
    stubber.add_response("describe_voices", {}, expected_params={"LanguageCode": "en-US"})
    assert asyncio.run(list_voices(provider)) == []


def test_describe_voices_error_becomes_voices_unavailable(polly):
    provider, stubber = polly
    stubber.add_client_error(
        "describe_voices",
        service_error_code="ServiceFailureException",
        service_message="",
        http_status_code=500,
    )
    with pytest.raises(VoicesUnavailable) as exc_info:
        asyncio.run(list_voices(provider))
    assert exc_info.value.status_code == 500
    assert exc_info.value.message
