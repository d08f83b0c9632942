from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient

from speech_gateway.infra.providers.polly import PollyProvider, get_provider
from speech_gateway.main import app

FAKE_AUDIO = b"ID3\x04\x00fake-mp3-frames" * 64


class FakePollyClient:
    """Stands in for boto3's Polly client and records every call."""

    def __init__(self, audio: bytes = FAKE_AUDIO, voices: list[dict] | None = None):
        self.audio = audio
        self.voices = voices if voices is not None else [
            {"Id": "Matthew", "Name": "Matthew", "Gender": "Male", "LanguageCode": "en-US"},
            {"Id": "Joanna", "Name": "Joanna", "Gender": "Female", "LanguageCode": "en-US"},
        ]
        self.synthesize_error: Exception | None = None
        self.voices_error: Exception | None = None
        self.stream_factory = None
        self.synthesize_calls: list[dict] = []
        self.describe_calls: list[dict] = []

    def synthesize_speech(self, **kwargs):
        self.synthesize_calls.append(kwargs)
        if self.synthesize_error is not None:
            raise self.synthesize_error
        stream = self.stream_factory() if self.stream_factory else io.BytesIO(self.audio)
        return {"AudioStream": stream, "ContentType": "audio/mpeg", "RequestCharacters": len(kwargs["Text"])}

    def describe_voices(self, **kwargs):
        self.describe_calls.append(kwargs)
        if self.voices_error is not None:
            raise self.voices_error
        return {"Voices": self.voices}


@pytest.fixture
def polly_client() -> FakePollyClient:
    return FakePollyClient()


@pytest.fixture
def client(polly_client):
    provider = PollyProvider(client=polly_client, region="us-east-1")
    app.dependency_overrides[get_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
