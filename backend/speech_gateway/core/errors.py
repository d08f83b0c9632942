"""
Error taxonomy for the gateway.

Every failure a request can hit is one of two kinds:

  - InvalidInput     -> the caller sent something unusable (400)
  - ProviderFailure  -> Polly, or the audio stream it returned, failed (500)

Each error carries the HTTP status it maps to and a message that is
returned verbatim to the caller as {"error": message}.  The handlers that
render them are registered on the app in main.py.
"""

from __future__ import annotations

from botocore.exceptions import ClientError


class GatewayError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(GatewayError):
    status_code = 400
    default_message = "text is required in request body"


class ProviderFailure(GatewayError):
    status_code = 500
    default_message = "Provider call failed"


class SynthesisFailed(ProviderFailure):
    default_message = "SynthesizeSpeech failed"


class VoicesUnavailable(ProviderFailure):
    default_message = "DescribeVoices failed"


def provider_message(exc: BaseException) -> str:
    """Best human-readable message from a provider exception, or ''."""
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        if error.get("Message"):
            return error["Message"]
    return str(exc)
