"""
Audio stream collector.

Polly hands back the synthesized audio as a botocore StreamingBody, a
blocking file-like object.  collect_stream() drains it chunk by chunk,
awaiting each read on a worker thread so the event loop keeps serving
other requests, and returns the concatenated bytes only once the
provider signals end-of-stream (an empty read).

Anything with a read(size) method works, which is what the tests rely on.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from speech_gateway.core.logging import logger
from speech_gateway.core.settings import settings


class ByteStream(Protocol):
    def read(self, amt: int | None = ...) -> bytes: ...


async def collect_stream(stream: ByteStream, chunk_size: int | None = None) -> bytes:
    """Read the stream to completion, in order, into one buffer."""
    size = chunk_size or settings.stream_chunk_size
    buffer = bytearray()
    try:
        while True:
            chunk = await asyncio.to_thread(stream.read, size)
            if not chunk:
                break
            buffer.extend(chunk)
    finally:
        close = getattr(stream, "close", None)
        if close is not None:
            try:
                close()
            except Exception as e:
                logger.warning("Closing audio stream failed: %s", e)
    return bytes(buffer)
