"""
Run the gateway:

    python -m speech_gateway

Host and port come from HOST / PORT (see core/settings.py).
"""

import uvicorn

from speech_gateway.core.settings import settings


def main() -> None:
    uvicorn.run(
        "speech_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
