import logging

from speech_gateway.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

logger = logging.getLogger("speech_gateway")


def setup_logging() -> None:
    """Configure root logging once; later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(settings.log_level.upper())
        return
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
