import logging
import sys

from app.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once; later calls are ignored"""
    global _configured
    if _configured:
        return

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate handlers when uvicorn or pytest already installed one
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(settings.log_format))
        root.addHandler(handler)

    _configured = True
