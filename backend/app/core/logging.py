"""Logging configuration."""
import logging

from app.core.config import settings


def configure_logging() -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
