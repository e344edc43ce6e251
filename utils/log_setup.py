"""
Logging Setup
loguru sinks for the validation layer
"""

import sys
from typing import Optional
from loguru import logger

from config import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Replace loguru's default sink

    Args:
        settings: Settings to read ENVIRONMENT, LOG_LEVEL and LOG_FILE from
    """
    settings = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=settings.LOG_LEVEL if settings.ENVIRONMENT == "production" else "DEBUG"
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            level=settings.LOG_LEVEL
        )

    logger.info(f"Logging configured for {settings.APP_NAME} ({settings.ENVIRONMENT})")
