import logging

from shared.config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=settings.LOG_FORMAT,
        force=True,
    )
