"""
Logging setup for applications embedding teseo.

The library only emits records through module loggers; handlers are
configured by the host application, optionally through configure_logging().
"""

import logging

from teseo.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure root logging with the level from settings.

    Args:
        settings: Settings to read LOG_LEVEL from. Defaults to get_settings()
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
