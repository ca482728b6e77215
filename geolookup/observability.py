"""Logging setup for applications embedding geolookup.

The library only creates loggers under the ``geolookup`` namespace and
never configures handlers on import. Applications that want the
``GEOLOOKUP_LOG_*`` settings applied call configure_logging() once at
startup.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("geolookup")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
    logger.setLevel(config.level.upper())
    logger.debug("Logging configured", extra={"level": config.level})
