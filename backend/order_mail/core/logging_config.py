"""
Logging setup

Services log through ``logging.getLogger(__name__)`` or an injected logger;
this module only wires the root handler for scripts and workers.
"""
import logging
from typing import Optional

from .config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from settings (LOG_LEVEL / LOG_FORMAT)"""
    settings = get_settings()
    logging.basicConfig(format=settings.LOG_FORMAT)
    # basicConfig is a no-op once handlers exist, the level is applied anyway
    logging.getLogger().setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
