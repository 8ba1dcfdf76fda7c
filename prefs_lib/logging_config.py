from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from prefs_lib.config.settings import load_settings

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging from the `log_level` in the storage config.

    Falls back to WARNING when the config is missing, unreadable or names an
    unknown level. Existing root handlers are replaced so repeated calls do
    not duplicate output. Returns a module logger for the caller.
    """
    level = logging.WARNING
    try:
        name = load_settings(config_path).log_level
        candidate = getattr(logging, name.upper(), None)
        if isinstance(candidate, int):
            level = candidate
    except ValueError:
        # If config parse fails, fall back to default level
        level = logging.WARNING

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info("Log level set to: %s", logging.getLevelName(level))
    return logger
