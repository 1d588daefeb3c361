"""
spg.log
Console logging for SPG notices, rendered with rich.
"""

import logging
from typing import Optional, Union

from rich.logging import RichHandler

from .config import load_config

LOGGER_NAME = "spg"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger. Calling it again only updates the level.
    """
    if level is None:
        level = load_config().log_level
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(show_time=False, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        log.addHandler(handler)
    return log
