import os
import logging
from .services.errors import SelectionError

LOG_FORMAT = "%(levelname)s: %(message)s"

def setup_logging(level="INFO"):
    """
    Configures the root logger for console output.
    Accepts a level name ('DEBUG', 'info', ...) or a logging constant.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

def normalize_mount_location(path):
    """
    Turns user input into an absolute destination directory.
    Expands '~' and resolves relative paths against the working directory.
    Raises SelectionError when nothing was entered.
    """
    if not path or not path.strip():
        raise SelectionError("No mount location was given")

    return os.path.abspath(os.path.expanduser(path.strip()))
