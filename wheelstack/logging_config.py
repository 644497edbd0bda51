"""
Logging for the wheelstack front-end.

Modules log through ``logging.getLogger(__name__)``; only ``desktop.main``
calls :func:`setup_logging`, with the ``--log-level`` / ``--log-file`` options.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def resolve_level(level: Union[int, str]) -> int:
    """Accept a level number or a CLI name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level {level!r}; choose from {', '.join(LEVEL_NAMES)}")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) output to the 'wheelstack' logger.

    Calling it again replaces the previous handlers, so a restart inside the
    same process does not double every line.
    """
    level = resolve_level(level)
    logger = logging.getLogger("wheelstack")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging at %s%s", logging.getLevelName(level),
                 f" (also to {log_file})" if log_file else "")
    return logger
