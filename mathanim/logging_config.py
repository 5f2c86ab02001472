"""
Logging Configuration

Library modules only create `logging.getLogger(__name__)` loggers. Scripts
that drive scenes call setup_logging() once to see their diagnostics.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespace: str = "mathanim",
    stream=None,
) -> logging.Logger:
    """
    Attach console (and optionally file) output to a logger namespace.

    Calling it again replaces the handlers it installed earlier, so a
    script can switch level or file between runs of a scene.

    Args:
        level: Logging level for the namespace and its handlers
        log_file: Optional path; the file is overwritten
        namespace: Logger to configure, e.g. "mathanim.scene" for playback only
        stream: Console stream, stdout by default

    Returns:
        The configured logger
    """
    logger = logging.getLogger(namespace)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return logger
