"""Logging setup for applications using instgeom.

The library only creates per-module loggers under the ``instgeom`` namespace; rejected geometry
(zero axes, collinear points, singular matrices) is reported to them at ERROR.
Call :func:`setup_logging` once from an application to see these messages.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "instgeom"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# marks handlers installed here, so repeat calls replace them and leave the application's own alone
_OWNED = "_instgeom_owned"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send instgeom diagnostics to stdout and, optionally, to a file.

    Parameters
    ----------
    level
        Logging level (e.g. logging.DEBUG, logging.INFO)
    log_file
        Path to also write the log to, optional. Overwritten on each call.

    Returns
    -------
    logging.Logger
        The 'instgeom' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    return logger
