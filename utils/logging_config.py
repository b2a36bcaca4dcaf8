from __future__ import annotations

from pathlib import Path
from loguru import logger

from config import SETTINGS


def configure_logging(log_file: Path | None = None, *, verbose: bool = False) -> Path | None:
    """Console sink at INFO (DEBUG when verbose) plus an optional rotating file sink.

    Without an explicit ``log_file`` the ``DOCLOCALIZER_LOG`` setting is used.
    Returns the file that receives DEBUG output, if any.
    """
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level="DEBUG" if verbose else "INFO")
    target = log_file or SETTINGS.log_file
    if target:
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.add(target, level="DEBUG", rotation="1 MB", retention=5)
    return target
