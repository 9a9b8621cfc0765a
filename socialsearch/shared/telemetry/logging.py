"""Logging for the search engine.

Every module logs under the "socialsearch" namespace via get_logger().
setup_logging() configures that namespace once per process: it always sets
the level, and only attaches its own stdout handler when the host has not
configured logging (no handlers on the package or root logger).
"""

import logging
import sys

from socialsearch.core.config import get_settings

LOGGER_NAMESPACE = "socialsearch"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _resolve_level() -> int:
    settings = get_settings()
    if settings.log_level:
        return logging.getLevelNamesMapping()[settings.log_level.upper()]
    return logging.DEBUG if settings.debug else logging.INFO


def _host_configured() -> bool:
    return bool(logging.getLogger().handlers)


def setup_logging(force: bool = False) -> logging.Logger:
    """Configure the socialsearch logger.

    Level is settings.log_level when set, else DEBUG when settings.debug
    is True, otherwise INFO.

    Args:
        force: Re-apply configuration even if it already ran.

    Returns:
        The package logger.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAMESPACE)
    if _configured and not force:
        return logger
    logger.setLevel(_resolve_level())
    if not logger.handlers and not _host_configured():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for name inside the socialsearch namespace.

    Args:
        name: Usually __name__ of the calling module; names outside the
            namespace are prefixed with it.

    Returns:
        Logger instance.
    """
    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
