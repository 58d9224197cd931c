"""Logging setup for the ``vercheck`` logger hierarchy.

Modules log through ``logging.getLogger('vercheck.<area>')``. Applications
that embed vercheck configure output themselves; ``configure_logging`` is the
opt-in setup driven by ``VERCHECK_*`` environment variables.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

from .exceptions import ConfigurationError

PACKAGE_LOGGER = 'vercheck'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# set on handlers owned by configure_logging so repeated calls replace them
_OWNED_ATTR = '_vercheck_owned'


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.environ.get('VERCHECK_LOG_LEVEL') or 'INFO').upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _env_int(setting: str, default: int) -> int:
    raw = os.environ.get(setting)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(setting, f'expected an integer, got {raw!r}') from None
    if value < 0:
        raise ConfigurationError(setting, f'must not be negative, got {value}')
    return value


def _build_handlers() -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    # only add console output when nothing upstream prints records already
    if not logging.getLogger().handlers:
        handlers.append(logging.StreamHandler())
    log_file = os.environ.get('VERCHECK_LOG_FILE')
    if log_file:
        max_bytes = _env_int('VERCHECK_LOG_MAX_BYTES', 5 * 1024 * 1024)
        backups = _env_int('VERCHECK_LOG_BACKUP_COUNT', 5)
        try:
            handlers.append(RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backups))
        except OSError as exc:
            raise ConfigurationError('VERCHECK_LOG_FILE', f'cannot open {log_file}: {exc}') from exc
    return handlers


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the ``vercheck`` logger and return it.

    ``level`` overrides ``VERCHECK_LOG_LEVEL`` (default ``INFO``); unknown
    names fall back to ``INFO``. ``VERCHECK_LOG_FILE`` adds a rotating file
    handler sized by ``VERCHECK_LOG_MAX_BYTES`` and
    ``VERCHECK_LOG_BACKUP_COUNT``. Handlers from a previous call are replaced.

    Raises:
        ConfigurationError: if a size setting is not a non-negative integer or
            the log file cannot be opened.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = _resolve_level(level)
    handlers = _build_handlers()

    for old in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        setattr(handler, _OWNED_ATTR, True)
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(resolved)

    logger.debug('logging configured level=%s handlers=%d',
                 logging.getLevelName(resolved), len(handlers))
    return logger
