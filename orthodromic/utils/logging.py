"""Logging utility for orthodromic"""

__all__ = ['LOGGER', 'log_suppressed', 'warn_once']

import logging

LOGGER = logging.getLogger('orthodromic')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning only once per distinct message"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def log_suppressed(func_name: str, error: Exception):
    """
    Records an error that was converted into the failure sentinel, so that
    the error kind is not lost entirely when debug logging is enabled.
    """
    LOGGER.debug(
        '%s failed with %s (%s); returning failure sentinel',
        func_name, type(error).__name__, error
    )
