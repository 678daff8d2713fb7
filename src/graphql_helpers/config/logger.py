"""
Package logging built on python-json-logger
"""

import logging
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

from .settings import PACKAGE_LOGGER, Config, get_config

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class PackageJsonFormatter(jsonlogger.JsonFormatter):
    """One JSON object per record: timestamp, level, logger, message and extras"""

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s',
            rename_fields={'levelname': 'level', 'name': 'logger'}
        )

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()


def configure_package_logger(config: Config = None) -> logging.Logger:
    """
    Apply settings to the ``graphql_helpers`` logger

    Runs once on package import with settings from the environment. Calling
    it again replaces the handler installed before.

    Args:
        config: Settings, read from the environment when omitted

    Returns:
        The package logger
    """
    config = config or get_config()
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, '_graphql_helpers', False):
            logger.removeHandler(handler)
            handler.close()

    if config.LOG_FORMAT == 'json':
        handler = logging.StreamHandler()
        handler.setFormatter(PackageJsonFormatter())
    elif config.LOG_FORMAT == 'text':
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    else:
        handler = logging.NullHandler()
    handler._graphql_helpers = True
    logger.addHandler(handler)

    if config.LOG_LEVEL:
        logger.setLevel(config.LOG_LEVEL)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance, the package logger when no name is given
    """
    return logging.getLogger(name or PACKAGE_LOGGER)


class LoggerMixin:
    """Per-class logger under the package logger"""

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(self.__class__.__module__ + '.' + self.__class__.__name__)

    def log_debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=kwargs)
