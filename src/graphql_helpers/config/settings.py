"""
Logging settings for graphql-helpers
Read from environment variables when a Config is created
"""

import os

PACKAGE_LOGGER = 'graphql_helpers'

LOG_FORMATS = ('json', 'text')


class Config:
    """
    Package settings

    GRAPHQL_HELPERS_LOG_LEVEL sets the package logger level; left unset the
    level is inherited from the application's logging setup.
    GRAPHQL_HELPERS_LOG_FORMAT ('json' or 'text') attaches a stderr handler
    to the package logger; left unset the library emits nothing by itself.
    """

    def __init__(self, log_level: str = None, log_format: str = None):
        if log_level is None:
            log_level = os.getenv('GRAPHQL_HELPERS_LOG_LEVEL', '')
        if log_format is None:
            log_format = os.getenv('GRAPHQL_HELPERS_LOG_FORMAT', '')

        self.LOG_LEVEL = log_level.upper()
        self.LOG_FORMAT = log_format.lower()

        if self.LOG_FORMAT and self.LOG_FORMAT not in LOG_FORMATS:
            raise ValueError(
                "Unknown log format %r, expected one of %s" % (log_format, ', '.join(LOG_FORMATS))
            )


def get_config() -> Config:
    """Settings from the current environment"""
    return Config()
