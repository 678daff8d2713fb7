"""
Configuration Package
Environment driven logging settings
"""

from .settings import PACKAGE_LOGGER, Config, get_config
from .logger import LoggerMixin, PackageJsonFormatter, configure_package_logger, get_logger

__all__ = [
    'PACKAGE_LOGGER',
    'Config',
    'get_config',
    'LoggerMixin',
    'PackageJsonFormatter',
    'configure_package_logger',
    'get_logger'
]
