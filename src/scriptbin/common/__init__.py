"""Common models and helpers used across scriptbin modules."""

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, AppPaths
from .paths import (
    expand_user_path,
    get_data_directory,
    get_executable_path,
    get_home_directory,
    get_working_directory,
)

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "expand_user_path",
    "get_data_directory",
    "get_executable_path",
    "get_home_directory",
    "get_working_directory",
    "setup_cli_logging",
]
