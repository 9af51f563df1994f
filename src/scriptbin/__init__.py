"""scriptbin - manage a directory of shell scripts and compile sources into binaries.

By default, internal logging is disabled when used as a library.
Library users can enable logging by calling scriptbin.enable_logging().
"""

from scriptbin.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
