"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - parsing: Markdown link and response parsing utilities
    - paths: Path expansion and watched-folder checks
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .parsing import (
    extract_link_targets,
    sanitize_filename,
    parse_error_response,
    is_empty,
)
from .paths import expand_path, is_file_in_watched_folders
from .logging import configure_logging, get_logger
from .protocols import FileAccessProtocol

__all__ = [
    # parsing
    "extract_link_targets",
    "sanitize_filename",
    "parse_error_response",
    "is_empty",
    # paths
    "expand_path",
    "is_file_in_watched_folders",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "FileAccessProtocol",
]
