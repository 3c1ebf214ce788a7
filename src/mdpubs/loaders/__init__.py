"""File loading utilities.

Key modules:
    - files: Note read/write and modification time
"""

from .files import LocalFileAccess, read_file, write_file, get_file_mtime

__all__ = [
    "LocalFileAccess",
    "read_file",
    "write_file",
    "get_file_mtime",
]
