"""
Protocol definitions for dependency injection.

Defines the file-access interface the note helpers depend on so callers
(and tests) can supply their own implementation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileAccessProtocol(Protocol):
	"""
	Protocol for raw note file access.

	Defines the expected methods for reading and writing a note's full text.
	"""

	def read_text(self, path: Path) -> str:
		"""Return the full text of *path*."""
		...

	def write_text(self, path: Path, content: str) -> None:
		"""Replace the full text of *path*."""
		...

	def mtime(self, path: Path) -> int:
		"""Return the modification time of *path* in whole seconds."""
		...

	def is_readable(self, path: Path) -> bool:
		"""Return True if *path* is a readable regular file."""
		...


__all__ = ["FileAccessProtocol"]
