"""
Note file access.

Provides the local-filesystem implementation of FileAccessProtocol and
thin wrappers that report failures through return values instead of
raising, so editor callbacks can keep going.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from mdpubs.utils.logging import get_logger

logger = get_logger(__name__)


class LocalFileAccess:
	"""FileAccessProtocol implementation backed by pathlib."""

	encoding = "utf-8"

	def read_text(self, path: Path) -> str:
		return Path(path).read_text(encoding=self.encoding)

	def write_text(self, path: Path, content: str) -> None:
		Path(path).write_text(content, encoding=self.encoding)

	def mtime(self, path: Path) -> int:
		return int(Path(path).stat().st_mtime)

	def is_readable(self, path: Path) -> bool:
		path = Path(path)
		return path.is_file() and os.access(path, os.R_OK)


def read_file(path: str | Path) -> Optional[str]:
	"""
	Read a note's full text.

	Parameters:
		path: Note path.

	Returns:
		File content, or None when the file cannot be opened or decoded.
	"""
	try:
		return LocalFileAccess().read_text(Path(path))
	except (OSError, UnicodeDecodeError) as exc:
		logger.debug("Could not open file: %s (%s)", path, exc)
		return None


def write_file(path: str | Path, content: str) -> bool:
	"""
	Replace a note's full text.

	Parameters:
		path: Note path.
		content: New file content.

	Returns:
		True on success, False when the file cannot be written.
	"""
	try:
		LocalFileAccess().write_text(Path(path), content)
	except OSError as exc:
		logger.debug("Could not write to file: %s (%s)", path, exc)
		return False
	return True


def get_file_mtime(path: str | Path) -> int:
	"""Return the modification time in seconds, or 0 if the file is missing."""
	try:
		return LocalFileAccess().mtime(Path(path))
	except OSError:
		return 0


__all__ = ["LocalFileAccess", "read_file", "write_file", "get_file_mtime"]
