"""
Path utilities.

Expands user-supplied paths and checks whether a note lives inside one
of the configured watched folders.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


def expand_path(path: str | Path) -> Path:
	"""Expand ``~`` and environment variables in *path*."""
	return Path(os.path.expandvars(os.path.expanduser(str(path))))


def is_file_in_watched_folders(filepath: str | Path,
                               watched_folders: Iterable[str | Path]) -> bool:
	"""
	Return True when *filepath* sits under one of *watched_folders*.

	Membership is a plain prefix test on the expanded path strings, so a
	folder ``~/notes`` also matches ``~/notes-archive/x.md``.

	Parameters:
		filepath: Path of the note.
		watched_folders: Folders configured for new-note creation.

	Returns:
		True if the note is inside a watched folder.
	"""
	expanded = str(expand_path(filepath))
	for folder in watched_folders or []:
		if expanded.startswith(str(expand_path(folder))):
			return True
	return False


__all__ = ["expand_path", "is_file_in_watched_folders"]
