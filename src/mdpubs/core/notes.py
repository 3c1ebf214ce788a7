"""
Note helpers used around publishing.

Glue between the editor-facing handlers and the frontmatter codec:
resolving local attachments, deriving titles and ids from a note, and
stamping the publication id back into the file after a publish.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from mdpubs.core.frontmatter import (
    add_publication_id,
    has_frontmatter,
    parse_frontmatter,
    set_publication_id,
)
from mdpubs.loaders.files import LocalFileAccess
from mdpubs.utils.logging import get_logger
from mdpubs.utils.parsing import extract_link_targets
from mdpubs.utils.paths import expand_path
from mdpubs.utils.protocols import FileAccessProtocol

logger = get_logger(__name__)

FIRST_LINE_RE = re.compile(r"^([^\r\n]*)")
HEADING_RE = re.compile(r"^#\s+(.+)")


def find_local_file_paths(
        content: str,
        base_dir: str | Path,
        files: Optional[FileAccessProtocol] = None) -> dict[str, Path]:
	"""
	Resolve the local files a note links to.

	Targets starting with ``/`` or ``~`` are treated as absolute; anything
	else is resolved against *base_dir*. Targets that are not readable
	files are left out.

	Parameters:
		content: Markdown text of the note.
		base_dir: Directory of the note.
		files: File access implementation (defaults to the local disk).

	Returns:
		Mapping of the target as written in the note to its resolved path.
	"""
	files = files or LocalFileAccess()
	paths: dict[str, Path] = {}
	for target in extract_link_targets(content):
		if target.startswith(("/", "~")):
			resolved = expand_path(target)
		else:
			resolved = expand_path(Path(base_dir) / target)
		if files.is_readable(resolved):
			paths[target] = resolved
		else:
			logger.debug("File not found or not readable: %s", resolved)
	return paths


def extract_note_id(filepath: str | Path) -> Optional[int]:
	"""Return the legacy note id encoded as a numeric filename, if any."""
	stem = Path(filepath).stem
	return int(stem) if stem.isdecimal() and stem.isascii() else None


def get_file_extension(filepath: str | Path | None) -> str:
	if not filepath:
		return ""
	return Path(filepath).suffix[1:]


def extract_title(filepath: str | Path, content: str) -> str:
	"""
	Derive a note title.

	Uses the first body line when it is a level-one ``# `` heading,
	otherwise the filename without its extension.
	"""
	_, body = parse_frontmatter(content)
	first_line = FIRST_LINE_RE.match(body).group(1)
	m = HEADING_RE.match(first_line)
	if m:
		return m.group(1)
	return Path(filepath).stem


def apply_publication_id(content: str, note_id: int) -> str:
	"""
	Record *note_id* in the note's frontmatter.

	Rewrites the existing block when there is one, otherwise prepends a
	new block.
	"""
	if has_frontmatter(content):
		return set_publication_id(content, note_id)
	return add_publication_id(content, note_id)


def stamp_publication_id(path: str | Path,
                         note_id: int,
                         files: Optional[FileAccessProtocol] = None) -> bool:
	"""
	Write the publication id returned by a publish back into the note.

	The file is only rewritten when its text actually changes.

	Parameters:
		path: Note path.
		note_id: Publication id assigned by the service.
		files: File access implementation (defaults to the local disk).

	Returns:
		True if the note now carries the id, False on read/write failure.
	"""
	files = files or LocalFileAccess()
	path = Path(path)
	try:
		content = files.read_text(path)
	except (OSError, UnicodeDecodeError) as exc:
		logger.warning("Could not open file: %s (%s)", path, exc)
		return False

	updated = apply_publication_id(content, note_id)
	if updated == content:
		return True
	try:
		files.write_text(path, updated)
	except OSError as exc:
		logger.warning("Could not write to file: %s (%s)", path, exc)
		return False
	logger.debug("Stamped mdpubs id %s into %s", note_id, path)
	return True


__all__ = [
    "find_local_file_paths",
    "extract_note_id",
    "get_file_extension",
    "extract_title",
    "apply_publication_id",
    "stamp_publication_id",
]
