"""
Markdown and response parsing utilities.

Provides link-target extraction from markdown, filename sanitisation and
error-message extraction from publishing service responses.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

LINK_OPEN_RE = re.compile(r"!*\[[^\]]*\]\(")
TITLE_RE = re.compile(r"\s+[\"']")
REMOTE_RE = re.compile(r"^(?:https?://|data:)")
INVALID_FILENAME_RE = re.compile(r'[<>:"/\\|?*]')
MAX_FILENAME_LENGTH = 100


def _balanced_end(text: str, start: int) -> Optional[int]:
	"""Return the index of the ``)`` closing the ``(`` at *start*."""
	depth = 0
	for i in range(start, len(text)):
		ch = text[i]
		if ch == '(':
			depth += 1
		elif ch == ')':
			depth -= 1
			if depth == 0:
				return i
	return None


def _clean_target(raw: str) -> str:
	"""Drop an optional link title, surrounding spaces and ``<...>``."""
	m = TITLE_RE.search(raw)
	path = raw[:m.start()] if m else raw
	path = path.strip()
	if path.startswith("<") and path.endswith(">"):
		path = path[1:-1]
	return path


def extract_link_targets(content: str) -> List[str]:
	"""
	Extract local link and image targets from markdown.

	Handles ``[text](target)`` and ``![alt](target)`` with balanced
	parentheses inside the target. Remote (``http(s)://``) and ``data:``
	targets are skipped.

	Parameters:
		content: Markdown text.

	Returns:
		Targets in document order, as written (minus title and ``<>``).
	"""
	targets: List[str] = []
	pos = 0
	while True:
		m = LINK_OPEN_RE.search(content, pos)
		if not m:
			break
		open_idx = m.end() - 1
		close_idx = _balanced_end(content, open_idx)
		if close_idx is None:
			pos = m.end()
			continue
		pos = close_idx + 1
		path = _clean_target(content[open_idx + 1:close_idx])
		if path and not REMOTE_RE.match(path):
			targets.append(path)
	return targets


def sanitize_filename(filename: str) -> str:
	"""
	Make a title safe to use as a note filename.

	Parameters:
		filename: Raw filename or title.

	Returns:
		Name with ``<>:"/\\|?*`` replaced by ``-``, trimmed and capped at
		100 characters.
	"""
	filename = INVALID_FILENAME_RE.sub("-", filename).strip()
	return filename[:MAX_FILENAME_LENGTH]


def parse_error_response(response: Any) -> str:
	"""
	Extract a human-readable error from a publishing service response.

	Parameters:
		response: Decoded response payload (mapping or string).

	Returns:
		The ``error`` or ``message`` entry of a mapping, the string itself,
		or ``"Unknown error"``.
	"""
	if isinstance(response, dict):
		if response.get("error"):
			return str(response["error"])
		if response.get("message"):
			return str(response["message"])
	elif isinstance(response, str):
		return response
	return "Unknown error"


def is_empty(value: Optional[str]) -> bool:
	"""Return True for None or an empty string."""
	return not value


__all__ = [
    "extract_link_targets",
    "sanitize_filename",
    "parse_error_response",
    "is_empty",
]
