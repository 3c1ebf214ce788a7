"""
Frontmatter codec for published notes.

Reads and rewrites the restricted `---` delimited block at the top of a
markdown note. Parsing is line oriented and never delegates to a YAML
engine; mutation replaces or inserts a single line so the rest of the
user's block is left byte for byte as written.

Grammar:
    - The block opens with ``---`` and a line break at offset 0 and
      closes at the first ``\\n---\\n`` after it.
    - Each physical line is ``key: value``; keys and values may be
      wrapped in single or double quotes.
    - Lines starting with ``#`` are comments.
    - ``tags``/``mdpubs-tags`` take an inline comma list (optionally in
      ``[...]``) or a following run of ``- item`` lines.

Nothing here raises on malformed input. A missing or unterminated block
is reported as "no frontmatter" and the content is returned untouched.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any

from mdpubs.models.frontmatter import FrontmatterFields, PublicationInfo
from mdpubs.utils.logging import get_logger

logger = get_logger(__name__)

START_MARKER = "---\n"
END_MARKER = "\n---\n"

ID_KEY = "mdpubs"
PRIVATE_KEY = "mdpubs-is-private"
TAG_KEYS = ("tags", "mdpubs-tags")

LINE_RE = re.compile(r"[^\r\n]+")
COMMENT_RE = re.compile(r"^\s*#")
LIST_ITEM_RE = re.compile(r"^\s*-")
LIST_VALUE_RE = re.compile(r"^\s*-\s*(.+)$")
INT_RE = re.compile(r"^[+-]?\d+$")
HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
ID_VALUE_RE = re.compile(r"^\d+$")
# Key text (indent, optional matching quotes, colon) is kept; the rest of
# the line is replaced.
ID_LINE_RE = re.compile(r"""^([ \t]*(["']?)mdpubs\2[ \t]*:)[^\r\n]*""",
                        re.M)


class ScanState(Enum):
	"""Line scanner state while walking the frontmatter block."""

	SCANNING_KEYS = "scanning_keys"
	COLLECTING_TAGS = "collecting_tags"


def _split_block(content: str) -> tuple[str, str] | None:
	"""Return ``(block, body)`` or None when there is no terminated block."""
	if not content.startswith(START_MARKER):
		return None
	# The closing marker may reuse the opening line break (empty block).
	end = content.find(END_MARKER, len(START_MARKER) - 1)
	if end < 0:
		return None
	block = content[len(START_MARKER):end]
	body = content[end + len(END_MARKER):]
	return block, body


def _unquote(text: str) -> str:
	"""Strip one pair of matching surrounding quotes."""
	if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
		return text[1:-1]
	return text


def _parse_number(value: str) -> int | float | None:
	if INT_RE.match(value):
		return int(value)
	if HEX_RE.match(value):
		return int(value, 16)
	if FLOAT_RE.match(value):
		return float(value)
	return None


def _coerce_value(raw: str) -> Any:
	"""
	Coerce a frontmatter scalar to a Python value.

	Parameters:
		raw: Trimmed value text, possibly quoted.

	Returns:
		int/float for numbers, bool for true/false (any case), None for
		``null`` or an empty value, otherwise the unquoted string.
	"""
	value = _unquote(raw)
	number = _parse_number(value)
	if number is not None:
		return number
	lowered = value.lower()
	if lowered == "true":
		return True
	if lowered == "false":
		return False
	if lowered == "null" or value == "":
		return None
	return value


def _split_inline_tags(value: str) -> list[str]:
	if value.startswith("[") and value.endswith("]"):
		value = value[1:-1]
	tags = (_unquote(piece.strip()) for piece in value.split(","))
	return [t for t in tags if t]


def has_frontmatter(content: str) -> bool:
	"""Return True when content starts with a terminated frontmatter block."""
	return _split_block(content) is not None


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
	"""
	Parse the frontmatter block into a flat mapping.

	Best-effort reader for general metadata lookups. Later duplicate keys
	overwrite earlier ones and lines without a colon are skipped.

	Parameters:
		content: The full note text.

	Returns:
		Tuple of (metadata dict, body text). Returns an empty dict and the
		original content when the block is missing or unterminated.
	"""
	split = _split_block(content)
	if split is None:
		return {}, content
	block, body = split

	metadata: dict[str, Any] = {}
	for line in LINE_RE.findall(block):
		line = line.strip()
		if not line or line.startswith("#"):
			continue
		key, sep, value = line.partition(":")
		if not sep:
			continue
		metadata[_unquote(key.strip())] = _coerce_value(value.strip())
	return metadata, body


def extract_publication_id(content: str) -> PublicationInfo:
	"""
	Scan the frontmatter for the publication id and publishing fields.

	A non-numeric ``mdpubs`` value marks the field as present with no id.
	Block tags are collected from ``- item`` lines directly after an empty
	``tags:`` key; the first line that is neither a list item nor a comment
	ends the list and is then read as a key.

	Parameters:
		content: The full note text.

	Returns:
		PublicationInfo(publication_id, has_id_field, body, extra). With no
		terminated block: ``(None, False, content, FrontmatterFields())``.
	"""
	split = _split_block(content)
	if split is None:
		return PublicationInfo(None, False, content, FrontmatterFields())
	block, body = split

	logger.debug("Raw frontmatter:\n%s", block)

	publication_id: int | None = None
	has_id_field = False
	is_private: bool | None = None
	tags: list[str] | None = None
	state = ScanState.SCANNING_KEYS

	for line in LINE_RE.findall(block):
		if COMMENT_RE.match(line):
			continue
		if state is ScanState.COLLECTING_TAGS:
			if LIST_ITEM_RE.match(line):
				m = LIST_VALUE_RE.match(line)
				tag = _unquote(m.group(1).strip()) if m else ""
				if tag:
					tags.append(tag)
				continue
			state = ScanState.SCANNING_KEYS

		key, sep, value = line.partition(":")
		if not sep:
			continue
		key = _unquote(key.strip())
		value = _unquote(value.strip())

		if key == ID_KEY:
			has_id_field = True
			if value:
				publication_id = (int(value)
				                  if ID_VALUE_RE.match(value) else None)
		elif key == PRIVATE_KEY:
			lowered = value.lower()
			if lowered == "true":
				is_private = True
			elif lowered == "false":
				is_private = False
		elif key in TAG_KEYS:
			if value and value != "[]":
				tags = _split_inline_tags(value)
			else:
				tags = []
				state = ScanState.COLLECTING_TAGS

	extra = FrontmatterFields(tags=tags, is_private=is_private)
	if logger.isEnabledFor(logging.DEBUG):
		logger.debug("Parsed mdpubs id=%s has_field=%s extra=%s",
		             publication_id, has_id_field, extra.model_dump())
	return PublicationInfo(publication_id, has_id_field, body, extra)


def set_publication_id(content: str, note_id: int) -> str:
	"""
	Write the publication id into an existing frontmatter block.

	Only the first ``mdpubs:`` line is rewritten (its key text is kept); if
	there is none, ``mdpubs: <id>`` is inserted right after the opening
	marker. No other byte of the note changes.

	Parameters:
		content: The full note text.
		note_id: Publication id to store.

	Returns:
		The updated note text, or the original content when it has no
		terminated frontmatter block (use add_publication_id instead).
	"""
	split = _split_block(content)
	if split is None:
		return content
	block, _ = split

	start = len(START_MARKER)
	new_block, count = ID_LINE_RE.subn(lambda m: f"{m.group(1)} {note_id}",
	                                   block,
	                                   count=1)
	if count:
		return content[:start] + new_block + content[start + len(block):]
	return f"{START_MARKER}{ID_KEY}: {note_id}\n{content[start:]}"


def add_publication_id(content: str, note_id: int) -> str:
	"""Prepend a fresh ``mdpubs`` frontmatter block to content without one."""
	return f"{START_MARKER}{ID_KEY}: {note_id}\n---\n{content}"


__all__ = [
    "ScanState",
    "has_frontmatter",
    "parse_frontmatter",
    "extract_publication_id",
    "set_publication_id",
    "add_publication_id",
]
