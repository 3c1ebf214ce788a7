"""
Frontmatter result models.

Defines the structures returned by the frontmatter codec when a note is
scanned for its publication id and the auxiliary publishing fields.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, Field


class FrontmatterFields(BaseModel):
	"""Publishing fields recognised alongside the publication id."""

	tags: list[str] | None = Field(
	    default=None,
	    description="Tags from `tags`/`mdpubs-tags`; None when no key is present",
	)
	is_private: bool | None = Field(
	    default=None, description="Value of `mdpubs-is-private`, if set")


class PublicationInfo(NamedTuple):
	"""Result of scanning a note for its `mdpubs` field.

	Unpacks as ``(publication_id, has_id_field, body, extra)``.
	"""

	publication_id: int | None
	has_id_field: bool
	body: str
	extra: FrontmatterFields


__all__ = ["FrontmatterFields", "PublicationInfo"]
