"""Frontmatter codec and note helpers.

Key modules:
    - frontmatter: Parsing and in-place rewriting of the `---` block
    - notes: Attachment discovery, titles and publication id stamping
"""

from .frontmatter import (
    ScanState,
    has_frontmatter,
    parse_frontmatter,
    extract_publication_id,
    set_publication_id,
    add_publication_id,
)
from .notes import (
    find_local_file_paths,
    extract_note_id,
    get_file_extension,
    extract_title,
    apply_publication_id,
    stamp_publication_id,
)

__all__ = [
    # frontmatter
    "ScanState",
    "has_frontmatter",
    "parse_frontmatter",
    "extract_publication_id",
    "set_publication_id",
    "add_publication_id",
    # notes
    "find_local_file_paths",
    "extract_note_id",
    "get_file_extension",
    "extract_title",
    "apply_publication_id",
    "stamp_publication_id",
]
