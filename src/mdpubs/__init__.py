"""
mdpubs - note helpers for publishing markdown notes.

This package reads and rewrites the frontmatter of markdown notes (the
``mdpubs`` publication id, tags and privacy flag) and provides the small
helpers the editor integration needs around a publish.

Main entry points:
    - mdpubs.core.frontmatter: frontmatter parsing and id stamping
    - mdpubs.core.notes: attachments, titles and publish-result handling
    - mdpubs.main: CLI entrypoint
"""
