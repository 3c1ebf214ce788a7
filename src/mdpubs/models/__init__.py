"""
mdpubs models.

Key models:
    - Config: Runtime configuration loaded from environment
    - FrontmatterFields: Tags and privacy flag read from a note
    - PublicationInfo: Result of scanning a note for its publication id
"""

from .config import Config, load_env
from .frontmatter import FrontmatterFields, PublicationInfo

__all__ = [
    "Config",
    "load_env",
    "FrontmatterFields",
    "PublicationInfo",
]
