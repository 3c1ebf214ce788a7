"""User interface components.

Key modules:
    - notify: Rich-based user notifications
"""

from mdpubs.ui.notify import notify

__all__ = ["notify"]
