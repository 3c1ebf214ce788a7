"""
User-facing notifications.

Renders short ``[MdPubs]`` messages on a Rich console, gated by the
``notifications`` setting.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

from mdpubs.models.config import Config
from mdpubs.utils.logging import LOG_PREFIX

_LEVEL_STYLES = {
    logging.DEBUG: "dim",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "bold red",
}


def notify(message: str,
           level: int = logging.INFO,
           *,
           config: Config,
           console: Console | None = None) -> bool:
	"""
	Show a notification to the user.

	Parameters:
		message: Text to display.
		level: A logging level; selects the style.
		config: Runtime configuration.
		console: Console to print on (defaults to stderr).

	Returns:
		True if the message was shown, False when notifications are off.
	"""
	if not config.notifications:
		return False
	console = console or Console(stderr=True)
	style = _LEVEL_STYLES.get(level, "bold red" if level > logging.ERROR else "")
	console.print(Text(f"{LOG_PREFIX} {message}", style=style))
	return True


__all__ = ["notify"]
