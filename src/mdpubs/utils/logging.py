"""
Logging configuration module.

Provides centralized logging setup for the helpers with a configurable
level and the ``[MdPubs]`` prefix on every record.
"""

from __future__ import annotations

import logging

LOG_PREFIX = "[MdPubs]"
LOG_FORMAT = f"%(asctime)s %(levelname)s %(name)s: {LOG_PREFIX} %(message)s"


def configure_logging(level: str = "warning") -> None:
	"""
	Configure basic logging with level and format.

	Repeated calls only adjust the root level, so a debug toggle in the
	configuration can be applied after startup.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.WARNING
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "LOG_FORMAT", "LOG_PREFIX"]
