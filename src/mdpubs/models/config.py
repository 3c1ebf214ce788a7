from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	debug: bool = Field(False, alias="MDPUBS_DEBUG",
	                    description="Emit debug logging")
	notifications: bool = Field(
	    True,
	    alias="MDPUBS_NOTIFICATIONS",
	    description="Show user-facing notifications",
	)
	watched_folders: Any = Field(
	    default_factory=list,
	    alias="MDPUBS_WATCHED_FOLDERS",
	    description="Folders where new notes are created and published",
	)
	log_level: str = Field("warning", alias="MDPUBS_LOG_LEVEL",
	                       description="Log level when debug is off")

	@field_validator("watched_folders", mode="before")
	@classmethod
	def split_watched_folders(cls, v: Any) -> list[str]:
		"""Normalize watched folders to a list regardless of input format."""
		if v is None or v == "":
			return []
		if isinstance(v, list):
			return v
		if isinstance(v, tuple):
			return list(v)
		# fallback: comma-separated string
		return [p.strip() for p in str(v).split(",") if p.strip()]

	@property
	def effective_log_level(self) -> str:
		"""Return "debug" when debug is enabled, else log_level."""
		return "debug" if self.debug else self.log_level


__all__ = ["Config", "load_env"]
