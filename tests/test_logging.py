"""Tests for the logging module."""

from __future__ import annotations

import logging

from mdpubs.utils.logging import LOG_PREFIX, configure_logging, get_logger


class TestConfigureLogging:
	"""Tests for configure_logging()."""

	def test_sets_root_level(self) -> None:
		configure_logging("debug")
		assert logging.getLogger().level == logging.DEBUG
		configure_logging("warning")
		assert logging.getLogger().level == logging.WARNING

	def test_unknown_level_falls_back_to_warning(self) -> None:
		configure_logging("chatty")
		assert logging.getLogger().level == logging.WARNING

	def test_codec_debug_output(self, caplog) -> None:
		from mdpubs.core.frontmatter import extract_publication_id

		with caplog.at_level(logging.DEBUG, logger="mdpubs"):
			extract_publication_id("---\nmdpubs: 5\n---\n")
		assert "Raw frontmatter" in caplog.text
		assert "id=5" in caplog.text


def test_get_logger_name() -> None:
	assert get_logger("mdpubs.x").name == "mdpubs.x"


def test_prefix() -> None:
	assert LOG_PREFIX == "[MdPubs]"


def test_codec_skips_debug_dump_when_disabled(caplog, monkeypatch) -> None:
	"""Parsed fields are not serialised unless debug logging is on."""
	from mdpubs.core.frontmatter import extract_publication_id
	from mdpubs.models.frontmatter import FrontmatterFields

	def _fail(self, *args, **kwargs):
		raise AssertionError("model_dump called with debug disabled")

	monkeypatch.setattr(FrontmatterFields, "model_dump", _fail)
	with caplog.at_level(logging.WARNING, logger="mdpubs"):
		info = extract_publication_id("---\nmdpubs: 5\n---\n")
	assert info.publication_id == 5
	assert "Parsed mdpubs" not in caplog.text
