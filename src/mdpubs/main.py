from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from typer.main import get_command

from mdpubs.core.frontmatter import extract_publication_id, parse_frontmatter
from mdpubs.core.notes import (
    extract_title,
    find_local_file_paths,
    stamp_publication_id,
)
from mdpubs.loaders.files import read_file
from mdpubs.models.config import Config, load_env
from mdpubs.ui.notify import notify
from mdpubs.utils.logging import configure_logging
from mdpubs.utils.paths import is_file_in_watched_folders

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the mdpubs CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _setup() -> Config:
	"""Load `.env`, build the configuration and apply its log level."""
	load_env()
	config = Config()
	configure_logging(config.effective_log_level)
	return config


def _read_note(path: Path, config: Config) -> str:
	content = read_file(path)
	if content is None:
		notify(f"Could not read {path}", logging.ERROR, config=config)
		raise typer.Exit(code=1)
	return content


def _fmt(value: object) -> str:
	if value is None:
		return "-"
	if isinstance(value, bool):
		return "yes" if value else "no"
	return str(value)


@cli.command()
def show(path: Path = typer.Argument(..., help="Markdown note")) -> None:
	"""Show the publishing metadata of a note."""
	config = _setup()
	content = _read_note(path, config)
	note_id, has_id_field, _, extra = extract_publication_id(content)
	metadata, _ = parse_frontmatter(content)

	typer.echo(f"title: {extract_title(path, content)}")
	typer.echo(f"mdpubs: {_fmt(note_id)}")
	typer.echo(f"has id field: {_fmt(has_id_field)}")
	typer.echo(f"private: {_fmt(extra.is_private)}")
	tags = ", ".join(extra.tags) if extra.tags is not None else None
	typer.echo(f"tags: {_fmt(tags)}")
	typer.echo(
	    f"watched: {_fmt(is_file_in_watched_folders(path, config.watched_folders))}"
	)
	for key, value in metadata.items():
		typer.echo(f"  {key} = {_fmt(value)}")


@cli.command()
def stamp(
    path: Path = typer.Argument(..., help="Markdown note"),
    note_id: int = typer.Argument(..., help="Publication id to record"),
) -> None:
	"""Write a publication id into a note's frontmatter."""
	config = _setup()
	if not stamp_publication_id(path, note_id):
		notify(f"Could not update {path}", logging.ERROR, config=config)
		raise typer.Exit(code=1)
	notify(f"Recorded mdpubs id {note_id} in {path.name}", config=config)


@cli.command()
def links(path: Path = typer.Argument(..., help="Markdown note")) -> None:
	"""List local files referenced by a note."""
	config = _setup()
	content = _read_note(path, config)
	for target, resolved in find_local_file_paths(content,
	                                              path.parent).items():
		typer.echo(f"{target} -> {resolved}")


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint for the `mdpubs` console script.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)
	return get_command(cli).main(
	    args=args,
	    prog_name="mdpubs",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
