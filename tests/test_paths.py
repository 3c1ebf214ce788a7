from pathlib import Path

from mdpubs.utils.paths import expand_path, is_file_in_watched_folders


def test_expand_path_home(monkeypatch, tmp_path):
	monkeypatch.setenv("HOME", str(tmp_path))
	assert expand_path("~/notes/a.md") == tmp_path / "notes" / "a.md"


def test_expand_path_env_var(monkeypatch, tmp_path):
	monkeypatch.setenv("NOTES_DIR", str(tmp_path))
	assert expand_path("$NOTES_DIR/a.md") == tmp_path / "a.md"


def test_is_file_in_watched_folders(monkeypatch, tmp_path):
	monkeypatch.setenv("HOME", str(tmp_path))
	folders = ["~/notes", "/srv/blog"]
	assert is_file_in_watched_folders(tmp_path / "notes" / "a.md", folders)
	assert is_file_in_watched_folders("~/notes/sub/b.md", folders)
	assert is_file_in_watched_folders(Path("/srv/blog/post.md"), folders)
	assert not is_file_in_watched_folders("/tmp/elsewhere.md", folders)


def test_is_file_in_watched_folders_empty():
	assert not is_file_in_watched_folders("/notes/a.md", [])
	assert not is_file_in_watched_folders("/notes/a.md", None)
