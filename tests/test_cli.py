import pytest

from mdpubs.main import entrypoint


@pytest.fixture(autouse=True)
def _quiet(monkeypatch, tmp_path):
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv("MDPUBS_NOTIFICATIONS", "false")
	monkeypatch.delenv("MDPUBS_WATCHED_FOLDERS", raising=False)
	monkeypatch.delenv("MDPUBS_DEBUG", raising=False)


def test_show(tmp_path, capsys):
	note = tmp_path / "note.md"
	note.write_text(
	    "---\nmdpubs: 12\nmdpubs-is-private: true\ntags: a, b\n---\n# Hello\n",
	    encoding="utf-8")
	entrypoint(["show", str(note)], standalone_mode=False)
	out = capsys.readouterr().out
	assert "title: Hello" in out
	assert "mdpubs: 12" in out
	assert "has id field: yes" in out
	assert "private: yes" in out
	assert "tags: a, b" in out
	assert "watched: no" in out
	assert "  mdpubs = 12" in out


def test_show_watched(tmp_path, capsys, monkeypatch):
	monkeypatch.setenv("MDPUBS_WATCHED_FOLDERS", str(tmp_path))
	note = tmp_path / "plain.md"
	note.write_text("text", encoding="utf-8")
	entrypoint(["show", str(note)], standalone_mode=False)
	out = capsys.readouterr().out
	assert "title: plain" in out
	assert "mdpubs: -" in out
	assert "has id field: no" in out
	assert "tags: -" in out
	assert "watched: yes" in out


def test_show_missing_file(tmp_path):
	code = entrypoint(["show", str(tmp_path / "missing.md")],
	                  standalone_mode=False)
	assert code == 1


def test_stamp(tmp_path):
	note = tmp_path / "note.md"
	note.write_text("body\n", encoding="utf-8")
	entrypoint(["stamp", str(note), "31"], standalone_mode=False)
	assert note.read_text(encoding="utf-8") == "---\nmdpubs: 31\n---\nbody\n"


def test_stamp_missing_file(tmp_path):
	code = entrypoint(["stamp", str(tmp_path / "missing.md"), "1"],
	                  standalone_mode=False)
	assert code == 1


def test_links(tmp_path, capsys):
	(tmp_path / "a.png").write_bytes(b"")
	note = tmp_path / "note.md"
	note.write_text("![a](a.png) [b](b.png)", encoding="utf-8")
	entrypoint(["links", str(note)], standalone_mode=False)
	out = capsys.readouterr().out
	assert f"a.png -> {tmp_path / 'a.png'}" in out
	assert "b.png" not in out


def test_help_does_not_crash():
	with pytest.raises(SystemExit) as exc_info:
		entrypoint(["--help"], standalone_mode=True)
	assert exc_info.value.code == 0


def test_show_undecodable_file(tmp_path):
	note = tmp_path / "bad.md"
	note.write_bytes(b"\xff body")
	code = entrypoint(["show", str(note)], standalone_mode=False)
	assert code == 1


def test_stamp_undecodable_file(tmp_path):
	note = tmp_path / "bad.md"
	note.write_bytes(b"\xff body")
	code = entrypoint(["stamp", str(note), "3"], standalone_mode=False)
	assert code == 1
	assert note.read_bytes() == b"\xff body"
