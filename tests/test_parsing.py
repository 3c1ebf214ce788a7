from mdpubs.utils.parsing import (
    extract_link_targets,
    is_empty,
    parse_error_response,
    sanitize_filename,
)


def test_extract_link_targets_images_and_links():
	content = "![alt](a.png) and [text](docs/b.md) and ![](c.jpg)"
	assert extract_link_targets(content) == ["a.png", "docs/b.md", "c.jpg"]


def test_extract_link_targets_balanced_parentheses():
	content = "[x](file (copy).png) trailing)"
	assert extract_link_targets(content) == ["file (copy).png"]


def test_extract_link_targets_strips_title_and_angle_brackets():
	content = "[a](my file.png \"A title\") [b](<dir/c d.png>) [c]( e.png 'x')"
	assert extract_link_targets(content) == [
	    "my file.png", "dir/c d.png", "e.png"
	]


def test_extract_link_targets_skips_remote():
	content = ("[a](http://x/y.png) [b](https://x/z.png) "
	           "![c](data:image/png;base64,AAAA) [d](local.png)")
	assert extract_link_targets(content) == ["local.png"]


def test_extract_link_targets_unclosed_link():
	assert extract_link_targets("[a](broken.png and [b](ok.png)") == ["ok.png"]


def test_extract_link_targets_empty_target():
	assert extract_link_targets("[a]() text") == []


def test_sanitize_filename():
	assert sanitize_filename('  a<b>c:d"e/f\\g|h?i*j  ') == "a-b-c-d-e-f-g-h-i-j"


def test_sanitize_filename_truncates():
	assert len(sanitize_filename("x" * 150)) == 100


def test_parse_error_response():
	assert parse_error_response({"error": "bad id"}) == "bad id"
	assert parse_error_response({"message": "try later"}) == "try later"
	assert parse_error_response({
	    "error": "first",
	    "message": "second"
	}) == "first"
	assert parse_error_response("plain") == "plain"
	assert parse_error_response({"status": 500}) == "Unknown error"
	assert parse_error_response(None) == "Unknown error"


def test_is_empty():
	assert is_empty(None)
	assert is_empty("")
	assert not is_empty(" ")
