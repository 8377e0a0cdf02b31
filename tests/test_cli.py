import sys
import pathlib
from unittest.mock import patch

import pytest

# Add project root to path for testing
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import sandblast.cli as cli
from sandblast.config import set_config
from sandblast.fetch import FetchResult
from sandblast.errors import FetchError

PARA = "Body" + " of readable article text" * 11 + " with a tail sentence"
PAGE = "<html><head><title>CLI page</title></head><body><p>%s</p></body></html>" % PARA

@pytest.fixture(autouse=True)
def reset_config():
    yield
    set_config(None)

def run(tmp_path, *args):
    cli.main([*args, "--config", str(tmp_path / "missing.yaml")])

def test_extract_local_file(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    run(tmp_path, str(page))
    out = capsys.readouterr().out
    assert out == f"TITLE: CLI page\nTEXT:\n{PARA}\n"

def test_debug_dumps(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    run(tmp_path, str(page), "--debug")
    out = capsys.readouterr().out
    assert "SIMPLIFIED:\n<~transient>[1]" in out
    assert "FLATTENED:\n<~transient>[1]" in out
    assert "CLEANED:\n" in out
    assert "<~textblock>[" in out

def test_url_is_fetched(tmp_path, capsys):
    with patch.object(cli, "fetch_url", return_value=FetchResult(PAGE, 200, "utf-8")) as fetched:
        run(tmp_path, "https://example.com/page")
    fetched.assert_called_once_with("https://example.com/page")
    assert PARA in capsys.readouterr().out

def test_fetch_error_exits(tmp_path, capsys):
    with patch.object(cli, "fetch_url", side_effect=FetchError("https://example.com/", "timed out")):
        with pytest.raises(SystemExit) as excinfo:
            run(tmp_path, "https://example.com/")
    assert excinfo.value.code == 1
    assert "timed out" in capsys.readouterr().err

def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        run(tmp_path, str(tmp_path / "nope.html"))
    assert excinfo.value.code == 1

def test_fragment_extracted_with_default_parser(tmp_path, capsys):
    page = tmp_path / "fragment.html"
    page.write_text("<p>%s</p>" % PARA, encoding="utf-8")
    run(tmp_path, str(page))
    assert capsys.readouterr().out == f"TITLE: \nTEXT:\n{PARA}\n"

def test_fragment_without_root_exits_with_html_parser(tmp_path, capsys):
    page = tmp_path / "fragment.html"
    page.write_text("<p>no root here</p>", encoding="utf-8")
    config = tmp_path / "sandblast.yaml"
    config.write_text("extract:\n  parser: html.parser\n")
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(page), "--config", str(config)])
    assert excinfo.value.code == 1
    assert "Could not find root" in capsys.readouterr().err

if __name__ == "__main__":
    print("run with pytest: these tests use fixtures")
