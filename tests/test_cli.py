"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from md2toc.__main__ import main
from md2toc.exceptions import PostNotFoundError
from md2toc.schemas import PostDetail

NESTED_EXAMPLE = "# Intro\n## Background\n## Method\n### Details\n# Conclusion\n"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler installed by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Markdown file with the nested example."""
    path = tmp_path / "post.md"
    path.write_text(NESTED_EXAMPLE, encoding="utf-8")
    return path


class TestMain:
    """Tests for main function."""

    def test_json_output(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Default output is the JSON forest."""
        assert main([str(markdown_file)]) == 0

        toc = json.loads(capsys.readouterr().out)
        assert [node["id"] for node in toc] == ["intro", "conclusion"]
        assert toc[0]["children"][1]["children"][0]["text"] == "Details"

    def test_outline_output(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Outline format prints a nested markdown list."""
        assert main(["--format", "outline", str(markdown_file)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == "- [Intro](#intro)"
        assert "    - [Details](#details)" in out

    def test_ids_output(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Ids format prints one tab-separated line per heading."""
        assert main(["--format", "ids", str(markdown_file)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "1\tintro\tIntro"
        assert len(lines) == 5

    def test_html_output(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Html format renders the document."""
        assert main(["--format", "html", str(markdown_file)]) == 0

        assert '<h3 id="details">Details</h3>' in capsys.readouterr().out

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """A dash reads markdown from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("plain text only\n"))

        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing file exits with status 1."""
        assert main([str(tmp_path / "absent.md")]) == 1

        assert "not found" in capsys.readouterr().err

    def test_invalid_utf8_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Undecodable bytes exit with status 1 and a message."""
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe# bad")

        assert main([str(path)]) == 1

        assert "md2toc:" in capsys.readouterr().err

    def test_requires_input(self) -> None:
        """Either a path or a slug is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    def test_slug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Posts can be fetched from the site by slug."""
        post = PostDetail(id=1, slug="hello", title="Hello", content_md="## Only\n")

        with patch("md2toc.__main__.fetch_post", AsyncMock(return_value=post)) as mock_fetch:
            assert main(["--slug", "hello", "--site-url", "http://blog.test"]) == 0

        mock_fetch.assert_awaited_once_with("hello", site_url="http://blog.test")
        assert json.loads(capsys.readouterr().out)[0]["id"] == "only"

    def test_slug_not_found(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Fetch errors exit with status 1."""
        mock_fetch = AsyncMock(side_effect=PostNotFoundError("Post not found: gone"))

        with patch("md2toc.__main__.fetch_post", mock_fetch):
            assert main(["--slug", "gone"]) == 1

        assert "Post not found: gone" in capsys.readouterr().err
