"""Tests for HTML rendering and heading id annotation."""

from __future__ import annotations

import re

from md2toc.rendering import add_heading_ids, render_markdown, render_post
from md2toc.schemas import RenderedPost
from md2toc.toc import extract_toc, flatten_toc


class TestAddHeadingIds:
    """Tests for add_heading_ids function."""

    def test_sets_id_from_text(self) -> None:
        """Heading text is slugified into the id attribute."""
        assert add_heading_ids("<h2>Hello, World!</h2>") == '<h2 id="hello-world">Hello, World!</h2>'

    def test_math_and_code_are_ignored(self) -> None:
        """Math spans and code do not contribute to the id."""
        html = '<h3>Proof of <span class="math inline">x^2</span> with <code>f()</code></h3>'

        result = add_heading_ids(html)

        assert 'id="proof-of-with"' in result

    def test_empty_heading_gets_no_id(self) -> None:
        """Headings without text are left untouched."""
        assert "id=" not in add_heading_ids('<h4><span class="math inline">x</span></h4>')

    def test_non_headings_untouched(self) -> None:
        """Other elements keep their attributes."""
        assert add_heading_ids("<p>Body</p>") == "<p>Body</p>"

    def test_empty_html(self) -> None:
        """Empty input yields an empty fragment."""
        assert add_heading_ids("") == ""


class TestRenderMarkdown:
    """Tests for render_markdown function."""

    def test_headings_have_ids(self) -> None:
        """Rendered headings are addressable."""
        html = render_markdown("# Intro\n\n## Method\n")

        assert '<h1 id="intro">Intro</h1>' in html
        assert '<h2 id="method">Method</h2>' in html

    def test_ids_match_outline(self, sample_markdown: str) -> None:
        """Every outline id exists in the rendered document."""
        html = render_markdown(sample_markdown)
        rendered_ids = set(re.findall(r'id="([^"]+)"', html))

        for node in flatten_toc(extract_toc(sample_markdown)):
            assert node.id in rendered_ids

    def test_math_heading_matches_outline(self) -> None:
        """Inline math in a heading is excluded on both sides."""
        text = "## Proof of $x^2$\n"
        html = render_markdown(text)

        assert 'id="proof-of"' in html
        assert "x^2" in html
        assert extract_toc(text)[0].id == "proof-of"

    def test_leading_style_block_is_kept(self) -> None:
        """Raw head-only elements stay in the fragment."""
        html = render_markdown("<style>p{color:red}</style>\n\n# A\n")

        assert "<style>p{color:red}</style>" in html
        assert '<h1 id="a">A</h1>' in html

    def test_tables_and_raw_html(self) -> None:
        """Tables and raw HTML blocks are rendered."""
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n\n<div>raw</div>\n")

        assert "<table>" in html
        assert "<div>raw</div>" in html


class TestRenderPost:
    """Tests for render_post function."""

    def test_collects_navigation_data(self, sample_markdown: str) -> None:
        """HTML, outline, reading time and preview are produced together."""
        rendered = render_post(sample_markdown)

        assert isinstance(rendered, RenderedPost)
        assert [node.text for node in rendered.toc] == ["Intro", "Conclusion"]
        assert 'id="details"' in rendered.html
        assert rendered.read_time_minutes == 1
        assert rendered.preview.startswith("Intro Some text with [formula] inline.")

    def test_empty_post(self) -> None:
        """An empty body renders to nothing."""
        rendered = render_post("")

        assert rendered.html == ""
        assert rendered.toc == []
        assert rendered.read_time_minutes == 0
        assert rendered.preview == ""
