"""Tests for heading identifier generation."""

from __future__ import annotations

import pytest

from md2toc.slugs import heading_id


class TestHeadingId:
    """Tests for heading_id function."""

    def test_punctuation_is_removed(self) -> None:
        """Commas and exclamation marks disappear, spaces become hyphens."""
        assert heading_id("Hello, World!") == "hello-world"

    def test_is_deterministic(self) -> None:
        """Same text always yields the same identifier."""
        assert heading_id("Getting Started") == heading_id("Getting Started")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("  Leading and trailing  ", "leading-and-trailing"),
            ("a -- b", "a-b"),
            ("C++ & Rust", "c-rust"),
            ("snake_case names", "snake_case-names"),
            ("Tabs\tand\nnewlines", "tabs-and-newlines"),
            ("Version 2.0", "version-20"),
            ("-already-hyphenated-", "already-hyphenated"),
        ],
    )
    def test_normalization(self, text: str, expected: str) -> None:
        """Whitespace and hyphen runs collapse, edges are trimmed."""
        assert heading_id(text) == expected

    def test_non_ascii_letters_are_dropped(self) -> None:
        """Only ASCII word characters survive."""
        assert heading_id("Café au lait") == "caf-au-lait"

    def test_empty_and_symbol_only_text(self) -> None:
        """Text without word characters yields an empty identifier."""
        assert heading_id("") == ""
        assert heading_id("!!! ???") == ""

    def test_duplicates_collide(self) -> None:
        """Headings that normalize the same share an identifier."""
        assert heading_id("Notes") == heading_id("notes!")
