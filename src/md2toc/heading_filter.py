"""Heuristics that reject heading text which is really unrendered math."""

from __future__ import annotations

import re
from typing import Iterable

from md2toc.config import MD2TOC_EXTRA_MATH_PATTERNS, MD2TOC_MAX_HEADING_LENGTH

DEFAULT_MATH_PATTERNS: tuple[str, ...] = (
    r"\\begin\{[^}]*\}",
    r"\\end\{[^}]*\}",
    r"\\[A-Za-z]+",
    r"[\[\]{}^_]",
    r"\b(?:pmatrix|matrix|bmatrix|vmatrix|Vmatrix|align|equation|gather)\b",
)


class HeadingFilter:
    """Decide whether extracted heading text belongs in a table of contents.

    Text is rejected when it is empty, when it is ``max_length`` characters or
    longer, or when any of ``patterns`` matches anywhere in it.
    """

    def __init__(
        self,
        patterns: Iterable[str] = DEFAULT_MATH_PATTERNS,
        *,
        max_length: int = MD2TOC_MAX_HEADING_LENGTH,
    ) -> None:
        self.patterns = tuple(patterns)
        self.max_length = max_length
        self._compiled = [re.compile(pattern) for pattern in self.patterns]

    @classmethod
    def from_config(cls) -> HeadingFilter:
        """Build the default filter extended with ``MD2TOC_EXTRA_MATH_PATTERNS``."""
        return cls(DEFAULT_MATH_PATTERNS + MD2TOC_EXTRA_MATH_PATTERNS)

    def with_patterns(self, *patterns: str) -> HeadingFilter:
        """Return a copy of this filter with additional patterns."""
        return HeadingFilter(self.patterns + patterns, max_length=self.max_length)

    def looks_like_math(self, text: str) -> bool:
        """Return True if any pattern matches somewhere in ``text``."""
        return any(pattern.search(text) for pattern in self._compiled)

    def accepts(self, text: str) -> bool:
        """Return True if trimmed ``text`` should become a heading entry."""
        if not text:
            return False
        if len(text) >= self.max_length:
            return False
        return not self.looks_like_math(text)
