"""Test setup for md2toc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_markdown() -> str:
    """Document with nested headings, math and code."""
    return (
        "# Intro\n"
        "\n"
        "Some text with $a + b$ inline.\n"
        "\n"
        "## Background\n"
        "\n"
        "## Method\n"
        "\n"
        "$$\n"
        "x^2 + y^2 = z^2\n"
        "$$\n"
        "\n"
        "### Details\n"
        "\n"
        "```python\n"
        "# not a heading\n"
        "```\n"
        "\n"
        "# Conclusion\n"
    )
