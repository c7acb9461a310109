"""Extract a table of contents from markdown headings."""

from __future__ import annotations

from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.dollarmath import dollarmath_plugin

from md2toc.heading_filter import HeadingFilter
from md2toc.schemas import HeadingRecord, TocNode
from md2toc.slugs import heading_id
from md2toc.utils.logging_config import get_logger
from md2toc.visitor import VisitAction, walk

logger = get_logger(__name__)

MATH_NODE_TYPES = frozenset(
    {"math_inline", "math_inline_double", "math_block", "math_block_label"}
)
# Inline nodes whose content is not part of the visible heading title.
_NON_TEXT_NODE_TYPES = frozenset({"code_inline", "image"})
_TEXT_NODE_TYPES = frozenset({"text", "text_special"})


def _new_parser() -> MarkdownIt:
    return MarkdownIt("commonmark").use(dollarmath_plugin)


def extract_toc(
    markdown_text: str, *, heading_filter: HeadingFilter | None = None
) -> list[TocNode]:
    """Build the nested table of contents for a markdown document.

    Never raises; a document without usable headings yields an empty list.
    """
    return build_toc_tree(extract_headings(markdown_text, heading_filter=heading_filter))


def extract_headings(
    markdown_text: str, *, heading_filter: HeadingFilter | None = None
) -> list[HeadingRecord]:
    """Return the retained headings of ``markdown_text`` in document order."""
    active_filter = heading_filter or HeadingFilter.from_config()
    tree = SyntaxTreeNode(_new_parser().parse(markdown_text))
    headings: list[HeadingRecord] = []

    def on_heading(node: SyntaxTreeNode) -> VisitAction:
        text = _heading_text(node).strip()
        if active_filter.accepts(text):
            headings.append(
                HeadingRecord(level=int(node.tag[1]), text=text, id=heading_id(text))
            )
        elif text:
            logger.debug("Discarded heading", extra={"heading": text[:80]})
        return VisitAction.SKIP_CHILDREN

    walk(tree, on_heading, types={"heading"})
    return headings


def _heading_text(heading: SyntaxTreeNode) -> str:
    parts: list[str] = []

    def collect(node: SyntaxTreeNode) -> VisitAction:
        if node.type in MATH_NODE_TYPES or node.type in _NON_TEXT_NODE_TYPES:
            return VisitAction.SKIP_CHILDREN
        if node.type in _TEXT_NODE_TYPES:
            parts.append(node.content)
        elif node.type == "softbreak":
            parts.append("\n")
        return VisitAction.CONTINUE

    for child in heading.children:
        walk(child, collect)
    return "".join(parts)


def build_toc_tree(headings: Iterable[HeadingRecord]) -> list[TocNode]:
    """Nest flat headings by level, keeping document order."""
    roots: list[TocNode] = []
    stack: list[TocNode] = []

    for heading in headings:
        node = TocNode(id=heading.id, text=heading.text, level=heading.level)

        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def flatten_toc(nodes: Iterable[TocNode]) -> list[TocNode]:
    """Return every node of the forest in document (pre-)order."""
    flat: list[TocNode] = []
    for node in nodes:
        flat.append(node)
        flat.extend(flatten_toc(node.children))
    return flat


def count_headings(nodes: Iterable[TocNode]) -> int:
    """Count total headings in the forest."""
    total = 0
    for node in nodes:
        total += 1
        total += count_headings(node.children)
    return total


def find_heading(nodes: Iterable[TocNode], target_id: str) -> TocNode | None:
    """Return the first node with ``target_id`` in document order."""
    for node in flatten_toc(nodes):
        if node.id == target_id:
            return node
    return None


def render_toc_markdown(nodes: list[TocNode], indent: int = 0) -> str:
    """Render the forest as a nested markdown list of anchor links."""
    lines: list[str] = []
    for node in nodes:
        lines.append("  " * indent + f"- [{node.text}](#{node.id})")
        if node.children:
            lines.append(render_toc_markdown(node.children, indent + 1))
    return "\n".join(lines)
