"""Command-line entry point: print the outline of a markdown document."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from md2toc.exceptions import Md2tocError
from md2toc.fetch import fetch_post
from md2toc.rendering import render_markdown
from md2toc.toc import build_toc_tree, extract_headings, render_toc_markdown
from md2toc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

FORMATS = ("json", "outline", "ids", "html")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2toc",
        description="Extract the table of contents of a markdown document or blog post.",
    )
    parser.add_argument("path", nargs="?", help="Markdown file to read ('-' for stdin)")
    parser.add_argument("--slug", help="Fetch the post with this slug from the site API instead")
    parser.add_argument("--site-url", help="Base URL of the site (defaults to MD2TOC_SITE_URL)")
    parser.add_argument("--format", choices=FORMATS, default="json", help="Output format")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to MD2TOC_LOG_LEVEL)")
    return parser


def load_markdown(args: argparse.Namespace) -> str:
    if args.slug:
        post = asyncio.run(fetch_post(args.slug, site_url=args.site_url))
        return post.content_md
    if args.path == "-":
        return sys.stdin.read()

    path = Path(args.path)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def format_output(markdown_text: str, output_format: str) -> str:
    if output_format == "html":
        return render_markdown(markdown_text)

    headings = extract_headings(markdown_text)
    if output_format == "ids":
        return "\n".join(f"{heading.level}\t{heading.id}\t{heading.text}" for heading in headings)

    toc = build_toc_tree(headings)
    if output_format == "outline":
        return render_toc_markdown(toc)
    return json.dumps([node.model_dump() for node in toc], indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.path and not args.slug:
        parser.error("Provide a markdown PATH or --slug")
    if args.path and args.slug:
        parser.error("PATH and --slug are mutually exclusive")

    configure_logging(args.log_level)

    try:
        markdown_text = load_markdown(args)
    except (Md2tocError, OSError, UnicodeDecodeError) as exc:
        logger.error("Could not load markdown", extra={"error": str(exc)})
        print(f"md2toc: {exc}", file=sys.stderr)
        return 1

    output = format_output(markdown_text, args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
