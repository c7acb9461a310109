"""Shared helpers for md2toc."""
