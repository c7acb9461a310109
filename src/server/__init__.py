"""HTTP API for md2toc."""
