"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import toc_router

app = FastAPI(
    title="md2toc",
    description="Table-of-contents extraction and rendering for markdown posts.",
    version="0.1.0",
)
app.include_router(toc_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
