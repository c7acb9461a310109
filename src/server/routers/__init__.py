"""API routers."""

from server.routers.toc import router as toc_router

__all__ = ["toc_router"]
