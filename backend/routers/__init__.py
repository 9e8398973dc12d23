"""Routers module - FastAPI route handlers"""

from . import config, content, diff, files

__all__ = ["config", "content", "diff", "files"]
