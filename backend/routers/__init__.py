"""Routers module - API endpoints"""

from . import compare, config

__all__ = ["compare", "config"]
