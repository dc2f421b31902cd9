"""Middleware for TinyLink web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
