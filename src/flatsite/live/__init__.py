"""Live reload support for development mode."""

from .reload import LiveReloadManager

__all__ = ['LiveReloadManager']
