"""Flatsite: pages rendered from a flat file tree.

This package maps request paths to page files, wraps them in templates and
falls back to 404/500 pages when rendering fails.
"""

from flatsite.core.site import PageResponse, Site

__all__ = ['PageResponse', 'Site']
