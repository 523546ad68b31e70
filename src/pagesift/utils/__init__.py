"""Utility modules for pagesift."""

from .urls import host_of, is_absolute_http_url, resolve_url

__all__ = ["host_of", "is_absolute_http_url", "resolve_url"]
