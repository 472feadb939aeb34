"""API package for the backend service.

This package contains the HTTP endpoints and the middleware that turns
errors into JSON responses.
"""

from .core import setup_api

__all__ = ["setup_api"]
