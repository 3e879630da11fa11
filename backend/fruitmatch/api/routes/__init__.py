"""API routes package.

This package contains all API route handlers for the application.
"""
from . import rankings

__all__ = [
    "rankings",
]
