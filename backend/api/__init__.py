"""
Accounts API package.

Provides the FastAPI application for the account and profile service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
