"""
API package for Gyazo Search.

Provides the Flask routes for the web interface.
"""

from __future__ import annotations

from .routes import api

__all__ = ['api']
