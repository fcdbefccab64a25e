"""Web API for daily-sage."""

from .app import create_app

__all__ = ["create_app"]
