"""Shared dependencies for API routes."""

from fastapi import Request

from ..services.controller import AppController


def get_controller(request: Request) -> AppController:
    """Get the controller from app state."""
    return request.app.state.controller
