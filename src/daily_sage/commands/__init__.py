"""CLI commands for daily-sage."""

from .auth import login, logout, status
from .init import init
from .onboard import onboard
from .serve import serve
from .today import history, journal, today, toggle

__all__ = [
    "history",
    "init",
    "journal",
    "login",
    "logout",
    "onboard",
    "serve",
    "status",
    "today",
    "toggle",
]
