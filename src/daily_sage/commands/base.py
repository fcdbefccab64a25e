"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..services.controller import AppController, View, create_controller


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


async def start_controller() -> AppController:
    """Build the controller from settings and load the current auth state."""
    controller = create_controller(get_settings())
    await controller.start()
    return controller


def require_view(ctx: click.Context, controller: AppController, view: View) -> None:
    """Exit with a hint when the app is not in the expected view."""
    if controller.view == view:
        return

    hints = {
        View.LOGIN: "Not signed in. Run 'daily-sage login' first.",
        View.ONBOARDING: "Profile not set up yet. Run 'daily-sage onboard' first.",
        View.DASHBOARD: "Already onboarded. Use 'daily-sage onboard' to edit your profile.",
    }
    echo_error(hints.get(controller.view, f"Unexpected state: {controller.view.value}"))
    controller.stop()
    ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)
