"""Initialize project command."""

import click

from ..config import BackendKind, get_settings
from ..db import init_db
from .base import async_command, echo_info, echo_success, echo_warning


@click.command()
@async_command
async def init():
    """Initialize daily-sage storage.

    In mock mode this creates the data directory and the local SQLite
    database. With DAILY_SAGE_MONGO_URI set, documents are created on
    first write and nothing needs initializing.
    """
    settings = get_settings()

    if settings.backend == BackendKind.REMOTE:
        echo_info(f"Using remote database '{settings.mongo_db}'; nothing to initialize")
    else:
        echo_info(f"Initializing daily-sage in {settings.data_dir}")
        await init_db(settings.db_path)
        echo_success("Local database initialized (mock mode)")

    if not settings.generation_enabled:
        echo_warning("OPENAI_API_KEY is not set; routines and tips cannot be generated")

    click.echo()
    click.echo("daily-sage is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Sign in:               daily-sage login")
    click.echo("  2. Fill in your profile:  daily-sage onboard")
    click.echo("  3. See today's plan:      daily-sage today")
