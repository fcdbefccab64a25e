"""CLI entry point for daily-sage."""

import click

from .commands import history, init, journal, login, logout, onboard, serve, status, today, toggle
from .config import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="daily-sage")
def main():
    """daily-sage: AI-assisted daily health routines and journal.

    Fill in a short health profile, get a personalised daily routine and
    cited health tips, and log mood, water, sleep and completed tasks.

    Example usage:

        # Sign in and set up your profile
        daily-sage login
        daily-sage onboard

        # See today's routine and tips
        daily-sage today

        # Log progress
        daily-sage toggle morning-walk
        daily-sage journal --water-add 2 --mood 4 --sleep 7.5
    """
    configure_logging()


# Register commands
main.add_command(init)
main.add_command(login)
main.add_command(logout)
main.add_command(status)
main.add_command(onboard)
main.add_command(today)
main.add_command(toggle)
main.add_command(journal)
main.add_command(history)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
