"""Sign-in commands."""

import click

from ..exceptions import DailySageError
from .base import async_command, echo_error, echo_info, echo_success, start_controller


@click.command()
@click.option("--email", "-e", help="Email to sign in with (remote database only)")
@click.option("--name", "-n", "display_name", help="Display name (remote database only)")
@click.pass_context
@async_command
async def login(ctx, email: str | None, display_name: str | None):
    """Sign in.

    In mock mode this always signs in the demo user.
    """
    controller = await start_controller()
    try:
        identity = await controller.login(email=email, display_name=display_name)
    except DailySageError as e:
        echo_error(e.message)
        ctx.exit(1)
    finally:
        controller.stop()

    echo_success(f"Signed in as {identity.display_name or identity.email or identity.uid}")
    echo_info(f"Next: daily-sage {'today' if controller.profile else 'onboard'}")


@click.command()
@async_command
async def logout():
    """Sign out."""
    controller = await start_controller()
    try:
        await controller.logout()
    finally:
        controller.stop()
    echo_success("Signed out")


@click.command()
@async_command
async def status():
    """Show who is signed in and what to do next."""
    controller = await start_controller()
    controller.stop()

    click.echo()
    if controller.identity is None:
        click.echo("Not signed in.")
    else:
        identity = controller.identity
        click.echo(f"Signed in: {identity.display_name or '-'} <{identity.email or '-'}> ({identity.uid})")
        if controller.profile is not None:
            profile = controller.profile
            click.echo(f"Profile:   complete={profile.is_profile_complete} BMI={profile.bmi or '-'}")
    click.echo(f"View:      {controller.view.value}")
