"""Dashboard and journal commands."""

import click

from ..models.journal import MAX_SLEEP_HOURS, MOOD_VALUES
from ..services.controller import View
from ..services.dashboard import DashboardSession
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    format_table,
    require_view,
    start_controller,
)

MOOD_LABELS = {1: "awful", 2: "low", 3: "okay", 4: "good", 5: "great"}


def _half_hours(ctx, param, value):
    """Restrict sleep input to half-hour steps."""
    if value is not None and (value * 2) != int(value * 2):
        raise click.BadParameter("use half-hour steps, e.g. 7 or 7.5")
    return value


async def _open_dashboard(ctx, for_update: bool = False) -> DashboardSession:
    controller = await start_controller()
    require_view(ctx, controller, View.DASHBOARD)
    dashboard = await controller.open_dashboard()
    controller.stop()
    if dashboard.last_error is not None:
        echo_error(f"Could not load everything: {dashboard.last_error}")
        # Saving over an entry that was never read would lose it
        if for_update and not dashboard.entry_loaded:
            ctx.exit(1)
    return dashboard


def _print_journal(dashboard: DashboardSession) -> None:
    entry = dashboard.entry
    click.echo(f"Journal for {entry.date.isoformat()}")
    click.echo("-" * 40)
    click.echo(f"  Mood:   {entry.mood} ({MOOD_LABELS.get(entry.mood, '?')})")
    click.echo(f"  Water:  {entry.water_intake_cups} cup(s)")
    click.echo(f"  Sleep:  {entry.sleep_hours:g} h")
    if entry.notes:
        click.echo(f"  Notes:  {entry.notes}")


@click.command()
@click.option("--tips/--no-tips", default=True, help="Show today's health tips")
@click.pass_context
@async_command
async def today(ctx, tips: bool):
    """Show today's routine, health tips and journal."""
    dashboard = await _open_dashboard(ctx)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"My Routine ({dashboard.completion_ratio:.0%} done)")
    click.echo("=" * 60)

    if dashboard.routines:
        done = dashboard.entry.completed_routine_ids
        rows = [
            [
                "[x]" if item.id in done else "[ ]",
                item.id,
                item.time_of_day.value,
                item.category.value,
                f"{item.duration_minutes} min",
                item.title,
            ]
            for item in dashboard.routines
        ]
        click.echo(format_table(["", "ID", "When", "Category", "Time", "Title"], rows))
    else:
        echo_info("No routine yet. Check OPENAI_API_KEY and run 'daily-sage today' again.")

    if tips:
        click.echo()
        click.echo("Daily Tips")
        click.echo("-" * 40)
        for tip in dashboard.tips:
            click.echo(click.style(tip.title, bold=True) + f"  [{tip.category}]")
            click.echo(f"  {tip.content}")
            click.echo(f"  Source: {tip.source_name} <{tip.source_url}>")
            click.echo()

    click.echo()
    _print_journal(dashboard)


@click.command()
@click.argument("routine_id")
@click.pass_context
@async_command
async def toggle(ctx, routine_id: str):
    """Mark a routine item done (or not done) for today."""
    dashboard = await _open_dashboard(ctx, for_update=True)

    if routine_id not in {item.id for item in dashboard.routines}:
        echo_error(f"No routine item with ID '{routine_id}'")
        ctx.exit(1)

    entry = await dashboard.toggle_routine(routine_id)
    state = "done" if routine_id in entry.completed_routine_ids else "not done"
    echo_success(f"'{routine_id}' marked {state} ({dashboard.completion_ratio:.0%} of today's routine)")


@click.command()
@click.option("--water-add", "water_add", type=click.IntRange(min=0), default=0, help="Cups of water to add")
@click.option("--water-remove", "water_remove", type=click.IntRange(min=0), default=0, help="Cups of water to remove")
@click.option("--mood", type=click.Choice([str(v) for v in MOOD_VALUES]), help="Mood from 1 (awful) to 5 (great)")
@click.option(
    "--sleep",
    type=click.FloatRange(0, MAX_SLEEP_HOURS),
    callback=_half_hours,
    help="Hours slept last night (0-12, half-hour steps)",
)
@click.option("--notes", help="Free-text notes for today")
@click.pass_context
@async_command
async def journal(ctx, water_add: int, water_remove: int, mood: str | None, sleep: float | None, notes: str | None):
    """Update and save today's journal entry."""
    dashboard = await _open_dashboard(ctx, for_update=True)

    # One cup per interaction, as if the button were pressed repeatedly
    for _ in range(water_add):
        dashboard.adjust_water(1)
    for _ in range(water_remove):
        dashboard.adjust_water(-1)
    if mood is not None:
        dashboard.set_mood(int(mood))
    if sleep is not None:
        dashboard.set_sleep_hours(sleep)
    if notes is not None:
        dashboard.set_notes(notes)

    message = await dashboard.save_entry()
    echo_success(message)
    click.echo()
    _print_journal(dashboard)


@click.command()
@click.option("--limit", "-n", type=click.IntRange(1, 365), default=14, help="Number of days to show")
@click.pass_context
@async_command
async def history(ctx, limit: int):
    """List recent journal entries."""
    controller = await start_controller()
    controller.stop()
    require_view(ctx, controller, View.DASHBOARD)

    entries = await controller.store.list_journal_entries(controller.profile.uid, limit=limit)
    if not entries:
        echo_info("No journal entries yet. Start with 'daily-sage journal'")
        return

    rows = [
        [
            entry.date.isoformat(),
            str(entry.mood),
            str(entry.water_intake_cups),
            f"{entry.sleep_hours:g}",
            str(len(entry.completed_routine_ids)),
            entry.notes[:30] + "..." if len(entry.notes) > 30 else entry.notes,
        ]
        for entry in entries
    ]
    click.echo()
    click.echo(format_table(["Date", "Mood", "Water", "Sleep", "Done", "Notes"], rows))
    click.echo()
    click.echo(f"Total: {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}")
