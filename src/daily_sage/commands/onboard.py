"""Onboarding questionnaire command."""

import click

from ..clients.questionnaire import OnboardingQuestionnaire
from ..services.controller import View
from .base import async_command, echo_info, echo_success, require_view, start_controller


@click.command()
@click.pass_context
@async_command
async def onboard(ctx):
    """Fill in (or edit) your health profile.

    Walks through three steps: Basic Vitals, Lifestyle, and Health &
    Schedule. Existing answers are offered as defaults. Saving a changed
    profile rebuilds your daily routine on the next 'daily-sage today'.
    """
    controller = await start_controller()
    try:
        if controller.view == View.DASHBOARD:
            echo_info("Editing your existing profile")
            flow = controller.edit_profile()
        else:
            require_view(ctx, controller, View.ONBOARDING)
            flow = controller.onboarding

        result = await OnboardingQuestionnaire(flow).run()
        if result is None:
            echo_info("Onboarding cancelled; nothing saved")
            return

        profile = await controller.complete_onboarding(result.draft)
    finally:
        controller.stop()

    echo_success(f"Profile saved (BMI {profile.bmi})")
    echo_info("Next: daily-sage today")
