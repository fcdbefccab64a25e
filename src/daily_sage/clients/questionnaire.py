"""Interactive onboarding questionnaire for the terminal."""

from datetime import date

import questionary
from questionary import Style

from ..models.user_profile import ActivityLevel, DietType, Gender, ProfileDraft
from ..services.onboarding import LAST_STEP, OnboardingFlow, OnboardingResult

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#5f8f6b bold"),
        ("question", "bold"),
        ("answer", "fg:#3d6b4a bold"),
        ("pointer", "fg:#5f8f6b bold"),
        ("highlighted", "fg:#5f8f6b bold"),
        ("selected", "fg:#3d6b4a"),
        ("separator", "fg:#3d6b4a"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _parse_float(value: str | None) -> float | None:
    try:
        return float(value) if value else None
    except ValueError:
        return None


def _parse_date(value: str | None) -> date | None:
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


def _valid_date(value: str) -> bool | str:
    if not value or _parse_date(value):
        return True
    return "Use the YYYY-MM-DD format"


def _valid_time(value: str) -> bool | str:
    if not value:
        return True
    hours, _, minutes = value.partition(":")
    if hours.isdigit() and minutes.isdigit() and int(hours) < 24 and int(minutes) < 60:
        return True
    return "Use the HH:MM format"


class OnboardingQuestionnaire:
    """Drives an OnboardingFlow step by step with questionary prompts."""

    def __init__(self, flow: OnboardingFlow):
        self.flow = flow

    async def run(self) -> OnboardingResult | None:
        """Ask every step; returns None if the user aborts (Ctrl+C)."""
        steps = {
            1: self._basic_vitals,
            2: self._lifestyle,
            3: self._health_and_schedule,
        }

        while True:
            print(f"\n=== Step {self.flow.step} of {LAST_STEP}: {self.flow.step_title} ===\n")
            answers = await steps[self.flow.step](self.flow.draft)
            if answers is None:
                return None
            self.flow.update(**answers)

            if self.flow.can_go_back:
                action = await questionary.select(
                    "Continue?",
                    choices=[
                        questionary.Choice("Complete" if self.flow.step == LAST_STEP else "Next", "next"),
                        questionary.Choice("Back", "back"),
                    ],
                    style=custom_style,
                ).ask_async()
                if action is None:
                    return None
                if action == "back":
                    self.flow.back()
                    continue

            result = self.flow.next()
            if result is not None:
                return result

    async def _basic_vitals(self, draft: ProfileDraft) -> dict | None:
        name = await questionary.text(
            "What should we call you?",
            default=draft.display_name or "",
            style=custom_style,
        ).ask_async()

        birth_date = await questionary.text(
            "Date of birth (YYYY-MM-DD):",
            default=draft.birth_date.isoformat() if draft.birth_date else "",
            validate=_valid_date,
            style=custom_style,
        ).ask_async()

        gender = await questionary.select(
            "Gender:",
            choices=[questionary.Choice(g.value, g) for g in Gender],
            default=draft.gender,
            style=custom_style,
        ).ask_async()

        height = await questionary.text(
            "Height (cm):",
            default=f"{draft.height:g}" if draft.height else "",
            style=custom_style,
        ).ask_async()

        weight = await questionary.text(
            "Weight (kg):",
            default=f"{draft.weight:g}" if draft.weight else "",
            style=custom_style,
        ).ask_async()

        if weight is None:
            return None
        return {
            "display_name": name or None,
            "birth_date": _parse_date(birth_date),
            "gender": gender,
            "height": _parse_float(height),
            "weight": _parse_float(weight),
        }

    async def _lifestyle(self, draft: ProfileDraft) -> dict | None:
        diet = await questionary.select(
            "Which diet do you usually follow?",
            choices=[questionary.Choice(d.value, d) for d in DietType],
            default=draft.diet,
            style=custom_style,
        ).ask_async()

        activity = await questionary.select(
            "How active are you?",
            choices=[questionary.Choice(a.value, a) for a in ActivityLevel],
            default=draft.exercise_frequency,
            style=custom_style,
        ).ask_async()

        smoker = await questionary.confirm(
            "Do you smoke?",
            default=bool(draft.smoker),
            style=custom_style,
        ).ask_async()

        drinker = await questionary.confirm(
            "Do you drink alcohol?",
            default=bool(draft.drinker),
            style=custom_style,
        ).ask_async()

        sleep_time = await questionary.text(
            "Usual bedtime (HH:MM, optional):",
            default=draft.sleep_time or "",
            validate=_valid_time,
            style=custom_style,
        ).ask_async()

        wake_time = await questionary.text(
            "Usual wake-up time (HH:MM, optional):",
            default=draft.wake_time or "",
            validate=_valid_time,
            style=custom_style,
        ).ask_async()

        if wake_time is None:
            return None
        return {
            "diet": diet,
            "exercise_frequency": activity,
            "smoker": smoker,
            "drinker": drinker,
            "sleep_time": sleep_time or None,
            "wake_time": wake_time or None,
        }

    async def _health_and_schedule(self, draft: ProfileDraft) -> dict | None:
        questions = [
            ("health_conditions", "Physical health conditions (e.g., Asthma, Diabetes, Hypertension):"),
            ("mental_conditions", "Mental health considerations (e.g., Anxiety, ADHD):"),
            ("work_schedule", "Work schedule (e.g., 9-5 office, night shifts):"),
            ("additional_info", "Anything else we should know? (optional)"),
        ]

        answers = {}
        for field_name, prompt in questions:
            value = await questionary.text(
                prompt,
                default=getattr(draft, field_name) or "",
                style=custom_style,
            ).ask_async()
            if value is None:
                return None
            answers[field_name] = value or None
        return answers
