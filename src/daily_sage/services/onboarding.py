"""Three-step health profile questionnaire."""

from dataclasses import dataclass, replace

from ..exceptions import InvalidTransitionError
from ..models.user_profile import (
    ActivityLevel,
    DietType,
    ProfileDraft,
    UserProfile,
    calculate_bmi,
)

STEP_TITLES = {
    1: "Basic Vitals",
    2: "Lifestyle",
    3: "Health & Schedule",
}
LAST_STEP = len(STEP_TITLES)

# Fields each step asks for (used by the surfaces to render questions)
STEP_FIELDS = {
    1: ["display_name", "birth_date", "gender", "height", "weight"],
    2: ["diet", "exercise_frequency", "smoker", "drinker", "sleep_time", "wake_time"],
    3: ["health_conditions", "mental_conditions", "work_schedule", "additional_info"],
}

# Lifestyle answers pre-selected when the user has none yet
HABIT_DEFAULTS = {
    "smoker": False,
    "drinker": False,
    "diet": DietType.NONE,
    "exercise_frequency": ActivityLevel.SEDENTARY,
}


@dataclass
class OnboardingResult:
    """Emitted once the final step is confirmed."""

    draft: ProfileDraft


class OnboardingFlow:
    """Walks a single mutable draft through Basic Vitals, Lifestyle and
    Health & Schedule.

    Going back never discards answers. Confirming the last step computes
    BMI from the current height and weight and yields an OnboardingResult;
    the flow itself has no terminal state.
    """

    def __init__(self, initial: ProfileDraft | None = None):
        if isinstance(initial, UserProfile):
            draft = initial.to_draft()
        elif initial is not None:
            draft = replace(initial)
        else:
            draft = ProfileDraft()

        for name, default in HABIT_DEFAULTS.items():
            if getattr(draft, name) is None:
                setattr(draft, name, default)

        self.step = 1
        self.draft = draft

    @property
    def step_title(self) -> str:
        return STEP_TITLES[self.step]

    @property
    def progress(self) -> float:
        """Fraction of the questionnaire reached, 1/3 to 1."""
        return self.step / LAST_STEP

    @property
    def can_go_back(self) -> bool:
        return self.step > 1

    def update(self, **answers) -> None:
        """Record answers on the draft. Unknown fields are rejected."""
        unknown = set(answers) - ProfileDraft.field_names()
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
        for name, value in answers.items():
            setattr(self.draft, name, value)

    def next(self) -> OnboardingResult | None:
        """Advance one step, or complete the questionnaire from the last step."""
        if self.step < LAST_STEP:
            self.step += 1
            return None

        self.draft.bmi = calculate_bmi(self.draft.height, self.draft.weight)
        return OnboardingResult(draft=replace(self.draft))

    def back(self) -> None:
        """Return to the previous step, keeping every answer."""
        if not self.can_go_back:
            raise InvalidTransitionError("Already at the first step", state=self.step_title)
        self.step -= 1
