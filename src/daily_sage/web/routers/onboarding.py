"""Onboarding questionnaire and profile routes."""

from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...exceptions import InvalidTransitionError
from ...models.user_profile import ActivityLevel, DietType, Gender
from ...services.controller import AppController, View
from ...services.onboarding import OnboardingFlow, STEP_FIELDS
from ..deps import get_controller

router = APIRouter(tags=["onboarding"])


class DraftUpdate(BaseModel):
    """Answers for any questionnaire step; omitted fields stay unchanged."""

    display_name: str | None = None
    birth_date: date | None = None
    gender: Gender | None = None
    height: float | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    smoker: bool | None = None
    drinker: bool | None = None
    diet: DietType | None = None
    exercise_frequency: ActivityLevel | None = None
    sleep_time: str | None = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    wake_time: str | None = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    health_conditions: str | None = None
    mental_conditions: str | None = None
    work_schedule: str | None = None
    additional_info: str | None = None


def _current_flow(controller: AppController) -> OnboardingFlow:
    if controller.view != View.ONBOARDING or controller.onboarding is None:
        raise InvalidTransitionError("Onboarding is not in progress", state=controller.view.value)
    return controller.onboarding


def _flow_state(flow: OnboardingFlow) -> dict:
    return {
        "view": View.ONBOARDING.value,
        "step": flow.step,
        "title": flow.step_title,
        "progress": round(flow.progress, 2),
        "fields": STEP_FIELDS[flow.step],
        "draft": flow.draft.to_dict(),
    }


@router.get("/onboarding")
async def get_onboarding(controller: AppController = Depends(get_controller)):
    """Current questionnaire step and draft."""
    return _flow_state(_current_flow(controller))


@router.post("/onboarding/draft")
async def update_draft(body: DraftUpdate, controller: AppController = Depends(get_controller)):
    """Record answers on the draft."""
    flow = _current_flow(controller)
    flow.update(**body.model_dump(exclude_unset=True))
    return _flow_state(flow)


@router.post("/onboarding/next")
async def next_step(controller: AppController = Depends(get_controller)):
    """Advance; after the last step the profile is saved and the dashboard opens."""
    profile = await controller.onboarding_next()
    if profile is None:
        return _flow_state(controller.onboarding)
    return controller.to_dict()


@router.post("/onboarding/back")
async def previous_step(controller: AppController = Depends(get_controller)):
    """Go back one step, keeping answers."""
    flow = _current_flow(controller)
    flow.back()
    return _flow_state(flow)


@router.post("/profile/edit")
async def edit_profile(controller: AppController = Depends(get_controller)):
    """Re-open the questionnaire seeded with the saved profile."""
    return _flow_state(controller.edit_profile())
