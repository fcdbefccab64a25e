"""Dashboard and journal routes."""

from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from ...exceptions import InvalidTransitionError
from ...models.journal import MAX_SLEEP_HOURS
from ...services.controller import AppController, View
from ..deps import get_controller

router = APIRouter(tags=["dashboard"])


class WaterRequest(BaseModel):
    delta: Literal[-1, 1] = 1


class JournalUpdate(BaseModel):
    """Journal fields to set before saving; omitted fields keep their value."""

    mood: int | None = Field(default=None, ge=1, le=5)
    sleep_hours: float | None = Field(default=None, ge=0, le=MAX_SLEEP_HOURS, multiple_of=0.5)
    notes: str | None = None


@router.get("/dashboard")
async def get_dashboard(
    refresh: bool = Query(False, description="Reload routines, journal and tips"),
    controller: AppController = Depends(get_controller),
):
    """Routines, tips and today's journal entry."""
    session = await controller.open_dashboard(refresh=refresh)
    data = session.to_dict()
    if session.last_error is not None:
        data["error"] = str(session.last_error)
    return data


@router.post("/journal/routines/{routine_id}/toggle")
async def toggle_routine(routine_id: str, controller: AppController = Depends(get_controller)):
    """Flip a routine item's completion; saved immediately."""
    session = await controller.open_dashboard()
    entry = await session.toggle_routine(routine_id)
    return entry.to_dict()


@router.post("/journal/water")
async def adjust_water(body: WaterRequest, controller: AppController = Depends(get_controller)):
    """Add or remove one cup of water (not saved until PUT /journal)."""
    session = await controller.open_dashboard()
    session.require_loaded_entry()
    session.adjust_water(body.delta)
    return session.entry.to_dict()


@router.put("/journal")
async def save_journal(body: JournalUpdate, controller: AppController = Depends(get_controller)):
    """Apply edits and save the whole entry."""
    session = await controller.open_dashboard()
    session.require_loaded_entry()
    if body.mood is not None:
        session.set_mood(body.mood)
    if body.sleep_hours is not None:
        session.set_sleep_hours(body.sleep_hours)
    if body.notes is not None:
        session.set_notes(body.notes)

    message = await session.save_entry()
    return {"message": message, "journal": session.entry.to_dict()}


@router.get("/journal/history")
async def journal_history(
    limit: int = Query(30, ge=1, le=365),
    controller: AppController = Depends(get_controller),
):
    """Recent journal entries, newest first."""
    if controller.view != View.DASHBOARD or controller.profile is None:
        raise InvalidTransitionError("Journal history is not available", state=controller.view.value)
    entries = await controller.store.list_journal_entries(controller.profile.uid, limit=limit)
    return [entry.to_dict() for entry in entries]
