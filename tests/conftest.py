"""Pytest configuration and fixtures."""

import tempfile
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from daily_sage.auth.provider import LocalAuthProvider
from daily_sage.db.stores import LocalStore
from daily_sage.models.routine import HealthTip, RoutineCategory, RoutineItem, TimeOfDay
from daily_sage.models.user_profile import (
    ActivityLevel,
    DietType,
    Gender,
    UserProfile,
)
from daily_sage.services.controller import AppController

TODAY = date(2026, 3, 14)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def store(temp_db_path):
    """Mock-mode store on a temporary SQLite file."""
    return LocalStore(temp_db_path)


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        uid="mock-123",
        email="demo@example.com",
        display_name="Demo User",
        is_profile_complete=True,
        birth_date=date(1990, 6, 1),
        gender=Gender.FEMALE,
        height=170,
        weight=70,
        bmi=24.2,
        smoker=False,
        drinker=True,
        diet=DietType.MEDITERRANEAN,
        exercise_frequency=ActivityLevel.LIGHTLY_ACTIVE,
        sleep_time="23:00",
        wake_time="07:00",
        health_conditions="Mild asthma",
        work_schedule="9-5 office",
    )


@pytest.fixture
def sample_routines():
    """A small generated routine set."""
    return [
        RoutineItem(
            id="morning-walk",
            title="Morning walk",
            description="A brisk 20 minute walk outside.",
            category=RoutineCategory.EXERCISE,
            time_of_day=TimeOfDay.MORNING,
            duration_minutes=20,
        ),
        RoutineItem(
            id="wind-down",
            title="Screen-free wind down",
            description="No screens 30 minutes before bed.",
            category=RoutineCategory.SLEEP,
            time_of_day=TimeOfDay.EVENING,
            duration_minutes=30,
        ),
    ]


@pytest.fixture
def sample_tips():
    return [
        HealthTip(
            id="tip-1",
            title="Move every hour",
            content="Stand up and **stretch** for two minutes.",
            source_name="NHS",
            source_url="https://www.nhs.uk/live-well/exercise/",
            category="Activity",
        )
    ]


@pytest.fixture
def mock_generator(sample_routines, sample_tips):
    """Content generator returning canned routines and tips."""
    generator = MagicMock()
    generator.generate_routines = AsyncMock(return_value=sample_routines)
    generator.generate_daily_tips = AsyncMock(return_value=sample_tips)
    return generator


@pytest.fixture
def auth(store):
    return LocalAuthProvider(store)


@pytest.fixture
def controller(auth, store, mock_generator):
    """Controller wired to the local store and canned generator."""
    return AppController(auth=auth, store=store, generator=mock_generator, today=lambda: TODAY)
