"""Tests for data models."""

from datetime import date

import pytest

from daily_sage.models.journal import JournalEntry
from daily_sage.models.routine import FALLBACK_TIP, HealthTip, RoutineCategory, RoutineItem, TimeOfDay
from daily_sage.models.user_profile import (
    DietType,
    Gender,
    Identity,
    ProfileDraft,
    UserProfile,
    calculate_age,
    calculate_bmi,
)


class TestBMI:
    """Tests for BMI calculation."""

    def test_bmi_rounded_to_one_decimal(self):
        """70kg at 170cm is 70 / 1.7^2."""
        assert calculate_bmi(170, 70) == 24.2

    def test_bmi_zero_when_height_missing(self):
        assert calculate_bmi(0, 70) == 0
        assert calculate_bmi(None, 70) == 0

    def test_bmi_zero_when_weight_missing(self):
        assert calculate_bmi(170, 0) == 0
        assert calculate_bmi(170, None) == 0


class TestAge:
    """Tests for age calculation."""

    def test_age_on_birthday(self):
        """Exactly N years after birth gives N."""
        assert calculate_age(date(1990, 3, 14), today=date(2026, 3, 14)) == 36

    def test_age_day_before_birthday(self):
        """One day before the anniversary gives N - 1."""
        assert calculate_age(date(1990, 3, 14), today=date(2026, 3, 13)) == 35

    def test_age_earlier_month(self):
        assert calculate_age(date(1990, 12, 1), today=date(2026, 6, 30)) == 35


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_profile_to_dict_omits_unset_fields(self):
        """Test profile serialization uses stored key names and skips None."""
        profile = UserProfile(uid="u1", birth_date=date(1990, 1, 2), diet=DietType.VEGAN)
        data = profile.to_dict()

        assert data["uid"] == "u1"
        assert data["birthDate"] == "1990-01-02"
        assert data["diet"] == "Vegan"
        assert data["isProfileComplete"] is False
        assert "weight" not in data
        assert "photoURL" not in data

    def test_profile_to_dict_including_unset_answers(self):
        """Unset answers appear as None; unset identity fields stay omitted."""
        data = UserProfile(uid="u1", height=180).to_dict(include_unset=True)

        assert data["height"] == 180
        assert data["healthConditions"] is None
        assert "photoURL" not in data
        assert "email" not in data

    def test_profile_from_dict(self, sample_user_profile):
        """Test profile deserialization."""
        profile = UserProfile.from_dict(sample_user_profile.to_dict())

        assert profile == sample_user_profile
        assert profile.gender == Gender.FEMALE

    def test_profile_from_dict_rejects_unknown_enum(self):
        with pytest.raises(ValueError):
            UserProfile.from_dict({"uid": "u1", "diet": "Carnivore"})

    def test_from_draft_takes_identity_fields(self):
        """Identity wins for uid, email and photo; the draft's name is a fallback."""
        identity = Identity(uid="u1", email="a@b.c", photo_url="https://img")
        draft = ProfileDraft(display_name="Sam", height=180, weight=80, bmi=24.7)

        profile = UserProfile.from_draft(identity, draft)

        assert profile.uid == "u1"
        assert profile.email == "a@b.c"
        assert profile.photo_url == "https://img"
        assert profile.display_name == "Sam"
        assert profile.is_profile_complete is True
        assert profile.bmi == 24.7

    def test_from_draft_prefers_identity_name(self):
        identity = Identity(uid="u1", display_name="Demo User")
        profile = UserProfile.from_draft(identity, ProfileDraft(display_name="Sam"))
        assert profile.display_name == "Demo User"

    def test_profile_summary(self, sample_user_profile):
        """Test profile summary generation for AI context."""
        summary = sample_user_profile.get_summary()

        assert "BMI: 24.2" in summary
        assert "Smoker: no, Drinker: yes" in summary
        assert "Mediterranean" in summary
        assert "Mild asthma" in summary
        assert "9-5 office" in summary

    def test_summary_defaults_age_without_birth_date(self):
        summary = UserProfile(uid="u1").get_summary()
        assert "Age: 30" in summary


class TestRoutineItem:
    """Tests for RoutineItem validation."""

    def _record(self, **overrides):
        record = {
            "id": "r1",
            "title": "Stretch",
            "description": "Full body stretch",
            "category": "exercise",
            "timeOfDay": "morning",
            "durationMinutes": 10,
        }
        record.update(overrides)
        return record

    def test_from_dict(self):
        item = RoutineItem.from_dict(self._record())

        assert item.category == RoutineCategory.EXERCISE
        assert item.time_of_day == TimeOfDay.MORNING
        assert item.duration_minutes == 10
        assert item.to_dict() == self._record()

    def test_rejects_unknown_category(self):
        with pytest.raises(ValueError):
            RoutineItem.from_dict(self._record(category="hobby"))

    def test_rejects_unknown_time_of_day(self):
        with pytest.raises(ValueError):
            RoutineItem.from_dict(self._record(timeOfDay="night"))

    def test_rejects_negative_duration(self):
        with pytest.raises(ValueError):
            RoutineItem.from_dict(self._record(durationMinutes=-5))

    def test_rejects_fractional_duration(self):
        with pytest.raises(ValueError):
            RoutineItem.from_dict(self._record(durationMinutes=7.5))

    def test_rejects_missing_title(self):
        record = self._record()
        del record["title"]
        with pytest.raises(ValueError):
            RoutineItem.from_dict(record)


class TestHealthTip:
    """Tests for HealthTip validation."""

    def test_rejects_non_http_source(self):
        with pytest.raises(ValueError):
            HealthTip.from_dict({
                "id": "t1",
                "title": "Sleep",
                "content": "Sleep more",
                "sourceName": "CDC",
                "sourceUrl": "cdc.gov",
                "category": "Sleep",
            })

    def test_fallback_tip(self):
        assert FALLBACK_TIP.source_name == "Mayo Clinic"
        assert FALLBACK_TIP.id == "fallback-1"


class TestJournalEntry:
    """Tests for JournalEntry model."""

    def test_new_day_defaults(self):
        entry = JournalEntry(date=date(2026, 3, 14))

        assert entry.completed_routine_ids == set()
        assert entry.water_intake_cups == 0
        assert entry.sleep_hours == 7
        assert entry.mood == 3
        assert entry.notes == ""

    def test_completed_ids_stored_sorted(self):
        entry = JournalEntry(date=date(2026, 3, 14), completed_routine_ids={"b", "a"})
        assert entry.to_dict()["completedRoutineIds"] == ["a", "b"]

    def test_from_dict(self):
        entry = JournalEntry.from_dict({
            "date": "2026-03-14",
            "completedRoutineIds": ["a"],
            "mood": 5,
            "notes": "Good day",
            "waterIntakeCups": 6,
            "sleepHours": 7.5,
        })

        assert entry.date == date(2026, 3, 14)
        assert entry.completed_routine_ids == {"a"}
        assert entry.sleep_hours == 7.5
