"""User identity and health profile data models."""

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum


class Gender(str, Enum):
    """Self-reported gender."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-Binary"
    PREFER_NOT_TO_SAY = "Prefer not to say"


class DietType(str, Enum):
    """Usual diet."""

    NONE = "None/Omnivore"
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    KETO = "Keto"
    PALEO = "Paleo"
    GLUTEN_FREE = "Gluten Free"
    MEDITERRANEAN = "Mediterranean"


class ActivityLevel(str, Enum):
    """How often the user exercises."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"
    EXTRA_ACTIVE = "Extra Active"


@dataclass(frozen=True)
class Identity:
    """An authenticated user as reported by the auth provider."""

    uid: str
    display_name: str | None = None
    email: str | None = None
    photo_url: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "uid": self.uid,
            "displayName": self.display_name,
            "email": self.email,
            "photoURL": self.photo_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Identity":
        """Create from dictionary."""
        return cls(
            uid=data["uid"],
            display_name=data.get("displayName"),
            email=data.get("email"),
            photo_url=data.get("photoURL"),
        )


# Python attribute -> stored document key
_FIELD_KEYS = {
    "uid": "uid",
    "email": "email",
    "display_name": "displayName",
    "photo_url": "photoURL",
    "is_profile_complete": "isProfileComplete",
    "birth_date": "birthDate",
    "gender": "gender",
    "height": "height",
    "weight": "weight",
    "bmi": "bmi",
    "smoker": "smoker",
    "drinker": "drinker",
    "diet": "diet",
    "exercise_frequency": "exerciseFrequency",
    "sleep_time": "sleepTime",
    "wake_time": "wakeTime",
    "health_conditions": "healthConditions",
    "mental_conditions": "mentalConditions",
    "work_schedule": "workSchedule",
    "additional_info": "additionalInfo",
}

# Age used in prompts when no birth date was given
DEFAULT_AGE = 30

_ENUM_FIELDS = {
    "gender": Gender,
    "diet": DietType,
    "exercise_frequency": ActivityLevel,
}


@dataclass
class ProfileDraft:
    """Questionnaire answers; every field is optional until completion."""

    display_name: str | None = None

    # Basic vitals
    birth_date: date | None = None
    gender: Gender | None = None
    height: float | None = None  # cm
    weight: float | None = None  # kg
    bmi: float | None = None

    # Lifestyle
    smoker: bool | None = None
    drinker: bool | None = None
    diet: DietType | None = None
    exercise_frequency: ActivityLevel | None = None
    sleep_time: str | None = None  # HH:MM
    wake_time: str | None = None  # HH:MM

    # Health & schedule
    health_conditions: str | None = None
    mental_conditions: str | None = None
    work_schedule: str | None = None
    additional_info: str | None = None

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(ProfileDraft)}

    def to_dict(self, include_unset: bool = False) -> dict:
        """Convert to a storage document, omitting unset fields.

        With ``include_unset`` the questionnaire answers that are unset are
        kept as None, so a store can clear them instead of merging.
        """
        answer_names = ProfileDraft.field_names()
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                if include_unset and f.name in answer_names:
                    data[_FIELD_KEYS[f.name]] = None
                continue
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, date):
                value = value.isoformat()
            data[_FIELD_KEYS[f.name]] = value
        return data

    @classmethod
    def _parse_fields(cls, data: dict) -> dict:
        """Read draft fields from a storage document."""
        values = {}
        for name in cls.field_names():
            value = data.get(_FIELD_KEYS[name])
            if value is None:
                continue
            if name in _ENUM_FIELDS:
                value = _ENUM_FIELDS[name](value)
            elif name == "birth_date":
                value = date.fromisoformat(value) if value else None
            values[name] = value
        return values

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileDraft":
        """Create from dictionary."""
        return cls(**cls._parse_fields(data))


@dataclass(kw_only=True)
class UserProfile(ProfileDraft):
    """Persisted health profile of one user, keyed by uid."""

    uid: str
    email: str | None = None
    photo_url: str | None = None
    is_profile_complete: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            uid=data["uid"],
            email=data.get("email"),
            photo_url=data.get("photoURL"),
            is_profile_complete=bool(data.get("isProfileComplete", False)),
            **cls._parse_fields(data),
        )

    @classmethod
    def from_draft(cls, identity: Identity, draft: ProfileDraft) -> "UserProfile":
        """Merge questionnaire answers with the authenticated identity."""
        values = {name: getattr(draft, name) for name in ProfileDraft.field_names()}
        values["display_name"] = identity.display_name or draft.display_name
        return cls(
            uid=identity.uid,
            email=identity.email,
            photo_url=identity.photo_url,
            is_profile_complete=True,
            **values,
        )

    def to_draft(self) -> ProfileDraft:
        """Copy the editable answers into a fresh draft."""
        return ProfileDraft(**{name: getattr(self, name) for name in ProfileDraft.field_names()})

    @property
    def age(self) -> int | None:
        if self.birth_date is None:
            return None
        return calculate_age(self.birth_date)

    def get_summary(self) -> str:
        """Generate a summary for AI context."""
        age = self.age if self.age is not None else DEFAULT_AGE
        summary = f"- Age: {age}\n"
        summary += f"- BMI: {self.bmi if self.bmi is not None else 'unknown'}\n"
        if self.gender:
            summary += f"- Gender: {self.gender.value}\n"
        summary += f"- Habits: Smoker: {_yes_no(self.smoker)}, Drinker: {_yes_no(self.drinker)}\n"
        if self.diet:
            summary += f"- Diet: {self.diet.value}\n"
        if self.exercise_frequency:
            summary += f"- Activity level: {self.exercise_frequency.value}\n"
        if self.sleep_time or self.wake_time:
            summary += f"- Sleep schedule: {self.sleep_time or '?'} to {self.wake_time or '?'}\n"
        summary += f"- Conditions: {self.health_conditions or 'none reported'}\n"
        summary += f"- Mental: {self.mental_conditions or 'none reported'}\n"
        summary += f"- Work: {self.work_schedule or 'not specified'}\n"
        if self.additional_info:
            summary += f"- Notes: {self.additional_info}\n"
        return summary


def _yes_no(value: bool | None) -> str:
    if value is None:
        return "unknown"
    return "yes" if value else "no"


def calculate_bmi(height_cm: float | None, weight_kg: float | None) -> float:
    """Body mass index rounded to one decimal; 0 when height or weight is missing."""
    if not height_cm or not weight_kg:
        return 0
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Age in whole years at the last birthday."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
