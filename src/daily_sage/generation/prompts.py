"""Prompt templates and output schemas for content generation."""

from ..models.routine import RoutineCategory, TimeOfDay
from ..models.user_profile import UserProfile

# Sources the tips prompt asks the model to search and cite
CERTIFIED_SOURCES = ["WHO", "Mayo Clinic", "CDC", "NHS", "Harvard Health"]


def _array_schema(item_properties: dict) -> dict:
    """Wrap record properties in the top-level object strict schemas require."""
    return {
        "type": "object",
        "properties": {
            "items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": item_properties,
                    "required": list(item_properties),
                    "additionalProperties": False,
                },
            },
        },
        "required": ["items"],
        "additionalProperties": False,
    }


ROUTINE_SCHEMA = _array_schema({
    "id": {"type": "string"},
    "title": {"type": "string"},
    "description": {"type": "string"},
    "category": {"type": "string", "enum": [c.value for c in RoutineCategory]},
    "timeOfDay": {"type": "string", "enum": [t.value for t in TimeOfDay]},
    "durationMinutes": {"type": "number"},
})

TIP_SCHEMA = _array_schema({
    "id": {"type": "string"},
    "title": {"type": "string"},
    "content": {"type": "string"},
    "sourceName": {"type": "string"},
    "sourceUrl": {"type": "string"},
    "category": {"type": "string"},
})


def build_routine_prompt(profile: UserProfile) -> str:
    """Prompt asking for a tailored daily routine."""
    return f"""
Based on the following user profile, generate a daily health routine structure.
Profile:
{profile.get_summary()}
Create 5-7 distinct routine items covering exercise, diet/nutrition, sleep hygiene, and mental wellness.
Ensure they are tailored specifically to the provided constraints (e.g., if sedentary, suggest light movement).
Each item needs a short unique id, a category ({", ".join(c.value for c in RoutineCategory)}),
a time of day ({", ".join(t.value for t in TimeOfDay)}) and a duration in minutes.
""".strip()


def build_tips_prompt(profile: UserProfile) -> str:
    """Prompt asking for cited, search-grounded health tips."""
    return f"""
Find 5 SPECIFIC, actionable health tips relevant to a person with this profile:
{profile.get_summary()}
CRITICAL REQUIREMENT:
You MUST search for information from certified health sources ({", ".join(CERTIFIED_SOURCES)}).
Return each tip with: id, title, content (markdown), sourceName, sourceUrl, category.
The sourceUrl must be a direct link found via search.
""".strip()
