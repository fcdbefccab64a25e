"""Generative content for routines and health tips."""

from .client import ContentGenerator
from .prompts import ROUTINE_SCHEMA, TIP_SCHEMA, build_routine_prompt, build_tips_prompt

__all__ = [
    "build_routine_prompt",
    "build_tips_prompt",
    "ContentGenerator",
    "ROUTINE_SCHEMA",
    "TIP_SCHEMA",
]
