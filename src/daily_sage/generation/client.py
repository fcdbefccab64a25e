"""Generative content client for routines and health tips."""

import json
import logging

from openai import AsyncOpenAI

from ..config import Settings
from ..exceptions import GenerationNotConfiguredError
from ..models.routine import FALLBACK_TIP, HealthTip, RoutineItem
from ..models.user_profile import UserProfile
from .prompts import ROUTINE_SCHEMA, TIP_SCHEMA, build_routine_prompt, build_tips_prompt

logger = logging.getLogger(__name__)


class ContentGenerator:
    """Requests schema-constrained routines and tips from a hosted model.

    Both operations fail loudly when no API key is configured. Any other
    failure (transport, malformed JSON, records violating the schema) is
    logged and turned into an empty routine list or the fallback tip.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        client: AsyncOpenAI | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentGenerator":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.model,
            temperature=settings.temperature,
        )

    def _ensure_configured(self) -> None:
        if not self.api_key and self._client is None:
            raise GenerationNotConfiguredError()

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _request_items(
        self,
        prompt: str,
        schema: dict,
        schema_name: str,
        web_search: bool = False,
    ) -> list[dict]:
        """Send one structured-output request and return the parsed records."""
        request: dict = {
            "model": self.model,
            "input": prompt,
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": schema,
                    "strict": True,
                }
            },
        }
        if web_search:
            request["tools"] = [{"type": "web_search"}]
        else:
            request["temperature"] = self.temperature

        response = await self.client.responses.create(**request)
        text = response.output_text
        if not text:
            return []

        payload = json.loads(text)
        if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
            raise ValueError("Response is not an object with an 'items' array")
        return payload["items"]

    async def generate_routines(self, profile: UserProfile) -> list[RoutineItem]:
        """Generate a daily routine tailored to the profile."""
        self._ensure_configured()
        logger.info("Generating routines for %s with %s", profile.uid, self.model)

        try:
            records = await self._request_items(
                build_routine_prompt(profile), ROUTINE_SCHEMA, "routine_items"
            )
            return [RoutineItem.from_dict(record) for record in records]
        except Exception as e:
            logger.error("Error generating routines: %s", e)
            return []

    async def generate_daily_tips(self, profile: UserProfile) -> list[HealthTip]:
        """Generate cited health tips, searching the web for sources."""
        self._ensure_configured()
        logger.info("Generating daily tips for %s with %s", profile.uid, self.model)

        try:
            records = await self._request_items(
                build_tips_prompt(profile), TIP_SCHEMA, "health_tips", web_search=True
            )
            # Citations are checked for shape only, not fetched
            return [HealthTip.from_dict(record) for record in records]
        except Exception as e:
            logger.error("Error generating tips, using fallback: %s", e)
            return [FALLBACK_TIP]
