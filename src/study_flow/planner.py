"""AI study plan requests through Gemini."""
import asyncio
import logging
import os
from datetime import date
from typing import Optional, Protocol

from google import genai

from study_flow.models import ConfigurationError, StudyConfiguration
from study_flow.schedule import days_remaining
from study_flow.store import ConfigStore

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

EMPTY_PLAN_MESSAGE = "Failed to generate plan."
PLAN_ERROR_MESSAGE = "Error connecting to Gemini API. Please check your API key."


def build_plan_prompt(config: StudyConfiguration, today: Optional[date] = None) -> str:
    days_left = days_remaining(config.exam_date, today)
    return f"""Act as an expert academic counselor. Create a highly personalized study plan for a student with the following details:
- Exam Date: {config.exam_date.isoformat()} ({days_left} days remaining)
- Subjects: {", ".join(config.subjects)}
- Weak Topics: {", ".join(config.weak_topics)}
- Daily Study Hours: {config.daily_hours} hours

Requirements:
1. Provide a daily routine suggestion.
2. Give specific strategies for the weak topics.
3. Suggest a weekly mock test schedule.
4. Ensure the schedule staggers the review of different topics so they don't all fall on the same day.
5. Include motivational advice.

Keep the tone encouraging and professional. Use Markdown for formatting."""


class PlanGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class GeminiPlanGenerator:
    """Text generation backed by the google-genai SDK."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        self.model = model or os.getenv("STUDY_FLOW_MODEL", DEFAULT_MODEL)

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")
        client = genai.Client(api_key=self.api_key)
        try:
            response = await client.aio.models.generate_content(model=self.model, contents=prompt)
        finally:
            await client.aio.aclose()
        return response.text or ""


class PlanSession:
    """Runs plan requests against a store, one at a time.

    The outcome is always text: the generated plan or a fallback message.
    """

    def __init__(self, store: ConfigStore, generator: PlanGenerator):
        self.store = store
        self.generator = generator

    async def request(self, today: Optional[date] = None) -> Optional[str]:
        if self.store.is_generating:
            logger.warning("Plan request already in flight, ignoring")
            return None
        self.store.is_generating = True
        try:
            prompt = build_plan_prompt(self.store.config, today)
            logger.info("Requesting study plan (%d chars prompt)", len(prompt))
            try:
                text = await self.generator.generate(prompt)
            except Exception:
                logger.exception("Plan generation failed")
                text = PLAN_ERROR_MESSAGE
            else:
                text = text or EMPTY_PLAN_MESSAGE
            self.store.plan_text = text
            logger.info("Plan request finished")
            return text
        finally:
            self.store.is_generating = False


def generate_plan_sync(session: PlanSession, today: Optional[date] = None) -> Optional[str]:
    """Blocking wrapper for the interactive CLI."""
    return asyncio.run(session.request(today))
