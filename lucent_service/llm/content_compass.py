"""
Seasonal Content Compass (v1.0.0)
Suggests a content theme and a soft-focus post structure for a platform.
"""
import logging
from typing import Any, Dict

from lucent_service.core.validation import FieldSpec
from lucent_service.core.schemas import ContentSuggestion, parse_content_suggestion
from lucent_service.llm.llm_adapter import get_analyst_client

logger = logging.getLogger(__name__)

FEATURE_ID = "content-compass"
FAILURE_MESSAGE = "Failed to get content suggestions."

# Options offered by the dashboard; other values are passed through
SEASONS = ("Spring", "Summer", "Autumn", "Winter")
MOODS = (
    "Early summer calm",
    "Deep creative energy",
    "Quietly reflective",
    "Playful and bright",
    "Focused and grounded",
)
PLATFORMS = ("Instagram", "X (Twitter)", "LinkedIn")

INPUT_FIELDS = (
    FieldSpec("currentSeason"),
    FieldSpec("mood"),
    FieldSpec("platform"),
)

SYSTEM_PROMPT = """You are a social media content strategist.

Respond with ONLY this JSON:
{
    "theme": "suggested content theme",
    "postStructure": "soft-focus post structure for the platform"
}"""

PROMPT_TEMPLATE = """Based on the current season, the user's mood, and the social media platform, suggest a content theme and a soft-focus post structure.

Current Season: {currentSeason}
Mood: {mood}
Platform: {platform}"""


def get_options() -> dict:
    """Choices the dashboard offers for each field."""
    return {
        "currentSeason": list(SEASONS),
        "mood": list(MOODS),
        "platform": list(PLATFORMS),
    }


def render_prompt(values: Dict[str, Any]) -> str:
    return PROMPT_TEMPLATE.format(
        currentSeason=values["currentSeason"],
        mood=values["mood"],
        platform=values["platform"],
    )


async def suggest_content(values: Dict[str, Any]) -> ContentSuggestion:
    """
    Suggest a seasonal theme and post structure.

    Raises:
        ProviderError: If the provider call fails
        SchemaViolation: If the response does not match the schema
    """
    client = get_analyst_client()
    data = await client.generate_json(SYSTEM_PROMPT, render_prompt(values))

    suggestion = parse_content_suggestion(data)
    logger.info(f"Content compass theme: {suggestion.theme[:60]}")
    return suggestion
