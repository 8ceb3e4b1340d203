"""
Style Insight Engine (v1.0.0)
Identifies visual clusters and thematic tags in a moodboard or outfit photo.
"""
import logging
from typing import Any, Dict

from lucent_service.core.validation import FieldSpec, FIELD_IMAGE
from lucent_service.core.schemas import StyleInsight, parse_style_insight
from lucent_service.llm.llm_adapter import get_analyst_client

logger = logging.getLogger(__name__)

FEATURE_ID = "style-insight"
FAILURE_MESSAGE = "Failed to analyze style."

INPUT_FIELDS = (
    FieldSpec("photoDataUri", kind=FIELD_IMAGE),
)

SYSTEM_PROMPT = """You are a visual style analyst for a creative wellbeing dashboard.

Respond with ONLY this JSON:
{
    "visualClusters": ["cluster1", "cluster2", ...],
    "thematicTags": ["tag1", "tag2", ...]
}"""

PROMPT = """Analyze the style of the image provided. Identify visual clusters (e.g. earthy, bold, minimalist) and thematic tags (e.g. grounded, surreal, early summer calm) that describe the style. Return the visual clusters and thematic tags as lists of strings."""


async def analyze_style(values: Dict[str, Any]) -> StyleInsight:
    """
    Run style analysis on a validated photo.

    Raises:
        ProviderError: If the provider call fails
        SchemaViolation: If the response does not match the schema
    """
    photo = values["photoDataUri"]
    client = get_analyst_client()

    logger.info(f"Style insight: analyzing {photo.mime_type} photo ({photo.size_bytes} bytes)")
    data = await client.generate_json(SYSTEM_PROMPT, PROMPT, images=[photo])

    insight = parse_style_insight(data)
    logger.info(
        f"Style insight: {len(insight.visual_clusters)} clusters, {len(insight.thematic_tags)} tags"
    )
    return insight
