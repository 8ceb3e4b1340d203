"""
AI Outfit Visualizer (v1.0.0)
Identifies the garments in an outfit photo, then renders each one on a
neutral virtual model.

Flow:
    1. One analyst call labels the garments and describes the overall style.
    2. One image call per label, all in parallel. A failed render leaves
       that item's imageUrl empty and does not fail the others.
"""
import asyncio
import logging
from typing import Any, Dict

from lucent_service.core.validation import FieldSpec, FIELD_IMAGE
from lucent_service.core.schemas import OutfitItem, OutfitVisualization, parse_outfit_analysis
from lucent_service.llm.llm_adapter import get_analyst_client, get_image_client
from lucent_service.observability.metrics import increment_subcall_failure

logger = logging.getLogger(__name__)

FEATURE_ID = "outfit-visualizer"
FAILURE_MESSAGE = "Failed to visualize outfit."

INPUT_FIELDS = (
    FieldSpec("photoDataUri", kind=FIELD_IMAGE),
)

SYSTEM_PROMPT = """You are a fashion expert.

Respond with ONLY this JSON:
{
    "identifiedItems": [{"label": "semantic label of the garment"}, ...],
    "overallStyleDescription": "description of the overall style"
}"""

PROMPT = """Analyze the provided outfit photo and identify the fashion items, providing semantic labels for each.

Also, generate a description of the overall style of the outfit."""

RENDER_PROMPT_TEMPLATE = (
    "Generate an image of a neutral, non-gendered virtual model wearing a {label}. "
    "Focus on the garment itself, not the model's features. "
    "The model should be in a neutral pose."
)


async def render_item(label: str) -> str:
    """
    Render one garment on a virtual model.

    Returns:
        Image URL/data URI, or "" if this render failed
    """
    try:
        client = get_image_client()
        return await client.generate_image(RENDER_PROMPT_TEMPLATE.format(label=label))
    except Exception as e:
        logger.warning(f"Render failed for '{label}' (non-fatal): {e}")
        increment_subcall_failure(FEATURE_ID)
        return ""


async def visualize_outfit(values: Dict[str, Any]) -> OutfitVisualization:
    """
    Identify garments then render them concurrently.

    Raises:
        ProviderError: If the identification call fails
        SchemaViolation: If the identification response does not match the schema
    """
    photo = values["photoDataUri"]
    client = get_analyst_client()

    data = await client.generate_json(SYSTEM_PROMPT, PROMPT, images=[photo])
    analysis = parse_outfit_analysis(data)

    labels = [item.label for item in analysis.identified_items]
    logger.info(f"Outfit visualizer: rendering {len(labels)} items in parallel")

    urls = await asyncio.gather(*[render_item(label) for label in labels])

    rendered = sum(1 for url in urls if url)
    logger.info(f"Outfit visualizer: {rendered}/{len(labels)} renders succeeded")

    return OutfitVisualization(
        identified_items=[OutfitItem(label=label, image_url=url) for label, url in zip(labels, urls)],
        overall_style_description=analysis.overall_style_description,
    )
