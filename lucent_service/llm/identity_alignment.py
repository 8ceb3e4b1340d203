"""
Identity-Expression Alignment (v1.0.0)
Scores how well a user's content reflects the mood they describe.
"""
import logging
from typing import Any, Dict

from lucent_service.core.validation import FieldSpec
from lucent_service.core.schemas import AlignmentReport, parse_alignment_report
from lucent_service.llm.llm_adapter import get_analyst_client

logger = logging.getLogger(__name__)

FEATURE_ID = "identity-alignment"
FAILURE_MESSAGE = "Failed to run alignment check."

MIN_TEXT_LENGTH = 10

INPUT_FIELDS = (
    FieldSpec("questionnaireResponses", min_length=MIN_TEXT_LENGTH),
    FieldSpec("contentExamples", min_length=MIN_TEXT_LENGTH),
)

SYSTEM_PROMPT = """You are an AI assistant designed to analyze the alignment between a user's expressed mood and their content.

Respond with ONLY this JSON:
{
    "alignmentScore": <integer 0-100>,
    "feedback": "specific, actionable feedback"
}"""

PROMPT_TEMPLATE = """Based on the user's questionnaire responses:
{questionnaireResponses}

And their content examples:
{contentExamples}

Provide an alignment score (0-100) and feedback on how well the content reflects their desired personal expression. Be specific in your feedback. Focus on actionable areas for improvement."""


def render_prompt(values: Dict[str, Any]) -> str:
    return PROMPT_TEMPLATE.format(
        questionnaireResponses=values["questionnaireResponses"],
        contentExamples=values["contentExamples"],
    )


async def check_alignment(values: Dict[str, Any]) -> AlignmentReport:
    """
    Score mood/content alignment.

    Raises:
        ProviderError: If the provider call fails
        SchemaViolation: If the response does not match the schema
    """
    client = get_analyst_client()
    data = await client.generate_json(SYSTEM_PROMPT, render_prompt(values))

    report = parse_alignment_report(data)
    logger.info(f"Alignment score: {report.alignment_score}")
    return report
