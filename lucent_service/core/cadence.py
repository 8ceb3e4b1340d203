"""
Gentle Cadence Planner (v1.0.0)
Maps how the user feels and how much energy they have to a posting suggestion.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Union

from lucent_service.core.validation import InputValidationError

logger = logging.getLogger(__name__)

MIN_ENERGY = 0
MAX_ENERGY = 100

# Lower bounds of the Medium and High buckets (inclusive)
MEDIUM_THRESHOLD = 33
HIGH_THRESHOLD = 66


class Mood(Enum):
    """How the user is feeling today."""
    SCATTERED = "scattered"
    TIRED = "tired"
    INSPIRED = "inspired"


class EnergyLevel(Enum):
    """Bucketed energy score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


SUGGESTIONS = MappingProxyType({
    Mood.SCATTERED: MappingProxyType({
        EnergyLevel.LOW: "It's okay to rest. Maybe just one gentle post, or none at all. Your presence is enough.",
        EnergyLevel.MEDIUM: "Focus on one small thing. A single photo, a short thought. No pressure.",
        EnergyLevel.HIGH: "Channel that energy! Try a quick burst of posts, like an IG story series, then log off.",
    }),
    Mood.TIRED: MappingProxyType({
        EnergyLevel.LOW: "Permission to be offline. Rest is productive. Come back when you're ready.",
        EnergyLevel.MEDIUM: "Share something simple that's already created. A past photo, a favorite quote.",
        EnergyLevel.HIGH: "A quick 'hello' is plenty. Don't push. Maybe reshare something that inspires you.",
    }),
    Mood.INSPIRED: MappingProxyType({
        EnergyLevel.LOW: "Capture the spark without needing to perfect it. A note, a voice memo, a draft.",
        EnergyLevel.MEDIUM: "Ride the wave. Create and share what feels good. Don't overthink the schedule.",
        EnergyLevel.HIGH: "Flow with it! This is a great time for a series, a deep-dive post, or batch-creating content.",
    }),
})


def parse_mood(value: Union[str, Mood]) -> Mood:
    """
    Resolve a mood name (case-insensitive) or Mood member.

    Raises:
        InputValidationError: If the mood is not recognized
    """
    if isinstance(value, Mood):
        return value
    if isinstance(value, str):
        try:
            return Mood(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in Mood)
    raise InputValidationError("mood", f"mood must be one of: {allowed}")


def energy_level(score: int) -> EnergyLevel:
    """
    Bucket a 0-100 energy score.

    Boundaries belong to the upper bucket: 33 is Medium, 66 is High.

    Raises:
        InputValidationError: If score is not an integer in [0, 100]
    """
    # bool is an int subclass but never a valid slider value
    if isinstance(score, bool) or not isinstance(score, int):
        raise InputValidationError("energyScore", "energyScore must be an integer")
    if score < MIN_ENERGY or score > MAX_ENERGY:
        raise InputValidationError(
            "energyScore",
            f"energyScore must be between {MIN_ENERGY} and {MAX_ENERGY}, got {score}"
        )

    if score < MEDIUM_THRESHOLD:
        return EnergyLevel.LOW
    if score < HIGH_THRESHOLD:
        return EnergyLevel.MEDIUM
    return EnergyLevel.HIGH


def recommend(mood: Union[str, Mood], score: int) -> str:
    """Return the suggestion for a mood and raw energy score."""
    return SUGGESTIONS[parse_mood(mood)][energy_level(score)]


def build_cadence_plan(mood: Union[str, Mood], score: int) -> dict:
    """Full cadence response for the dashboard."""
    resolved = parse_mood(mood)
    level = energy_level(score)
    logger.debug(f"Cadence: mood={resolved.value}, score={score}, level={level.value}")
    return {
        "mood": resolved.value,
        "energyScore": score,
        "energyLevel": level.value,
        "suggestion": SUGGESTIONS[resolved][level],
    }
