# Core module
from lucent_service.core.validation import (
    InputValidationError,
    FieldSpec,
    ImagePayload,
    validate_payload,
    validate_image_data_uri,
    validate_text,
)
from lucent_service.core.schemas import (
    SchemaViolation,
    StyleInsight,
    AlignmentReport,
    ContentSuggestion,
    OutfitItem,
    OutfitVisualization,
)
from lucent_service.core.cadence import (
    Mood,
    EnergyLevel,
    energy_level,
    recommend,
    build_cadence_plan,
)
