"""
Output Schemas (v1.0.0)
Structural validators for provider responses. Nothing is coerced: a wrong
type or missing field is a SchemaViolation.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class SchemaViolation(Exception):
    """Provider responded but the payload does not match the output schema."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


# ==================== FEATURE OUTPUTS ====================

@dataclass
class StyleInsight:
    """Style insight engine output."""
    visual_clusters: List[str]
    thematic_tags: List[str]

    def to_dict(self) -> dict:
        return {
            "visualClusters": list(self.visual_clusters),
            "thematicTags": list(self.thematic_tags),
        }


@dataclass
class AlignmentReport:
    """Identity-expression alignment output."""
    alignment_score: int
    feedback: str

    def to_dict(self) -> dict:
        return {"alignmentScore": self.alignment_score, "feedback": self.feedback}


@dataclass
class ContentSuggestion:
    """Seasonal content compass output."""
    theme: str
    post_structure: str

    def to_dict(self) -> dict:
        return {"theme": self.theme, "postStructure": self.post_structure}


@dataclass
class OutfitItem:
    """One garment found in an outfit photo."""
    label: str
    image_url: str = ""

    def to_dict(self) -> dict:
        return {"label": self.label, "imageUrl": self.image_url}


@dataclass
class OutfitVisualization:
    """Outfit visualizer output."""
    identified_items: List[OutfitItem] = field(default_factory=list)
    overall_style_description: str = ""

    def to_dict(self) -> dict:
        return {
            "identifiedItems": [item.to_dict() for item in self.identified_items],
            "overallStyleDescription": self.overall_style_description,
        }


# ==================== FIELD VALIDATORS ====================

def _require_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaViolation("response", f"expected a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: Dict[str, Any], key: str, path: str = "") -> str:
    name = path or key
    if key not in data:
        raise SchemaViolation(name, "is missing")
    value = data[key]
    if not isinstance(value, str):
        raise SchemaViolation(name, f"expected string, got {type(value).__name__}")
    return value


def _require_str_list(data: Dict[str, Any], key: str) -> List[str]:
    if key not in data:
        raise SchemaViolation(key, "is missing")
    value = data[key]
    if not isinstance(value, list):
        raise SchemaViolation(key, f"expected list, got {type(value).__name__}")
    for i, entry in enumerate(value):
        if not isinstance(entry, str):
            raise SchemaViolation(f"{key}[{i}]", f"expected string, got {type(entry).__name__}")
    return list(value)


def _require_int_in_range(data: Dict[str, Any], key: str, low: int, high: int) -> int:
    if key not in data:
        raise SchemaViolation(key, "is missing")
    value = data[key]
    # JSON numbers like 82.0 are accepted, 82.5 and booleans are not
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaViolation(key, f"expected integer, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise SchemaViolation(key, f"expected integer, got {value}")
        value = int(value)
    if value < low or value > high:
        raise SchemaViolation(key, f"must be between {low} and {high}, got {value}")
    return value


# ==================== SCHEMA CHECKS ====================

def parse_style_insight(data: Any) -> StyleInsight:
    data = _require_object(data)
    return StyleInsight(
        visual_clusters=_require_str_list(data, "visualClusters"),
        thematic_tags=_require_str_list(data, "thematicTags"),
    )


def parse_alignment_report(data: Any) -> AlignmentReport:
    data = _require_object(data)
    return AlignmentReport(
        alignment_score=_require_int_in_range(data, "alignmentScore", 0, 100),
        feedback=_require_str(data, "feedback"),
    )


def parse_content_suggestion(data: Any) -> ContentSuggestion:
    data = _require_object(data)
    return ContentSuggestion(
        theme=_require_str(data, "theme"),
        post_structure=_require_str(data, "postStructure"),
    )


def parse_outfit_analysis(data: Any) -> OutfitVisualization:
    """
    Validate the garment-identification response.

    imageUrl is optional here since renders are produced afterwards,
    but when present it must be a string.
    """
    data = _require_object(data)

    if "identifiedItems" not in data:
        raise SchemaViolation("identifiedItems", "is missing")
    raw_items = data["identifiedItems"]
    if not isinstance(raw_items, list):
        raise SchemaViolation("identifiedItems", f"expected list, got {type(raw_items).__name__}")

    items = []
    for i, raw in enumerate(raw_items):
        path = f"identifiedItems[{i}]"
        if not isinstance(raw, dict):
            raise SchemaViolation(path, f"expected object, got {type(raw).__name__}")
        label = _require_str(raw, "label", f"{path}.label")
        image_url = ""
        if "imageUrl" in raw:
            image_url = _require_str(raw, "imageUrl", f"{path}.imageUrl")
        items.append(OutfitItem(label=label, image_url=image_url))

    return OutfitVisualization(
        identified_items=items,
        overall_style_description=_require_str(data, "overallStyleDescription"),
    )
