"""
Input Validation Module (v1.0.0)
Validates feature payloads and embedded photos before any provider call.
"""
import io
import re
import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from PIL import Image

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_MAX_IMAGE_BYTES = 4 * 1024 * 1024
DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)

FIELD_TEXT = "text"
FIELD_IMAGE = "image"


class InputValidationError(Exception):
    """Caller-supplied input does not satisfy a feature's input schema."""
    def __init__(self, field: str, message: str, status_code: int = 400):
        self.field = field
        self.message = message
        self.status_code = status_code
        super().__init__(f"{field}: {message}")


@dataclass(frozen=True)
class FieldSpec:
    """One named input field of a feature."""
    name: str
    kind: str = FIELD_TEXT
    min_length: int = 1


@dataclass
class ImagePayload:
    """A decoded photo data URI."""
    data_uri: str
    mime_type: str
    content: bytes
    image: Image.Image

    @property
    def size_bytes(self) -> int:
        return len(self.content)


def parse_data_uri(value: str, field: str = "photoDataUri") -> Tuple[str, bytes]:
    """
    Split a 'data:<mimetype>;base64,<encoded_data>' string.

    Returns:
        Tuple of (lower-cased MIME type, decoded bytes)

    Raises:
        InputValidationError: If the string is not a base64 data URI
    """
    match = DATA_URI_PATTERN.match(value.strip())
    if not match:
        raise InputValidationError(
            field, "must be a data URI of the form 'data:<mimetype>;base64,<data>'"
        )

    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError):
        raise InputValidationError(field, "contains invalid base64 data")

    if not content:
        raise InputValidationError(field, "image data is empty")

    return match.group("mime").lower(), content


def validate_file_size(content: bytes, field: str, max_bytes: int = DEFAULT_MAX_IMAGE_BYTES) -> None:
    """
    Check if decoded image size is within limits.

    Raises:
        InputValidationError: If the image exceeds max_bytes
    """
    if len(content) > max_bytes:
        size_mb = len(content) / (1024 * 1024)
        max_mb = max_bytes / (1024 * 1024)
        raise InputValidationError(
            field,
            f"image too large: {size_mb:.1f}MB (max {max_mb:g}MB)",
            status_code=413
        )


def validate_mime_type(mime: str, field: str) -> None:
    """
    Check that a MIME type is an image type.

    Raises:
        InputValidationError: If the MIME type is not image/*
    """
    if not mime.startswith("image/"):
        raise InputValidationError(
            field, f"unsupported file type: {mime} (expected an image)", status_code=415
        )


def decode_image(content: bytes, field: str) -> Image.Image:
    """
    Decode image bytes to PIL Image.

    Raises:
        InputValidationError: If image cannot be decoded
    """
    try:
        image = Image.open(io.BytesIO(content))
        image.load()  # Force load to catch truncated images
        return image
    except Exception as e:
        raise InputValidationError(field, f"cannot decode image: {e}")


def validate_image_data_uri(
    value: Any,
    field: str = "photoDataUri",
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES
) -> ImagePayload:
    """
    Complete validation pipeline for an uploaded photo data URI.

    Raises:
        InputValidationError: If any validation fails
    """
    if not isinstance(value, str) or not value.strip():
        raise InputValidationError(field, "is required")

    mime, content = parse_data_uri(value, field)
    validate_mime_type(mime, field)
    validate_file_size(content, field, max_bytes)
    image = decode_image(content, field)

    logger.info(f"Image validated: {image.size[0]}x{image.size[1]}, {image.mode}, {mime}")
    return ImagePayload(data_uri=value.strip(), mime_type=mime, content=content, image=image)


def validate_text(value: Any, field: str, min_length: int = 1) -> str:
    """
    Check a required free-text field.

    Raises:
        InputValidationError: If missing, not a string or too short
    """
    if value is None:
        raise InputValidationError(field, "is required")
    if not isinstance(value, str):
        raise InputValidationError(field, "must be a string")

    text = value.strip()
    if not text:
        raise InputValidationError(field, "is required")
    if len(text) < min_length:
        raise InputValidationError(field, f"must be at least {min_length} characters")
    return text


def validate_payload(
    payload: Optional[Dict[str, Any]],
    fields: Sequence[FieldSpec],
    max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES
) -> Dict[str, Any]:
    """
    Validate a feature payload against its field specs.

    Text fields come back stripped, image fields as ImagePayload.
    Unknown keys are dropped.

    Raises:
        InputValidationError: On the first field that fails
    """
    if not isinstance(payload, dict):
        raise InputValidationError("payload", "must be a JSON object")

    values: Dict[str, Any] = {}
    for field_spec in fields:
        raw = payload.get(field_spec.name)
        if field_spec.kind == FIELD_IMAGE:
            values[field_spec.name] = validate_image_data_uri(raw, field_spec.name, max_image_bytes)
        else:
            values[field_spec.name] = validate_text(raw, field_spec.name, field_spec.min_length)
    return values
