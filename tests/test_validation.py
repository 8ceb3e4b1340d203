"""
Tests for feature input validation.
"""
import base64

import pytest

from lucent_service.core.validation import (
    FieldSpec,
    FIELD_IMAGE,
    ImagePayload,
    InputValidationError,
    parse_data_uri,
    validate_image_data_uri,
    validate_payload,
    validate_text,
)


class TestDataUri:
    """Photo data URI handling."""

    def test_valid_photo_is_decoded(self, photo_data_uri, png_bytes):
        photo = validate_image_data_uri(photo_data_uri)
        assert isinstance(photo, ImagePayload)
        assert photo.mime_type == "image/png"
        assert photo.content == png_bytes
        assert photo.image.size == (64, 96)

    def test_plain_string_is_rejected(self):
        with pytest.raises(InputValidationError) as exc:
            validate_image_data_uri("not a data uri")
        assert exc.value.field == "photoDataUri"

    def test_non_image_mime_is_rejected(self):
        uri = "data:application/pdf;base64," + base64.b64encode(b"%PDF-1.4").decode()
        with pytest.raises(InputValidationError) as exc:
            validate_image_data_uri(uri)
        assert exc.value.status_code == 415

    def test_invalid_base64_is_rejected(self):
        with pytest.raises(InputValidationError) as exc:
            parse_data_uri("data:image/png;base64,@@not-base64@@")
        assert "base64" in exc.value.message

    def test_oversized_image_is_rejected(self, png_bytes):
        uri = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
        with pytest.raises(InputValidationError) as exc:
            validate_image_data_uri(uri, max_bytes=len(png_bytes) - 1)
        assert exc.value.status_code == 413
        assert "too large" in exc.value.message

    def test_undecodable_image_is_rejected(self):
        uri = "data:image/jpeg;base64," + base64.b64encode(b"not an image at all").decode()
        with pytest.raises(InputValidationError) as exc:
            validate_image_data_uri(uri)
        assert "cannot decode" in exc.value.message

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_missing_photo_is_rejected(self, value):
        with pytest.raises(InputValidationError):
            validate_image_data_uri(value)


class TestText:
    """Free-text fields."""

    def test_text_is_stripped(self):
        assert validate_text("  hello world  ", "field") == "hello world"

    def test_min_length_ignores_surrounding_whitespace(self):
        with pytest.raises(InputValidationError) as exc:
            validate_text("   short    ", "questionnaireResponses", min_length=10)
        assert "at least 10" in exc.value.message

    def test_non_string_is_rejected(self):
        with pytest.raises(InputValidationError):
            validate_text(["list"], "mood")


class TestPayload:
    """Whole-payload validation."""

    FIELDS = (
        FieldSpec("photoDataUri", kind=FIELD_IMAGE),
        FieldSpec("note", min_length=3),
    )

    def test_valid_payload(self, photo_data_uri):
        values = validate_payload(
            {"photoDataUri": photo_data_uri, "note": "calm", "extra": "ignored"}, self.FIELDS
        )
        assert set(values) == {"photoDataUri", "note"}
        assert values["note"] == "calm"

    def test_missing_field_names_the_field(self, photo_data_uri):
        with pytest.raises(InputValidationError) as exc:
            validate_payload({"photoDataUri": photo_data_uri}, self.FIELDS)
        assert exc.value.field == "note"

    def test_non_dict_payload_is_rejected(self):
        with pytest.raises(InputValidationError) as exc:
            validate_payload(["not", "a", "dict"], self.FIELDS)
        assert exc.value.field == "payload"
