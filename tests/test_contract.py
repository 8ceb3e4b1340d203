"""
Tests for the analysis request contract (run_analysis).
Provider clients are mocked; no network calls are made.
"""
import asyncio
from unittest.mock import patch, MagicMock, AsyncMock

from lucent_service.core.contract import (
    run_analysis,
    FEATURES,
    INPUT_VALIDATION,
    PROVIDER_ERROR,
    SCHEMA_VIOLATION,
    UNKNOWN_FEATURE,
)
from lucent_service.llm.llm_adapter import ProviderError
from lucent_service.observability import get_metrics


ALIGNMENT_INPUT = {
    "questionnaireResponses": "I feel calm and want to slow down this season.",
    "contentExamples": "Loud launch posts, countdown timers and flash sales.",
}


class TestFeatureRegistry:

    def test_all_four_features_registered(self):
        assert set(FEATURES) == {
            "style-insight", "identity-alignment", "content-compass", "outfit-visualizer"
        }

    def test_unknown_feature_fails_without_raising(self):
        result = asyncio.run(run_analysis("horoscope", {}))
        assert result.success is False
        assert result.error_kind == UNKNOWN_FEATURE


class TestInputValidation:
    """Invalid input short-circuits before any provider call."""

    def test_missing_field_never_calls_provider(self, mock_client):
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client) as getter:
            result = asyncio.run(run_analysis("identity-alignment", {"questionnaireResponses": "Feeling quite calm"}))

        assert result.success is False
        assert result.error_kind == INPUT_VALIDATION
        assert result.field == "contentExamples"
        assert getter.call_count == 0
        assert mock_client.generate_json.await_count == 0

    def test_short_text_is_rejected(self, mock_client):
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis(
                "identity-alignment",
                {"questionnaireResponses": "tired", "contentExamples": ALIGNMENT_INPUT["contentExamples"]},
            ))

        assert result.error_kind == INPUT_VALIDATION
        assert result.field == "questionnaireResponses"
        assert mock_client.generate_json.await_count == 0

    def test_bad_photo_never_calls_provider(self, mock_client):
        with patch("lucent_service.llm.style_insight.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("style-insight", {"photoDataUri": "https://example.com/a.jpg"}))

        assert result.error_kind == INPUT_VALIDATION
        assert result.to_dict()["success"] is False
        assert result.to_dict()["field"] == "photoDataUri"
        assert mock_client.generate_json.await_count == 0

    def test_oversized_photo_uses_configured_limit(self, mock_client, photo_data_uri, monkeypatch):
        from lucent_service.config import reload_settings
        monkeypatch.setenv("LUCENT_MAX_IMAGE_MB", "0.00001")
        reload_settings()

        with patch("lucent_service.llm.style_insight.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("style-insight", {"photoDataUri": photo_data_uri}))

        assert result.error_kind == INPUT_VALIDATION
        assert "too large" in result.error


class TestProviderOutcomes:

    def test_style_insight_success(self, mock_client, photo_data_uri):
        mock_client.generate_json.return_value = {
            "visualClusters": ["earthy", "minimalist"],
            "thematicTags": ["grounded"],
        }
        with patch("lucent_service.llm.style_insight.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("style-insight", {"photoDataUri": photo_data_uri}))

        assert result.success is True
        assert result.to_dict() == {
            "success": True,
            "data": {"visualClusters": ["earthy", "minimalist"], "thematicTags": ["grounded"]},
        }
        # The decoded photo is passed to the provider
        _, kwargs = mock_client.generate_json.call_args
        assert kwargs["images"][0].mime_type == "image/png"

    def test_alignment_prompt_contains_inputs(self, mock_client):
        mock_client.generate_json.return_value = {"alignmentScore": 40, "feedback": "Slow the pace."}
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("identity-alignment", ALIGNMENT_INPUT))

        assert result.success is True
        assert result.data == {"alignmentScore": 40, "feedback": "Slow the pace."}
        system_prompt, user_prompt = mock_client.generate_json.call_args[0]
        assert ALIGNMENT_INPUT["questionnaireResponses"] in user_prompt
        assert ALIGNMENT_INPUT["contentExamples"] in user_prompt

    def test_missing_output_field_is_schema_violation(self, mock_client):
        mock_client.generate_json.return_value = {"theme": "Golden hour"}
        with patch("lucent_service.llm.content_compass.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis(
                "content-compass",
                {"currentSeason": "Autumn", "mood": "Quietly reflective", "platform": "Instagram"},
            ))

        assert result.success is False
        assert result.error_kind == SCHEMA_VIOLATION
        assert result.to_dict() == {"success": False, "error": "Failed to get content suggestions."}

    def test_provider_error_is_converted(self, mock_client):
        mock_client.generate_json.side_effect = ProviderError("gemini timed out after 60s", provider="gemini")
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("identity-alignment", ALIGNMENT_INPUT))

        assert result.success is False
        assert result.error_kind == PROVIDER_ERROR
        assert result.error == "Failed to run alignment check."
        assert "timed out" not in result.error

    def test_unexpected_exception_is_converted(self, mock_client):
        mock_client.generate_json.side_effect = RuntimeError("socket closed")
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client):
            result = asyncio.run(run_analysis("identity-alignment", ALIGNMENT_INPUT))

        assert result.success is False
        assert result.error_kind == PROVIDER_ERROR

    def test_missing_api_key_is_a_failure_result(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("LUCENT_LLM_PROVIDER", "gemini")
        result = asyncio.run(run_analysis("identity-alignment", ALIGNMENT_INPUT))

        assert result.success is False
        assert result.error_kind == PROVIDER_ERROR

    def test_metrics_count_outcomes(self, mock_client):
        mock_client.generate_json.return_value = {"alignmentScore": 90, "feedback": "Aligned."}
        with patch("lucent_service.llm.identity_alignment.get_analyst_client", return_value=mock_client):
            asyncio.run(run_analysis("identity-alignment", ALIGNMENT_INPUT))
            asyncio.run(run_analysis("identity-alignment", {}))

        metrics = get_metrics()
        assert metrics["total_requests"] == 2
        assert metrics["successes"] == 1
        assert metrics["failures_by_kind"] == {INPUT_VALIDATION: 1}
        assert metrics["requests_by_feature"] == {"identity-alignment": 2}


class TestOutfitVisualizer:
    """Identification then concurrent per-garment renders."""

    ANALYSIS = {
        "identifiedItems": [{"label": "denim jacket"}, {"label": "wide-leg trousers"}, {"label": "loafers"}],
        "overallStyleDescription": "Relaxed smart-casual",
    }

    def _image_client(self, failing_label=None):
        async def fake_render(prompt):
            if failing_label and failing_label in prompt:
                raise ProviderError("no image returned (reason: SAFETY)", provider="gemini")
            label = prompt.split("wearing a ")[1].split(".")[0]
            return f"data:image/png;base64,{label.replace(' ', '_')}"

        client = MagicMock()
        client.generate_image = AsyncMock(side_effect=fake_render)
        return client

    def _run(self, analyst, image_client, photo_data_uri):
        with patch("lucent_service.llm.outfit_visualizer.get_analyst_client", return_value=analyst), \
             patch("lucent_service.llm.outfit_visualizer.get_image_client", return_value=image_client):
            return asyncio.run(run_analysis("outfit-visualizer", {"photoDataUri": photo_data_uri}))

    def test_one_failed_render_does_not_fail_request(self, mock_client, photo_data_uri):
        mock_client.generate_json.return_value = self.ANALYSIS
        image_client = self._image_client(failing_label="wide-leg trousers")

        result = self._run(mock_client, image_client, photo_data_uri)

        assert result.success is True
        items = result.data["identifiedItems"]
        assert [item["label"] for item in items] == ["denim jacket", "wide-leg trousers", "loafers"]
        assert [item["imageUrl"] == "" for item in items] == [False, True, False]
        assert items[0]["imageUrl"] == "data:image/png;base64,denim_jacket"
        assert result.data["overallStyleDescription"] == "Relaxed smart-casual"
        assert image_client.generate_image.await_count == 3
        assert get_metrics()["subcall_failures"] == 1
        assert get_metrics()["subcall_failures_by_feature"] == {"outfit-visualizer": 1}

    def test_renders_run_concurrently(self, mock_client, photo_data_uri):
        """All renders are in flight before any of them completes."""
        mock_client.generate_json.return_value = self.ANALYSIS
        in_flight = {"now": 0, "peak": 0}

        async def slow_render(prompt):
            in_flight["now"] += 1
            in_flight["peak"] = max(in_flight["peak"], in_flight["now"])
            await asyncio.sleep(0.01)
            in_flight["now"] -= 1
            return "data:image/png;base64,AAAA"

        image_client = MagicMock()
        image_client.generate_image = AsyncMock(side_effect=slow_render)

        result = self._run(mock_client, image_client, photo_data_uri)

        assert result.success is True
        assert in_flight["peak"] == 3

    def test_identification_failure_skips_renders(self, mock_client, photo_data_uri):
        mock_client.generate_json.return_value = {"identifiedItems": "jacket, trousers"}
        image_client = self._image_client()

        result = self._run(mock_client, image_client, photo_data_uri)

        assert result.success is False
        assert result.error_kind == SCHEMA_VIOLATION
        assert result.error == "Failed to visualize outfit."
        assert image_client.generate_image.await_count == 0

    def test_unavailable_image_provider_leaves_urls_empty(self, mock_client, photo_data_uri):
        mock_client.generate_json.return_value = self.ANALYSIS

        with patch("lucent_service.llm.outfit_visualizer.get_analyst_client", return_value=mock_client), \
             patch("lucent_service.llm.outfit_visualizer.get_image_client",
                   side_effect=ProviderError("GEMINI_API_KEY not set", provider="gemini")):
            result = asyncio.run(run_analysis("outfit-visualizer", {"photoDataUri": photo_data_uri}))

        assert result.success is True
        assert [item["imageUrl"] for item in result.data["identifiedItems"]] == ["", "", ""]
