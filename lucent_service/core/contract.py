"""
Analysis Request Contract (v1.0.0)
One entry point for every provider-backed feature.

run_analysis() validates the payload, calls the provider, checks the response
schema and always returns an AnalysisResult. It never raises.

Request states (logged):
    validating -> awaiting_provider -> succeeded | failed
"""
import time
import uuid
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

from lucent_service.config.settings import get_settings
from lucent_service.config.llm_config import get_analyst_config
from lucent_service.core.validation import FieldSpec, InputValidationError, validate_payload
from lucent_service.core.schemas import SchemaViolation
from lucent_service.llm import style_insight, identity_alignment, content_compass, outfit_visualizer
from lucent_service.llm.llm_adapter import ProviderError
from lucent_service.observability import log_request, increment_request

logger = logging.getLogger(__name__)

# error_kind values
INPUT_VALIDATION = "input_validation"
PROVIDER_ERROR = "provider_error"
SCHEMA_VIOLATION = "schema_violation"
UNKNOWN_FEATURE = "unknown_feature"


@dataclass(frozen=True)
class Feature:
    """A provider-backed feature: input schema plus the flow that runs it."""
    feature_id: str
    input_fields: Sequence[FieldSpec]
    run: Callable[[Dict[str, Any]], Awaitable[Any]]
    failure_message: str


FEATURES: Dict[str, Feature] = {
    module.FEATURE_ID: Feature(
        feature_id=module.FEATURE_ID,
        input_fields=module.INPUT_FIELDS,
        run=runner,
        failure_message=module.FAILURE_MESSAGE,
    )
    for module, runner in (
        (style_insight, style_insight.analyze_style),
        (identity_alignment, identity_alignment.check_alignment),
        (content_compass, content_compass.suggest_content),
        (outfit_visualizer, outfit_visualizer.visualize_outfit),
    )
}


@dataclass
class AnalysisResult:
    """Discriminated success/failure result returned to the UI layer."""
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    field: Optional[str] = None

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "AnalysisResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_kind: str, field: Optional[str] = None) -> "AnalysisResult":
        return cls(success=False, error=error, error_kind=error_kind, field=field)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}
        payload = {"success": False, "error": self.error}
        if self.field:
            payload["field"] = self.field
        return payload


def get_feature(feature_id: str) -> Optional[Feature]:
    return FEATURES.get(feature_id)


async def run_analysis(feature_id: str, payload: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Run one provider-backed feature end to end.

    Args:
        feature_id: One of FEATURES
        payload: Mapping of field name -> string from the UI

    Returns:
        AnalysisResult with validated data, or a failure with a short reason
    """
    feature = get_feature(feature_id)
    if feature is None:
        logger.warning(f"Unknown feature requested: {feature_id}")
        return AnalysisResult.fail(f"Unknown feature: {feature_id}", UNKNOWN_FEATURE)

    request_id = uuid.uuid4().hex[:12]
    start = time.monotonic()

    # Validating
    logger.info(f"[{request_id}] {feature_id}: validating")
    try:
        values = validate_payload(payload, feature.input_fields, get_settings().max_image_bytes)
    except InputValidationError as e:
        logger.info(f"[{request_id}] {feature_id}: rejected input ({e})")
        result = AnalysisResult.fail(str(e), INPUT_VALIDATION, e.field)
        _record(request_id, feature_id, start, result, detail=str(e))
        return result

    # AwaitingProvider
    logger.info(f"[{request_id}] {feature_id}: awaiting_provider")
    try:
        output = await feature.run(values)
    except SchemaViolation as e:
        logger.error(f"[{request_id}] {feature_id}: schema violation: {e}")
        result = AnalysisResult.fail(feature.failure_message, SCHEMA_VIOLATION)
        _record(request_id, feature_id, start, result, detail=str(e))
        return result
    except ProviderError as e:
        logger.error(f"[{request_id}] {feature_id}: provider error: {e}")
        result = AnalysisResult.fail(feature.failure_message, PROVIDER_ERROR)
        _record(request_id, feature_id, start, result, detail=str(e))
        return result
    except Exception as e:
        logger.exception(f"[{request_id}] {feature_id}: unexpected error: {e}")
        result = AnalysisResult.fail(feature.failure_message, PROVIDER_ERROR)
        _record(request_id, feature_id, start, result, detail=str(e))
        return result

    result = AnalysisResult.ok(output.to_dict())
    item_count = len(output.identified_items) if hasattr(output, "identified_items") else None
    _record(request_id, feature_id, start, result, item_count=item_count)
    return result


def _record(
    request_id: str,
    feature_id: str,
    start: float,
    result: AnalysisResult,
    detail: Optional[str] = None,
    item_count: Optional[int] = None
):
    """Log the terminal state and update metrics."""
    latency_ms = int((time.monotonic() - start) * 1000)
    status = "succeeded" if result.success else "failed"
    logger.info(f"[{request_id}] {feature_id}: {status} in {latency_ms}ms")

    increment_request(feature_id, result.success, latency_ms, result.error_kind)
    try:
        log_request(
            request_id=request_id,
            feature=feature_id,
            provider_used=get_analyst_config().provider.value,
            latency_ms=latency_ms,
            status=status,
            error=detail,
            item_count=item_count,
        )
    except OSError as e:
        logger.warning(f"Request log unavailable: {e}")
