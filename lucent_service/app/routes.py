"""
API Routes for Lucent Service v1.0.0
Style insight, alignment, content compass, outfit visualizer and cadence planner.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse

from lucent_service import __version__
from lucent_service.config import get_settings, get_all_configs_dict, is_role_configured, LLMRole
from lucent_service.core.contract import (
    run_analysis,
    FEATURES,
    AnalysisResult,
    INPUT_VALIDATION,
    UNKNOWN_FEATURE,
)
from lucent_service.core.cadence import build_cadence_plan, Mood
from lucent_service.core.validation import InputValidationError
from lucent_service.core.dashboard import get_growth_trail, get_merch_shelf
from lucent_service.llm.content_compass import get_options as get_compass_options
from lucent_service.observability import get_metrics, is_logging_enabled

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: AnalysisResult) -> JSONResponse:
    """Map an AnalysisResult onto an HTTP status."""
    if result.success:
        status_code = 200
    elif result.error_kind == INPUT_VALIDATION:
        status_code = 400
    elif result.error_kind == UNKNOWN_FEATURE:
        status_code = 404
    else:
        status_code = 502
    return JSONResponse(content=result.to_dict(), status_code=status_code)


# ==================== PUBLIC ENDPOINTS ====================

@router.get("/health")
async def health_check():
    """Health check with observability info."""
    metrics = get_metrics()

    return {
        "status": "ok",
        "version": __version__,
        "llm_config": get_all_configs_dict(),
        "llm_available": {
            "analyst": is_role_configured(LLMRole.ANALYST),
            "image": is_role_configured(LLMRole.IMAGE),
        },
        "settings": get_settings().to_dict(),
        "observability": {
            "logging_enabled": is_logging_enabled(),
            "total_requests": metrics["total_requests"],
            "success_ratio": metrics["success_ratio"],
        },
        "features": sorted(FEATURES) + ["cadence", "growth-trail", "merch-shelf"],
    }


@router.get("/metrics")
async def get_metrics_endpoint():
    """Get detailed metrics for monitoring."""
    return JSONResponse(content=get_metrics())


# ==================== ANALYSIS FEATURES ====================

@router.post("/ai/style-insight")
async def style_insight(payload: Dict[str, Any] = Body(...)):
    """Identify visual clusters and thematic tags in a photo data URI."""
    return _to_response(await run_analysis("style-insight", payload))


@router.post("/ai/identity-alignment")
async def identity_alignment(payload: Dict[str, Any] = Body(...)):
    """Score how well content examples reflect questionnaire responses."""
    return _to_response(await run_analysis("identity-alignment", payload))


@router.post("/ai/content-compass")
async def content_compass(payload: Dict[str, Any] = Body(...)):
    """Suggest a seasonal content theme and post structure."""
    return _to_response(await run_analysis("content-compass", payload))


@router.get("/ai/content-compass/options")
async def content_compass_options():
    return get_compass_options()


@router.post("/ai/outfit-visualizer")
async def outfit_visualizer(payload: Dict[str, Any] = Body(...)):
    """Identify garments in an outfit photo and render each on a virtual model."""
    return _to_response(await run_analysis("outfit-visualizer", payload))


@router.post("/ai/analyze/{feature_id}")
async def analyze(feature_id: str, payload: Dict[str, Any] = Body(...)):
    """Generic entry point for any analysis feature."""
    return _to_response(await run_analysis(feature_id, payload))


# ==================== CADENCE PLANNER ====================

@router.post("/ai/cadence")
async def cadence(payload: Dict[str, Any] = Body(...)):
    """
    Gentle cadence suggestion.

    Body: {"mood": "scattered|tired|inspired", "energyScore": 0-100}
    """
    try:
        return build_cadence_plan(payload.get("mood"), payload.get("energyScore"))
    except InputValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/ai/cadence/moods")
async def cadence_moods():
    return {"moods": [mood.value for mood in Mood]}


# ==================== DASHBOARD CONTENT ====================

@router.get("/ai/growth-trail")
async def growth_trail():
    return {"entries": get_growth_trail()}


@router.get("/ai/merch-shelf")
async def merch_shelf():
    return {"products": get_merch_shelf()}
