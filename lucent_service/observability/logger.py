"""
Request Logger (v1.0.0)
Structured logging for analysis request tracking and observability.
"""
import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

from lucent_service.config.settings import get_settings

DEFAULT_LOGS_DIR = Path(__file__).parent.parent.parent / "logs"

# Configure request logger
request_logger = logging.getLogger("lucent.requests")
request_logger.setLevel(logging.INFO)

# Prevent propagation to root logger
request_logger.propagate = False


def _ensure_file_handler():
    """Attach the JSON-lines file handler on first use."""
    if request_logger.handlers:
        return

    settings = get_settings()
    logs_dir = Path(settings.log_dir) if settings.log_dir else DEFAULT_LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(logs_dir / "requests.log", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(message)s"))
    request_logger.addHandler(file_handler)


def log_request(
    request_id: str,
    feature: str,
    provider_used: Optional[str],
    latency_ms: int,
    status: str,
    error: Optional[str] = None,
    item_count: Optional[int] = None
):
    """
    Log a structured request entry.

    Args:
        request_id: Unique request identifier
        feature: Feature id (style-insight, outfit-visualizer, ...)
        provider_used: LLM provider (gemini/openai)
        latency_ms: Request latency in milliseconds
        status: succeeded or failed
        error: Internal failure detail if failed
        item_count: Garments identified (outfit visualizer only)
    """
    if not is_logging_enabled():
        return

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "request_id": request_id,
        "feature": feature,
        "provider": provider_used,
        "latency_ms": latency_ms,
        "status": status,
    }

    if error:
        entry["error"] = error
    if item_count is not None:
        entry["item_count"] = item_count

    _ensure_file_handler()
    request_logger.info(json.dumps(entry))


def is_logging_enabled() -> bool:
    """Check if request logging is enabled."""
    return get_settings().logging_enabled
