"""
Metrics Module (v1.0.0)
Track analysis request counts, outcomes and latency per feature.
"""
import threading
from typing import Dict, Any, Optional

# Thread-safe metrics storage
_lock = threading.Lock()


def _empty_metrics() -> Dict[str, Any]:
    return {
        "total_requests": 0,
        "successes": 0,
        "failures": 0,
        "failures_by_kind": {},
        "requests_by_feature": {},
        "subcall_failures": 0,
        "subcall_failures_by_feature": {},
        "total_latency_ms": 0,
    }


_metrics = _empty_metrics()


def increment_request(feature: str, success: bool, latency_ms: int = 0, error_kind: Optional[str] = None):
    """
    Record an analysis request in metrics.

    Args:
        feature: Feature id
        success: Whether the request succeeded
        latency_ms: Request latency
        error_kind: Failure category when success is False
    """
    with _lock:
        _metrics["total_requests"] += 1
        _metrics["total_latency_ms"] += latency_ms
        _metrics["requests_by_feature"][feature] = _metrics["requests_by_feature"].get(feature, 0) + 1

        if success:
            _metrics["successes"] += 1
        else:
            _metrics["failures"] += 1
            kind = error_kind or "unknown"
            _metrics["failures_by_kind"][kind] = _metrics["failures_by_kind"].get(kind, 0) + 1


def increment_subcall_failure(feature: str):
    """Record a failed image sub-call (does not count as a failed request)."""
    with _lock:
        _metrics["subcall_failures"] += 1
        _metrics["subcall_failures_by_feature"][feature] = _metrics["subcall_failures_by_feature"].get(feature, 0) + 1


def get_metrics() -> Dict[str, Any]:
    """Get current metrics snapshot."""
    with _lock:
        total = _metrics["total_requests"]

        return {
            "total_requests": total,
            "successes": _metrics["successes"],
            "failures": _metrics["failures"],
            "success_ratio": round(_metrics["successes"] / total, 3) if total > 0 else 0.0,
            "failures_by_kind": dict(_metrics["failures_by_kind"]),
            "requests_by_feature": dict(_metrics["requests_by_feature"]),
            "subcall_failures": _metrics["subcall_failures"],
            "subcall_failures_by_feature": dict(_metrics["subcall_failures_by_feature"]),
            "avg_latency_ms": round(_metrics["total_latency_ms"] / total, 1) if total > 0 else 0.0,
        }


def reset_metrics():
    """Reset all metrics (for testing)."""
    global _metrics
    with _lock:
        _metrics = _empty_metrics()
