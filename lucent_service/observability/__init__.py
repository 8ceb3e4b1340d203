# Observability module
from lucent_service.observability.logger import log_request, is_logging_enabled
from lucent_service.observability.metrics import (
    increment_request,
    increment_subcall_failure,
    get_metrics,
    reset_metrics,
)
