"""REST runtime abstractions."""

from .failure import FailureHandler, LogFailures, invoke_failure_handler, raise_for_status
from .http_client import ApiClient

__all__ = [
    "ApiClient",
    "FailureHandler",
    "LogFailures",
    "invoke_failure_handler",
    "raise_for_status",
]
