"""signpost - OAuth 1.0a request signing and async retry with backoff."""

from .api import SignedApiClient
from .domain import (
    ApiResponseError,
    Credentials,
    MalformedResponseError,
    RetryCancelledError,
    RetryConfigurationError,
    RetryPolicy,
    SigningError,
    TransientOperationError,
)
from .retry import RetryExecutor, RetryObserver, retry
from .signing import build_authorization_header, percent_encode

__all__ = [
    "SignedApiClient",
    "Credentials",
    "RetryPolicy",
    "RetryExecutor",
    "RetryObserver",
    "retry",
    "build_authorization_header",
    "percent_encode",
    # Exceptions
    "ApiResponseError",
    "MalformedResponseError",
    "RetryCancelledError",
    "RetryConfigurationError",
    "SigningError",
    "TransientOperationError",
]
