"""Domain layer - credentials, retry models and exceptions."""

from .credentials import Credentials
from .exceptions import (
    ApiResponseError,
    ClientNotInitialisedError,
    MalformedResponseError,
    RetryCancelledError,
    RetryConfigurationError,
    RetryError,
    SigningError,
    SignpostError,
    TransientOperationError,
)
from .retry import ErrorCategory, RetryPolicy, StatusCodePolicy

__all__ = [
    # Credentials
    "Credentials",
    # Retry Models
    "ErrorCategory",
    "RetryPolicy",
    "StatusCodePolicy",
    # Exceptions
    "ApiResponseError",
    "ClientNotInitialisedError",
    "MalformedResponseError",
    "RetryCancelledError",
    "RetryConfigurationError",
    "RetryError",
    "SigningError",
    "SignpostError",
    "TransientOperationError",
]
