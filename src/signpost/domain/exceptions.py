"""Custom exceptions for signpost."""


class SignpostError(Exception):
    """Base exception for signpost errors."""

    pass


class SigningError(SignpostError):
    """Raised when an OAuth signature cannot be produced.

    Covers missing or empty credentials and failures of the system's
    random number generator. Signing errors are always fatal and are
    never retried by the signer itself.
    """

    pass


class RetryError(SignpostError):
    """Base exception for retry executor errors."""

    pass


class RetryConfigurationError(RetryError):
    """Raised when a retry policy cannot be executed (e.g. max_attempts < 1)."""

    pass


class RetryCancelledError(RetryError):
    """Raised when a retried call is cancelled before it could complete."""

    pass


class TransientOperationError(SignpostError):
    """Base exception for failures raised by a wrapped remote operation."""

    pass


class ApiResponseError(TransientOperationError):
    """Raised when the remote API answers with a non-2xx status."""

    def __init__(self, *, status: int, body: str, url: str | None = None) -> None:
        self.status = status
        self.body = body
        self.url = url
        message = f"API error: {status} {body}"
        if url:
            message = f"API error from {url}: {status} {body}"
        super().__init__(message)


class MalformedResponseError(TransientOperationError):
    """Raised when the remote API answers with a body that is not valid JSON."""

    def __init__(self, *, body: str, status: int | None = None) -> None:
        self.body = body
        self.status = status
        super().__init__(f"API returned invalid JSON: {body[:200]}")


class ClientNotInitialisedError(SignpostError):
    """Raised when the HTTP client is used before its session is opened."""

    pass
