"""Signed POST requests to an OAuth 1.0a protected REST API."""

import json as jsonlib
import typing as t
from dataclasses import replace

from ..domain.credentials import Credentials
from ..domain.exceptions import ApiResponseError, MalformedResponseError
from ..domain.retry import RetryPolicy
from ..infrastructure.http import AiohttpClient
from ..infrastructure.logging import get_logger
from ..retry import BaseRetryExecutor, LoggingRetryObserver, RetryExecutor
from ..signing import build_authorization_header, encode_form_body

if t.TYPE_CHECKING:
    import loguru

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class SignedApiClient:
    """Posts OAuth-signed requests and parses JSON responses, with retry.

    Every attempt gets a freshly signed header so that a retried request
    never reuses a nonce.
    """

    def __init__(
        self,
        http_client: AiohttpClient,
        credentials: Credentials,
        executor: BaseRetryExecutor | None = None,
        policy: RetryPolicy | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """
        Args:
            http_client: Opened HTTP client used for requests
            credentials: OAuth credentials used to sign each request
            executor: Retry executor. Defaults to a RetryExecutor sharing
                      this client's logger.
            policy: Retry policy. When it has no observer, a
                    LoggingRetryObserver is attached per request.
            logger: Logger for request outcomes
        """
        self.http_client = http_client
        self.credentials = credentials
        self.logger = logger
        self.executor = executor if executor is not None else RetryExecutor(logger)
        self.policy = policy if policy is not None else RetryPolicy()

    async def post(
        self,
        url: str,
        *,
        form: t.Mapping[str, t.Any] | None = None,
        json: t.Any = None,
    ) -> t.Any:
        """
        POST a signed request and return the decoded JSON response.

        Form parameters take part in the OAuth signature; a JSON body does
        not.

        Args:
            url: Absolute endpoint URL, without query string
            form: Form body parameters
            json: JSON-serialisable body (mutually exclusive with form)

        Returns:
            Decoded JSON response

        Raises:
            ValueError: If both form and json are given
            SigningError: If credentials are incomplete
            ApiResponseError: Non-2xx response after all attempts
            MalformedResponseError: Non-JSON response after all attempts
        """
        if form is not None and json is not None:
            raise ValueError("Pass either form or json, not both")

        policy = self.policy
        if policy.on_retry is None:
            policy = replace(
                policy,
                on_retry=LoggingRetryObserver(self.logger, "API request", url=url),
            )

        async def send() -> t.Any:
            return await self._send(url, form, json)

        result = await self.executor.execute(send, policy)
        self.logger.info(f"API request succeeded: POST {url}")
        return result

    async def _send(
        self,
        url: str,
        form: t.Mapping[str, t.Any] | None,
        json: t.Any,
    ) -> t.Any:
        headers = {
            "Authorization": build_authorization_header(
                "POST", url, form, self.credentials
            ),
        }
        if form is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            body: str | None = encode_form_body(form)
        elif json is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            body = jsonlib.dumps(json)
        else:
            body = None

        async with self.http_client.post(url, data=body, headers=headers) as response:
            text = await response.text()

            if not 200 <= response.status < 300:
                raise ApiResponseError(status=response.status, body=text, url=url)

            try:
                return jsonlib.loads(text)
            except ValueError as e:
                raise MalformedResponseError(body=text, status=response.status) from e
