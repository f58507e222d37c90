"""OAuth 1.0a request signing with HMAC-SHA1."""

import base64
import hashlib
import hmac
import secrets
import time
import typing as t

from ..domain.credentials import Credentials
from ..domain.exceptions import SigningError
from .encoding import build_param_string, percent_encode

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
NONCE_BYTES = 16


def generate_nonce() -> str:
    """Return a hex-encoded nonce built from 16 bytes of OS randomness.

    Raises:
        SigningError: If the operating system cannot supply random bytes
    """
    try:
        return secrets.token_hex(NONCE_BYTES)
    except (OSError, NotImplementedError) as e:
        raise SigningError(f"Unable to generate OAuth nonce: {e}") from e


def generate_timestamp() -> str:
    """Current Unix time in whole seconds, as a decimal string."""
    return str(int(time.time()))


def build_oauth_params(
    credentials: Credentials, nonce: str, timestamp: str
) -> dict[str, str]:
    """Build the protocol parameter set, in header order."""
    return {
        "oauth_consumer_key": credentials.consumer_key,
        "oauth_nonce": nonce,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp,
        "oauth_token": credentials.access_token,
        "oauth_version": OAUTH_VERSION,
    }


def build_signature_base_string(
    method: str, url: str, params: t.Mapping[str, t.Any]
) -> str:
    """Join ``METHOD&enc(url)&enc(param_string)``."""
    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(build_param_string(params)),
        ]
    )


def build_signing_key(consumer_secret: str, token_secret: str) -> str:
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def create_signature(
    method: str,
    url: str,
    oauth_params: t.Mapping[str, str],
    body_params: t.Mapping[str, t.Any] | None,
    consumer_secret: str,
    token_secret: str,
) -> str:
    """
    Compute the base64 HMAC-SHA1 signature of a request.

    Body parameters only take part in the signature for POST requests;
    for anything else they are ignored.

    Args:
        method: HTTP method
        url: Absolute endpoint URL, without query string
        oauth_params: Protocol parameters (see ``build_oauth_params``)
        body_params: Form body parameters, or None
        consumer_secret: Application secret
        token_secret: User access token secret

    Returns:
        Base64-encoded signature
    """
    all_params: dict[str, t.Any] = dict(oauth_params)
    if method.upper() == "POST" and body_params is not None:
        all_params.update(body_params)

    base_string = build_signature_base_string(method, url, all_params)
    signing_key = build_signing_key(consumer_secret, token_secret)

    digest = hmac.new(
        signing_key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def format_authorization_header(params: t.Mapping[str, str]) -> str:
    return "OAuth " + ", ".join(
        f'{percent_encode(key)}="{percent_encode(value)}"'
        for key, value in params.items()
    )


def build_authorization_header(
    method: str,
    url: str,
    body_params: t.Mapping[str, t.Any] | None,
    credentials: Credentials,
    *,
    nonce: str | None = None,
    timestamp: str | None = None,
) -> str:
    """
    Build a ready-to-use ``Authorization`` header value.

    A fresh nonce and timestamp are generated per call unless given
    explicitly (useful for reproducing known signatures).

    Header parameters are emitted in protocol order followed by
    ``oauth_signature``. Body parameters are signed but never included
    in the header.

    Raises:
        SigningError: On empty method, missing credentials or RNG failure
    """
    if not method:
        raise SigningError("HTTP method is required")
    credentials.validate()

    oauth_params = build_oauth_params(
        credentials,
        nonce=nonce if nonce is not None else generate_nonce(),
        timestamp=timestamp if timestamp is not None else generate_timestamp(),
    )
    signature = create_signature(
        method,
        url,
        oauth_params,
        body_params,
        credentials.consumer_secret,
        credentials.access_secret,
    )
    return format_authorization_header({**oauth_params, "oauth_signature": signature})

