"""OAuth 1.0a signing."""

from .encoding import build_param_string, encode_form_body, percent_encode
from .signer import (
    build_authorization_header,
    build_signature_base_string,
    build_signing_key,
    create_signature,
    generate_nonce,
    generate_timestamp,
)

__all__ = [
    "build_authorization_header",
    "build_param_string",
    "build_signature_base_string",
    "build_signing_key",
    "create_signature",
    "encode_form_body",
    "generate_nonce",
    "generate_timestamp",
    "percent_encode",
]
