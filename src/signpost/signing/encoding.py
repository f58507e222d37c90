"""RFC 3986 percent-encoding and OAuth parameter strings."""

import typing as t
from urllib.parse import quote

from ..domain.exceptions import SigningError


def coerce_value(value: t.Any) -> str:
    """Convert a parameter value to the string that goes on the wire.

    Booleans render as ``true``/``false`` to match JSON-style clients.
    ``None`` has no wire form and is rejected.
    """
    if value is None:
        raise SigningError("Parameter values must not be None")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percent_encode(value: t.Any) -> str:
    """
    Percent-encode a value per RFC 3986.

    Only the unreserved characters ``A-Za-z0-9-._~`` are left literal.
    Text is encoded as UTF-8 first and a space becomes ``%20``, never ``+``.

    Examples:
        >>> percent_encode("Ladies + Gentlemen")
        'Ladies%20%2B%20Gentlemen'
        >>> percent_encode("a-b_c.d~e")
        'a-b_c.d~e'
    """
    return quote(coerce_value(value), safe="~")


def build_param_string(params: t.Mapping[str, t.Any]) -> str:
    """
    Build the normalised parameter string used in the signature base string.

    Keys are sorted ascending by their UTF-8 byte value, then each pair is
    rendered as ``enc(key)=enc(value)`` and joined with ``&``.

    Examples:
        >>> build_param_string({"b": 2, "a": 1, "c": 3})
        'a=1&b=2&c=3'
    """
    return "&".join(
        f"{percent_encode(key)}={percent_encode(params[key])}"
        for key in sorted(params, key=lambda k: k.encode("utf-8"))
    )


def encode_form_body(params: t.Mapping[str, t.Any]) -> str:
    """Encode a form body with the same rules used to sign it."""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(value)}"
        for key, value in params.items()
    )
