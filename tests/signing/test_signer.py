"""Tests for OAuth 1.0a signing."""

import re
from urllib.parse import unquote

import pytest

from signpost.domain.credentials import Credentials
from signpost.domain.exceptions import SigningError
from signpost.signing import (
    build_authorization_header,
    build_signature_base_string,
    build_signing_key,
    create_signature,
    generate_nonce,
    generate_timestamp,
)
from signpost.signing.signer import build_oauth_params

# Sample request from Twitter's "Creating a signature" documentation
URL = "https://api.twitter.com/1.1/statuses/update.json"
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = "1318622958"
BODY = {
    "status": "Hello Ladies + Gentlemen, a signed OAuth request!",
    "include_entities": "true",
}
EXPECTED_BASE_STRING = (
    "POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&"
    "include_entities%3Dtrue%26oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26"
    "oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26"
    "oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1318622958%26"
    "oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb%26"
    "oauth_version%3D1.0%26status%3DHello%2520Ladies%2520%252B%2520Gentlemen"
    "%252C%2520a%2520signed%2520OAuth%2520request%2521"
)
EXPECTED_SIGNATURE = "hCtSmYh+iHYCEqBWrE7C7hYmtUk="


def parse_header(header: str) -> dict[str, str]:
    """Split an OAuth header into its decoded parameters."""
    assert header.startswith("OAuth ")
    pairs = re.findall(r'([^=, ]+)="([^"]*)"', header[len("OAuth ") :])
    return {unquote(key): unquote(value) for key, value in pairs}


@pytest.fixture
def oauth_params(credentials):
    return build_oauth_params(credentials, nonce=NONCE, timestamp=TIMESTAMP)


class TestSignatureComponents:
    """Test the individual steps of the signing algorithm."""

    def test_signature_base_string(self, oauth_params):
        params = {**oauth_params, **BODY}
        assert build_signature_base_string("post", URL, params) == EXPECTED_BASE_STRING

    def test_signing_key(self, credentials):
        assert build_signing_key(
            credentials.consumer_secret, credentials.access_secret
        ) == (
            "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw&"
            "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"
        )

    def test_signing_key_encodes_secrets(self):
        assert build_signing_key("a&b", "c d") == "a%26b&c%20d"

    def test_known_signature(self, credentials, oauth_params):
        """Matches the published signature for the sample request."""
        signature = create_signature(
            "POST",
            URL,
            oauth_params,
            BODY,
            credentials.consumer_secret,
            credentials.access_secret,
        )
        assert signature == EXPECTED_SIGNATURE

    def test_boolean_body_value_matches_string(self, credentials, oauth_params):
        body = {**BODY, "include_entities": True}
        signature = create_signature(
            "POST",
            URL,
            oauth_params,
            body,
            credentials.consumer_secret,
            credentials.access_secret,
        )
        assert signature == EXPECTED_SIGNATURE

    def test_body_ignored_for_non_post(self, credentials, oauth_params):
        """Body parameters only enter the signature for POST requests."""
        secrets = (credentials.consumer_secret, credentials.access_secret)

        with_body = create_signature("GET", URL, oauth_params, BODY, *secrets)
        without_body = create_signature("GET", URL, oauth_params, None, *secrets)

        assert with_body == without_body


class TestBuildAuthorizationHeader:
    """Test build_authorization_header."""

    def test_known_header(self, credentials):
        header = build_authorization_header(
            "POST", URL, BODY, credentials, nonce=NONCE, timestamp=TIMESTAMP
        )

        assert header == (
            'OAuth oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog", '
            'oauth_nonce="kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg", '
            'oauth_signature_method="HMAC-SHA1", '
            'oauth_timestamp="1318622958", '
            'oauth_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb", '
            'oauth_version="1.0", '
            'oauth_signature="hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"'
        )

    def test_deterministic_for_fixed_nonce_and_timestamp(self, credentials):
        first = build_authorization_header(
            "POST", URL, BODY, credentials, nonce=NONCE, timestamp=TIMESTAMP
        )
        second = build_authorization_header(
            "POST",
            URL,
            dict(reversed(BODY.items())),
            credentials,
            nonce=NONCE,
            timestamp=TIMESTAMP,
        )
        assert first == second

    def test_body_params_not_in_header(self, credentials):
        params = parse_header(build_authorization_header("POST", URL, BODY, credentials))
        assert "status" not in params
        assert "include_entities" not in params
        assert set(params) == {
            "oauth_consumer_key",
            "oauth_nonce",
            "oauth_signature_method",
            "oauth_timestamp",
            "oauth_token",
            "oauth_version",
            "oauth_signature",
        }

    def test_fresh_nonce_per_call(self, credentials):
        first = parse_header(build_authorization_header("POST", URL, None, credentials))
        second = parse_header(build_authorization_header("POST", URL, None, credentials))
        assert first["oauth_nonce"] != second["oauth_nonce"]
        assert first["oauth_signature"] != second["oauth_signature"]

    def test_timestamp_is_current(self, credentials, mocker):
        mocker.patch("signpost.signing.signer.time.time", return_value=1700000000.9)
        params = parse_header(build_authorization_header("POST", URL, None, credentials))
        assert params["oauth_timestamp"] == "1700000000"

    @pytest.mark.parametrize(
        "method, url, body",
        [
            ("GET", URL, BODY),
            ("POST", URL + "x", BODY),
            ("POST", URL, {**BODY, "status": BODY["status"][:-1] + "?"}),
            ("POST", URL, {**BODY, "include_entities": "truE"}),
        ],
    )
    def test_single_change_alters_signature(self, credentials, method, url, body):
        """Changing the method, URL or any value changes the signature."""
        baseline = parse_header(
            build_authorization_header(
                "POST", URL, BODY, credentials, nonce=NONCE, timestamp=TIMESTAMP
            )
        )
        changed = parse_header(
            build_authorization_header(
                method, url, body, credentials, nonce=NONCE, timestamp=TIMESTAMP
            )
        )
        assert changed["oauth_signature"] != baseline["oauth_signature"]


class TestSigningErrors:
    """Test error conditions."""

    @pytest.mark.parametrize(
        "field_name",
        ["consumer_key", "consumer_secret", "access_token", "access_secret"],
    )
    def test_empty_credential(self, field_name):
        values = {
            "consumer_key": "ck",
            "consumer_secret": "cs",
            "access_token": "at",
            "access_secret": "as",
            field_name: "",
        }
        with pytest.raises(SigningError, match=field_name):
            build_authorization_header("POST", URL, None, Credentials(**values))

    def test_empty_method(self, credentials):
        with pytest.raises(SigningError, match="method"):
            build_authorization_header("", URL, None, credentials)

    def test_randomness_failure(self, credentials, mocker):
        mocker.patch(
            "signpost.signing.signer.secrets.token_hex",
            side_effect=NotImplementedError("no entropy source"),
        )
        with pytest.raises(SigningError, match="nonce"):
            build_authorization_header("POST", URL, None, credentials)


class TestGenerators:
    def test_nonce_is_16_bytes_hex(self):
        nonce = generate_nonce()
        assert re.fullmatch(r"[0-9a-f]{32}", nonce)

    def test_timestamp_is_decimal_seconds(self):
        assert generate_timestamp().isdigit()
