"""OAuth 1.0a credential set."""

from dataclasses import dataclass, field, fields

from .exceptions import SigningError


@dataclass(frozen=True)
class Credentials:
    """The four secrets needed to sign a request on behalf of a user.

    Values are supplied fresh by the caller for each signing call; the
    signer never caches them. Secret values are excluded from ``repr``.
    """

    consumer_key: str = field(repr=False)
    consumer_secret: str = field(repr=False)
    access_token: str = field(repr=False)
    access_secret: str = field(repr=False)

    def validate(self) -> None:
        """Raise SigningError if any credential is missing or empty."""
        missing = [f.name for f in fields(self) if not getattr(self, f.name)]
        if missing:
            raise SigningError(f"Missing OAuth credentials: {', '.join(missing)}")
