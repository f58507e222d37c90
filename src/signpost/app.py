"""Application wiring."""

from dataclasses import dataclass

from .config.settings import CredentialSettings, Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds references to cross-cutting concerns. Credentials are kept as
    settings and turned into a Credentials value only when needed.
    """

    settings: Settings
    credentials: CredentialSettings


def create_app(
    settings: Settings | None = None,
    credentials: CredentialSettings | None = None,
) -> App:
    """Create an `App` with provided settings or defaults, and set up logging."""
    settings = settings or Settings()
    credentials = credentials or CredentialSettings()
    setup_logging(settings)
    return App(settings=settings, credentials=credentials)
