"""Pytest configuration and fixtures for signpost tests."""

import typing as t

import loguru
import pytest
from blockbuster import BlockBuster, blockbuster_ctx
from typer.testing import CliRunner

from signpost.app import create_app
from signpost.config.settings import CredentialSettings, Environment, LogLevel, Settings
from signpost.domain.credentials import Credentials
from signpost.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in async event loop during tests.

    Backoff waits must suspend the calling task rather than block the
    loop; Blockbuster raises a BlockingError if any blocking call is made
    from signpost code within an async context.
    """
    with blockbuster_ctx(
        scanned_modules=["signpost"],
    ) as bb:
        # Third party modules use these functions, so we deactivate them
        # for now
        bb.functions["os.path.abspath"].deactivate()

        yield bb


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def credential_settings():
    """Credential settings holding the Twitter documentation sample values."""
    return CredentialSettings(
        consumer_key="xvz1evFS4wEEPTGEFPHBog",
        consumer_secret="kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
        access_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
        access_secret="LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
    )


@pytest.fixture
def credentials(credential_settings) -> Credentials:
    return credential_settings.to_credentials()


@pytest.fixture
def test_app(test_settings, credential_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings, credentials=credential_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()
