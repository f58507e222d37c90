"""Configuration."""

from .settings import (
    CredentialSettings,
    Environment,
    LogLevel,
    Settings,
    build_settings,
)

__all__ = [
    "CredentialSettings",
    "Environment",
    "LogLevel",
    "Settings",
    "build_settings",
]
