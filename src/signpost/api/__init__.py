"""Signed API client."""

from .client import SignedApiClient

__all__ = ["SignedApiClient"]
