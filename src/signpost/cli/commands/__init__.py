"""CLI commands."""

from .post import post
from .sign import sign

__all__ = ["post", "sign"]
