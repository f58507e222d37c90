"""Error reporting helpers."""

from .error_info import ErrorInfo
from .serialize import safe_serialize

__all__ = ["ErrorInfo", "safe_serialize"]
