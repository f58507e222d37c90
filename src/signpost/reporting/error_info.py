"""Structured error details for logs and CLI output."""

import traceback as tb
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from .serialize import DEFAULT_MAX_DEPTH, safe_serialize


class ErrorInfo(BaseModel):
    """Immutable, serializable snapshot of an exception."""

    model_config = ConfigDict(frozen=True)

    exc_type: str = Field(description="Fully qualified exception type")
    message: str = Field(description="Exception message")
    attributes: dict[str, t.Any] = Field(
        default_factory=dict, description="Extra attributes set on the exception"
    )
    traceback: str | None = Field(default=None, description="Formatted traceback")

    @classmethod
    def from_exception(
        cls,
        error: BaseException,
        include_traceback: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> "ErrorInfo":
        """Build ErrorInfo from an exception.

        Args:
            error: The exception to capture
            include_traceback: Whether to format and keep the traceback
            max_depth: Nesting limit when serializing extra attributes
        """
        exc_class = type(error)
        serialized = safe_serialize(error, max_depth=max(max_depth, 1))
        attributes = {
            key: value
            for key, value in serialized.items()
            if key not in ("type", "message")
        }
        return cls(
            exc_type=f"{exc_class.__module__}.{exc_class.__qualname__}",
            message=str(error),
            attributes=attributes,
            traceback=(
                "".join(tb.format_exception(error)) if include_traceback else None
            ),
        )
