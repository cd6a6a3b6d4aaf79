"""
Error taxonomy for richerr library misuse.

These are the exceptions the library itself raises when a caller hands it
something it cannot work with. They are distinct from the rich error nodes
in richerr.errorglue, which decorate the caller's own errors.

Each error class implements:
- code: String identifier for the error type
- message: Human-readable description
- context: Dict containing additional contextual information
"""
from __future__ import annotations
from typing import Any


class RichErrError(Exception):
    """Base exception for all richerr library errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "UNKNOWN_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context) if context else {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to structured dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


class FormatError(RichErrError):
    """Unknown rendering format requested."""

    def __init__(
        self,
        message: str,
        *,
        format: str = "unknown",
        code: str = "FORMAT_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = dict(context) if context else {}
        ctx["format"] = format
        super().__init__(message, code=code, context=ctx)


class ChannelClosedError(RichErrError):
    """Send attempted on a closed error channel."""

    def __init__(
        self,
        message: str = "send on closed channel",
        *,
        code: str = "CHANNEL_CLOSED",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


class ConfigurationError(RichErrError):
    """Missing or invalid configuration."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "CONFIGURATION_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)
