from __future__ import annotations

from typing import Any, Optional


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OTP_INVALID = 2


class OTPError(Exception):
    """Base error for otptool."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self.context = context or {}


class DecodeError(OTPError):
    """The shared secret is not valid hex or base32."""


class ConfigError(OTPError):
    """A parameter is out of range or could not be parsed."""
