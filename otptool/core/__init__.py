"""Core enums, schemas, errors, and the HOTP/TOTP engine."""

from .enums import Mode, SecretEncoding
from .schemas import (
    HOTPParams,
    TOTPParams,
    OTPParams,
    Matched,
    NoMatch,
    ValidationResult,
    Passcode,
)
from .errors import (
    OTPError,
    DecodeError,
    ConfigError,
    EXIT_OK,
    EXIT_FAILURE,
    EXIT_OTP_INVALID,
)
from .hotp import generate
from .totp import derive_counter, generate_totp
from .validator import validate, validate_hotp, validate_totp
from .engine import advance, generate_sequence, resync

__all__ = [
    # Enums
    "Mode",
    "SecretEncoding",
    # Schemas
    "HOTPParams",
    "TOTPParams",
    "OTPParams",
    "Matched",
    "NoMatch",
    "ValidationResult",
    "Passcode",
    # Errors
    "OTPError",
    "DecodeError",
    "ConfigError",
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_OTP_INVALID",
    # Engine
    "generate",
    "derive_counter",
    "generate_totp",
    "validate",
    "validate_hotp",
    "validate_totp",
    "advance",
    "generate_sequence",
    "resync",
]
