"""
otptool: HOTP/TOTP one-time passcode generation and validation.

This package provides a small, typed, stateless passcode engine:
- Core schemas, errors and the HOTP/TOTP/validation engine in `otptool.core`
- Secret normalization and hex/base32 decoding in `otptool.auth`
- An oathtool-style command line in `otptool.cli`

Environment variables are loaded via python-dotenv when available.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Best-effort .env loading
try:  # pragma: no cover - optional dependency
    from dotenv import load_dotenv  # type: ignore

    load_dotenv()
except ImportError:  # pragma: no cover - be silent if dotenv is missing
    pass

from .auth.secret import decode_secret
from .core.enums import Mode, SecretEncoding
from .core.engine import advance, generate_sequence, resync
from .core.hotp import generate
from .core.schemas import HOTPParams, Matched, NoMatch, Passcode, TOTPParams
from .core.totp import derive_counter, generate_totp
from .core.validator import validate, validate_hotp, validate_totp

__all__ = [
    "__version__",
    "decode_secret",
    # Enums
    "Mode",
    "SecretEncoding",
    # Schemas
    "HOTPParams",
    "TOTPParams",
    "Matched",
    "NoMatch",
    "Passcode",
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
