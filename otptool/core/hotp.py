"""HOTP passcodes (RFC 4226).

HMAC-SHA1 over the 8-byte big-endian counter, reduced to a decimal code by
dynamic truncation. The hash is fixed; there is no algorithm switch.
"""

from __future__ import annotations

import base64

import pyotp

from .errors import ConfigError


MIN_DIGITS = 1
MAX_DIGITS = 10
MAX_COUNTER = 2**64 - 1


def check_digits(digits: int) -> int:
    """Return ``digits`` if it is a supported passcode width, else raise ConfigError."""

    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ConfigError(f"digits must be an integer, got {digits!r}", context={"digits": digits})
    if digits < MIN_DIGITS or digits > MAX_DIGITS:
        raise ConfigError(
            f"digits must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digits}",
            context={"digits": digits},
        )
    return digits


def check_counter(counter: int) -> int:
    if counter < 0 or counter > MAX_COUNTER:
        raise ConfigError(
            f"counter must fit in an unsigned 64-bit integer, got {counter}",
            context={"counter": counter},
        )
    return counter


def _b32(key: bytes) -> str:
    return base64.b32encode(key).decode("ascii")


def generate(key: bytes, counter: int, digits: int = 6) -> str:
    check_digits(digits)
    check_counter(counter)
    return pyotp.HOTP(_b32(key), digits=digits).at(counter)
