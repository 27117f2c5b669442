from __future__ import annotations

import base64
import binascii
import re

from ..core.enums import SecretEncoding
from ..core.errors import DecodeError


_SEPARATORS = re.compile(r"[\s-]+")


def normalize_secret(secret: str) -> str:
    """Uppercase and drop whitespace and dashes."""

    return _SEPARATORS.sub("", secret).upper()


def pad_base32(secret: str) -> str:
    """Re-pad a base32 string to the next multiple of 8 characters."""

    stripped = secret.rstrip("=")
    return stripped + "=" * (-len(stripped) % 8)


def decode_secret(secret: str, encoding: SecretEncoding = SecretEncoding.HEX) -> bytes:
    """Turn a hex or base32 secret into key bytes."""

    cleaned = normalize_secret(secret)
    if not cleaned:
        raise DecodeError("secret is empty")
    encoding = SecretEncoding(encoding)
    try:
        if encoding is SecretEncoding.BASE32:
            return base64.b32decode(pad_base32(cleaned))
        return bytes.fromhex(cleaned)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(
            f"invalid {encoding.value} secret: {e}",
            context={"encoding": encoding.value},
        ) from e


def mask_secret(secret: str, keep: int = 4) -> str:
    if len(secret) <= keep * 2:
        return "*" * len(secret)
    return f"{secret[:keep]}***{secret[-keep:]}"
