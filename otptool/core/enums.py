from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    HOTP = "hotp"
    TOTP = "totp"


class SecretEncoding(str, Enum):
    HEX = "hex"
    BASE32 = "base32"
