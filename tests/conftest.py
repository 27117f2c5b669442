import base64
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


RFC_SECRET = b"12345678901234567890"

# RFC 4226 appendix D, counters 0..9
RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]

# RFC 6238 appendix B, SHA1 rows
RFC6238_CODES = {
    59: "94287082",
    1111111109: "07081804",
    1111111111: "14050471",
    1234567890: "89005924",
    2000000000: "69279037",
    20000000000: "65353130",
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("OTPTOOL_DIGITS", "OTPTOOL_WINDOW", "OTPTOOL_TOTP_STEP", "OTPTOOL_VERBOSE", "OTPTOOL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def rfc_key():
    return RFC_SECRET


@pytest.fixture
def rfc_hex():
    return RFC_SECRET.hex()


@pytest.fixture
def rfc_b32():
    return base64.b32encode(RFC_SECRET).decode("ascii")
