from __future__ import annotations

from .errors import ConfigError
from .hotp import generate


def derive_counter(now: int, epoch: int = 0, step: int = 30) -> int:
    """Number of whole ``step`` intervals between ``epoch`` and ``now``.

    Times before the epoch are rejected rather than clamped.
    """

    if step <= 0:
        raise ConfigError(f"time step must be positive, got {step}", context={"step": step})
    if now < epoch:
        raise ConfigError(
            "current time is earlier than the start time",
            context={"now": now, "epoch": epoch},
        )
    return (now - epoch) // step


def generate_totp(key: bytes, now: int, epoch: int = 0, step: int = 30, digits: int = 6) -> str:
    return generate(key, derive_counter(now, epoch, step), digits)
