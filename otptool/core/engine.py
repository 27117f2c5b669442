from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..logging import get_logger
from .hotp import MAX_COUNTER, generate
from .schemas import HOTPParams, Matched, OTPParams, Passcode, TOTPParams, ValidationResult
from .totp import derive_counter
from .validator import validate


log = get_logger(__name__)


def counter_for(params: OTPParams) -> int:
    """HOTP counter the parameters resolve to."""

    if isinstance(params, HOTPParams):
        return params.counter
    if isinstance(params, TOTPParams):
        return derive_counter(params.now, params.epoch, params.step)
    raise TypeError(f"unsupported OTP parameters: {params!r}")


def advance(params: OTPParams, steps: int = 1) -> OTPParams:
    """Return a copy of ``params`` moved ``steps`` counter steps forward (or back)."""

    if isinstance(params, HOTPParams):
        return replace(params, counter=params.counter + steps)
    if isinstance(params, TOTPParams):
        return replace(params, now=params.now + steps * params.step)
    raise TypeError(f"unsupported OTP parameters: {params!r}")


def generate_for(key: bytes, params: OTPParams, digits: int = 6) -> Passcode:
    counter = counter_for(params)
    return Passcode(code=generate(key, counter, digits), counter=counter, params=params)


def generate_sequence(key: bytes, params: OTPParams, digits: int = 6, count: int = 1) -> List[Passcode]:
    """Passcodes for ``count`` consecutive steps starting at ``params``.

    The run stops early at the last 64-bit counter, the same counters a
    validation window skips.
    """

    rows: List[Passcode] = []
    current = params
    for _ in range(count):
        if rows and rows[-1].counter == MAX_COUNTER:
            break
        rows.append(generate_for(key, current, digits))
        current = advance(current)
    log.debug("generated %d %s passcode(s)", len(rows), params.mode.value)
    return rows


def check(key: bytes, params: OTPParams, window: int, digits: int, candidate: str) -> ValidationResult:
    result = validate(key, params, window, digits, candidate)
    log.debug("%s validation result: %s", params.mode.value, result)
    return result


def resync(params: OTPParams, result: ValidationResult) -> Optional[OTPParams]:
    """Parameters of the step that matched, or None when nothing did."""

    if isinstance(result, Matched):
        return advance(params, result.offset)
    return None
