from __future__ import annotations

from typing import Tuple

from pyotp.utils import strings_equal

from ..logging import get_logger
from .errors import ConfigError
from .hotp import MAX_COUNTER, check_counter, check_digits, generate
from .schemas import HOTPParams, Matched, NoMatch, OTPParams, TOTPParams, ValidationResult
from .totp import derive_counter


log = get_logger(__name__)


def _check_window(window: int) -> int:
    if window < 0:
        raise ConfigError(f"window must not be negative, got {window}", context={"window": window})
    return window


def _well_formed(candidate: str, digits: int) -> bool:
    """Exactly ``digits`` ASCII decimal characters; anything else cannot match."""

    return len(candidate) == digits and candidate.isascii() and candidate.isdigit()


def totp_window_bounds(window: int) -> Tuple[int, int]:
    """Split a TOTP window into (steps behind, steps ahead).

    Odd windows give the extra step to the past: 3 -> (2, 1).
    """

    _check_window(window)
    ahead = window // 2
    return window - ahead, ahead


def _scan(key: bytes, base: int, offsets: range, digits: int, candidate: str) -> ValidationResult:
    for offset in offsets:
        counter = base + offset
        if counter < 0 or counter > MAX_COUNTER:
            continue
        code = generate(key, counter, digits)
        log.debug("counter %d (offset %+d): %s", counter, offset, code)
        if strings_equal(code, candidate):
            return Matched(offset)
    return NoMatch()


def validate_hotp(key: bytes, start_counter: int, window: int, digits: int, candidate: str) -> ValidationResult:
    """Look for ``candidate`` at counters ``start_counter .. start_counter + window``.

    The first (smallest) matching offset wins. Nothing outside the call is
    advanced; the caller decides what to do with the offset.
    """

    check_digits(digits)
    check_counter(start_counter)
    _check_window(window)
    if not _well_formed(candidate, digits):
        return NoMatch()
    return _scan(key, start_counter, range(0, window + 1), digits, candidate)


def validate_totp(
    key: bytes,
    now: int,
    epoch: int,
    step: int,
    window: int,
    digits: int,
    candidate: str,
) -> ValidationResult:
    """Look for ``candidate`` in the steps around the one containing ``now``.

    Candidates are tried earliest first; the offset is relative to the
    current step and negative for past steps.
    """

    check_digits(digits)
    base = derive_counter(now, epoch, step)
    behind, ahead = totp_window_bounds(window)
    if not _well_formed(candidate, digits):
        return NoMatch()
    return _scan(key, base, range(-behind, ahead + 1), digits, candidate)


def validate(key: bytes, params: OTPParams, window: int, digits: int, candidate: str) -> ValidationResult:
    if isinstance(params, HOTPParams):
        return validate_hotp(key, params.counter, window, digits, candidate)
    if isinstance(params, TOTPParams):
        return validate_totp(key, params.now, params.epoch, params.step, window, digits, candidate)
    raise TypeError(f"unsupported OTP parameters: {params!r}")
