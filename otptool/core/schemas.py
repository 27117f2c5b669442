from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .enums import Mode


@dataclass(frozen=True)
class HOTPParams:
    """Starting counter for event-based passcodes."""

    counter: int = 0

    @property
    def mode(self) -> Mode:
        return Mode.HOTP


@dataclass(frozen=True)
class TOTPParams:
    """Time inputs for time-based passcodes, all in whole seconds."""

    now: int
    epoch: int = 0
    step: int = 30

    @property
    def mode(self) -> Mode:
        return Mode.TOTP


OTPParams = Union[HOTPParams, TOTPParams]


@dataclass(frozen=True)
class Matched:
    offset: int


@dataclass(frozen=True)
class NoMatch:
    pass


ValidationResult = Union[Matched, NoMatch]


@dataclass(frozen=True)
class Passcode:
    """A generated passcode together with the step that produced it."""

    code: str
    counter: int
    params: OTPParams
