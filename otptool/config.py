from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.errors import ConfigError


def getenv(key: str, default: Optional[str] = None, *aliases: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return first non-empty env var among key and aliases."""

    source = os.environ if env is None else env
    for k in (key, *aliases):
        v = source.get(k)
        if v not in (None, ""):
            return v
    return default


def getenv_int(key: str, default: int, *, env: Optional[Mapping[str, str]] = None) -> int:
    v = getenv(key, env=env)
    if v is None:
        return default
    try:
        return int(v.strip())
    except ValueError as e:
        raise ConfigError(f"{key}: could not parse {v!r} as an integer", context={key: v}) from e


def getenv_bool(key: str, default: bool = False, *, env: Optional[Mapping[str, str]] = None) -> bool:
    v = getenv(key, env=env)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Defaults:
    """Option defaults, overridable from the environment."""

    digits: int = 6
    window: int = 0
    step: int = 30
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Defaults":
        return cls(
            digits=getenv_int("OTPTOOL_DIGITS", cls.digits, env=env),
            window=getenv_int("OTPTOOL_WINDOW", cls.window, env=env),
            step=getenv_int("OTPTOOL_TOTP_STEP", cls.step, env=env),
            verbose=getenv_bool("OTPTOOL_VERBOSE", cls.verbose, env=env),
        )
