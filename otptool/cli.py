"""Command line front end: ``otptool hotp|totp [options] SECRET [OTP]``.

Without OTP, prints ``window + 1`` passcodes for consecutive steps. With
OTP, validates it and prints the counter (hotp) or time (totp) it matched
at. Exit status: 0 on success, 1 on bad input, 2 when the OTP does not
validate.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional

import click

from . import __version__
from .auth.secret import decode_secret, mask_secret, normalize_secret
from .config import Defaults
from .core.clock import UNIX_EPOCH, format_time, parse_time, utc_now
from .core.engine import check, counter_for, generate_sequence, resync
from .core.enums import SecretEncoding
from .core.errors import EXIT_FAILURE, EXIT_OK, EXIT_OTP_INVALID, ConfigError, OTPError
from .core.hotp import check_digits
from .core.schemas import HOTPParams, Matched, OTPParams, TOTPParams
from .logging import get_logger, set_level


log = get_logger(__name__)


def _common_options(func: Callable) -> Callable:
    func = click.argument("otp", required=False)(func)
    func = click.argument("secret")(func)
    func = click.option("-v", "verbose", is_flag=True, default=False, help="Explain what is being done.")(func)
    func = click.option("-w", "window", type=int, default=None, help="Window of counter values to test when validating OTPs.  [default: 0]")(func)
    func = click.option("-d", "digits", type=int, default=None, help="The number of digits in the OTP.  [default: 6]")(func)
    func = click.option("-b", "b32", is_flag=True, default=False, help="Use base32 encoding instead of hex.")(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", prog_name="otptool")
def cli() -> None:
    """Generate and validate HOTP/TOTP one-time passcodes."""


@cli.command("hotp")
@click.option("-c", "counter", type=int, default=0, show_default=True, help="HOTP counter value.")
@_common_options
@click.pass_context
def hotp_command(
    ctx: click.Context,
    counter: int,
    b32: bool,
    digits: Optional[int],
    window: Optional[int],
    verbose: bool,
    secret: str,
    otp: Optional[str],
) -> None:
    """Event-based passcodes (RFC 4226)."""

    def params() -> OTPParams:
        return HOTPParams(counter=counter)

    ctx.exit(_execute(params, secret, otp, b32=b32, digits=digits, window=window, verbose=verbose))


@cli.command("totp")
@click.option("-N", "now", default=None, help="Use this time as current time, 'YYYY-MM-DD HH:MM:SS TZ'.")
@click.option("-s", "step", type=int, default=None, help="The time-step duration in seconds.  [default: 30]")
@click.option("-S", "epoch", default=UNIX_EPOCH, show_default=True, help="When to start counting time-steps.")
@_common_options
@click.pass_context
def totp_command(
    ctx: click.Context,
    now: Optional[str],
    step: Optional[int],
    epoch: str,
    b32: bool,
    digits: Optional[int],
    window: Optional[int],
    verbose: bool,
    secret: str,
    otp: Optional[str],
) -> None:
    """Time-based passcodes (RFC 6238)."""

    def params() -> OTPParams:
        return TOTPParams(
            now=utc_now() if now is None else parse_time(now),
            epoch=parse_time(epoch),
            step=Defaults.from_env().step if step is None else step,
        )

    ctx.exit(_execute(params, secret, otp, b32=b32, digits=digits, window=window, verbose=verbose))


def _execute(
    build: Callable[[], OTPParams],
    secret: str,
    otp: Optional[str],
    *,
    b32: bool,
    digits: Optional[int],
    window: Optional[int],
    verbose: bool,
) -> int:
    """Run one invocation and turn its outcome into an exit status."""

    try:
        return _run(build, secret, otp, b32=b32, digits=digits, window=window, verbose=verbose)
    except OTPError as e:
        click.echo(f"error: {e}", err=True)
        return e.exit_code


def _run(
    build: Callable[[], OTPParams],
    secret: str,
    otp: Optional[str],
    *,
    b32: bool,
    digits: Optional[int],
    window: Optional[int],
    verbose: bool,
) -> int:
    defaults = Defaults.from_env()
    if verbose or defaults.verbose:
        set_level(logging.DEBUG)
    digits = check_digits(defaults.digits if digits is None else digits)
    window = defaults.window if window is None else window
    if window < 0:
        raise ConfigError(f"window must not be negative, got {window}", context={"window": window})

    params = build()
    encoding = SecretEncoding.BASE32 if b32 else SecretEncoding.HEX
    _explain(params, secret, otp, encoding, digits, window)
    key = decode_secret(secret, encoding)

    if otp is None:
        for row in generate_sequence(key, params, digits, window + 1):
            click.echo(row.code)
        return EXIT_OK

    candidate = otp.strip()
    result = check(key, params, window, digits, candidate)
    if not isinstance(result, Matched):
        click.echo(f"error: OTP {candidate!r} did not validate", err=True)
        return EXIT_OTP_INVALID

    matched = resync(params, result)
    log.debug("Matched at offset %+d", result.offset)
    if isinstance(matched, TOTPParams):
        click.echo(format_time(matched.now))
    else:
        click.echo(str(counter_for(matched)))
    return EXIT_OK


def _explain(
    params: OTPParams,
    secret: str,
    otp: Optional[str],
    encoding: SecretEncoding,
    digits: int,
    window: int,
) -> None:
    log.debug("Parsed %s options.", params.mode.value)
    log.debug("%s secret: %s", "Base32" if encoding is SecretEncoding.BASE32 else "Hex", mask_secret(normalize_secret(secret)))
    if otp is not None:
        log.debug("OTP: %r", otp)
    log.debug("Digits: %d", digits)
    log.debug("Window size: %d", window)
    if isinstance(params, HOTPParams):
        log.debug("Start counter: %d", params.counter)
    else:
        log.debug("Step size (seconds): %d", params.step)
        log.debug("Start time: %s", format_time(params.epoch))
        log.debug("Current time: %s", format_time(params.now))


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point; click usage errors exit with 1, not click's 2."""

    try:
        rv = cli.main(args=argv, prog_name="otptool", standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(EXIT_FAILURE)
    except click.ClickException as e:
        e.show()
        sys.exit(EXIT_FAILURE)
    sys.exit(rv if isinstance(rv, int) else EXIT_OK)
