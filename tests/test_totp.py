import pyotp
import pytest

from otptool.core.errors import ConfigError
from otptool.core.totp import derive_counter, generate_totp

from conftest import RFC6238_CODES


@pytest.mark.parametrize("now,expected", sorted(RFC6238_CODES.items()))
def test_rfc6238_vectors(rfc_key, now, expected):
    assert generate_totp(rfc_key, now, 0, 30, 8) == expected


def test_matches_pyotp(rfc_key, rfc_b32):
    reference = pyotp.TOTP(rfc_b32, digits=6, interval=30)
    for now in (0, 29, 30, 1700000000, 1700000029):
        assert generate_totp(rfc_key, now, 0, 30, 6) == reference.at(now)


def test_derive_counter_basic():
    assert derive_counter(0, 0, 30) == 0
    assert derive_counter(59, 0, 30) == 1
    assert derive_counter(1111111109, 0, 30) == 37037036


def test_one_step_advances_counter_by_one():
    for now in (0, 17, 1234567890):
        assert derive_counter(now + 30, 0, 30) == derive_counter(now, 0, 30) + 1


def test_sub_step_jitter_is_ignored():
    base = derive_counter(1200, 0, 60)
    for jitter in range(60):
        assert derive_counter(1200 + jitter, 0, 60) == base


def test_epoch_offset():
    assert derive_counter(1000, 1000, 30) == 0
    assert derive_counter(1030, 1000, 30) == 1


@pytest.mark.parametrize("step", [0, -30])
def test_non_positive_step(step):
    with pytest.raises(ConfigError):
        derive_counter(100, 0, step)


def test_now_before_epoch_is_rejected():
    with pytest.raises(ConfigError) as exc:
        derive_counter(999, 1000, 30)
    assert exc.value.context == {"now": 999, "epoch": 1000}
