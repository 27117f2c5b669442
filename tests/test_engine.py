import pytest

from otptool.core.engine import advance, counter_for, generate_for, generate_sequence, resync
from otptool.core.enums import Mode
from otptool.core.schemas import HOTPParams, Matched, NoMatch, TOTPParams

from conftest import RFC4226_CODES


def test_advance_returns_new_params():
    start = HOTPParams(counter=4)
    assert advance(start) == HOTPParams(counter=5)
    assert advance(start, 3) == HOTPParams(counter=7)
    assert start == HOTPParams(counter=4)

    t = TOTPParams(now=100, epoch=10, step=30)
    assert advance(t, 2) == TOTPParams(now=160, epoch=10, step=30)
    assert advance(t, -1) == TOTPParams(now=70, epoch=10, step=30)


def test_counter_for():
    assert counter_for(HOTPParams(counter=9)) == 9
    assert counter_for(TOTPParams(now=95, epoch=5, step=30)) == 3
    with pytest.raises(TypeError):
        counter_for("hotp")  # type: ignore[arg-type]


def test_mode_property():
    assert HOTPParams().mode is Mode.HOTP
    assert TOTPParams(now=0).mode is Mode.TOTP


def test_generate_for_carries_step(rfc_key):
    row = generate_for(rfc_key, HOTPParams(counter=2))
    assert row.code == RFC4226_CODES[2]
    assert row.counter == 2
    assert row.params == HOTPParams(counter=2)


def test_generate_sequence_hotp(rfc_key):
    rows = generate_sequence(rfc_key, HOTPParams(counter=3), 6, 4)
    assert [r.code for r in rows] == RFC4226_CODES[3:7]
    assert [r.counter for r in rows] == [3, 4, 5, 6]


def test_generate_sequence_totp(rfc_key):
    rows = generate_sequence(rfc_key, TOTPParams(now=0, step=30), 6, 3)
    assert [r.code for r in rows] == RFC4226_CODES[:3]
    assert [r.params.now for r in rows] == [0, 30, 60]


def test_resync():
    assert resync(HOTPParams(counter=5), Matched(3)) == HOTPParams(counter=8)
    assert resync(TOTPParams(now=300), Matched(-2)) == TOTPParams(now=240)
    assert resync(HOTPParams(counter=5), NoMatch()) is None


def test_generate_sequence_stops_at_last_counter(rfc_key):
    from otptool.core.hotp import MAX_COUNTER

    rows = generate_sequence(rfc_key, HOTPParams(counter=MAX_COUNTER - 1), 6, 4)
    assert [r.counter for r in rows] == [MAX_COUNTER - 1, MAX_COUNTER]
