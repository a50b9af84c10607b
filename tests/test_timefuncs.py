from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction

import pytest

from tmplfuncs.timefuncs import TimeFuncs, parse_num

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def tf():
    return TimeFuncs()


def test_parse_num_integers():
    assert parse_num("42") == (42, 0)
    assert parse_num(42) == (42, 0)
    assert parse_num(Decimal(42)) == (42, 0)
    assert parse_num(Fraction(42)) == (42, 0)
    assert parse_num(2**63 - 1) == (2**63 - 1, 0)


def test_parse_num_fractions():
    assert parse_num("9223372036854775807.999999999") == (9223372036854775807, 999999999)
    assert parse_num("999999999999999.123456789123") == (999999999999999, 123456789)
    assert parse_num("123456.789") == (123456, 789000000)


@pytest.mark.parametrize("value", ["bogus.9223372036854775807", "bogus", "1.2.3", 1.1])
def test_parse_num_errors(value):
    with pytest.raises(ValueError):
        parse_num(value)


def test_parse_num_none():
    assert parse_num(None) == (0, 0)


def test_unix(tf):
    assert tf.unix(0) == EPOCH
    assert tf.unix(None) == EPOCH
    assert tf.unix("1.5") == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
    assert tf.unix("86400") == datetime(1970, 1, 2, tzinfo=timezone.utc)
    assert tf.unix(0).tzinfo is not None


@pytest.mark.parametrize("value", [1.5, "1.2.3", "soon"])
def test_unix_errors(tf, value):
    with pytest.raises(ValueError):
        tf.unix(value)


def test_duration_units(tf):
    assert tf.nanosecond(3000) == timedelta(microseconds=3)
    assert tf.microsecond(7) == timedelta(microseconds=7)
    assert tf.millisecond(1500) == timedelta(seconds=1, milliseconds=500)
    assert tf.second(5) == timedelta(seconds=5)
    assert tf.minute("2") == timedelta(minutes=2)
    assert tf.hour(3) == timedelta(hours=3)
    assert tf.hour(None) == timedelta(0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", timedelta(0)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1.5s", timedelta(seconds=1, milliseconds=500)),
        ("-2m", timedelta(minutes=-2)),
        ("+5ms", timedelta(milliseconds=5)),
        ("300us", timedelta(microseconds=300)),
        ("1\u00b5s", timedelta(microseconds=1)),
        ("2h45m30.5s", timedelta(hours=2, minutes=45, seconds=30, milliseconds=500)),
        (".5h", timedelta(minutes=30)),
        ("1.s", timedelta(seconds=1)),
    ],
)
def test_parse_duration(tf, text, expected):
    assert tf.parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "1", "bogus", "1x", ".s", "-", "1h2", "3000000h"])
def test_parse_duration_errors(tf, text):
    with pytest.raises(ValueError):
        tf.parse_duration(text)


def test_parse_duration_messages(tf):
    with pytest.raises(ValueError, match="missing unit"):
        tf.parse_duration("10")
    with pytest.raises(ValueError, match='unknown unit "d"'):
        tf.parse_duration("1d")


def test_since_and_until(tf):
    now = tf.now()
    elapsed = tf.since(now - timedelta(hours=1))
    assert timedelta(hours=1) <= elapsed < timedelta(hours=1, minutes=1)
    remaining = tf.until(now + timedelta(hours=1))
    assert timedelta(minutes=59) < remaining <= timedelta(hours=1)


def test_since_naive(tf):
    elapsed = tf.since(datetime.now() - timedelta(minutes=5))
    assert timedelta(minutes=5) <= elapsed < timedelta(minutes=6)


def test_now_is_current(tf):
    before = datetime.now(timezone.utc)
    current = tf.now()
    after = datetime.now(timezone.utc)
    assert before <= current <= after


def test_zone_consistent_with_now(tf):
    current = tf.now()
    assert tf.zone_offset() == int(current.utcoffset().total_seconds())
    assert tf.zone_name() == current.tzname()