r"""Unit tests for the Duration value type."""

from __future__ import annotations

import math
from datetime import timedelta

import pytest

from apoll.duration import (
    FIVE_HUNDRED_MILLISECONDS,
    FOREVER,
    ONE_HUNDRED_MILLISECONDS,
    ONE_MINUTE,
    ONE_SECOND,
    TEN_SECONDS,
    TWO_SECONDS,
    ZERO,
    Duration,
    TimeUnit,
)

##############################
#     Tests for creation     #
##############################


def test_duration_default_unit_is_milliseconds() -> None:
    duration = Duration(250)
    assert duration.value == 250
    assert duration.unit is TimeUnit.MILLISECONDS
    assert duration.to_millis() == 250


def test_duration_negative_value() -> None:
    with pytest.raises(ValueError, match=r"duration value must be non-negative"):
        Duration(-1)


def test_duration_nan_value() -> None:
    with pytest.raises(ValueError, match=r"duration value cannot be NaN"):
        Duration(math.nan, TimeUnit.SECONDS)


@pytest.mark.parametrize(
    ("duration", "millis"),
    [
        (Duration(2_000_000, TimeUnit.NANOSECONDS), 2),
        (Duration(3000, TimeUnit.MICROSECONDS), 3),
        (Duration(2, TimeUnit.SECONDS), 2000),
        (Duration(1, TimeUnit.MINUTES), 60_000),
        (Duration(1, TimeUnit.HOURS), 3_600_000),
        (Duration(1, TimeUnit.DAYS), 86_400_000),
    ],
)
def test_duration_units(duration: Duration, millis: float) -> None:
    assert duration.to_millis() == pytest.approx(millis)


def test_duration_constants() -> None:
    assert ONE_HUNDRED_MILLISECONDS == Duration(100)
    assert FIVE_HUNDRED_MILLISECONDS == Duration(500)
    assert TEN_SECONDS == Duration(10_000)
    assert ONE_MINUTE == Duration(60, TimeUnit.SECONDS)
    assert FOREVER is Duration.FOREVER


def test_duration_forever() -> None:
    assert FOREVER.is_forever
    assert not TEN_SECONDS.is_forever
    assert FOREVER.to_seconds() == math.inf


def test_duration_is_zero() -> None:
    assert ZERO.is_zero
    assert not ONE_SECOND.is_zero


def test_duration_to_seconds() -> None:
    assert FIVE_HUNDRED_MILLISECONDS.to_seconds() == 0.5


def test_duration_timedelta() -> None:
    assert ONE_SECOND.to_timedelta() == timedelta(seconds=1)
    assert Duration.from_timedelta(timedelta(milliseconds=1500)) == Duration(1500)


def test_duration_forever_to_timedelta() -> None:
    with pytest.raises(ValueError, match=r"length 'forever'"):
        FOREVER.to_timedelta()


def test_duration_of_seconds() -> None:
    assert Duration.of_seconds(2) == TWO_SECONDS


####################################
#     Tests for equality/order     #
####################################


def test_duration_eq_across_units() -> None:
    assert Duration(1, TimeUnit.SECONDS) == Duration(1000)
    assert Duration(1, TimeUnit.SECONDS) != Duration(1001)


def test_duration_eq_other_type() -> None:
    assert Duration(1000) != 1000


def test_duration_hash_across_units() -> None:
    assert hash(Duration(1, TimeUnit.MINUTES)) == hash(Duration(60, TimeUnit.SECONDS))


def test_duration_ordering() -> None:
    assert ONE_HUNDRED_MILLISECONDS < ONE_SECOND
    assert TEN_SECONDS > ONE_SECOND
    assert ONE_SECOND <= Duration(1000)
    assert FOREVER > Duration(1, TimeUnit.DAYS)
    assert min(TEN_SECONDS, ONE_SECOND) is ONE_SECOND


################################
#     Tests for arithmetic     #
################################


def test_duration_multiply() -> None:
    assert FIVE_HUNDRED_MILLISECONDS.multiply(2) == ONE_SECOND
    assert FIVE_HUNDRED_MILLISECONDS * 2 == ONE_SECOND
    assert 2 * FIVE_HUNDRED_MILLISECONDS == ONE_SECOND


def test_duration_multiply_keeps_unit() -> None:
    assert (TWO_SECONDS * 3).unit is TimeUnit.SECONDS


def test_duration_multiply_negative() -> None:
    with pytest.raises(ValueError, match=r"negative factor"):
        ONE_SECOND * -1


def test_duration_divide() -> None:
    assert ONE_SECOND.divide(2) == FIVE_HUNDRED_MILLISECONDS
    assert ONE_SECOND / 4 == Duration(250)


def test_duration_divide_by_zero() -> None:
    with pytest.raises(ValueError, match=r"non-positive divisor"):
        ONE_SECOND / 0


def test_duration_plus() -> None:
    assert ONE_SECOND.plus(FIVE_HUNDRED_MILLISECONDS) == Duration(1500)
    assert ONE_SECOND + ONE_SECOND == TWO_SECONDS
    assert (ONE_SECOND + ONE_SECOND).unit is TimeUnit.SECONDS


def test_duration_minus() -> None:
    assert TWO_SECONDS.minus(FIVE_HUNDRED_MILLISECONDS) == Duration(1500)
    assert TWO_SECONDS - ONE_SECOND == ONE_SECOND


def test_duration_minus_negative_result() -> None:
    with pytest.raises(ValueError, match=r"Cannot subtract"):
        ONE_SECOND - TWO_SECONDS


def test_duration_forever_arithmetic() -> None:
    assert FOREVER * 2 is FOREVER
    assert FOREVER / 2 is FOREVER
    assert FOREVER + ONE_SECOND is FOREVER
    assert ONE_SECOND + FOREVER is FOREVER
    assert FOREVER - ONE_SECOND is FOREVER


def test_duration_minus_forever() -> None:
    with pytest.raises(ValueError, match=r"length 'forever'"):
        ONE_SECOND - FOREVER
    with pytest.raises(ValueError, match=r"length 'forever'"):
        FOREVER - FOREVER


def test_duration_add_other_type() -> None:
    with pytest.raises(TypeError):
        ONE_SECOND + 1  # type: ignore[operator]


####################################
#     Tests for representation     #
####################################


def test_duration_repr() -> None:
    assert repr(Duration(500)) == "Duration(500, MILLISECONDS)"
    assert repr(Duration(1.5, TimeUnit.SECONDS)) == "Duration(1.5, SECONDS)"
    assert repr(FOREVER) == "Duration.FOREVER"


def test_duration_str() -> None:
    assert str(TEN_SECONDS) == "10 seconds"
    assert str(FOREVER) == "forever"
