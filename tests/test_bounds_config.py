import numpy as np
import pytest

from vecsub import (
    IndexOutOfRangeError,
    IntegerIndex,
    RealIndex,
    SubsetConfig,
    Subsetter,
    Vector,
    subset,
)
from vecsub.core.subset import NO_BOUNDS_CHECK_ENV


def test_position_above_length_is_rejected(ints):
    with pytest.raises(IndexOutOfRangeError, match="above vector size") as info:
        subset(ints, [0, 3])
    assert info.value.position == 3
    assert info.value.length == 3
    assert "(index 3, length 3)" in str(info.value)


def test_negative_position_is_rejected(ints):
    with pytest.raises(IndexOutOfRangeError, match="< 0"):
        subset(ints, IntegerIndex([-1]))


def test_negative_real_truncating_below_zero_is_rejected(ints):
    with pytest.raises(IndexOutOfRangeError):
        subset(ints, RealIndex([-1.5]))


def test_range_errors_are_index_errors(ints):
    with pytest.raises(IndexError):
        subset(ints, [10])


def test_missing_index_is_never_a_range_error(ints):
    for checked in (True, False):
        out = subset(ints, [None], bounds_checked=checked)
        assert out.to_list() == [None]


def test_unchecked_negative_position_is_passed_to_storage():
    vec = Vector([1, 2, 3], names=["a", "b", "c"])
    out = subset(vec, [-1, 0], bounds_checked=False)
    assert out.to_list() == [3, 1]
    assert out.names_list() == [None, "a"]


def test_unchecked_position_past_end_surfaces_storage_error(ints):
    with pytest.raises(IndexError) as info:
        subset(ints, [5], bounds_checked=False)
    assert not isinstance(info.value, IndexOutOfRangeError)


def test_config_disables_checking(ints):
    out = subset(ints, [-1], config=SubsetConfig(bounds_check=False))
    assert out.to_list() == [30]


def test_config_normalized_coerces_flag():
    assert SubsetConfig(bounds_check=0).normalized().bounds_check is False


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_env_toggle_disables_checking(monkeypatch, ints, raw):
    monkeypatch.setenv(NO_BOUNDS_CHECK_ENV, raw)
    assert SubsetConfig.from_env().bounds_check is False
    assert subset(ints, [-1]).to_list() == [30]


@pytest.mark.parametrize("raw", ["", "0", "false", "no"])
def test_env_toggle_keeps_checking(monkeypatch, raw):
    monkeypatch.setenv(NO_BOUNDS_CHECK_ENV, raw)
    assert SubsetConfig.from_env().bounds_check is True


def test_from_env_accepts_explicit_mapping():
    assert SubsetConfig.from_env({NO_BOUNDS_CHECK_ENV: "1"}).bounds_check is False
    assert SubsetConfig.from_env({}).bounds_check is True


def test_explicit_argument_beats_config_and_env(monkeypatch, ints):
    monkeypatch.setenv(NO_BOUNDS_CHECK_ENV, "1")
    with pytest.raises(IndexOutOfRangeError):
        subset(ints, [-1], bounds_checked=True)
    with pytest.raises(IndexOutOfRangeError):
        subset(ints, [-1], config=SubsetConfig(bounds_check=True))


def test_subsetter_evaluates_on_conversion(ints):
    proxy = Subsetter(ints, [2, 1])
    assert len(proxy) == 2
    np.testing.assert_array_equal(np.asarray(proxy), np.array([30, 20], dtype=np.int32))
    assert proxy.value().to_list() == [30, 20]


def test_subsetter_defers_errors_until_evaluated(ints):
    proxy = Subsetter(ints, [7])
    with pytest.raises(IndexOutOfRangeError):
        proxy.value()
    unchecked = Subsetter(ints, [-1], config=SubsetConfig(bounds_check=False))
    assert unchecked.value().to_list() == [30]


@pytest.mark.parametrize(
    "index",
    [[2**40], np.array([2**33], dtype=np.int64), IntegerIndex([2**35, 0])],
    ids=["list", "int64-array", "integer-index"],
)
def test_positions_beyond_32_bits_are_range_errors(ints, index):
    with pytest.raises(IndexOutOfRangeError, match="above vector size") as info:
        subset(ints, index)
    assert info.value.position > 2**32
    assert info.value.length == 3


def test_negative_positions_beyond_32_bits_are_range_errors(ints):
    with pytest.raises(IndexOutOfRangeError, match="< 0") as info:
        subset(ints, [-(2**40)])
    assert info.value.position == -(2**40)


def test_unchecked_position_beyond_32_bits_is_left_to_storage(ints):
    with pytest.raises(IndexError) as info:
        subset(ints, [2**40], bounds_checked=False)
    assert not isinstance(info.value, IndexOutOfRangeError)
