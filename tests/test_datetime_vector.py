from datetime import datetime, timezone

from vecsub import (
    DATETIME_CLASS,
    ElementKind,
    Vector,
    get_datetimes,
    is_datetime_vector,
    new_datetime_vector,
    subset,
)


def test_stamps_class_and_timezone():
    vec = new_datetime_vector([0.0, 86400.0], tz="America/Chicago")
    assert vec.kind is ElementKind.REAL
    assert vec.attrs["class"] == ("POSIXct", "POSIXt")
    assert vec.attrs["tzone"] == "America/Chicago"
    assert is_datetime_vector(vec)


def test_empty_timezone_is_not_attached():
    vec = new_datetime_vector([1.0])
    assert vec.attrs["class"] == DATETIME_CLASS
    assert "tzone" not in vec.attrs


def test_length_argument_allocates_zeros():
    vec = new_datetime_vector(3)
    assert vec.to_list() == [0.0, 0.0, 0.0]


def test_integer_vector_is_coerced_with_missing_kept():
    vec = new_datetime_vector(Vector([60, None], names=["a", "b"]), tz="UTC")
    assert vec.to_list() == [60.0, None]
    assert vec.names_list() == ["a", "b"]


def test_get_datetimes_converts_seconds():
    vec = new_datetime_vector([0.0, None, 90.5])
    assert get_datetimes(vec) == [
        datetime(1970, 1, 1, tzinfo=timezone.utc),
        None,
        datetime(1970, 1, 1, 0, 1, 30, 500000, tzinfo=timezone.utc),
    ]


def test_subsetting_drops_datetime_metadata():
    vec = new_datetime_vector([0.0, 1.0], tz="UTC")
    out = subset(vec, [1])
    assert out.to_list() == [1.0]
    assert not is_datetime_vector(out)


def test_get_datetimes_uses_stored_timezone():
    vec = new_datetime_vector([0.0], tz="America/Chicago")
    (stamp,) = get_datetimes(vec)
    assert stamp.tzinfo.key == "America/Chicago"
    assert (stamp.year, stamp.month, stamp.day, stamp.hour) == (1969, 12, 31, 18)
    assert stamp == datetime(1970, 1, 1, tzinfo=timezone.utc)
