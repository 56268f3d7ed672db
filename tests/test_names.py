import numpy as np

from vecsub import NA_INTEGER, NA_STRING, Vector, match, propagate_names


def test_match_returns_first_one_based_position():
    out = match(["b", "z", "a"], ["a", "b", "a"])
    assert out.dtype == np.int32
    assert out.tolist() == [2, NA_INTEGER, 1]


def test_match_missing_label_finds_missing_entry():
    assert match([None], ["a", None]).tolist() == [2]
    assert match([None], ["a"]).tolist() == [NA_INTEGER]


def test_match_is_exact():
    assert match(["A", "a "], ["a"]).tolist() == [NA_INTEGER, NA_INTEGER]
    assert match(["NA"], [None]).tolist() == [NA_INTEGER]


def test_propagate_names_without_names_is_no_propagation():
    assert propagate_names(None, np.array([0, 1]), 2) is None


def test_propagate_names_marks_missing_and_out_of_range():
    names = Vector(["x", "y", "z"], names=None).values
    out = propagate_names(names, np.array([2, NA_INTEGER, 3, -1, 0]), 3)
    assert out[0] == "z"
    assert out[1] is NA_STRING
    assert out[2] is NA_STRING
    assert out[3] is NA_STRING
    assert out[4] == "x"


def test_propagate_names_does_not_alias_source():
    names = Vector(["x", "y"]).values
    out = propagate_names(names, np.array([0]), 2)
    out[0] = "changed"
    assert names[0] == "x"
