import pickle

from ngtree.utils.iterables import IGNORE, zip_with_padding


def test_zip_with_padding_pads_shorter_left():
    assert zip_with_padding([1, 2], ["a", "b", "c"], "x") == [
        (1, "a"),
        (2, "b"),
        ("x", "c"),
    ]


def test_zip_with_padding_pads_shorter_right():
    assert zip_with_padding([1, 2, 3, 4], ["a"], 0) == [
        (1, "a"),
        (2, 0),
        (3, 0),
        (4, 0),
    ]


def test_zip_with_padding_none_is_a_real_padding_value():
    assert zip_with_padding([], [1, 2], None) == [(None, 1), (None, 2)]


def test_zip_with_padding_equal_lengths():
    assert zip_with_padding("ab", "cd", "x") == [("a", "c"), ("b", "d")]
    assert zip_with_padding("ab", "cd") == [("a", "c"), ("b", "d")]


def test_zip_with_padding_ignore_drops_excess():
    assert zip_with_padding([1, 2, 3], [1, 2]) == [(1, 1), (2, 2)]
    assert zip_with_padding([1], [1, 2, 3, 4], IGNORE) == [(1, 1)]


def test_zip_with_padding_consecutive_pairs():
    cycle = ["a", "b", "c", "d"]
    assert zip_with_padding(cycle, cycle[1:], IGNORE) == [
        ("a", "b"),
        ("b", "c"),
        ("c", "d"),
    ]


def test_zip_with_padding_empty_inputs():
    assert zip_with_padding([], []) == []
    assert zip_with_padding([], [], "x") == []
    assert zip_with_padding([1], [], IGNORE) == []


def test_zip_with_padding_accepts_iterators():
    assert zip_with_padding(iter(range(3)), (c for c in "ab"), "-") == [
        (0, "a"),
        (1, "b"),
        (2, "-"),
    ]


def test_ignore_is_a_singleton():
    assert pickle.loads(pickle.dumps(IGNORE)) is IGNORE
    assert repr(IGNORE) == "IGNORE"
