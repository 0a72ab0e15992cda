import collections
import inspect

import pytest

from arenakit.debug import debug, format_debug, format_value, split_names


def test_booleans():
    assert format_value(True) == "T"
    assert format_value(False) == "F"


def test_strings_are_quoted():
    assert format_value("abc") == '"abc"'


def test_numbers():
    assert format_value(42) == "42"
    assert format_value(2.0) == "2"
    assert format_value(0.5) == "0.5"


def test_list():
    assert format_value([1, 2, 3]) == "{1,2,3}"
    assert format_value([]) == "{}"


def test_tuple_and_nested():
    assert format_value((1, "a")) == '(1,"a")'
    assert format_value([(1, True)]) == "{" + format_value((1, True)) + "}"


def test_mapping_renders_pairs():
    assert format_value({1: "x", 2: "y"}) == (
        "{" + format_value((1, "x")) + "," + format_value((2, "y")) + "}"
    )


def test_set_is_ordered():
    assert format_value({3, 1, 2}) == format_value([1, 2, 3])


def test_deque_matches_list():
    assert format_value(collections.deque([4, 5])) == format_value([4, 5])


def test_matrix_layout():
    text = format_value([[1, 2], [3, 4]])
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1] == lines[4] == "~~~~~"
    assert lines[2] == "0 " + format_value([1, 2])
    assert lines[3] == "1 " + format_value([3, 4])
    assert text.endswith("~~~~~\n")


def test_split_names_respects_brackets():
    assert split_names("a, f(b, c), d") == ["a", "f(b, c)", "d"]
    assert split_names("m{1, 2}, x") == ["m{1, 2}", "x"]
    assert split_names("") == []


def test_format_debug():
    assert format_debug("x, y", 1, "s") == (
        "[x = " + format_value(1) + " || y = " + format_value("s") + "]"
    )


def test_format_debug_count_mismatch():
    with pytest.raises(ValueError):
        format_debug("x, y", 1)


def test_debug_prints_line_number(capsys):
    line = inspect.currentframe().f_lineno + 1
    debug("v", [1, 2])
    out = capsys.readouterr().out
    assert out == f"{line}: {format_debug('v', [1, 2])}\n"