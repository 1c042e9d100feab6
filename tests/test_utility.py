import os

from rumengine.utility import (
    format_vector,
    get_file_dir,
    get_file_ext,
    longest_common_string,
)


def test_file_ext_takes_last_dot():
    assert get_file_ext("archive.tar.gz") == "gz"


def test_file_ext_without_dot_is_empty():
    assert get_file_ext("Makefile") == ""


def test_file_ext_trailing_dot_is_empty():
    assert get_file_ext("name.") == ""


def test_file_dir_strips_last_component():
    path = os.sep.join(["Assets", "Models", "Knight.model"])
    assert get_file_dir(path) == os.sep.join(["Assets", "Models"])


def test_file_dir_without_separator_returns_whole_path():
    assert get_file_dir("Knight.model") == "Knight.model"


def test_longest_common_string_finds_run():
    assert longest_common_string("abcdef", "zcdemf") == "cde"


def test_longest_common_string_result_is_in_both():
    a, b = "the knight rides", "a knight walks"
    result = longest_common_string(a, b)
    assert result in a and result in b
    assert result == " knight "


def test_longest_common_string_empty_inputs():
    assert longest_common_string("", "abc") == ""
    assert longest_common_string("abc", "") == ""


def test_longest_common_string_single_char_match_is_not_reported():
    assert longest_common_string("abc", "xbz") == ""


def test_format_vector():
    assert format_vector([1, 2, 3]) == "[1, 2, 3]\n"
    assert format_vector([]) == "[]\n"