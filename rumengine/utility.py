"""Small string helpers for file paths and text."""

from __future__ import annotations

import os
from typing import Iterable


def get_file_ext(path: str) -> str:
    """Return the text after the last dot, or an empty string if there is none."""
    _, dot, ext = path.rpartition(".")
    return ext if dot else ""


def get_file_dir(path: str) -> str:
    """Return everything before the last path separator (the whole path if there is none)."""
    index = path.rfind(os.sep)
    return path if index == -1 else path[:index]


def longest_common_string(a: str, b: str) -> str:
    """Return the longest common substring of two strings.

    Only substrings of two or more characters are reported; a longest match of a
    single character yields an empty string.
    """
    if not a or not b:
        return ""
    best = ""
    for ch in a:
        for start in (pos for pos, other in enumerate(b) if other == ch):
            candidate = ch
            for follow in b[start + 1:]:
                candidate += follow
                if candidate not in a:
                    break
                if len(candidate) > len(best):
                    best = candidate
    return best


def format_vector(values: Iterable[object]) -> str:
    """Format a sequence as ``[a, b, c]`` followed by a newline."""
    return "[" + ", ".join(str(value) for value in values) + "]\n"