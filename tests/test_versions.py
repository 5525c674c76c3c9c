"""
Tests for ghcheck.versions.
"""

import pytest

from ghcheck.versions import extract_version, first_line, is_older_than


@pytest.mark.parametrize("banner, expected", [
    ("git version 2.43.0", "2.43.0"),
    ("git version 2.39.3 (Apple Git-146)", "2.39.3"),
    ("git version 2.42.0.windows.2", "2.42.0"),
    ("1.85.1\n0ee08df0cf4527e40edc9aa28f4b5bd38bbff2b2\nx64", "1.85.1"),
    ("no digits here", None),
    ("", None),
])
def test_extract_version(banner, expected):
    assert extract_version(banner) == expected


def test_is_older_than():
    assert is_older_than("git version 2.17.1", "2.28.0")
    assert not is_older_than("git version 2.43.0", "2.28.0")
    assert not is_older_than("git version unknown", "2.28.0")
    assert not is_older_than(None, "2.28.0")


def test_first_line():
    assert first_line("1.85.1\nabc\nx64") == "1.85.1"
    assert first_line("") == ""
    assert first_line(None) == ""


def test_is_older_than_boundaries():
    assert not is_older_than("git version 2.28.0", "2.28.0")
    assert is_older_than("git version 2.27.9", "2.28.0")
    assert not is_older_than("git version 2.42.0.windows.2", "2.28.0")
