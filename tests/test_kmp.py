import pytest

from cptoolkit.kmp import kmp_search, prefix_function


def test_prefix_function_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("seq", ["abacabab", "aaaaa", "abcd", [1, 2, 1, 2, 1, 3]])
def test_prefix_function_entries_are_borders(seq):
    table = prefix_function(seq)
    assert len(table) == len(seq)
    for i, p in enumerate(table):
        assert p <= i
        assert list(seq[:p]) == list(seq[i - p + 1 : i + 1])


def test_overlapping_matches():
    assert kmp_search("abababa", "aba") == [0, 2, 4]


def test_zero_values_are_matched():
    assert kmp_search([0, 0, 0], [0]) == [0, 1, 2]


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("mississippi", "issi"),
        ("aaaaab", "aab"),
        ([3, 1, 3, 1, 3, 1], [3, 1, 3]),
        ("abc", "x"),
    ],
)
def test_matches_are_exactly_the_equal_slices(text, pattern):
    found = set(kmp_search(text, pattern))
    m = len(pattern)
    for i in range(len(text) - m + 1):
        assert (i in found) == (list(text[i : i + m]) == list(pattern))
    assert all(0 <= i <= len(text) - m for i in found)


def test_pattern_longer_than_text():
    assert kmp_search("ab", "abc") == []


def test_empty_pattern_matches_everywhere():
    text = "xyz"
    assert kmp_search(text, "") == list(range(len(text) + 1))