import pytest

from cptoolkit.manacher import longest_palindromes_from, palindrome_counts


def _is_palindrome(seq):
    return list(seq) == list(reversed(seq))


def test_example_counts():
    counts = palindrome_counts("aaaba")
    assert counts.odd == [1, 2, 1, 2, 1]
    assert counts.even == [0, 1, 1, 0, 0]


def test_example_longest():
    assert longest_palindromes_from("aaaba") == [3, 2, 3, 1, 1]


@pytest.mark.parametrize("seq", ["abacabadabacaba", "abba", "xyz", [1, 2, 2, 1, 3, 1]])
def test_counts_describe_palindromes(seq):
    counts = palindrome_counts(seq)
    for i, (o, e) in enumerate(zip(counts.odd, counts.even)):
        assert o >= 1
        assert _is_palindrome(seq[i - o + 1 : i + o])
        if i + o < len(seq) and i - o >= 0:
            assert seq[i + o] != seq[i - o]
        assert _is_palindrome(seq[i - e : i + e])


@pytest.mark.parametrize("seq", ["abacabadabacaba", "abba", "xyz", "banana"])
def test_longest_from_are_palindromes_and_maximal(seq):
    longest = longest_palindromes_from(seq)
    assert len(longest) == len(seq)
    for i, length in enumerate(longest):
        window = list(seq[i : i + length])
        assert len(window) == length
        assert window == window[::-1]
        longer = [
            j for j in range(i + length + 1, len(seq) + 1) if _is_palindrome(seq[i:j])
        ]
        assert longer == []


def test_empty():
    assert longest_palindromes_from("") == []
    assert palindrome_counts("") == ([], [])