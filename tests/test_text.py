import itertools

import pytest

from algocollection.text import count_words, diamond, is_all_digits, permutations


def test_count_words_source_sample():
    assert count_words("Hello, this is a \nWord Counter\n Program  ") == 7


def test_count_words_empty_and_blank():
    assert count_words("") == 0
    assert count_words(" \n\t  ") == 0


def test_count_words_matches_split_on_separators():
    text = "one\ttwo  three\nfour"
    assert count_words(text) == len(text.split())


def test_count_words_carriage_return_is_not_a_separator():
    assert count_words("a\rb") == count_words("ab")


def test_is_all_digits_true_for_digits():
    assert is_all_digits("0123456789") is True


def test_is_all_digits_false_with_letter():
    assert is_all_digits("12a4") is False


def test_is_all_digits_false_with_space():
    assert is_all_digits("12 4") is False


def test_is_all_digits_empty():
    assert is_all_digits("") is True


@pytest.mark.parametrize("n", [1, 2, 5])
def test_diamond_shape(n):
    lines = diamond(n)
    assert len(lines) == 2 * n
    stars = [line.count("*") for line in lines]
    assert stars == list(range(1, n + 1)) + list(range(n, 0, -1))
    assert lines[: n][::-1] == lines[n:]


def test_diamond_widest_row_has_no_indent():
    lines = diamond(4)
    assert lines[3] == "* " * 4
    assert lines[0] == "   * "


def test_diamond_zero():
    assert diamond(0) == []


def test_diamond_negative():
    with pytest.raises(ValueError):
        diamond(-1)


def test_permutations_abc_order():
    assert permutations("abc") == ["abc", "acb", "bac", "bca", "cba", "cab"]


def test_permutations_cover_all_arrangements():
    result = permutations("abcd")
    expected = sorted("".join(p) for p in itertools.permutations("abcd"))
    assert sorted(result) == expected
    assert result[0] == "abcd"


def test_permutations_single_and_empty():
    assert permutations("x") == ["x"]
    assert permutations("") == []