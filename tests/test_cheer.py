import pytest

from algocollection.cheer import will_cheer, window_max_sum

SAMPLE = [1, 3, 2, 4, 5, 3, 6, 7]


def test_sample_case_is_no():
    assert will_cheer(SAMPLE, 3) is False


def test_sample_window_sum():
    assert window_max_sum(SAMPLE, 3) == 30


def test_window_of_one_is_plain_sum():
    assert window_max_sum(SAMPLE, 1) == sum(SAMPLE)


def test_window_of_full_length_is_max():
    assert window_max_sum(SAMPLE, len(SAMPLE)) == max(SAMPLE)


def test_window_longer_than_scores_gives_zero():
    assert window_max_sum([5, 6], 3) == 0


def test_window_sums_bounded_by_max():
    for k in range(1, len(SAMPLE) + 1):
        windows = len(SAMPLE) - k + 1
        total = window_max_sum(SAMPLE, k)
        assert windows * min(SAMPLE) <= total <= windows * max(SAMPLE)


def test_prime_sum_cheers():
    assert will_cheer([2], 1) is True
    assert will_cheer([1, 1, 1], 1) is True


def test_composite_or_tiny_sum_does_not_cheer():
    assert will_cheer([4], 1) is False
    assert will_cheer([1], 1) is False
    assert will_cheer([], 2) is False


def test_non_positive_window_raises():
    with pytest.raises(ValueError):
        window_max_sum(SAMPLE, 0)