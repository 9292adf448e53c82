import random

import pytest

from algokit.arrays import (
    count_pairs,
    min_digit_permutation_difference,
    minimal_product,
    not_equal_positions,
    saved_mice,
    table_is_stable,
)


def test_digit_permutation_worked_example():
    rows = ["5237", "2753", "7523", "5723", "5237", "7523"]
    assert min_digit_permutation_difference(rows) == 2700


def test_digit_permutation_single_row_is_zero():
    assert min_digit_permutation_difference(["9081"]) == 0


def test_digit_permutation_not_worse_than_identity():
    rng = random.Random(3)
    for _ in range(20):
        rows = ["".join(rng.choice("0123456789") for _ in range(4)) for _ in range(5)]
        identity = max(map(int, rows)) - min(map(int, rows))
        assert 0 <= min_digit_permutation_difference(rows) <= identity


def test_digit_permutation_errors():
    with pytest.raises(ValueError):
        min_digit_permutation_difference([])
    with pytest.raises(ValueError):
        min_digit_permutation_difference(["12", "123"])


def test_not_equal_positions_invariants():
    rng = random.Random(7)
    for _ in range(30):
        arr = [rng.randint(1, 3) for _ in range(rng.randint(1, 12))]
        queries = []
        for _ in range(10):
            l = rng.randint(1, len(arr))
            r = rng.randint(l, len(arr))
            queries.append((l, r, rng.randint(1, 3)))
        for (l, r, x), answer in zip(queries, not_equal_positions(arr, queries)):
            if answer == -1:
                assert all(v == x for v in arr[l - 1 : r])
            else:
                assert l <= answer <= r
                assert arr[answer - 1] != x
                assert all(v == x for v in arr[answer:r])


def test_not_equal_positions_rejects_bad_range():
    with pytest.raises(ValueError):
        not_equal_positions([1, 2], [(2, 3, 1)])


def test_minimal_product_constant_sequence_is_impossible():
    assert minimal_product(10, 5, 5, 1, 2, 3, 4, 5) is None


def test_minimal_product_single_value_is_impossible():
    assert minimal_product(1, -10, 10, 1, 1, 1, 0, 20) is None


def test_minimal_product_uses_32_bit_arithmetic():
    base = minimal_product(50, -100, 100, 3, 5, 7, 11, 13)
    wrapped = minimal_product(50, -100, 100, 3 + (1 << 32), 5, 7 + (1 << 32), 11, 13)
    assert base == wrapped


def test_minimal_product_within_bounds():
    rng = random.Random(11)
    for _ in range(20):
        l = rng.randint(-50, 0)
        r = rng.randint(1, 50)
        result = minimal_product(30, l, r, rng.randint(0, 99), rng.randint(0, 99),
                                 rng.randint(0, 99), rng.randint(0, 99), rng.randint(0, 99))
        if result is not None:
            corners = [l * l, l * r, r * r]
            assert min(corners) <= result <= max(corners)


def test_table_stability_cases():
    assert table_is_stable([1, 1, 1, 1]) is True
    assert table_is_stable([3, 1, 3, 1]) is True
    assert table_is_stable([1, 2, 3, 100]) is False


def test_table_stability_order_and_shift_invariant():
    rng = random.Random(5)
    for _ in range(50):
        legs = [rng.randint(1, 6) for _ in range(4)]
        shuffled = legs[:]
        rng.shuffle(shuffled)
        shifted = [leg + 10 for leg in legs]
        assert table_is_stable(legs) == table_is_stable(shuffled) == table_is_stable(shifted)


def test_table_needs_four_legs():
    with pytest.raises(ValueError):
        table_is_stable([1, 2, 3])


def test_saved_mice_worked_example():
    assert saved_mice(10, [8, 7, 5, 4, 9, 4]) == 3


def test_saved_mice_bounds_and_order():
    rng = random.Random(2)
    for _ in range(30):
        n = rng.randint(2, 30)
        positions = [rng.randint(1, n - 1) for _ in range(rng.randint(1, 10))]
        result = saved_mice(n, positions)
        assert 0 <= result <= len(positions)
        assert saved_mice(n, list(reversed(positions))) == result


def test_count_pairs_worked_example():
    assert count_pairs([1, 1, 2, 3, 8, 2, 1, 4]) == 3


def test_count_pairs_matches_definition():
    rng = random.Random(9)
    for _ in range(30):
        values = [rng.randint(0, 10) for _ in range(rng.randint(0, 10))]
        expected = sum(
            1
            for i in range(1, len(values) + 1)
            for j in range(i + 1, len(values) + 1)
            if values[i - 1] < i < values[j - 1] < j
        )
        assert count_pairs(values) == expected