import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from simpleswap.constants import MAX_UINT256
from simpleswap.liquidity import isqrt, min_ratio, mint_amount

ONE = 10**18


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 1),
        (4, 2),
        (8, 2),
        (9, 3),
        (15, 3),
        (16, 4),
        (100, 10),
        (ONE * ONE, ONE),
        (ONE * ONE - 1, ONE - 1),
    ],
)
def test_isqrt(value: int, expected: int) -> None:
    assert isqrt(value) == expected


@given(value=st.integers(min_value=0, max_value=MAX_UINT256))
def test_isqrt_matches_floor_square_root(value: int) -> None:
    root = isqrt(value)
    assert root == math.isqrt(value)
    assert root * root <= value < (root + 1) * (root + 1)


def test_min_ratio_truncates() -> None:
    assert min_ratio(20, 30, 10, 10) == 2
    assert min_ratio(ONE, ONE, 10 * ONE, 10 * ONE) == 0
    assert min_ratio(25, 100, 10, 10) == 2


def test_min_ratio_zero_reserves_count_as_one() -> None:
    assert min_ratio(5, 7, 0, 0) == 5
    assert min_ratio(5, 7, 0, 1) == 5
    assert min_ratio(5, 7, 1, 0) == 5


def test_mint_amount_bootstrap() -> None:
    assert mint_amount(10, 10, 0, 0, 0) == 10
    assert mint_amount(10 * ONE, 10 * ONE, 0, 0, 0) == 10 * ONE
    assert mint_amount(1, 1, 0, 1, 1) == 1
    assert mint_amount(1, 2, 0, 10, 20) == 1
    assert mint_amount(0, ONE, 0, 1, 10 * ONE) == 0


def test_mint_amount_with_existing_supply() -> None:
    assert mint_amount(20, 20, 10, 10, 10) == 20
    assert mint_amount(30, 20, 10, 10, 10) == 20


def test_mint_amount_small_deposit_mints_nothing() -> None:
    assert mint_amount(ONE, ONE, 10 * ONE, 10 * ONE, 10 * ONE) == 0


@given(
    amount_a=st.integers(min_value=0, max_value=10**36),
    amount_b=st.integers(min_value=0, max_value=10**36),
)
def test_mint_amount_bootstrap_is_geometric_mean(amount_a: int, amount_b: int) -> None:
    assert mint_amount(amount_a, amount_b, 0, 0, 0) == math.isqrt(amount_a * amount_b)
