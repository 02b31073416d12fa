import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from simpleswap.constants import MAX_UINT256, PRICE_SCALE
from simpleswap.exceptions import (
    BelowMinimum,
    BelowMinimumA,
    BelowMinimumB,
    InsufficientAmount,
    InsufficientLiquidity,
)
from simpleswap.pricing import optimal_deposit, price, proportional_withdrawal, quote

ONE = 10**18

RESERVES = st.integers(min_value=1, max_value=10**36)
AMOUNTS = st.integers(min_value=1, max_value=10**36)


def test_quote() -> None:
    assert quote(ONE, 10 * ONE, 10 * ONE) == ONE
    assert quote(1, 3, 2) == 0
    assert quote(3, 2, 7) == 10
    assert quote(ONE // 1000, 1000 * ONE, ONE) == ONE // 10**6


def test_quote_entire_input_reserve_returns_entire_output_reserve() -> None:
    assert quote(10 * ONE, 10 * ONE, 7 * ONE) == 7 * ONE


def test_quote_is_independent_of_trade_size() -> None:
    assert quote(50 * ONE, 100 * ONE, 100 * ONE) == 50 * ONE
    assert quote(ONE, 100 * ONE, 100 * ONE) == ONE


def test_quote_zero_input() -> None:
    with pytest.raises(InsufficientAmount):
        quote(0, 10 * ONE, 10 * ONE)

    # The amount check comes before the reserve check
    with pytest.raises(InsufficientAmount):
        quote(0, 0, 0)


@pytest.mark.parametrize(("reserve_in", "reserve_out"), [(0, 10), (10, 0), (0, 0)])
def test_quote_zero_reserves(reserve_in: int, reserve_out: int) -> None:
    with pytest.raises(InsufficientLiquidity):
        quote(1, reserve_in, reserve_out)


def test_quote_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        quote(-1, 10, 10)
    with pytest.raises(ValidationError):
        quote(MAX_UINT256 + 1, 10, 10)


@given(amount_in=AMOUNTS, reserve_in=RESERVES, reserve_out=RESERVES)
def test_quote_is_floor_of_ratio(amount_in: int, reserve_in: int, reserve_out: int) -> None:
    amount_out = quote(amount_in, reserve_in, reserve_out)
    assert amount_out == amount_in * reserve_out // reserve_in
    assert amount_out * reserve_in <= amount_in * reserve_out
    assert (amount_out + 1) * reserve_in > amount_in * reserve_out


@given(amount_in=AMOUNTS, increment=AMOUNTS, reserve_in=RESERVES, reserve_out=RESERVES)
def test_quote_is_monotonic(amount_in: int, increment: int, reserve_in: int, reserve_out: int) -> None:
    assert quote(amount_in, reserve_in, reserve_out) <= quote(
        amount_in + increment, reserve_in, reserve_out
    )


def test_optimal_deposit_empty_pair_accepts_desired_amounts() -> None:
    assert optimal_deposit(10, 10, 0, 0, 0, 0) == (10, 10)
    assert optimal_deposit(1000 * ONE, ONE, 0, 0, 0, 0) == (1000 * ONE, ONE)


def test_optimal_deposit_uses_implied_b() -> None:
    assert optimal_deposit(10, 30, 0, 0, 10, 20) == (10, 20)


def test_optimal_deposit_falls_back_to_implied_a() -> None:
    # 10 A implies 20 B, above the 2 B desired, so 2 B implies 1 A
    assert optimal_deposit(10, 2, 0, 0, 10, 20) == (1, 2)
    assert optimal_deposit(10 * ONE, 2 * ONE, 0, 0, 10 * ONE, 20 * ONE) == (ONE, 2 * ONE)


def test_optimal_deposit_below_minimum_a() -> None:
    with pytest.raises(BelowMinimumA) as exc_info:
        optimal_deposit(10, 2, 2, 0, 10, 20)
    assert exc_info.value.minimum == 2
    assert exc_info.value.amount == 1

    with pytest.raises(BelowMinimum):
        optimal_deposit(ONE, ONE, 10 * ONE, 10 * ONE, ONE, 1000 * ONE)


def test_optimal_deposit_below_minimum_b() -> None:
    with pytest.raises(BelowMinimumB):
        optimal_deposit(2 * ONE, 10 * ONE, 0, 8 * ONE, 15 * ONE, 5 * ONE)


def test_optimal_deposit_single_zero_reserve() -> None:
    with pytest.raises(InsufficientLiquidity):
        optimal_deposit(ONE, ONE, 0, 0, 0, 10 * ONE)


@given(
    desired_a=AMOUNTS,
    desired_b=AMOUNTS,
    reserve_a=RESERVES,
    reserve_b=RESERVES,
)
def test_optimal_deposit_never_exceeds_desired_amounts(
    desired_a: int, desired_b: int, reserve_a: int, reserve_b: int
) -> None:
    amount_a, amount_b = optimal_deposit(desired_a, desired_b, 0, 0, reserve_a, reserve_b)
    assert amount_a <= desired_a
    assert amount_b <= desired_b
    assert amount_a == desired_a or amount_b == desired_b


def test_proportional_withdrawal() -> None:
    assert proportional_withdrawal(10 * ONE, 10 * ONE, 10 * ONE, 10 * ONE) == (10 * ONE, 10 * ONE)
    assert proportional_withdrawal(5, 10, 21, 10) == (5, 10)
    assert proportional_withdrawal(1, 10, 10, 3) == (3, 3)
    assert proportional_withdrawal(0, 10, 10, 10) == (0, 0)


@pytest.mark.parametrize(
    ("reserve_a", "reserve_b", "total_supply"),
    [(0, 10, 10), (10, 0, 10), (10, 10, 0)],
)
def test_proportional_withdrawal_without_liquidity(
    reserve_a: int, reserve_b: int, total_supply: int
) -> None:
    with pytest.raises(InsufficientLiquidity):
        proportional_withdrawal(1, reserve_a, reserve_b, total_supply)


def test_price() -> None:
    assert price(10, 10) == PRICE_SCALE
    assert price(10 * ONE, 10 * ONE) == 10**18
    assert price(10, 20) == 2 * PRICE_SCALE
    assert price(3, 1, scale=1000) == 333


def test_price_without_liquidity() -> None:
    with pytest.raises(InsufficientLiquidity):
        price(0, 10)
    with pytest.raises(InsufficientLiquidity):
        price(10, 0)
