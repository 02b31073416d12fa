from pydantic import validate_call

from simpleswap.constants import PRICE_SCALE
from simpleswap.exceptions.liquidity_pool import (
    BelowMinimumA,
    BelowMinimumB,
    ConstraintViolation,
    InsufficientAmount,
    InsufficientLiquidity,
)
from simpleswap.validation import ValidatedUint256, ValidatedUint256NonZero


@validate_call(validate_return=True)
def quote(
    amount_in: ValidatedUint256,
    reserve_in: ValidatedUint256,
    reserve_out: ValidatedUint256,
) -> ValidatedUint256:
    """
    Calculate the output for an input amount at the current reserve ratio.

    The price is a plain ratio of the reserves. The input is not added to `reserve_in` before
    dividing, so the quoted rate does not depend on the trade size and a trade equal to the input
    reserve quotes the full output reserve.
    """

    if amount_in == 0:
        raise InsufficientAmount
    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidity

    return amount_in * reserve_out // reserve_in


@validate_call(validate_return=True)
def optimal_deposit(
    desired_a: ValidatedUint256,
    desired_b: ValidatedUint256,
    min_a: ValidatedUint256,
    min_b: ValidatedUint256,
    reserve_a: ValidatedUint256,
    reserve_b: ValidatedUint256,
) -> tuple[ValidatedUint256, ValidatedUint256]:
    """
    Find the deposit amounts matching the current reserve ratio without exceeding either desired
    amount.

    An empty pair accepts the desired amounts as given, which sets the initial ratio.
    """

    if reserve_a == 0 and reserve_b == 0:
        return desired_a, desired_b

    implied_b = quote(desired_a, reserve_a, reserve_b)
    if implied_b <= desired_b:
        if implied_b < min_b:
            raise BelowMinimumB(minimum=min_b, amount=implied_b)
        return desired_a, implied_b

    implied_a = quote(desired_b, reserve_b, reserve_a)
    if implied_a > desired_a:  # pragma: no cover
        raise ConstraintViolation
    if implied_a < min_a:
        raise BelowMinimumA(minimum=min_a, amount=implied_a)
    return implied_a, desired_b


@validate_call(validate_return=True)
def proportional_withdrawal(
    claim_amount: ValidatedUint256,
    reserve_a: ValidatedUint256,
    reserve_b: ValidatedUint256,
    total_supply: ValidatedUint256,
) -> tuple[ValidatedUint256, ValidatedUint256]:
    """
    Calculate the share of both reserves redeemed by a claim amount.
    """

    if reserve_a == 0 or reserve_b == 0 or total_supply == 0:
        raise InsufficientLiquidity

    return (
        claim_amount * reserve_a // total_supply,
        claim_amount * reserve_b // total_supply,
    )


@validate_call(validate_return=True)
def price(
    reserve_a: ValidatedUint256,
    reserve_b: ValidatedUint256,
    scale: ValidatedUint256NonZero = PRICE_SCALE,
) -> ValidatedUint256:
    """
    The price of asset A in units of asset B, as a fixed-point integer at `scale`.
    """

    if reserve_a == 0 or reserve_b == 0:
        raise InsufficientLiquidity

    return reserve_b * scale // reserve_a
