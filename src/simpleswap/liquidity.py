from pydantic import validate_call

from simpleswap.validation import ValidatedUint256


@validate_call(validate_return=True)
def isqrt(y: ValidatedUint256) -> ValidatedUint256:
    """
    Floor of the square root by Babylonian iteration, starting from `y // 2 + 1`.

    Returns 0 for 0 and 1 for inputs up to 3.
    """

    z = 0
    if y > 3:
        z = y
        x = y // 2 + 1
        while x < z:
            z = x
            x = (y // x + x) // 2
    elif y != 0:
        z = 1
    return z


@validate_call(validate_return=True)
def min_ratio(
    amount_a: ValidatedUint256,
    amount_b: ValidatedUint256,
    reserve_a: ValidatedUint256,
    reserve_b: ValidatedUint256,
) -> ValidatedUint256:
    """
    The smaller of the two deposit-to-reserve ratios, each truncated by integer division. Zero
    reserves are treated as one.
    """

    return min(
        amount_a // (reserve_a or 1),
        amount_b // (reserve_b or 1),
    )


@validate_call(validate_return=True)
def mint_amount(
    amount_a: ValidatedUint256,
    amount_b: ValidatedUint256,
    total_supply: ValidatedUint256,
    reserve_a: ValidatedUint256,
    reserve_b: ValidatedUint256,
) -> ValidatedUint256:
    """
    Calculate the claim amount minted for a deposit, using the reserves and claim supply from
    before the deposit.

    The first deposit mints the geometric mean of the deposited amounts. Later deposits mint the
    truncated ratio times the supply, so a deposit smaller than the reserves can mint nothing.
    """

    if total_supply == 0:
        return isqrt(amount_a * amount_b)

    return min_ratio(amount_a, amount_b, reserve_a, reserve_b) * total_supply
