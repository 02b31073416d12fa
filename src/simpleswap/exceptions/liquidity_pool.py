from typing import Any

from simpleswap.exceptions.base import SimpleSwapError

"""
Exceptions defined here are raised by the pricing and liquidity accounting functions.
"""


class LiquidityPoolError(SimpleSwapError):
    """
    Exception raised inside pricing and liquidity accounting helpers.
    """


class InsufficientLiquidity(LiquidityPoolError):
    """
    A reserve (or the claim supply) needed for a ratio calculation is zero.
    """

    def __init__(self) -> None:
        super().__init__(message="Insufficient liquidity.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()


class InsufficientAmount(LiquidityPoolError):
    """
    A required input amount is zero.
    """

    def __init__(self) -> None:
        super().__init__(message="Insufficient amount.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()


class BelowMinimum(LiquidityPoolError):
    """
    A computed amount is below the floor supplied by the caller.
    """

    label = ""

    def __init__(self, minimum: int, amount: int) -> None:
        self.minimum = minimum
        self.amount = amount
        super().__init__(
            message=f"Amount{self.label} below minimum: {amount} computed, {minimum} required."
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.minimum, self.amount)


class BelowMinimumA(BelowMinimum):
    label = " A"


class BelowMinimumB(BelowMinimum):
    label = " B"


class ConstraintViolation(LiquidityPoolError):
    """
    No deposit split satisfies both desired amounts at the current reserve ratio.
    """

    def __init__(self) -> None:
        super().__init__(message="No deposit split satisfies the desired amounts.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()
