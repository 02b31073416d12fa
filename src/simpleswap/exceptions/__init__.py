from simpleswap.exceptions.base import SimpleSwapError, SimpleSwapValueError
from simpleswap.exceptions.ledger import (
    InsufficientAllowance,
    InsufficientBalance,
    LedgerError,
    Underflow,
)
from simpleswap.exceptions.liquidity_pool import (
    BelowMinimum,
    BelowMinimumA,
    BelowMinimumB,
    ConstraintViolation,
    InsufficientAmount,
    InsufficientLiquidity,
    LiquidityPoolError,
)
from simpleswap.exceptions.transaction import (
    DeadlineExpired,
    InvalidPath,
    InvalidRecipient,
    Reentrant,
    SlippageExceeded,
    TransactionError,
    TransferFailed,
    Unauthorized,
)

from . import ledger, liquidity_pool, transaction

__all__ = (
    "BelowMinimum",
    "BelowMinimumA",
    "BelowMinimumB",
    "ConstraintViolation",
    "DeadlineExpired",
    "InsufficientAllowance",
    "InsufficientAmount",
    "InsufficientBalance",
    "InsufficientLiquidity",
    "InvalidPath",
    "InvalidRecipient",
    "LedgerError",
    "LiquidityPoolError",
    "Reentrant",
    "SimpleSwapError",
    "SimpleSwapValueError",
    "SlippageExceeded",
    "TransactionError",
    "TransferFailed",
    "Unauthorized",
    "Underflow",
    "ledger",
    "liquidity_pool",
    "transaction",
)
