from .config import settings
from .functions import get_checksum_address
from .version import __version__

# isort: split

from .claim_token import ClaimToken
from .erc20 import Erc20Token
from .ledger import BalanceLedger, ReserveLedger
from .liquidity import isqrt, min_ratio, mint_amount
from .logging import logger
from .pool import ReentrancyGuard, SimpleSwapPool, SimpleSwapPoolState
from .pricing import optimal_deposit, price, proportional_withdrawal, quote
from .records import DepositRecord, SwapRecord, WithdrawalRecord

__all__ = (
    "BalanceLedger",
    "ClaimToken",
    "DepositRecord",
    "Erc20Token",
    "ReentrancyGuard",
    "ReserveLedger",
    "SimpleSwapPool",
    "SimpleSwapPoolState",
    "SwapRecord",
    "WithdrawalRecord",
    "__version__",
    "get_checksum_address",
    "isqrt",
    "logger",
    "min_ratio",
    "mint_amount",
    "optimal_deposit",
    "price",
    "proportional_withdrawal",
    "quote",
    "settings",
)
