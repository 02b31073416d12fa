__all__ = (
    "MAX_UINT256",
    "MIN_UINT256",
    "PRICE_SCALE",
    "ZERO_ADDRESS",
)

import typing

from eth_typing import ChecksumAddress


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MIN_UINT256 = 0
MAX_UINT256 = _max_uint(256)

# Fixed-point scale for quoted prices
PRICE_SCALE = 10**18

ZERO_ADDRESS = ChecksumAddress("0x0000000000000000000000000000000000000000")
