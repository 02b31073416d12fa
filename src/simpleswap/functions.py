import functools

from cchecksum import to_checksum_address
from eth_typing import ChecksumAddress, HexAddress

from simpleswap.exceptions import SimpleSwapValueError


@functools.lru_cache(maxsize=512)
def get_checksum_address(address: HexAddress | str | bytes) -> ChecksumAddress:
    return to_checksum_address(address)


def address_of(item: "str | bytes | object") -> ChecksumAddress:
    """
    Resolve an asset, token or account to its checksummed address. Objects exposing an `address`
    attribute are resolved through that attribute.
    """

    if isinstance(item, str | bytes):
        return get_checksum_address(item)
    return get_checksum_address(item.address)  # type: ignore[attr-defined]


def check_non_negative(amount: int) -> None:
    if amount < 0:
        raise SimpleSwapValueError(message=f"Amount must be non-negative, got {amount}.")
