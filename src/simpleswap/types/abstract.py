from typing import Any, Protocol, runtime_checkable

from eth_typing import ChecksumAddress


@runtime_checkable
class AbstractAsset(Protocol):
    """
    The transfer capability of a fungible asset held by the pool. The pool never inspects how the
    asset keeps its balances, it only relies on these calls.

    A `False` return from `transfer` or `transfer_from` signals a failed transfer.
    """

    address: ChecksumAddress

    def transfer(self, sender: str, to: str, amount: int) -> bool: ...

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> bool: ...

    def balance_of(self, owner: str) -> int: ...


@runtime_checkable
class AbstractClaimToken(Protocol):
    """
    The ledger for the liquidity claim token issued by the pool.
    """

    @property
    def total_supply(self) -> int: ...

    def mint(self, to: str, amount: int) -> None: ...

    def burn(self, owner: str, amount: int) -> None: ...


@runtime_checkable
class Snapshottable(Protocol):
    """
    An object that can capture its state and later roll back to it.
    """

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...
