from eth_typing import ChecksumAddress

from simpleswap.exceptions.ledger import InsufficientBalance, Underflow
from simpleswap.functions import address_of, check_non_negative
from simpleswap.logging import logger
from simpleswap.types.abstract import AbstractAsset


class ReserveLedger:
    """
    Tracks the reserve the pool accounts for, keyed by asset address.

    The ledger is the source of truth for pricing and accounting. It is only updated by explicit
    adjustments and never reads live asset balances, except through `reconcile`.
    """

    def __init__(self) -> None:
        self._reserves: dict[ChecksumAddress, int] = {}

    def __contains__(self, asset: object) -> bool:
        return address_of(asset) in self._reserves

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._reserves})"

    def get(self, asset: AbstractAsset | ChecksumAddress | str) -> int:
        """
        Get the tracked reserve for an asset. Unknown assets hold a zero reserve.
        """

        return self._reserves.get(address_of(asset), 0)

    def increase(self, asset: AbstractAsset | ChecksumAddress | str, amount: int) -> None:
        check_non_negative(amount)
        _asset = address_of(asset)
        logger.debug(f"RESERVE: {_asset} +{amount}")
        self._reserves[_asset] = self._reserves.get(_asset, 0) + amount

    def decrease(self, asset: AbstractAsset | ChecksumAddress | str, amount: int) -> None:
        """
        Remove an amount from the tracked reserve.

        Raises
        ------
        Underflow
            If the amount exceeds the tracked reserve.
        """

        check_non_negative(amount)
        _asset = address_of(asset)
        reserve = self._reserves.get(_asset, 0)
        if amount > reserve:
            raise Underflow(asset=_asset, reserve=reserve, amount=amount)
        logger.debug(f"RESERVE: {_asset} -{amount}")
        self._reserves[_asset] = reserve - amount

    def reconcile(self, asset: AbstractAsset | ChecksumAddress | str, actual: int) -> int:
        """
        Overwrite the tracked reserve with an externally observed balance, returning the previous
        value.
        """

        check_non_negative(actual)
        _asset = address_of(asset)
        previous = self._reserves.get(_asset, 0)
        logger.debug(f"RESERVE: {_asset} {previous} -> {actual}")
        self._reserves[_asset] = actual
        return previous

    def snapshot(self) -> dict[ChecksumAddress, int]:
        return self._reserves.copy()

    def restore(self, snapshot: dict[ChecksumAddress, int]) -> None:
        self._reserves = snapshot.copy()


class BalanceLedger:
    """
    A dictionary-like class for tracking a single token's balances across addresses.

    Zero balances are not recorded.
    """

    def __init__(self) -> None:
        self.balances: dict[
            ChecksumAddress,  # address holding balance
            int,  # balance
        ] = {}

    def adjust(self, address: ChecksumAddress | str, amount: int) -> None:
        """
        Apply an adjustment to the balance held by an address.

        The amount can be positive (credit) or negative (debit). The method checksums the address
        prior to use.

        Raises
        ------
        InsufficientBalance
            If a debit exceeds the balance held.
        """

        _address = address_of(address)
        balance = self.balances.get(_address, 0)

        if balance + amount < 0:
            raise InsufficientBalance(owner=_address, balance=balance, amount=-amount)

        logger.debug(f"BALANCE: {_address} {'+' if amount > 0 else ''}{amount}")

        balance += amount
        if balance == 0:
            self.balances.pop(_address, None)
        else:
            self.balances[_address] = balance

    def balance(self, address: ChecksumAddress | str) -> int:
        return self.balances.get(address_of(address), 0)

    def transfer(
        self,
        amount: int,
        from_addr: ChecksumAddress | str,
        to_addr: ChecksumAddress | str,
    ) -> None:
        """
        Transfer a balance between addresses. The debit is applied first, so a failed transfer
        leaves both balances untouched.
        """

        check_non_negative(amount)
        self.adjust(address=from_addr, amount=-amount)
        self.adjust(address=to_addr, amount=amount)

    def total(self) -> int:
        return sum(self.balances.values())

    def snapshot(self) -> dict[ChecksumAddress, int]:
        return self.balances.copy()

    def restore(self, snapshot: dict[ChecksumAddress, int]) -> None:
        self.balances = snapshot.copy()
