from typing import Any

from eth_typing import ChecksumAddress

from simpleswap.exceptions.base import SimpleSwapError


class LedgerError(SimpleSwapError):
    """
    Exception raised when a ledger adjustment does not align with the recorded state.
    """


class Underflow(LedgerError):
    def __init__(self, asset: ChecksumAddress, reserve: int, amount: int) -> None:
        """
        A decrease exceeds the tracked reserve.
        """

        self.asset = asset
        self.reserve = reserve
        self.amount = amount
        super().__init__(message=f"Cannot remove {amount} from reserve of {reserve} {asset}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.asset, self.reserve, self.amount)


class InsufficientBalance(LedgerError):
    def __init__(self, owner: ChecksumAddress, balance: int, amount: int) -> None:
        self.owner = owner
        self.balance = balance
        self.amount = amount
        super().__init__(message=f"{owner} holds {balance}, {amount} required.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.owner, self.balance, self.amount)


class InsufficientAllowance(LedgerError):
    def __init__(self, spender: ChecksumAddress, allowance: int, amount: int) -> None:
        self.spender = spender
        self.allowance = allowance
        self.amount = amount
        super().__init__(message=f"{spender} is allowed {allowance}, {amount} required.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.spender, self.allowance, self.amount)
