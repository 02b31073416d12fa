from typing import Any

from eth_typing import ChecksumAddress

from simpleswap.constants import ZERO_ADDRESS
from simpleswap.exceptions.ledger import InsufficientAllowance
from simpleswap.exceptions.transaction import InvalidRecipient
from simpleswap.functions import address_of, check_non_negative, get_checksum_address
from simpleswap.ledger import BalanceLedger
from simpleswap.logging import logger


class Erc20Token:
    """
    An in-memory fungible token with ERC-20 semantics.

    Balances are held in a `BalanceLedger`. Failed transfers raise instead of returning `False`,
    matching tokens that revert on failure.
    """

    def __init__(
        self,
        address: str,
        *,
        name: str = "Unknown",
        symbol: str = "UNKN",
        decimals: int = 18,
        silent: bool = True,
    ) -> None:
        self.address = get_checksum_address(address)
        self.name = name
        self.symbol = symbol
        self.decimals = decimals

        self._ledger = BalanceLedger()
        self._allowances: dict[tuple[ChecksumAddress, ChecksumAddress], int] = {}
        self._total_supply = 0

        if not silent:  # pragma: no cover
            logger.info(f"• {self.symbol} ({self.name})")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Erc20Token):
            return self.address == other.address
        if isinstance(other, str):
            return self.address.lower() == other.lower()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.address)

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Erc20Token):
            return self.address < other.address
        if isinstance(other, str):
            return self.address.lower() < other.lower()
        return NotImplemented

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(address={self.address}, symbol='{self.symbol}', name='{self.name}', decimals={self.decimals})"  # noqa:E501

    def __str__(self) -> str:
        return self.symbol

    @property
    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, owner: str) -> int:
        return self._ledger.balance(owner)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((address_of(owner), address_of(spender)), 0)

    def approve(self, owner: str, spender: str, amount: int) -> bool:
        check_non_negative(amount)
        self._allowances[address_of(owner), address_of(spender)] = amount
        return True

    def transfer(self, sender: str, to: str, amount: int) -> bool:
        _to = address_of(to)
        if _to == ZERO_ADDRESS:
            raise InvalidRecipient(recipient=_to)
        self._ledger.transfer(amount=amount, from_addr=sender, to_addr=_to)
        return True

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> bool:
        """
        Move `amount` from `owner` to `to` on behalf of `spender`, consuming the allowance.
        """

        _owner = address_of(owner)
        _spender = address_of(spender)
        allowance = self.allowance(_owner, _spender)
        if allowance < amount:
            raise InsufficientAllowance(spender=_spender, allowance=allowance, amount=amount)

        self.transfer(sender=_owner, to=to, amount=amount)
        self._allowances[_owner, _spender] = allowance - amount
        return True

    def mint(self, to: str, amount: int) -> None:
        _to = address_of(to)
        if _to == ZERO_ADDRESS:
            raise InvalidRecipient(recipient=_to)
        check_non_negative(amount)
        self._ledger.adjust(address=_to, amount=amount)
        self._total_supply += amount

    def burn(self, owner: str, amount: int) -> None:
        check_non_negative(amount)
        self._ledger.adjust(address=owner, amount=-amount)
        self._total_supply -= amount

    def snapshot(self) -> tuple[Any, ...]:
        return (
            self._ledger.snapshot(),
            self._allowances.copy(),
            self._total_supply,
        )

    def restore(self, snapshot: tuple[Any, ...]) -> None:
        balances, allowances, total_supply = snapshot
        self._ledger.restore(balances)
        self._allowances = allowances.copy()
        self._total_supply = total_supply
