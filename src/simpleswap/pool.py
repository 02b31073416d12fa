import contextlib
import dataclasses
import time
from collections.abc import Callable, Generator, Sequence
from threading import Lock
from types import TracebackType
from typing import Any, Self
from weakref import WeakSet

from eth_typing import ChecksumAddress

from simpleswap.claim_token import ClaimToken
from simpleswap.constants import PRICE_SCALE, ZERO_ADDRESS
from simpleswap.exceptions.liquidity_pool import BelowMinimumA, BelowMinimumB
from simpleswap.exceptions.transaction import (
    DeadlineExpired,
    InvalidPath,
    InvalidRecipient,
    Reentrant,
    SlippageExceeded,
    TransferFailed,
    Unauthorized,
)
from simpleswap.functions import address_of, get_checksum_address
from simpleswap.ledger import ReserveLedger
from simpleswap.liquidity import mint_amount
from simpleswap.logging import logger
from simpleswap.pricing import optimal_deposit, price, proportional_withdrawal, quote
from simpleswap.records import DepositRecord, PoolRecord, SwapRecord, WithdrawalRecord
from simpleswap.types.abstract import AbstractAsset, AbstractClaimToken, Snapshottable
from simpleswap.types.concrete import Publisher, PublisherMixin, Subscriber


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class SimpleSwapPoolState:
    address: ChecksumAddress
    reserves: dict[ChecksumAddress, int]
    total_supply: int


class ReentrancyGuard:
    """
    A non-blocking lock held for the duration of one state-mutating call. Entering the guard while
    it is held raises `Reentrant` instead of waiting, whether the second call comes from a callback
    on the same thread or from another thread.
    """

    def __init__(self) -> None:
        self._lock = Lock()

    def __enter__(self) -> Self:
        if not self._lock.acquire(blocking=False):
            raise Reentrant
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self._lock.release()

    @property
    def locked(self) -> bool:
        return self._lock.locked()


def _default_clock() -> int:
    return int(time.time())


class SimpleSwapPool(PublisherMixin):
    """
    A two-asset pool priced by the ratio of its tracked reserves.

    Reserves are tracked per asset address in a `ReserveLedger`. Deposits mint a claim token, and
    withdrawals burn it in exchange for a proportional share of both reserves. Swaps are priced at
    `amount_in * reserve_out / reserve_in`, with no slippage term.
    """

    def __init__(
        self,
        address: ChecksumAddress | str,
        *,
        owner: ChecksumAddress | str,
        claim_token: AbstractClaimToken | None = None,
        clock: Callable[[], int] | None = None,
        silent: bool = False,
    ) -> None:
        """
        Arguments
        ---------
        address:
            The address holding the pool's assets.
        owner:
            The only address permitted to reconcile reserves.
        claim_token:
            The ledger for the liquidity claim token. A `ClaimToken` sharing the pool address is
            created if omitted.
        clock:
            A callable returning the current unix timestamp, used to evaluate deadlines. Defaults
            to the system clock.
        silent:
            Suppress status output.
        """

        self.address = get_checksum_address(address)
        self.owner = get_checksum_address(owner)
        self.claim_token = claim_token if claim_token is not None else ClaimToken(self.address)
        self.clock = clock if clock is not None else _default_clock
        self.silent = silent
        self.name = f"{self.__class__.__name__} @ {self.address}"

        self._reserves = ReserveLedger()
        self._records: list[PoolRecord] = []
        self._reentrancy_guard = ReentrancyGuard()
        self._subscribers: WeakSet[Subscriber] = WeakSet()

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(address={self.address}, owner={self.owner})"

    def _notify_subscribers(self: Publisher, message: PoolRecord) -> None:
        for subscriber in self._subscribers:
            subscriber.notify(publisher=self, message=message)

    @property
    def locked(self) -> bool:
        return self._reentrancy_guard.locked

    @property
    def records(self) -> tuple[PoolRecord, ...]:
        return tuple(self._records)

    @property
    def state(self) -> SimpleSwapPoolState:
        return SimpleSwapPoolState(
            address=self.address,
            reserves=self._reserves.snapshot(),
            total_supply=self.claim_token.total_supply,
        )

    def get_reserve(self, asset: AbstractAsset | str) -> int:
        return self._reserves.get(asset)

    def _check_deadline(self, deadline: int) -> None:
        timestamp = self.clock()
        if timestamp > deadline:
            raise DeadlineExpired(deadline=deadline, timestamp=timestamp)

    @staticmethod
    def _check_pair(asset_a: AbstractAsset, asset_b: AbstractAsset) -> None:
        if address_of(asset_a) == address_of(asset_b):
            raise InvalidPath(message="Identical assets.")

    @staticmethod
    def _check_recipient(recipient: ChecksumAddress | str) -> ChecksumAddress:
        _recipient = get_checksum_address(recipient)
        if _recipient == ZERO_ADDRESS:
            raise InvalidRecipient(recipient=_recipient)
        return _recipient

    @contextlib.contextmanager
    def _transaction(self, *assets: AbstractAsset) -> Generator[None, None, None]:
        """
        Roll back the reserve ledger, the claim token, the record log and any snapshot-capable
        asset if the enclosed block raises. Subscribers are notified after the block exits.
        """

        participants: list[Snapshottable] = [self._reserves]
        participants.extend(
            item for item in (self.claim_token, *assets) if isinstance(item, Snapshottable)
        )
        snapshots: list[tuple[Snapshottable, Any]] = [
            (participant, participant.snapshot()) for participant in participants
        ]
        record_count = len(self._records)

        try:
            yield
        except BaseException:
            for participant, snapshot in snapshots:
                participant.restore(snapshot)
            del self._records[record_count:]
            raise

    def _pull(self, asset: AbstractAsset, sender: ChecksumAddress, amount: int) -> None:
        try:
            success = asset.transfer_from(self.address, sender, self.address, amount)
        except Exception as exc:
            raise TransferFailed(asset=address_of(asset), amount=amount) from exc
        if not success:
            raise TransferFailed(asset=address_of(asset), amount=amount)

    def _push(self, asset: AbstractAsset, recipient: ChecksumAddress, amount: int) -> None:
        try:
            success = asset.transfer(self.address, recipient, amount)
        except Exception as exc:
            raise TransferFailed(asset=address_of(asset), amount=amount) from exc
        if not success:
            raise TransferFailed(asset=address_of(asset), amount=amount)

    def deposit(
        self,
        asset_a: AbstractAsset,
        asset_b: AbstractAsset,
        desired_a: int,
        desired_b: int,
        min_a: int,
        min_b: int,
        recipient: ChecksumAddress | str,
        deadline: int,
        *,
        sender: ChecksumAddress | str,
    ) -> tuple[int, int, int]:
        """
        Deposit a pair of assets at the current reserve ratio and mint claim tokens to the
        recipient.

        Returns the amounts of both assets pulled from `sender` and the claim amount minted.
        """

        with self._reentrancy_guard:
            self._check_deadline(deadline)
            self._check_pair(asset_a, asset_b)
            _recipient = self._check_recipient(recipient)
            _sender = get_checksum_address(sender)

            with self._transaction(asset_a, asset_b):
                reserve_a = self._reserves.get(asset_a)
                reserve_b = self._reserves.get(asset_b)
                amount_a, amount_b = optimal_deposit(
                    desired_a, desired_b, min_a, min_b, reserve_a, reserve_b
                )

                self._pull(asset_a, _sender, amount_a)
                self._pull(asset_b, _sender, amount_b)
                self._reserves.increase(asset_a, amount_a)
                self._reserves.increase(asset_b, amount_b)

                claim_amount = mint_amount(
                    amount_a,
                    amount_b,
                    self.claim_token.total_supply,
                    reserve_a,
                    reserve_b,
                )
                self.claim_token.mint(_recipient, claim_amount)

                record = DepositRecord(
                    provider=_sender,
                    asset_a=address_of(asset_a),
                    asset_b=address_of(asset_b),
                    amount_a=amount_a,
                    amount_b=amount_b,
                    claim_amount=claim_amount,
                )
                self._records.append(record)

            # Subscribers only see records of committed operations
            self._notify_subscribers(message=record)

        if not self.silent:
            logger.info(f"[{self.name}]")
            logger.info(f"• Deposit: {amount_a} {asset_a} + {amount_b} {asset_b}")
            logger.info(f"• Minted: {claim_amount} to {_recipient}")

        return amount_a, amount_b, claim_amount

    def withdraw(
        self,
        asset_a: AbstractAsset,
        asset_b: AbstractAsset,
        claim_amount: int,
        min_a: int,
        min_b: int,
        recipient: ChecksumAddress | str,
        deadline: int,
        *,
        sender: ChecksumAddress | str,
    ) -> tuple[int, int]:
        """
        Burn claim tokens held by `sender` and send the proportional share of both reserves to the
        recipient.
        """

        with self._reentrancy_guard:
            self._check_deadline(deadline)
            self._check_pair(asset_a, asset_b)
            _recipient = self._check_recipient(recipient)
            _sender = get_checksum_address(sender)

            with self._transaction(asset_a, asset_b):
                amount_a, amount_b = proportional_withdrawal(
                    claim_amount,
                    self._reserves.get(asset_a),
                    self._reserves.get(asset_b),
                    self.claim_token.total_supply,
                )
                if amount_a < min_a:
                    raise BelowMinimumA(minimum=min_a, amount=amount_a)
                if amount_b < min_b:
                    raise BelowMinimumB(minimum=min_b, amount=amount_b)

                self._reserves.decrease(asset_a, amount_a)
                self._reserves.decrease(asset_b, amount_b)
                self.claim_token.burn(_sender, claim_amount)
                self._push(asset_a, _recipient, amount_a)
                self._push(asset_b, _recipient, amount_b)

                record = WithdrawalRecord(
                    provider=_sender,
                    asset_a=address_of(asset_a),
                    asset_b=address_of(asset_b),
                    amount_a=amount_a,
                    amount_b=amount_b,
                    claim_amount=claim_amount,
                )
                self._records.append(record)

            self._notify_subscribers(message=record)

        if not self.silent:
            logger.info(f"[{self.name}]")
            logger.info(f"• Withdrawal: {amount_a} {asset_a} + {amount_b} {asset_b}")
            logger.info(f"• Burned: {claim_amount} from {_sender}")

        return amount_a, amount_b

    def swap(
        self,
        amount_in: int,
        min_amount_out: int,
        path: Sequence[AbstractAsset],
        recipient: ChecksumAddress | str,
        deadline: int,
        *,
        sender: ChecksumAddress | str,
    ) -> tuple[int, int]:
        """
        Swap an exact input of `path[0]` for `path[1]` at the current reserve ratio.

        Returns the input and output amounts.
        """

        with self._reentrancy_guard:
            self._check_deadline(deadline)
            if len(path) != 2:
                raise InvalidPath(message=f"Path must hold two assets, got {len(path)}.")
            asset_in, asset_out = path
            self._check_pair(asset_in, asset_out)
            _recipient = self._check_recipient(recipient)
            _sender = get_checksum_address(sender)

            with self._transaction(asset_in, asset_out):
                amount_out = quote(
                    amount_in,
                    self._reserves.get(asset_in),
                    self._reserves.get(asset_out),
                )
                if amount_out < min_amount_out:
                    raise SlippageExceeded(minimum=min_amount_out, received=amount_out)

                self._pull(asset_in, _sender, amount_in)
                self._reserves.increase(asset_in, amount_in)
                self._reserves.decrease(asset_out, amount_out)
                self._push(asset_out, _recipient, amount_out)

                record = SwapRecord(
                    trader=_sender,
                    asset_in=address_of(asset_in),
                    asset_out=address_of(asset_out),
                    amount_in=amount_in,
                    amount_out=amount_out,
                )
                self._records.append(record)

            self._notify_subscribers(message=record)

        if not self.silent:
            logger.info(f"[{self.name}]")
            logger.info(f"• Swap: {amount_in} {asset_in} -> {amount_out} {asset_out}")

        return amount_in, amount_out

    def reconcile_reserve(
        self,
        asset: AbstractAsset,
        *,
        sender: ChecksumAddress | str,
    ) -> int:
        """
        Overwrite the tracked reserve for an asset with the balance the pool actually holds.

        Use this to account for transfers made to the pool outside of `deposit` and `swap`. Only
        the owner may call it.
        """

        with self._reentrancy_guard:
            _sender = get_checksum_address(sender)
            if _sender != self.owner:
                raise Unauthorized(sender=_sender)

            actual = asset.balance_of(self.address)
            previous = self._reserves.reconcile(asset, actual)

        if previous != actual:
            logger.info(f"[{self.name}] Reconciled reserve of {asset}: {previous} -> {actual}")

        return actual

    @staticmethod
    def quote_output(amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """
        Calculate the swap output for an input amount against arbitrary reserves.
        """

        return quote(amount_in, reserve_in, reserve_out)

    def quote_price(self, asset_a: AbstractAsset | str, asset_b: AbstractAsset | str) -> int:
        """
        The price of `asset_a` in units of `asset_b` as a fixed-point integer at `PRICE_SCALE`.
        """

        return price(
            self._reserves.get(asset_a),
            self._reserves.get(asset_b),
            PRICE_SCALE,
        )
