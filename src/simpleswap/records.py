import dataclasses

from eth_typing import ChecksumAddress

from simpleswap.types.concrete import AbstractPublisherMessage


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class DepositRecord(AbstractPublisherMessage):
    provider: ChecksumAddress
    asset_a: ChecksumAddress
    asset_b: ChecksumAddress
    amount_a: int
    amount_b: int
    claim_amount: int


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class WithdrawalRecord(AbstractPublisherMessage):
    provider: ChecksumAddress
    asset_a: ChecksumAddress
    asset_b: ChecksumAddress
    amount_a: int
    amount_b: int
    claim_amount: int


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class SwapRecord(AbstractPublisherMessage):
    trader: ChecksumAddress
    asset_in: ChecksumAddress
    asset_out: ChecksumAddress
    amount_in: int
    amount_out: int


type PoolRecord = DepositRecord | WithdrawalRecord | SwapRecord
