from simpleswap.config import settings
from simpleswap.erc20 import Erc20Token
from simpleswap.logging import logger


class ClaimToken(Erc20Token):
    """
    The liquidity claim token issued by a pool. Each unit is a proportional share of the pool's
    tracked reserves.

    The token shares its address with the pool that issues it. Name, symbol and decimals default to
    the configured values.
    """

    def __init__(
        self,
        address: str,
        *,
        name: str | None = None,
        symbol: str | None = None,
        decimals: int | None = None,
    ) -> None:
        super().__init__(
            address=address,
            name=name if name is not None else settings.pool.claim_token_name,
            symbol=symbol if symbol is not None else settings.pool.claim_token_symbol,
            decimals=decimals if decimals is not None else settings.pool.claim_token_decimals,
        )

    def mint(self, to: str, amount: int) -> None:
        super().mint(to=to, amount=amount)
        logger.debug(f"{self.symbol}: minted {amount} to {to}, supply {self.total_supply}")

    def burn(self, owner: str, amount: int) -> None:
        super().burn(owner=owner, amount=amount)
        logger.debug(f"{self.symbol}: burned {amount} from {owner}, supply {self.total_supply}")
