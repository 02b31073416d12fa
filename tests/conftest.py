import logging

import pytest

from simpleswap.erc20 import Erc20Token
from simpleswap.logging import logger
from simpleswap.pool import SimpleSwapPool

NOW = 1_700_000_000
DEADLINE = NOW + 600

OWNER = "0x1000000000000000000000000000000000000001"
ALICE = "0x2000000000000000000000000000000000000002"
BOB = "0x3000000000000000000000000000000000000003"
POOL_ADDRESS = "0x5000000000000000000000000000000000000005"
TOKEN_A_ADDRESS = "0x7000000000000000000000000000000000000007"
TOKEN_B_ADDRESS = "0x8000000000000000000000000000000000000008"

ONE = 10**18


def fund(token: Erc20Token, holder: str, amount: int, spender: str = POOL_ADDRESS) -> None:
    """
    Mint `amount` to `holder` and approve `spender` to pull all of it.
    """

    token.mint(holder, amount)
    token.approve(holder, spender, token.allowance(holder, spender) + amount)


def build_pool(**kwargs) -> SimpleSwapPool:
    kwargs.setdefault("owner", OWNER)
    kwargs.setdefault("clock", lambda: NOW)
    kwargs.setdefault("silent", True)
    return SimpleSwapPool(POOL_ADDRESS, **kwargs)


@pytest.fixture(scope="session", autouse=True)
def _set_simpleswap_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def token_a() -> Erc20Token:
    token = Erc20Token(TOKEN_A_ADDRESS, name="Token A", symbol="TKA")
    fund(token, ALICE, 100 * ONE)
    fund(token, BOB, 100 * ONE)
    return token


@pytest.fixture
def token_b() -> Erc20Token:
    token = Erc20Token(TOKEN_B_ADDRESS, name="Token B", symbol="TKB")
    fund(token, ALICE, 100 * ONE)
    fund(token, BOB, 100 * ONE)
    return token


@pytest.fixture
def pool() -> SimpleSwapPool:
    return build_pool()


@pytest.fixture
def seeded_pool(pool: SimpleSwapPool, token_a: Erc20Token, token_b: Erc20Token) -> SimpleSwapPool:
    """
    A pool holding 10 TKA and 10 TKB deposited by Alice.
    """

    pool.deposit(token_a, token_b, 10 * ONE, 10 * ONE, 0, 0, ALICE, DEADLINE, sender=ALICE)
    return pool
