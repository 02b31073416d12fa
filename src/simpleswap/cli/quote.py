import click
from pydantic import ValidationError

from simpleswap.cli import cli
from simpleswap.config import settings
from simpleswap.constants import MAX_UINT256
from simpleswap.exceptions import SimpleSwapError
from simpleswap.liquidity import mint_amount
from simpleswap.pricing import optimal_deposit, price, proportional_withdrawal
from simpleswap.pricing import quote as quote_output

AMOUNT = click.IntRange(min=0, max=MAX_UINT256)
OUT_OF_RANGE = "An intermediate or result value exceeds the uint256 range."


@cli.group()
def quote() -> None:
    """
    Quote swaps, prices and liquidity amounts against a set of reserves
    """


@quote.command("output")
@click.argument("amount_in", type=AMOUNT)
@click.argument("reserve_in", type=AMOUNT)
@click.argument("reserve_out", type=AMOUNT)
def quote_output_command(amount_in: int, reserve_in: int, reserve_out: int) -> None:
    """
    Show the swap output for AMOUNT_IN against RESERVE_IN and RESERVE_OUT.
    """

    try:
        click.echo(quote_output(amount_in, reserve_in, reserve_out))
    except SimpleSwapError as exc:
        raise click.ClickException(str(exc.message)) from exc
    except ValidationError as exc:
        raise click.ClickException(OUT_OF_RANGE) from exc


@quote.command("price")
@click.argument("reserve_a", type=AMOUNT)
@click.argument("reserve_b", type=AMOUNT)
@click.option(
    "--scale",
    type=click.IntRange(min=1, max=MAX_UINT256),
    default=None,
    help="Fixed-point scale, defaults to the configured price scale",
)
def quote_price_command(reserve_a: int, reserve_b: int, scale: int | None) -> None:
    """
    Show the price of asset A in units of asset B.
    """

    try:
        click.echo(
            price(
                reserve_a,
                reserve_b,
                scale if scale is not None else settings.pool.price_scale,
            )
        )
    except SimpleSwapError as exc:
        raise click.ClickException(str(exc.message)) from exc
    except ValidationError as exc:
        raise click.ClickException(OUT_OF_RANGE) from exc


@quote.command("deposit")
@click.argument("desired_a", type=AMOUNT)
@click.argument("desired_b", type=AMOUNT)
@click.argument("reserve_a", type=AMOUNT)
@click.argument("reserve_b", type=AMOUNT)
@click.option("--min-a", type=AMOUNT, default=0, show_default=True)
@click.option("--min-b", type=AMOUNT, default=0, show_default=True)
@click.option("--total-supply", type=AMOUNT, default=0, show_default=True)
def quote_deposit_command(
    desired_a: int,
    desired_b: int,
    reserve_a: int,
    reserve_b: int,
    min_a: int,
    min_b: int,
    total_supply: int,
) -> None:
    """
    Show the deposit amounts and claim amount minted for a deposit of DESIRED_A and DESIRED_B.
    """

    try:
        amount_a, amount_b = optimal_deposit(
            desired_a, desired_b, min_a, min_b, reserve_a, reserve_b
        )
        claim_amount = mint_amount(amount_a, amount_b, total_supply, reserve_a, reserve_b)
    except SimpleSwapError as exc:
        raise click.ClickException(str(exc.message)) from exc
    except ValidationError as exc:
        raise click.ClickException(OUT_OF_RANGE) from exc

    click.echo(f"amount_a: {amount_a}")
    click.echo(f"amount_b: {amount_b}")
    click.echo(f"claim_amount: {claim_amount}")


@quote.command("withdrawal")
@click.argument("claim_amount", type=AMOUNT)
@click.argument("reserve_a", type=AMOUNT)
@click.argument("reserve_b", type=AMOUNT)
@click.argument("total_supply", type=AMOUNT)
def quote_withdrawal_command(
    claim_amount: int,
    reserve_a: int,
    reserve_b: int,
    total_supply: int,
) -> None:
    """
    Show the assets redeemed by burning CLAIM_AMOUNT.
    """

    try:
        amount_a, amount_b = proportional_withdrawal(
            claim_amount, reserve_a, reserve_b, total_supply
        )
    except SimpleSwapError as exc:
        raise click.ClickException(str(exc.message)) from exc
    except ValidationError as exc:
        raise click.ClickException(OUT_OF_RANGE) from exc

    click.echo(f"amount_a: {amount_a}")
    click.echo(f"amount_b: {amount_b}")
