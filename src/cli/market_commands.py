"""Market data commands for the E*TRADE CLI."""

from typing import Optional, Tuple

import click

from src.etrade.constants import (
    OptionCategory,
    OptionChainType,
    OptionExpiryType,
    OptionPriceType,
    QuoteDetailFlag,
)

from .utils import EnumChoice, get_cli_context, handle_errors, write_response


@click.group()
def market() -> None:
    """Market data and quotes."""


@market.command()
@click.argument("symbols", nargs=-1, required=True)
@click.option("--detail", type=EnumChoice(QuoteDetailFlag), help="Quote detail level")
@click.option(
    "--require-earnings-date/--no-require-earnings-date",
    "-r",
    default=True,
    help="Include next earnings date",
)
@click.option(
    "--skip-mini-options-check",
    "-s",
    is_flag=True,
    help="Skip checking whether the symbol has mini options",
)
@click.pass_context
@handle_errors
def quotes(
    ctx: click.Context,
    symbols: Tuple[str, ...],
    detail: Optional[QuoteDetailFlag],
    require_earnings_date: bool,
    skip_mini_options_check: bool,
) -> None:
    """
    Get quotes for up to 50 symbols.

    Example: etrade market quotes AAPL MSFT --detail all
    """
    client = get_cli_context(ctx).get_client()
    body = client.get_quotes(
        list(symbols),
        detail_flag=detail,
        require_earnings_date=require_earnings_date,
        skip_mini_options_check=skip_mini_options_check,
    )
    write_response(ctx, body)


@market.command()
@click.argument("search")
@click.pass_context
@handle_errors
def lookup(ctx: click.Context, search: str) -> None:
    """Look up a product by full or partial name."""
    write_response(ctx, get_cli_context(ctx).get_client().lookup_product(search))


@market.command(name="optionchains")
@click.argument("symbol")
@click.option("--expiry-year", type=int, help="Expiration year")
@click.option("--expiry-month", type=int, help="Expiration month")
@click.option("--expiry-day", type=int, help="Expiration day")
@click.option("--strike-price-near", type=int, help="Center the chain on this strike")
@click.option("--strikes", "no_of_strikes", type=int, help="Number of strikes")
@click.option("--include-weekly", is_flag=True, help="Include weekly options")
@click.option(
    "--skip-adjusted/--no-skip-adjusted", default=True, help="Skip adjusted options"
)
@click.option("--category", type=EnumChoice(OptionCategory), help="Option category")
@click.option("--chain-type", type=EnumChoice(OptionChainType), help="Chain type")
@click.option("--price-type", type=EnumChoice(OptionPriceType), help="Price type")
@click.pass_context
@handle_errors
def option_chains(
    ctx: click.Context,
    symbol: str,
    expiry_year: Optional[int],
    expiry_month: Optional[int],
    expiry_day: Optional[int],
    strike_price_near: Optional[int],
    no_of_strikes: Optional[int],
    include_weekly: bool,
    skip_adjusted: bool,
    category: Optional[OptionCategory],
    chain_type: Optional[OptionChainType],
    price_type: Optional[OptionPriceType],
) -> None:
    """Get the option chain for a symbol."""
    client = get_cli_context(ctx).get_client()
    body = client.get_option_chains(
        symbol,
        expiry_year=expiry_year,
        expiry_month=expiry_month,
        expiry_day=expiry_day,
        strike_price_near=strike_price_near,
        no_of_strikes=no_of_strikes,
        include_weekly=include_weekly,
        skip_adjusted=skip_adjusted,
        option_category=category,
        chain_type=chain_type,
        price_type=price_type,
    )
    write_response(ctx, body)


@market.command(name="optionexpire")
@click.argument("symbol")
@click.option("--expiry-type", "-e", type=EnumChoice(OptionExpiryType), help="Expiry type")
@click.pass_context
@handle_errors
def option_expire(ctx: click.Context, symbol: str, expiry_type: Optional[OptionExpiryType]) -> None:
    """Get option expire dates for an underlying symbol."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.get_option_expire_dates(symbol, expiry_type))
