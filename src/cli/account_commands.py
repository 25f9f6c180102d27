"""
Account commands for the E*TRADE CLI.

Balances, transactions, portfolio and account lookup.
"""

from typing import Optional

import click

from src.etrade.constants import MarketSession, PortfolioSortBy, PortfolioView, SortOrder

from .utils import (
    EnumChoice,
    date_option,
    get_cli_context,
    handle_errors,
    write_json,
    write_response,
)


@click.group()
def accounts() -> None:
    """Account information."""


@accounts.command(name="list")
@click.pass_context
@handle_errors
def list_accounts(ctx: click.Context) -> None:
    """List accounts."""
    write_response(ctx, get_cli_context(ctx).get_client().list_accounts())


@accounts.command(name="get")
@click.argument("account_id")
@click.pass_context
@handle_errors
def get_account(ctx: click.Context, account_id: str) -> None:
    """
    Show one account by its account id.

    Example: etrade accounts get 84010429
    """
    account = get_cli_context(ctx).get_customer().get_account_by_id(account_id)
    write_json(ctx, account.info.to_dict())


@accounts.command()
@click.argument("account_id_key")
@click.option("--real-time-nav", is_flag=True, help="Request real-time net asset value")
@click.pass_context
@handle_errors
def balances(ctx: click.Context, account_id_key: str, real_time_nav: bool) -> None:
    """Get account balances."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.get_account_balances(account_id_key, real_time_nav))


@accounts.command()
@click.argument("account_id_key")
@click.option("--start-date", help="Earliest date (YYYY-MM-DD)")
@click.option("--end-date", help="Latest date (YYYY-MM-DD)")
@click.option("--sort-order", type=EnumChoice(SortOrder), help="Sort direction")
@click.option("--marker", help="Pagination marker from a previous response")
@click.option("--count", type=int, help="Number of transactions to return")
@click.pass_context
@handle_errors
def transactions(
    ctx: click.Context,
    account_id_key: str,
    start_date: Optional[str],
    end_date: Optional[str],
    sort_order: Optional[SortOrder],
    marker: Optional[str],
    count: Optional[int],
) -> None:
    """List account transactions."""
    client = get_cli_context(ctx).get_client()
    body = client.list_transactions(
        account_id_key,
        start_date=date_option(start_date),
        end_date=date_option(end_date),
        sort_order=sort_order,
        marker=marker,
        count=count,
    )
    write_response(ctx, body)


@accounts.command()
@click.argument("account_id_key")
@click.argument("transaction_id")
@click.pass_context
@handle_errors
def transaction(ctx: click.Context, account_id_key: str, transaction_id: str) -> None:
    """Get details of one transaction."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.list_transaction_details(account_id_key, transaction_id))


@accounts.command()
@click.argument("account_id_key")
@click.option("--count", type=int, help="Number of positions to return")
@click.option("--sort-by", type=EnumChoice(PortfolioSortBy), help="Sort field")
@click.option("--sort-order", type=EnumChoice(SortOrder), help="Sort direction")
@click.option("--page-number", help="Page to return")
@click.option("--market-session", type=EnumChoice(MarketSession), help="Market session")
@click.option("--totals-required", is_flag=True, help="Include portfolio totals")
@click.option("--lots-required", is_flag=True, help="Include position lots")
@click.option("--view", type=EnumChoice(PortfolioView), help="Portfolio view")
@click.pass_context
@handle_errors
def portfolio(
    ctx: click.Context,
    account_id_key: str,
    count: Optional[int],
    sort_by: Optional[PortfolioSortBy],
    sort_order: Optional[SortOrder],
    page_number: Optional[str],
    market_session: Optional[MarketSession],
    totals_required: bool,
    lots_required: bool,
    view: Optional[PortfolioView],
) -> None:
    """View account portfolio."""
    client = get_cli_context(ctx).get_client()
    body = client.view_portfolio(
        account_id_key,
        count=count,
        sort_by=sort_by,
        sort_order=sort_order,
        page_number=page_number,
        market_session=market_session,
        totals_required=totals_required,
        lots_required=lots_required,
        view=view,
    )
    write_response(ctx, body)


@accounts.command()
@click.argument("account_id")
@click.pass_context
@handle_errors
def positions(ctx: click.Context, account_id: str) -> None:
    """
    List decoded portfolio positions of an account, by account id.

    Example: etrade accounts positions 84010429
    """
    account = get_cli_context(ctx).get_customer().get_account_by_id(account_id)
    write_json(ctx, [position.to_dict() for position in account.get_portfolio_positions()])
