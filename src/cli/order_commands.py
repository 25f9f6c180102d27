"""
Order commands for the E*TRADE CLI.

Preview, place and change commands read the order request document from a
JSON file, e.g. ``{"PreviewOrderRequest": {...}}``.
"""

from typing import Optional, Tuple

import click

from src.etrade.constants import (
    MarketSession,
    OrderSecurityType,
    OrderStatus,
    OrderTransactionType,
)

from .utils import (
    EnumChoice,
    date_option,
    get_cli_context,
    handle_errors,
    load_json_file,
    write_response,
)

REQUEST_FILE = click.Path(exists=True, dir_okay=False)


@click.group()
def orders() -> None:
    """Order management."""


@orders.command(name="list")
@click.argument("account_id_key")
@click.option("--marker", help="Pagination marker from a previous response")
@click.option("--count", type=int, help="Number of orders to return")
@click.option("--status", type=EnumChoice(OrderStatus), help="Order status")
@click.option("--from-date", help="Earliest date (YYYY-MM-DD)")
@click.option("--to-date", help="Latest date (YYYY-MM-DD)")
@click.option("--symbol", "symbols", multiple=True, help="Filter by symbol (repeatable)")
@click.option("--security-type", type=EnumChoice(OrderSecurityType), help="Security type")
@click.option(
    "--transaction-type", type=EnumChoice(OrderTransactionType), help="Transaction type"
)
@click.option("--market-session", type=EnumChoice(MarketSession), help="Market session")
@click.pass_context
@handle_errors
def list_orders(
    ctx: click.Context,
    account_id_key: str,
    marker: Optional[str],
    count: Optional[int],
    status: Optional[OrderStatus],
    from_date: Optional[str],
    to_date: Optional[str],
    symbols: Tuple[str, ...],
    security_type: Optional[OrderSecurityType],
    transaction_type: Optional[OrderTransactionType],
    market_session: Optional[MarketSession],
) -> None:
    """List orders for an account."""
    client = get_cli_context(ctx).get_client()
    body = client.list_orders(
        account_id_key,
        marker=marker,
        count=count,
        status=status,
        from_date=date_option(from_date),
        to_date=date_option(to_date),
        symbols=list(symbols),
        security_type=security_type,
        transaction_type=transaction_type,
        market_session=market_session,
    )
    write_response(ctx, body)


@orders.command()
@click.argument("account_id_key")
@click.argument("request_file", type=REQUEST_FILE)
@click.pass_context
@handle_errors
def preview(ctx: click.Context, account_id_key: str, request_file: str) -> None:
    """Preview an order."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.preview_order(account_id_key, load_json_file(request_file)))


@orders.command()
@click.argument("account_id_key")
@click.argument("request_file", type=REQUEST_FILE)
@click.pass_context
@handle_errors
def place(ctx: click.Context, account_id_key: str, request_file: str) -> None:
    """Place a previewed order."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.place_order(account_id_key, load_json_file(request_file)))


@orders.command(name="change-preview")
@click.argument("account_id_key")
@click.argument("order_id")
@click.argument("request_file", type=REQUEST_FILE)
@click.pass_context
@handle_errors
def change_preview(
    ctx: click.Context, account_id_key: str, order_id: str, request_file: str
) -> None:
    """Preview a change to an open order."""
    client = get_cli_context(ctx).get_client()
    body = client.change_previewed_order(account_id_key, order_id, load_json_file(request_file))
    write_response(ctx, body)


@orders.command(name="change-place")
@click.argument("account_id_key")
@click.argument("order_id")
@click.argument("request_file", type=REQUEST_FILE)
@click.pass_context
@handle_errors
def change_place(
    ctx: click.Context, account_id_key: str, order_id: str, request_file: str
) -> None:
    """Place a previewed change to an open order."""
    client = get_cli_context(ctx).get_client()
    body = client.place_changed_order(account_id_key, order_id, load_json_file(request_file))
    write_response(ctx, body)


@orders.command()
@click.argument("account_id_key")
@click.argument("order_id")
@click.pass_context
@handle_errors
def cancel(ctx: click.Context, account_id_key: str, order_id: str) -> None:
    """Cancel an open order."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.cancel_order(account_id_key, order_id))
