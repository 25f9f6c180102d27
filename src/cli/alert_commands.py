"""Alert commands for the E*TRADE CLI."""

from typing import Optional, Tuple

import click

from src.etrade.constants import AlertCategory, AlertStatus, SortOrder

from .utils import EnumChoice, get_cli_context, handle_errors, write_json, write_response


@click.group()
def alerts() -> None:
    """Alert management."""


@alerts.command(name="list")
@click.option("--count", type=int, help="Number of alerts to return (max 300)")
@click.option("--category", type=EnumChoice(AlertCategory), help="Alert category")
@click.option("--status", type=EnumChoice(AlertStatus), help="Alert status")
@click.option("--direction", type=EnumChoice(SortOrder), help="Sort direction")
@click.option("--search", help="Search alert subjects")
@click.pass_context
@handle_errors
def list_alerts(
    ctx: click.Context,
    count: Optional[int],
    category: Optional[AlertCategory],
    status: Optional[AlertStatus],
    direction: Optional[SortOrder],
    search: Optional[str],
) -> None:
    """List alerts."""
    client = get_cli_context(ctx).get_client()
    body = client.list_alerts(
        count=count, category=category, status=status, direction=direction, search=search
    )
    write_response(ctx, body)


@alerts.command(name="get")
@click.argument("alert_id", type=int)
@click.pass_context
@handle_errors
def get_alert(ctx: click.Context, alert_id: int) -> None:
    """Show one alert from the alert list."""
    alert = get_cli_context(ctx).get_customer().get_alert_by_id(alert_id)
    write_json(ctx, alert.info.to_dict())


@alerts.command()
@click.argument("alert_id")
@click.option("--html-tags", is_flag=True, help="Keep HTML tags in the message")
@click.pass_context
@handle_errors
def details(ctx: click.Context, alert_id: str, html_tags: bool) -> None:
    """Get alert details."""
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.list_alert_details(alert_id, html_tags))


@alerts.command()
@click.argument("alert_ids", nargs=-1, required=True)
@click.pass_context
@handle_errors
def delete(ctx: click.Context, alert_ids: Tuple[str, ...]) -> None:
    """
    Delete one or more alerts.

    Example: etrade alerts delete 1234 5678
    """
    client = get_cli_context(ctx).get_client()
    write_response(ctx, client.delete_alerts(list(alert_ids)))
