"""
Click CLI implementation for the E*TRADE client.

Each API area is its own command group; responses are written as the raw
JSON returned by E*TRADE.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from src.config import ConfigurationError, ETradeConfig

from .account_commands import accounts
from .alert_commands import alerts
from .auth_commands import auth
from .context import CLIContext
from .market_commands import market
from .order_commands import orders
from .utils import print_error

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file",
)
@click.option(
    "--production/--sandbox",
    default=None,
    help="Use the production or sandbox environment (overrides config)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--pretty", is_flag=True, help="Indent JSON output")
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the response to a file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Optional[str],
    production: Optional[bool],
    verbose: bool,
    pretty: bool,
    output_file: Optional[str],
) -> None:
    """
    E*TRADE API client.

    Authorize once with 'etrade auth login', then query accounts, alerts,
    market data and orders.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ETradeConfig.load_from_file(Path(config_file) if config_file else None)
    except ConfigurationError as e:
        print_error(str(e))
        ctx.exit(1)

    if production is not None:
        config.production = production

    logger.debug(f"Using {config!r}")

    ctx.obj = CLIContext(
        config=config,
        verbose=verbose,
        pretty=pretty,
        output_file=output_file,
    )


cli.add_command(auth)
cli.add_command(accounts)
cli.add_command(alerts)
cli.add_command(market)
cli.add_command(orders)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


__all__ = ["cli", "main"]
