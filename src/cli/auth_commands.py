"""
Authorization commands for the E*TRADE CLI.

Runs the out-of-band OAuth flow and manages the stored access token.
"""

import click

from src.oauth.coordinator import OAuthCoordinator

from .utils import get_cli_context, handle_errors, print_success, write_json


@click.group()
def auth() -> None:
    """OAuth authorization."""


@auth.command()
@click.option("--open-browser", is_flag=True, help="Open the authorize page in a browser")
@click.pass_context
@handle_errors
def login(ctx: click.Context, open_browser: bool) -> None:
    """
    Authorize this application with E*TRADE.

    Prints the authorize URL, then prompts for the verifier code shown
    after approving access.
    """
    cli_ctx = get_cli_context(ctx)
    coordinator = OAuthCoordinator(cli_ctx.config)

    def get_verifier(url: str) -> str:
        click.echo("Visit this URL to authorize access:")
        click.echo(url)
        if open_browser:
            click.launch(url)
        return click.prompt("Verifier code")

    token = coordinator.authorize(get_verifier)
    print_success(f"Authorized ({cli_ctx.config.environment_name})")
    click.echo(f"Token expires at {token.expires_at.isoformat()}")


@auth.command()
@click.pass_context
@handle_errors
def renew(ctx: click.Context) -> None:
    """Reactivate an idle access token."""
    OAuthCoordinator(get_cli_context(ctx).config).renew()
    print_success("Access token renewed")


@auth.command()
@click.pass_context
@handle_errors
def revoke(ctx: click.Context) -> None:
    """Revoke the access token and delete it locally."""
    OAuthCoordinator(get_cli_context(ctx).config).revoke()
    print_success("Access token revoked")


@auth.command()
@click.pass_context
@handle_errors
def status(ctx: click.Context) -> None:
    """Show authorization status."""
    write_json(ctx, OAuthCoordinator(get_cli_context(ctx).config).get_status())
