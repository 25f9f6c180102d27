"""
CLI utility functions for the E*TRADE tool.

Output helpers, error handling, and the enum option type used by all
command groups.
"""

import functools
import json
import sys
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

import click

from src.config import ConfigurationError
from src.etrade.exceptions import ETradeError
from src.oauth.exceptions import ETradeOAuthError
from src.utils.date_utils import parse_cli_date

from .context import CLIContext


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Get the CLIContext from the click context."""
    return ctx.find_root().obj


def print_error(message: str) -> None:
    """Print error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def print_success(message: str) -> None:
    """Print success message."""
    click.secho(message, fg="green")


def camel_case(name: str) -> str:
    """Convert an enum member name to a CLI token (WEEK_52_HIGH -> week52High)."""
    first, *rest = name.lower().split("_")
    return first + "".join(part.capitalize() for part in rest)


def enum_choices(enum_cls: Type[Enum]) -> Dict[str, Enum]:
    """Map CLI tokens to enum members."""
    return {camel_case(member.name): member for member in enum_cls}


class EnumChoice(click.Choice):
    """Choice parameter that converts the selected token to an enum member."""

    def __init__(self, enum_cls: Type[Enum]):
        self.mapping = enum_choices(enum_cls)
        super().__init__(list(self.mapping))

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Any:
        if isinstance(value, Enum):
            return value
        token = super().convert(value, param, ctx)
        return self.mapping[token]


def date_option(value: Optional[str]) -> Optional[date]:
    """Parse a --*-date option value."""
    try:
        return parse_cli_date(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def write_output(ctx: click.Context, text: str) -> None:
    """Write text to the configured output file or stdout."""
    cli_ctx = get_cli_context(ctx)
    if cli_ctx.output_file:
        with open(cli_ctx.output_file, "w") as f:
            f.write(text)
            f.write("\n")
    else:
        click.echo(text)


def write_response(ctx: click.Context, body: bytes) -> None:
    """Write a raw API response, indented when --pretty is set."""
    text = body.decode("utf-8", errors="replace")
    if get_cli_context(ctx).pretty and text:
        try:
            text = json.dumps(json.loads(text), indent=2)
        except json.JSONDecodeError:
            pass
    write_output(ctx, text)


def write_json(ctx: click.Context, data: Any) -> None:
    """Write a Python object as JSON."""
    indent = 2 if get_cli_context(ctx).pretty else None
    write_output(ctx, json.dumps(data, indent=indent))


def load_json_file(path: str) -> Dict[str, Any]:
    """
    Load an order request document.

    Raises:
        click.BadParameter: If the file is not a JSON object
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise click.BadParameter(f"cannot read JSON from {path}: {e}") from e

    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a JSON object")
    return data


def handle_errors(func: Callable) -> Callable:
    """Report client, OAuth and configuration errors and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ETradeError, ETradeOAuthError, ConfigurationError) as e:
            print_error(str(e))
            sys.exit(1)

    return wrapper
