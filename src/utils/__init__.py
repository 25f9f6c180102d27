"""Shared utility functions."""

from .date_utils import format_etrade_date, parse_cli_date

__all__ = ["format_etrade_date", "parse_cli_date"]
