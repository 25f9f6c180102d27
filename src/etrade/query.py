"""
Query-string encoding for E*TRADE requests.

Optional parameters are skipped when unset (``None`` or an empty string).
Keys are serialized in alphabetical order so that one logical request always
produces the same URL.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Iterator, Tuple
from urllib.parse import urlencode

from src.utils.date_utils import format_etrade_date


def encode_value(value: Any) -> str:
    """
    Convert a parameter value to its wire string.

    Args:
        value: Enum member, bool, date/datetime, int or str

    Returns:
        Canonical string sent to the API
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return format_etrade_date(value)
    return str(value)


def is_unset(value: Any) -> bool:
    """Whether a parameter value means "not supplied"."""
    return value is None or (isinstance(value, str) and value == "")


class QueryParams:
    """
    Ordered-on-output collection of query parameters.

    Example:
        params = QueryParams()
        params.add("sortOrder", SortOrder.ASC).add("marker", None)
        params.encode()  # "sortOrder=ASC"
    """

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def add(self, key: str, value: Any) -> "QueryParams":
        """
        Add a parameter unless its value is unset.

        Args:
            key: Query key as named by the API
            value: Parameter value (see encode_value)

        Returns:
            self, for chaining
        """
        if not is_unset(value):
            self._params[key] = encode_value(value)
        return self

    def add_list(self, key: str, values: Any) -> "QueryParams":
        """Add a comma-joined list parameter unless the list is empty or None."""
        if values:
            self._params[key] = ",".join(encode_value(v) for v in values)
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(sorted(self._params.items()))

    def get(self, key: str) -> Any:
        return self._params.get(key)

    def encode(self) -> str:
        """Serialize as application/x-www-form-urlencoded with sorted keys."""
        return urlencode(list(self))


def build_url(base_url: str, params: QueryParams) -> str:
    """
    Append encoded query parameters to a URL.

    Args:
        base_url: Endpoint URL without a query string
        params: Parameters to append

    Returns:
        base_url unchanged when there are no parameters, else base_url?query
    """
    query = params.encode()
    if not query:
        return base_url
    return f"{base_url}?{query}"
