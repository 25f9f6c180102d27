"""Request parameter validation utilities."""

from collections.abc import Sequence
from typing import Any, Optional

from .exceptions import ETradeValidationError


def require_value(value: Any, name: str) -> None:
    """
    Reject an empty or missing required parameter.

    Args:
        value: Parameter value (None, empty string and empty containers are rejected)
        name: Parameter name for the error message

    Raises:
        ETradeValidationError: If value is missing
    """
    if value is None or (isinstance(value, (str, bytes, Sequence, dict)) and len(value) == 0):
        raise ETradeValidationError(f"{name} is required")


def require_items(values: Optional[Sequence[Any]], name: str, maximum: Optional[int] = None) -> None:
    """
    Validate a required list parameter.

    Args:
        values: List of values; must be non-empty with no empty members
        name: Parameter name for the error message
        maximum: Optional upper bound on the number of values

    Raises:
        ETradeValidationError: If values is a bare string, or the list is empty,
            too long or has empty members
    """
    if isinstance(values, (str, bytes)):
        raise ETradeValidationError(f"{name} must be a list, not a single string")

    if not values:
        raise ETradeValidationError(f"at least one {name} is required")

    if maximum is not None and len(values) > maximum:
        raise ETradeValidationError(
            f"too many {name}: {len(values)} given, maximum is {maximum}"
        )

    for index, value in enumerate(values):
        if value is None or str(value) == "":
            raise ETradeValidationError(f"{name}[{index}] is empty")


def check_max_count(count: Optional[int], maximum: int, name: str = "count") -> None:
    """
    Validate an optional count against an upper bound.

    Args:
        count: Requested count, or None when not supplied
        maximum: Largest accepted count
        name: Parameter name for the error message

    Raises:
        ETradeValidationError: If count is non-positive or above maximum
    """
    if count is None:
        return

    if count < 1:
        raise ETradeValidationError(f"{name} must be positive, got {count}")

    if count > maximum:
        raise ETradeValidationError(f"{name} must be at most {maximum}, got {count}")
