"""
E*TRADE API response parsers.

Functions for decoding raw JSON response bodies into internal data models.
E*TRADE wraps every payload in a named envelope, e.g.::

    {"AccountListResponse": {"Accounts": {"Account": [{...}, ...]}}}
    {"AlertsResponse": {"totalAlerts": 2, "Alert": [{...}, ...]}}

A collection holding a single record may be serialized as an object rather
than a one-element array; both forms are accepted.
"""

import json
import logging
from typing import Any, Dict, List, Union

from .exceptions import ETradeResponseError
from .models import AccountInfo, AlertInfo, PortfolioPosition

logger = logging.getLogger(__name__)


def decode_json(body: Union[bytes, str]) -> Dict[str, Any]:
    """
    Decode a response body into a JSON object.

    Raises:
        ETradeResponseError: If the body is not a JSON object
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ETradeResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ETradeResponseError(f"Expected a JSON object, got {type(data).__name__}")

    return data


def _as_list(value: Any) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if not isinstance(value, list):
        raise ETradeResponseError(f"Expected a list of records, got {type(value).__name__}")

    for record in value:
        if not isinstance(record, dict):
            raise ETradeResponseError(f"Expected a record object, got {type(record).__name__}")
    return value


def _envelope(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    payload = data.get(name)
    if not isinstance(payload, dict):
        raise ETradeResponseError(f"Response is missing the {name} envelope")
    return payload


def parse_account(data: Dict[str, Any]) -> AccountInfo:
    """
    Parse one account record.

    Args:
        data: Raw ``Account`` object

    Returns:
        AccountInfo

    Raises:
        ETradeResponseError: If closedDate is not numeric
    """
    try:
        closed_date = int(data.get("closedDate", 0) or 0)
    except (TypeError, ValueError) as e:
        raise ETradeResponseError(f"Account record has an invalid closedDate: {data!r}") from e

    return AccountInfo(
        account_id=str(data.get("accountId", "")),
        account_id_key=data.get("accountIdKey", ""),
        account_mode=data.get("accountMode", ""),
        account_desc=data.get("accountDesc", ""),
        account_name=data.get("accountName", ""),
        account_type=data.get("accountType", ""),
        institution_type=data.get("institutionType", ""),
        account_status=data.get("accountStatus", ""),
        closed_date=closed_date,
    )


def parse_account_list(body: Union[bytes, str]) -> List[AccountInfo]:
    """
    Parse an ``AccountListResponse`` body.

    Raises:
        ETradeResponseError: If the body does not have the expected shape
    """
    payload = _envelope(decode_json(body), "AccountListResponse")
    accounts = payload.get("Accounts") or {}
    records = _as_list(accounts.get("Account") if isinstance(accounts, dict) else accounts)

    return [parse_account(record) for record in records]


def parse_alert(data: Dict[str, Any]) -> AlertInfo:
    """
    Parse one alert record.

    Raises:
        ETradeResponseError: If the alert id is missing or not numeric
    """
    try:
        alert_id = int(data["id"])
    except (KeyError, TypeError, ValueError) as e:
        raise ETradeResponseError(f"Alert record has no valid id: {data!r}") from e

    try:
        create_time = int(data.get("createTime", 0) or 0)
    except (TypeError, ValueError) as e:
        raise ETradeResponseError(f"Alert {alert_id} has an invalid createTime") from e

    return AlertInfo(
        id=alert_id,
        create_time=create_time,
        subject=data.get("subject", ""),
        status=data.get("status", ""),
    )


def parse_alert_list(body: Union[bytes, str]) -> List[AlertInfo]:
    """
    Parse an ``AlertsResponse`` body.

    Raises:
        ETradeResponseError: If the body does not have the expected shape
    """
    payload = _envelope(decode_json(body), "AlertsResponse")
    return [parse_alert(record) for record in _as_list(payload.get("Alert"))]


def parse_position(data: Dict[str, Any]) -> PortfolioPosition:
    """
    Parse one portfolio position.

    Args:
        data: Raw ``Position`` object

    Returns:
        PortfolioPosition

    Raises:
        ETradeResponseError: If Product is not an object or a numeric field is invalid
    """
    product = data.get("Product") or {}
    if not isinstance(product, dict):
        raise ETradeResponseError(f"Position Product is not an object: {product!r}")

    try:
        return PortfolioPosition(
            position_id=int(data.get("positionId", 0) or 0),
            symbol=product.get("symbol", data.get("symbolDescription", "")),
            symbol_description=data.get("symbolDescription", ""),
            security_type=product.get("securityType", ""),
            position_type=data.get("positionType", ""),
            quantity=float(data.get("quantity", 0.0)),
            price_paid=float(data.get("pricePaid", 0.0)),
            total_cost=float(data.get("totalCost", 0.0)),
            market_value=float(data.get("marketValue", 0.0)),
            days_gain=float(data.get("daysGain", 0.0)),
            total_gain=float(data.get("totalGain", 0.0)),
            date_acquired=data.get("dateAcquired"),
        )
    except (TypeError, ValueError) as e:
        raise ETradeResponseError(f"Position has an invalid numeric field: {e}") from e


def parse_portfolio_positions(body: Union[bytes, str]) -> List[PortfolioPosition]:
    """
    Parse a ``PortfolioResponse`` body into a flat list of positions.

    Raises:
        ETradeResponseError: If the body does not have the expected shape
    """
    payload = _envelope(decode_json(body), "PortfolioResponse")

    positions = []
    for portfolio in _as_list(payload.get("AccountPortfolio")):
        for position_data in _as_list(portfolio.get("Position")):
            positions.append(parse_position(position_data))

    logger.debug(f"Parsed {len(positions)} portfolio position(s)")
    return positions
