"""
E*TRADE domain models.

Records decoded from API responses are frozen dataclasses. ``ETradeAccount``
and ``ETradeAlert`` pair one record with the client that fetched it so that
follow-up calls (balances, portfolio, alert details) can be made from the
object itself.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .constants import (
    MarketSession,
    OrderSecurityType,
    OrderStatus,
    OrderTransactionType,
    PortfolioSortBy,
    PortfolioView,
    SortOrder,
)

if TYPE_CHECKING:
    from .client import ETradeClient


@dataclass(frozen=True)
class AccountInfo:
    """
    Account record from the account list.

    Attributes:
        account_id: Account number shown to the user
        account_id_key: Opaque key used in account URLs
        account_mode: CASH, MARGIN, ...
        account_desc: Account description
        account_name: User-defined nickname
        account_type: INDIVIDUAL, IRA, ...
        institution_type: BROKERAGE, ...
        account_status: ACTIVE or CLOSED
        closed_date: Epoch seconds the account was closed (0 when open)
    """

    account_id: str
    account_id_key: str
    account_mode: str = ""
    account_desc: str = ""
    account_name: str = ""
    account_type: str = ""
    institution_type: str = ""
    account_status: str = ""
    closed_date: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AlertInfo:
    """
    Alert record from the alert list.

    Attributes:
        id: Numeric alert id
        create_time: Epoch seconds the alert was created
        subject: Alert subject line
        status: READ, UNREAD or DELETED
    """

    id: int
    create_time: int = 0
    subject: str = ""
    status: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PortfolioPosition:
    """
    Position decoded from a portfolio view.

    Attributes:
        position_id: Numeric position id
        symbol: Security symbol
        symbol_description: Display description (includes strike/expiry for options)
        security_type: EQ, OPTN, MF, ...
        position_type: LONG or SHORT
        quantity: Shares or contracts held
        price_paid: Cost per share
        total_cost: Total cost basis
        market_value: Current market value
        days_gain: Gain for the current day
        total_gain: Unrealized gain
        date_acquired: Epoch milliseconds the position was opened
    """

    position_id: int
    symbol: str
    symbol_description: str = ""
    security_type: str = ""
    position_type: str = ""
    quantity: float = 0.0
    price_paid: float = 0.0
    total_cost: float = 0.0
    market_value: float = 0.0
    days_gain: float = 0.0
    total_gain: float = 0.0
    date_acquired: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ETradeAccount:
    """An account record with a reference to the client that fetched it."""

    __slots__ = ("_client", "_info")

    def __init__(self, client: "ETradeClient", info: AccountInfo):
        self._client = client
        self._info = info

    @property
    def client(self) -> "ETradeClient":
        return self._client

    @property
    def info(self) -> AccountInfo:
        return self._info

    @property
    def account_id(self) -> str:
        return self._info.account_id

    @property
    def account_id_key(self) -> str:
        return self._info.account_id_key

    def get_balances(self, real_time_nav: bool = False) -> bytes:
        """Fetch balances for this account (raw JSON)."""
        return self._client.get_account_balances(self.account_id_key, real_time_nav)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort_order: Optional[SortOrder] = None,
        marker: Optional[str] = None,
        count: Optional[int] = None,
    ) -> bytes:
        """Fetch transactions for this account (raw JSON)."""
        return self._client.list_transactions(
            self.account_id_key, start_date, end_date, sort_order, marker, count
        )

    def view_portfolio(
        self,
        count: Optional[int] = None,
        sort_by: Optional[PortfolioSortBy] = None,
        sort_order: Optional[SortOrder] = None,
        page_number: Optional[str] = None,
        market_session: Optional[MarketSession] = None,
        totals_required: bool = False,
        lots_required: bool = False,
        view: Optional[PortfolioView] = None,
    ) -> bytes:
        """Fetch the portfolio of this account (raw JSON)."""
        return self._client.view_portfolio(
            self.account_id_key,
            count=count,
            sort_by=sort_by,
            sort_order=sort_order,
            page_number=page_number,
            market_session=market_session,
            totals_required=totals_required,
            lots_required=lots_required,
            view=view,
        )

    def get_portfolio_positions(
        self,
        count: Optional[int] = None,
        sort_by: Optional[PortfolioSortBy] = None,
        sort_order: Optional[SortOrder] = None,
        market_session: Optional[MarketSession] = None,
        view: Optional[PortfolioView] = None,
    ) -> List[PortfolioPosition]:
        """
        Fetch and decode the positions held in this account.

        Returns:
            Positions from every account portfolio in the response
        """
        from .parsers import parse_portfolio_positions

        body = self._client.view_portfolio(
            self.account_id_key,
            count=count,
            sort_by=sort_by,
            sort_order=sort_order,
            market_session=market_session,
            view=view,
        )
        return parse_portfolio_positions(body)

    def list_orders(
        self,
        marker: Optional[str] = None,
        count: Optional[int] = None,
        status: Optional[OrderStatus] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        symbols: Optional[List[str]] = None,
        security_type: Optional[OrderSecurityType] = None,
        transaction_type: Optional[OrderTransactionType] = None,
        market_session: Optional[MarketSession] = None,
    ) -> bytes:
        """Fetch orders for this account (raw JSON)."""
        return self._client.list_orders(
            self.account_id_key,
            marker=marker,
            count=count,
            status=status,
            from_date=from_date,
            to_date=to_date,
            symbols=symbols,
            security_type=security_type,
            transaction_type=transaction_type,
            market_session=market_session,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ETradeAccount):
            return NotImplemented
        return self._info == other._info

    def __hash__(self) -> int:
        return hash(self._info)

    def __repr__(self) -> str:
        return f"ETradeAccount({self._info.account_id} {self._info.account_desc!r})"


class ETradeAlert:
    """An alert record with a reference to the client that fetched it."""

    __slots__ = ("_client", "_info")

    def __init__(self, client: "ETradeClient", info: AlertInfo):
        self._client = client
        self._info = info

    @property
    def client(self) -> "ETradeClient":
        return self._client

    @property
    def info(self) -> AlertInfo:
        return self._info

    @property
    def id(self) -> int:
        return self._info.id

    def get_details(self, html_tags: bool = False) -> bytes:
        """Fetch the full alert message (raw JSON)."""
        return self._client.list_alert_details(self.id, html_tags)

    def delete(self) -> bytes:
        """Delete this alert on the server."""
        return self._client.delete_alerts([self.id])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ETradeAlert):
            return NotImplemented
        return self._info == other._info

    def __hash__(self) -> int:
        return hash(self._info)

    def __repr__(self) -> str:
        return f"ETradeAlert({self._info.id}: {self._info.subject!r})"
