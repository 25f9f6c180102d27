"""
E*TRADE API client.

One method per API operation. Each method validates its required
parameters, builds the endpoint URL, encodes the optional parameters that
were supplied, and dispatches the request through ``HttpClient``. Responses
are returned as raw JSON bytes; decoding into domain objects happens in
``src.etrade.customer``.

Validation always happens before the request is sent: a missing account id
key or symbol raises ``ETradeValidationError`` and no HTTP call is made.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from . import constants
from .constants import (
    AlertCategory,
    AlertStatus,
    InstitutionType,
    MarketSession,
    OptionCategory,
    OptionChainType,
    OptionExpiryType,
    OptionPriceType,
    OrderSecurityType,
    OrderStatus,
    OrderTransactionType,
    PortfolioSortBy,
    PortfolioView,
    QuoteDetailFlag,
    SortOrder,
)
from .endpoints import EndpointUrls
from .http_client import HttpClient
from .query import QueryParams, build_url
from .validation import check_max_count, require_items, require_value

logger = logging.getLogger(__name__)


class ETradeClient:
    """
    Request-construction layer for the E*TRADE REST API.

    Example:
        from src.etrade.endpoints import get_endpoint_urls
        from src.etrade.http_client import HttpClient

        client = ETradeClient(get_endpoint_urls(production=False), HttpClient(session))

        # Get quotes
        body = client.get_quotes(["AAPL", "MSFT"], detail_flag=QuoteDetailFlag.ALL)

        # List open orders
        body = client.list_orders(account_id_key, status=OrderStatus.OPEN)
    """

    def __init__(self, urls: EndpointUrls, http: HttpClient):
        """
        Initialize E*TRADE client.

        Args:
            urls: URL builder for the sandbox or production environment
            http: HTTP client wrapping the signed transport
        """
        self.urls = urls
        self.http = http

        logger.debug(f"ETradeClient initialized ({urls.environment.value})")

    def _get(self, url: str, params: Optional[QueryParams] = None) -> bytes:
        return self.http.do("GET", build_url(url, params or QueryParams()))

    # Accounts

    def list_accounts(self) -> bytes:
        """
        List the accounts of the authenticated user.

        Returns:
            Raw JSON ``AccountListResponse``
        """
        return self._get(self.urls.list_accounts_url())

    def get_account_balances(self, account_id_key: str, real_time_nav: bool = False) -> bytes:
        """
        Get balances for an account.

        Args:
            account_id_key: Account id key from list_accounts
            real_time_nav: Whether to request real-time net asset value

        Returns:
            Raw JSON ``BalanceResponse``

        Raises:
            ETradeValidationError: If account_id_key is empty
        """
        require_value(account_id_key, "account_id_key")

        params = QueryParams()
        params.add("instType", InstitutionType.BROKERAGE)
        params.add("realTimeNAV", real_time_nav)

        return self._get(self.urls.get_account_balances_url(account_id_key), params)

    def list_transactions(
        self,
        account_id_key: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort_order: Optional[SortOrder] = None,
        marker: Optional[str] = None,
        count: Optional[int] = None,
    ) -> bytes:
        """
        List transactions for an account.

        Args:
            account_id_key: Account id key from list_accounts
            start_date: Earliest transaction date
            end_date: Latest transaction date
            sort_order: Sort direction
            marker: Pagination marker from a previous response
            count: Number of transactions to return

        Returns:
            Raw JSON ``TransactionListResponse``

        Raises:
            ETradeValidationError: If account_id_key is empty
        """
        require_value(account_id_key, "account_id_key")

        params = QueryParams()
        params.add("startDate", start_date)
        params.add("endDate", end_date)
        params.add("sortOrder", sort_order)
        params.add("marker", marker)
        params.add("count", count)

        return self._get(self.urls.list_transactions_url(account_id_key), params)

    def list_transaction_details(self, account_id_key: str, transaction_id: str) -> bytes:
        """
        Get details of one transaction.

        Raises:
            ETradeValidationError: If account_id_key or transaction_id is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(transaction_id, "transaction_id")

        return self._get(self.urls.list_transaction_details_url(account_id_key, transaction_id))

    def view_portfolio(
        self,
        account_id_key: str,
        count: Optional[int] = None,
        sort_by: Optional[PortfolioSortBy] = None,
        sort_order: Optional[SortOrder] = None,
        page_number: Optional[str] = None,
        market_session: Optional[MarketSession] = None,
        totals_required: bool = False,
        lots_required: bool = False,
        view: Optional[PortfolioView] = None,
    ) -> bytes:
        """
        View the portfolio of an account.

        Args:
            account_id_key: Account id key from list_accounts
            count: Number of positions to return (at most PORTFOLIO_MAX_COUNT)
            sort_by: Sort field
            sort_order: Sort direction
            page_number: Page to return
            market_session: Market session for prices
            totals_required: Include portfolio totals
            lots_required: Include position lots
            view: Portfolio view type

        Returns:
            Raw JSON ``PortfolioResponse``

        Raises:
            ETradeValidationError: If account_id_key is empty or count is too large
        """
        require_value(account_id_key, "account_id_key")
        check_max_count(count, constants.PORTFOLIO_MAX_COUNT)

        params = QueryParams()
        params.add("count", count)
        params.add("sortBy", sort_by)
        params.add("sortOrder", sort_order)
        params.add("pageNumber", page_number)
        params.add("marketSession", market_session)
        params.add("totalsRequired", totals_required)
        params.add("lotsRequired", lots_required)
        params.add("view", view)

        return self._get(self.urls.view_portfolio_url(account_id_key), params)

    # Alerts

    def list_alerts(
        self,
        count: Optional[int] = None,
        category: Optional[AlertCategory] = None,
        status: Optional[AlertStatus] = None,
        direction: Optional[SortOrder] = None,
        search: Optional[str] = None,
    ) -> bytes:
        """
        List alerts for the authenticated user.

        Args:
            count: Number of alerts to return (at most ALERTS_MAX_COUNT)
            category: Alert category filter
            status: Alert status filter
            direction: Sort direction
            search: Subject search string

        Returns:
            Raw JSON ``AlertsResponse``

        Raises:
            ETradeValidationError: If count is too large
        """
        check_max_count(count, constants.ALERTS_MAX_COUNT)

        params = QueryParams()
        params.add("count", count)
        params.add("category", category)
        params.add("status", status)
        params.add("direction", direction)
        params.add("search", search)

        return self._get(self.urls.list_alerts_url(), params)

    def list_alert_details(self, alert_id: Union[str, int], html_tags: bool = False) -> bytes:
        """
        Get details of one alert.

        Args:
            alert_id: Alert id
            html_tags: Whether to keep HTML tags in the alert message

        Raises:
            ETradeValidationError: If alert_id is empty
        """
        require_value(alert_id, "alert_id")

        params = QueryParams()
        params.add("htmlTags", html_tags)

        return self._get(self.urls.list_alert_details_url(alert_id), params)

    def delete_alerts(self, alert_ids: Sequence[Union[str, int]]) -> bytes:
        """
        Delete one or more alerts.

        Raises:
            ETradeValidationError: If no alert ids are given
        """
        require_items(alert_ids, "alert_ids")

        ids = ",".join(str(alert_id) for alert_id in alert_ids)
        return self.http.do("DELETE", self.urls.delete_alerts_url(ids))

    # Market

    def get_quotes(
        self,
        symbols: Sequence[str],
        detail_flag: Optional[QuoteDetailFlag] = None,
        require_earnings_date: bool = False,
        skip_mini_options_check: bool = False,
    ) -> bytes:
        """
        Get quotes for up to 50 symbols.

        More than 25 symbols automatically sets ``overrideSymbolCount``.

        Args:
            symbols: Symbols to quote
            detail_flag: Level of quote detail
            require_earnings_date: Include the next earnings date
            skip_mini_options_check: Skip checking for mini options

        Returns:
            Raw JSON ``QuoteResponse``

        Raises:
            ETradeValidationError: If no symbols or more than 50 symbols are given
        """
        require_items(symbols, "symbols", maximum=constants.QUOTE_MAX_SYMBOLS)

        params = QueryParams()
        params.add("detailFlag", detail_flag)
        params.add("requireEarningsDate", require_earnings_date)
        params.add("skipMiniOptionsCheck", skip_mini_options_check)
        if len(symbols) > constants.QUOTE_OVERRIDE_THRESHOLD:
            params.add("overrideSymbolCount", True)

        return self._get(self.urls.get_quotes_url(",".join(symbols)), params)

    def lookup_product(self, search: str) -> bytes:
        """
        Look up securities by full or partial name.

        Raises:
            ETradeValidationError: If search is empty
        """
        require_value(search, "search")

        return self._get(self.urls.lookup_product_url(search))

    def get_option_chains(
        self,
        symbol: str,
        expiry_year: Optional[int] = None,
        expiry_month: Optional[int] = None,
        expiry_day: Optional[int] = None,
        strike_price_near: Optional[int] = None,
        no_of_strikes: Optional[int] = None,
        include_weekly: bool = False,
        skip_adjusted: bool = True,
        option_category: Optional[OptionCategory] = None,
        chain_type: Optional[OptionChainType] = None,
        price_type: Optional[OptionPriceType] = None,
    ) -> bytes:
        """
        Get the option chain for an underlying symbol.

        Args:
            symbol: Underlying symbol
            expiry_year: Expiration year
            expiry_month: Expiration month
            expiry_day: Expiration day
            strike_price_near: Center the chain on this strike
            no_of_strikes: Number of strikes to return
            include_weekly: Include weekly options
            skip_adjusted: Skip adjusted options
            option_category: Option category
            chain_type: Calls, puts or both
            price_type: Price type

        Returns:
            Raw JSON ``OptionChainResponse``

        Raises:
            ETradeValidationError: If symbol is empty
        """
        require_value(symbol, "symbol")

        params = QueryParams()
        params.add("symbol", symbol)
        params.add("expiryYear", expiry_year)
        params.add("expiryMonth", expiry_month)
        params.add("expiryDay", expiry_day)
        params.add("strikePriceNear", strike_price_near)
        params.add("noOfStrikes", no_of_strikes)
        params.add("includeWeekly", include_weekly)
        params.add("skipAdjusted", skip_adjusted)
        params.add("optionCategory", option_category)
        params.add("chainType", chain_type)
        params.add("priceType", price_type)

        return self._get(self.urls.get_option_chains_url(), params)

    def get_option_expire_dates(
        self, symbol: str, expiry_type: Optional[OptionExpiryType] = None
    ) -> bytes:
        """
        Get option expiration dates for an underlying symbol.

        Raises:
            ETradeValidationError: If symbol is empty
        """
        require_value(symbol, "symbol")

        params = QueryParams()
        params.add("symbol", symbol)
        params.add("expiryType", expiry_type)

        return self._get(self.urls.get_option_expire_dates_url(), params)

    # Orders

    def list_orders(
        self,
        account_id_key: str,
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
        """
        List orders for an account.

        Args:
            account_id_key: Account id key from list_accounts
            marker: Pagination marker from a previous response
            count: Number of orders to return
            status: Order status filter
            from_date: Earliest order date
            to_date: Latest order date
            symbols: Symbol filter (sent comma-joined)
            security_type: Security type filter
            transaction_type: Transaction type filter
            market_session: Market session filter

        Returns:
            Raw JSON ``OrdersResponse``

        Raises:
            ETradeValidationError: If account_id_key is empty
        """
        require_value(account_id_key, "account_id_key")

        params = QueryParams()
        params.add("marker", marker)
        params.add("count", count)
        params.add("status", status)
        params.add("fromDate", from_date)
        params.add("toDate", to_date)
        params.add_list("symbol", symbols)
        params.add("securityType", security_type)
        params.add("transactionType", transaction_type)
        params.add("marketSession", market_session)

        return self._get(self.urls.list_orders_url(account_id_key), params)

    def preview_order(self, account_id_key: str, order_request: Dict[str, Any]) -> bytes:
        """
        Preview an order before placing it.

        Args:
            account_id_key: Account id key from list_accounts
            order_request: ``PreviewOrderRequest`` JSON document

        Raises:
            ETradeValidationError: If account_id_key or order_request is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(order_request, "order_request")

        return self.http.do("POST", self.urls.preview_order_url(account_id_key), order_request)

    def place_order(self, account_id_key: str, order_request: Dict[str, Any]) -> bytes:
        """
        Place a previously previewed order.

        Args:
            account_id_key: Account id key from list_accounts
            order_request: ``PlaceOrderRequest`` JSON document including the preview ids

        Raises:
            ETradeValidationError: If account_id_key or order_request is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(order_request, "order_request")

        return self.http.do("POST", self.urls.place_order_url(account_id_key), order_request)

    def change_previewed_order(
        self, account_id_key: str, order_id: Union[str, int], order_request: Dict[str, Any]
    ) -> bytes:
        """
        Preview a change to an open order.

        Raises:
            ETradeValidationError: If any argument is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(order_id, "order_id")
        require_value(order_request, "order_request")

        url = self.urls.change_previewed_order_url(account_id_key, order_id)
        return self.http.do("POST", url, order_request)

    def place_changed_order(
        self, account_id_key: str, order_id: Union[str, int], order_request: Dict[str, Any]
    ) -> bytes:
        """
        Place a previewed change to an open order.

        Raises:
            ETradeValidationError: If any argument is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(order_id, "order_id")
        require_value(order_request, "order_request")

        url = self.urls.place_changed_order_url(account_id_key, order_id)
        return self.http.do("POST", url, order_request)

    def cancel_order(self, account_id_key: str, order_id: Union[str, int]) -> bytes:
        """
        Cancel an open order.

        Raises:
            ETradeValidationError: If account_id_key or order_id is empty
        """
        require_value(account_id_key, "account_id_key")
        require_value(order_id, "order_id")

        body = {"CancelOrderRequest": {"orderId": order_id}}
        return self.http.do("PUT", self.urls.cancel_order_url(account_id_key), body)
