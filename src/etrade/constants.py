"""
Enumerations and limits for E*TRADE API request parameters.

Each enum member's value is the literal token the API expects on the wire.
Optional parameters are passed as ``None`` when not supplied; there is no
"nil" member in any of these enums.
"""

from enum import Enum

# Quote requests accept at most 50 symbols; above 25 the API requires
# overrideSymbolCount=true.
QUOTE_MAX_SYMBOLS = 50
QUOTE_OVERRIDE_THRESHOLD = 25

PORTFOLIO_MAX_COUNT = 50
ALERTS_MAX_COUNT = 300


class Environment(Enum):
    """API environment selecting the base host."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


class SortOrder(Enum):
    """Sort direction for list endpoints."""

    ASC = "ASC"
    DESC = "DESC"


class MarketSession(Enum):
    """Market session filter."""

    REGULAR = "REGULAR"
    EXTENDED = "EXTENDED"


class InstitutionType(Enum):
    """Account institution type for balance requests."""

    BROKERAGE = "BROKERAGE"


class PortfolioSortBy(Enum):
    """Portfolio sort field."""

    SYMBOL = "SYMBOL"
    TYPE_NAME = "TYPE_NAME"
    EXCHANGE_NAME = "EXCHANGE_NAME"
    CURRENCY = "CURRENCY"
    QUANTITY = "QUANTITY"
    LONG_OR_SHORT = "LONG_OR_SHORT"
    DATE_ACQUIRED = "DATE_ACQUIRED"
    PRICE_PAID = "PRICEPAID"
    TOTAL_GAIN = "TOTAL_GAIN"
    TOTAL_GAIN_PCT = "TOTAL_GAIN_PCT"
    MARKET_VALUE = "MARKET_VALUE"
    BID = "BID"
    ASK = "ASK"
    PRICE_CHANGE = "PRICE_CHANGE"
    PRICE_CHANGE_PCT = "PRICE_CHANGE_PCT"
    VOLUME = "VOLUME"
    WEEK_52_HIGH = "WEEK_52_HIGH"
    WEEK_52_LOW = "WEEK_52_LOW"
    EPS = "EPS"
    PE_RATIO = "PE_RATIO"
    OPTION_TYPE = "OPTION_TYPE"
    STRIKE_PRICE = "STRIKE_PRICE"
    PREMIUM = "PREMIUM"
    EXPIRATION = "EXPIRATION"
    DAYS_GAIN = "DAYS_GAIN"
    COMMISSION = "COMMISSION"
    MARKET_CAP = "MARKETCAP"
    PREV_CLOSE = "PREV_CLOSE"
    OPEN = "OPEN"
    DAYS_RANGE = "DAYS_RANGE"
    TOTAL_COST = "TOTAL_COST"
    DAYS_GAIN_PCT = "DAYS_GAIN_PCT"
    PCT_OF_PORTFOLIO = "PCT_OF_PORTFOLIO"
    LAST_TRADE_TIME = "LAST_TRADE_TIME"
    BASE_SYMBOL_PRICE = "BASE_SYMBOL_PRICE"
    WEEK_52_RANGE = "WEEK_52_RANGE"
    LAST_TRADE = "LAST_TRADE"
    SYMBOL_DESC = "SYMBOL_DESC"


class PortfolioView(Enum):
    """Portfolio view type."""

    PERFORMANCE = "PERFORMANCE"
    FUNDAMENTAL = "FUNDAMENTAL"
    OPTIONS_WATCH = "OPTIONSWATCH"
    QUICK = "QUICK"
    COMPLETE = "COMPLETE"


class AlertCategory(Enum):
    """Alert category filter."""

    STOCK = "STOCK"
    ACCOUNT = "ACCOUNT"


class AlertStatus(Enum):
    """Alert status filter."""

    READ = "READ"
    UNREAD = "UNREAD"
    DELETED = "DELETED"


class QuoteDetailFlag(Enum):
    """Level of detail returned by the quotes endpoint."""

    ALL = "ALL"
    FUNDAMENTAL = "FUNDAMENTAL"
    INTRADAY = "INTRADAY"
    OPTIONS = "OPTIONS"
    WEEK_52 = "WEEK_52"
    MF_DETAIL = "MF_DETAIL"


class OptionCategory(Enum):
    """Option chain category."""

    STANDARD = "STANDARD"
    ALL = "ALL"
    MINI = "MINI"


class OptionChainType(Enum):
    """Option chain type."""

    CALL = "CALL"
    PUT = "PUT"
    CALL_PUT = "CALLPUT"


class OptionPriceType(Enum):
    """Option chain price type."""

    ATNM = "ATNM"
    ALL = "ALL"


class OptionExpiryType(Enum):
    """Expiry type filter for option expire dates."""

    UNSPECIFIED = "UNSPECIFIED"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    VIX = "VIX"
    ALL = "ALL"
    MONTH_END = "MONTHEND"


class OrderStatus(Enum):
    """Order status filter."""

    OPEN = "OPEN"
    EXECUTED = "EXECUTED"
    CANCELLED = "CANCELLED"
    INDIVIDUAL_FILLS = "INDIVIDUAL_FILLS"
    CANCEL_REQUESTED = "CANCEL_REQUESTED"
    EXPIRED = "EXPIRED"
    REJECTED = "REJECTED"


class OrderSecurityType(Enum):
    """Order security type filter."""

    EQUITY = "EQ"
    OPTION = "OPTN"
    MUTUAL_FUND = "MF"
    MONEY_MARKET_FUND = "MMF"


class OrderTransactionType(Enum):
    """Order transaction type filter."""

    ATNM = "ATNM"
    BUY = "BUY"
    SELL = "SELL"
    SELL_SHORT = "SELL_SHORT"
    BUY_TO_COVER = "BUY_TO_COVER"
    MF_EXCHANGE = "MF_EXCHANGE"
