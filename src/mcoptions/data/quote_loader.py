# src/mcoptions/data/quote_loader.py
"""
Option quote ingestion for batch MC-vs-BS comparisons.

Record format, one per line (no header):

    ticker,S0,K,r,sigma,days_to_expiry[,market_price]

Lines starting with '#' and blank lines are ignored. A malformed record is
logged and skipped; it never aborts the batch.

Usage:
    >>> from mcoptions.data.quote_loader import load_quotes, iter_quotes
    >>> df = load_quotes("real_stocks.csv")
    >>> for quote in iter_quotes(df):
    ...     params = quote.to_params()
"""

import logging
import math
import warnings
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

import pandas as pd

from mcoptions.common.validation import check_required_columns
from mcoptions.exceptions.data_exceptions import InvalidDataFormatError, MissingDataError
from mcoptions.exceptions.pricing_exceptions import InvalidArgumentError
from mcoptions.pricing_models.params import OptionParameters

logger = logging.getLogger(__name__)

QUOTE_COLUMNS = [
    "ticker",
    "spot",
    "strike",
    "rate",
    "volatility",
    "days_to_expiry",
    "market_price",
]
REQUIRED_COLUMNS = QUOTE_COLUMNS[:-1]
MIN_MARKET_PRICE = 0.01

# Catches records with more fields than QUOTE_COLUMNS
_OVERFLOW_COLUMN = "_extra"

__all__ = ["OptionQuote", "QUOTE_COLUMNS", "load_quotes", "parse_quotes", "iter_quotes"]


# =============================================================================
# Record Container
# =============================================================================


@dataclass(frozen=True)
class OptionQuote:
    """One quoted European call on a listed stock."""

    ticker: str
    spot: float
    strike: float
    rate: float
    volatility: float
    days_to_expiry: int
    market_price: Optional[float] = None

    @property
    def has_market_price(self) -> bool:
        return self.market_price is not None and self.market_price > MIN_MARKET_PRICE

    def to_params(self) -> OptionParameters:
        return OptionParameters.from_days(
            self.spot, self.strike, self.rate, self.volatility, self.days_to_expiry
        )


def _to_float(value, field: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidDataFormatError(f"{field}={value!r} is not a number") from None
    if math.isnan(number):
        raise InvalidDataFormatError(f"missing {field}")
    return number


def _row_to_quote(row: pd.Series) -> OptionQuote:
    ticker = row["ticker"]
    if not isinstance(ticker, str) or not ticker.strip():
        raise InvalidDataFormatError("missing ticker")

    days = _to_float(row["days_to_expiry"], "days_to_expiry")
    if not days.is_integer():
        raise InvalidDataFormatError(f"days_to_expiry={days} is not a whole number")

    market = row["market_price"]
    market_price = None if pd.isna(market) else _to_float(market, "market_price")

    quote = OptionQuote(
        ticker=ticker.strip(),
        spot=_to_float(row["spot"], "spot"),
        strike=_to_float(row["strike"], "strike"),
        rate=_to_float(row["rate"], "rate"),
        volatility=_to_float(row["volatility"], "volatility"),
        days_to_expiry=int(days),
        market_price=market_price,
    )
    try:
        quote.to_params()
    except InvalidArgumentError as exc:
        raise InvalidDataFormatError(str(exc)) from exc
    return quote


# =============================================================================
# Loading
# =============================================================================


def parse_quotes(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Convert raw string records to typed quotes, skipping malformed ones.

    Args:
        raw: DataFrame with QUOTE_COLUMNS holding unparsed values.

    Returns:
        DataFrame with one row per valid quote; market_price is NaN when absent.
    """
    check_required_columns(raw, REQUIRED_COLUMNS)
    if "market_price" not in raw.columns:
        raw = raw.assign(market_price=float("nan"))

    quotes: List[dict] = []
    for idx, row in raw.iterrows():
        try:
            quote = _row_to_quote(row)
        except InvalidDataFormatError as exc:
            logger.warning("Skipping quote record %s: %s", idx, exc)
            continue
        record = asdict(quote)
        if record["market_price"] is None:
            record["market_price"] = float("nan")
        quotes.append(record)

    skipped = len(raw) - len(quotes)
    if skipped:
        logger.info("Parsed %d quotes, skipped %d malformed records", len(quotes), skipped)
    return pd.DataFrame(quotes, columns=QUOTE_COLUMNS)


def load_quotes(path: Union[str, Path]) -> pd.DataFrame:
    """Read a quotes file and return the valid records."""
    path = Path(path)
    if not path.is_file():
        raise MissingDataError(str(path), "file not found")

    try:
        with warnings.catch_warnings():
            # over-long records are reported below
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            raw = pd.read_csv(
                path,
                header=None,
                names=QUOTE_COLUMNS + [_OVERFLOW_COLUMN],
                comment="#",
                skip_blank_lines=True,
                skipinitialspace=True,
                dtype=str,
                index_col=False,
                engine="python",
            )
    except pd.errors.EmptyDataError:
        logger.warning("No quote records in %s", path)
        raw = pd.DataFrame(columns=QUOTE_COLUMNS + [_OVERFLOW_COLUMN])
    logger.debug("Read %d raw records from %s", len(raw), path)

    overlong = raw[_OVERFLOW_COLUMN].notna()
    for idx in raw.index[overlong]:
        logger.warning(
            "Skipping quote record %s: more than %d fields", idx, len(QUOTE_COLUMNS)
        )
    return parse_quotes(raw.loc[~overlong, QUOTE_COLUMNS])


def iter_quotes(df: pd.DataFrame) -> Iterator[OptionQuote]:
    for row in df.itertuples(index=False):
        market = row.market_price
        yield OptionQuote(
            ticker=row.ticker,
            spot=float(row.spot),
            strike=float(row.strike),
            rate=float(row.rate),
            volatility=float(row.volatility),
            days_to_expiry=int(row.days_to_expiry),
            market_price=None if pd.isna(market) else float(market),
        )
