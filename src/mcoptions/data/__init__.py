from mcoptions.data.quote_loader import (
    QUOTE_COLUMNS,
    OptionQuote,
    iter_quotes,
    load_quotes,
    parse_quotes,
)

__all__ = ["OptionQuote", "QUOTE_COLUMNS", "load_quotes", "parse_quotes", "iter_quotes"]
