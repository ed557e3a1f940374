from mcoptions.reporting.comparison import (
    ComparisonSummary,
    classify_moneyness,
    compare_quote,
    format_report,
    percentage_error,
    run_comparison,
    summarize,
)

__all__ = [
    "ComparisonSummary",
    "classify_moneyness",
    "compare_quote",
    "format_report",
    "percentage_error",
    "run_comparison",
    "summarize",
]
