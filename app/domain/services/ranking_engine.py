"""
RANKING ENGINE
Apply the return calculations to the whole catalog and order the results

RULES:
✅ Every instrument appears exactly once (no filtering)
✅ Descending sort, ties keep catalog order (sorted() is stable)
✅ Pure: same inputs, same output
"""

import logging

from app.domain.models import (
    ComparisonReport,
    InstrumentComparison,
    InstrumentYtd,
    YtdReport,
)
from app.domain.services.catalog_engine import InstrumentCatalog
from app.domain.services.return_engine import (
    Number,
    compute_compound_return,
    compute_ytd_projection,
    to_decimal,
)

logger = logging.getLogger(__name__)


def rank_by_return(
    capital: Number,
    period_months: int,
    catalog: InstrumentCatalog,
) -> ComparisonReport:
    """
    Rank instruments by projected earnings over `period_months`.

    Args:
        capital: Amount invested in every instrument
        period_months: Holding period in months
        catalog: Instruments to compare

    Returns:
        ComparisonReport with results sorted by earnings, highest first
    """
    capital = to_decimal(capital)

    results = [
        InstrumentComparison(
            instrument=inst,
            projection=compute_compound_return(capital, inst.annual_rate, period_months),
        )
        for inst in catalog
    ]
    results = sorted(results, key=lambda r: r.earnings, reverse=True)

    return ComparisonReport(
        capital=capital,
        period_months=period_months,
        results=tuple(results),
    )


def rank_by_ytd(capital: Number, catalog: InstrumentCatalog) -> YtdReport:
    """
    Rank instruments by YTD rate, highest first.
    Ordering depends on the rate only, never on the computed earnings.
    """
    capital = to_decimal(capital)

    results = [
        InstrumentYtd(
            instrument=inst,
            projection=compute_ytd_projection(capital, inst.ytd_rate),
        )
        for inst in catalog
    ]
    results = sorted(results, key=lambda r: r.ytd_rate, reverse=True)

    return YtdReport(capital=capital, results=tuple(results))


class RankingEngine:
    """
    Ranking Engine
    Binds the ranking functions to a loaded catalog
    """

    def __init__(self, catalog: InstrumentCatalog):
        self.catalog = catalog

    def compare(self, capital: Number, period_months: int) -> ComparisonReport:
        logger.debug(f"Ranking {len(self.catalog)} instruments: capital={capital}, period={period_months}m")
        return rank_by_return(capital, period_months, self.catalog)

    def ytd(self, capital: Number) -> YtdReport:
        logger.debug(f"Ranking {len(self.catalog)} instruments by YTD: capital={capital}")
        return rank_by_ytd(capital, self.catalog)
