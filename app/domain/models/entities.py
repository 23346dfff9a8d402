"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class RiskLevel(str, Enum):
    """Risk level of an instrument"""
    LOW = "LOW RISK"
    MEDIUM = "MEDIUM RISK"
    HIGH = "HIGH RISK"


@dataclass(frozen=True)
class Instrument:
    """
    One catalog entry.
    Rates are percentages (27.5 means 27.5% per year).
    """
    id: str
    name: str
    provider: str
    type: str
    annual_rate: Decimal
    ytd_rate: Decimal
    maturity_days: Optional[int]
    min_investment: Decimal
    risk_level: RiskLevel
    description: str = ""


@dataclass(frozen=True)
class CompoundReturn:
    """Projected outcome of holding an instrument for a period"""
    total_return: Decimal
    earnings: Decimal
    effective_rate: Decimal


@dataclass(frozen=True)
class YtdProjection:
    """Outcome of applying a year-to-date rate to a capital amount"""
    ytd_earnings: Decimal
    projected_value: Decimal


@dataclass(frozen=True)
class InstrumentComparison:
    """Instrument together with its compound-return projection"""
    instrument: Instrument
    projection: CompoundReturn

    @property
    def earnings(self) -> Decimal:
        return self.projection.earnings


@dataclass(frozen=True)
class InstrumentYtd:
    """Instrument together with its YTD projection"""
    instrument: Instrument
    projection: YtdProjection

    @property
    def ytd_rate(self) -> Decimal:
        return self.instrument.ytd_rate


@dataclass(frozen=True)
class ComparisonReport:
    """Catalog ranked by projected earnings for one capital/period pair"""
    capital: Decimal
    period_months: int
    results: Tuple[InstrumentComparison, ...]

    @property
    def instrument_count(self) -> int:
        return len(self.results)


@dataclass(frozen=True)
class YtdReport:
    """Catalog ranked by YTD rate for one capital amount"""
    capital: Decimal
    results: Tuple[InstrumentYtd, ...]

    @property
    def instrument_count(self) -> int:
        return len(self.results)
