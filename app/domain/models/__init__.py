"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    RiskLevel,

    # Entities
    ComparisonReport,
    CompoundReturn,
    Instrument,
    InstrumentComparison,
    InstrumentYtd,
    YtdProjection,
    YtdReport,
)

__all__ = [
    # Enums
    "RiskLevel",

    # Entities
    "ComparisonReport",
    "CompoundReturn",
    "Instrument",
    "InstrumentComparison",
    "InstrumentYtd",
    "YtdProjection",
    "YtdReport",
]
