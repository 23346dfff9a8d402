from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.models import (
    ComparisonReport,
    Instrument,
    InstrumentComparison,
    InstrumentYtd,
    YtdReport,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InstrumentOut(CamelModel):
    id: str
    name: str
    provider: str
    type: str
    annual_rate: float
    ytd_rate: float
    maturity_days: Optional[int] = None
    min_investment: float
    risk_level: str
    description: str

    @staticmethod
    def fields_from(inst: Instrument) -> dict:
        return {
            "id": inst.id,
            "name": inst.name,
            "provider": inst.provider,
            "type": inst.type,
            "annual_rate": float(inst.annual_rate),
            "ytd_rate": float(inst.ytd_rate),
            "maturity_days": inst.maturity_days,
            "min_investment": float(inst.min_investment),
            "risk_level": inst.risk_level.value,
            "description": inst.description,
        }

    @classmethod
    def from_domain(cls, inst: Instrument) -> "InstrumentOut":
        return cls(**cls.fields_from(inst))


class ComparisonResultOut(InstrumentOut):
    total_return: float
    earnings: float
    effective_rate: float

    @classmethod
    def from_result(cls, result: InstrumentComparison) -> "ComparisonResultOut":
        return cls(
            **cls.fields_from(result.instrument),
            total_return=float(result.projection.total_return),
            earnings=float(result.projection.earnings),
            effective_rate=float(result.projection.effective_rate),
        )


class YtdResultOut(InstrumentOut):
    ytd_earnings: float
    projected_value: float

    @classmethod
    def from_result(cls, result: InstrumentYtd) -> "YtdResultOut":
        return cls(
            **cls.fields_from(result.instrument),
            ytd_earnings=float(result.projection.ytd_earnings),
            projected_value=float(result.projection.projected_value),
        )


class ComparisonResponse(CamelModel):
    capital: float
    period_months: int
    instrument_count: int
    results: List[ComparisonResultOut]

    @classmethod
    def from_report(cls, report: ComparisonReport) -> "ComparisonResponse":
        return cls(
            capital=float(report.capital),
            period_months=report.period_months,
            instrument_count=report.instrument_count,
            results=[ComparisonResultOut.from_result(r) for r in report.results],
        )


class YtdResponse(CamelModel):
    capital: float
    instrument_count: int
    results: List[YtdResultOut]

    @classmethod
    def from_report(cls, report: YtdReport) -> "YtdResponse":
        return cls(
            capital=float(report.capital),
            instrument_count=report.instrument_count,
            results=[YtdResultOut.from_result(r) for r in report.results],
        )
