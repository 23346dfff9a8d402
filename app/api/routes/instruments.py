"""
Instrument API Routes
Catalog listing plus the two ranked projections

Query params are read as raw strings: bad numeric input falls back to the
configured defaults instead of producing a validation error.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from app.config import settings
from app.domain.schemas.instruments import (
    ComparisonResponse,
    InstrumentOut,
    YtdResponse,
)
from app.domain.services.catalog_engine import InstrumentCatalog, InstrumentNotFound
from app.domain.services.ranking_engine import RankingEngine
from app.utils.params import parse_capital, parse_period


router = APIRouter()


def get_catalog(request: Request) -> InstrumentCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=500, detail="Catalog not loaded")
    return catalog


def get_ranking_engine(request: Request) -> RankingEngine:
    engine = getattr(request.app.state, "ranking_engine", None)
    if engine is None:
        raise HTTPException(status_code=500, detail="Catalog not loaded")
    return engine


@router.get("", response_model=List[InstrumentOut])
async def list_instruments(catalog: InstrumentCatalog = Depends(get_catalog)):
    """
    Full catalog in definition order, no computed fields
    """
    return [InstrumentOut.from_domain(inst) for inst in catalog]


@router.get("/compare", response_model=ComparisonResponse)
async def compare_instruments(
    capital: Optional[str] = None,
    period: Optional[str] = None,
    engine: RankingEngine = Depends(get_ranking_engine),
):
    """
    Rank all instruments by projected earnings for `capital` over `period` months
    """
    capital_value = parse_capital(capital, settings.DEFAULT_CAPITAL, settings.MAX_CAPITAL)
    period_months = parse_period(period, settings.DEFAULT_PERIOD_MONTHS, settings.MAX_PERIOD_MONTHS)

    report = engine.compare(capital_value, period_months)
    return ComparisonResponse.from_report(report)


@router.get("/ytd", response_model=YtdResponse)
async def ytd_instruments(
    capital: Optional[str] = None,
    engine: RankingEngine = Depends(get_ranking_engine),
):
    """
    Rank all instruments by year-to-date rate with projected value for `capital`
    """
    capital_value = parse_capital(capital, settings.DEFAULT_CAPITAL, settings.MAX_CAPITAL)

    report = engine.ytd(capital_value)
    return YtdResponse.from_report(report)


@router.get("/{instrument_id}", response_model=InstrumentOut)
async def get_instrument(
    instrument_id: str,
    catalog: InstrumentCatalog = Depends(get_catalog),
):
    """
    Single catalog entry by id
    """
    try:
        inst = catalog.get_instrument(instrument_id)
    except InstrumentNotFound:
        raise HTTPException(status_code=404, detail=f"Instrument not found: {instrument_id}")
    return InstrumentOut.from_domain(inst)
