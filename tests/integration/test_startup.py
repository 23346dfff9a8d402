import pytest
from fastapi import FastAPI

import app.main as app_main
from app.config import settings
from app.domain.services.catalog_engine import CatalogError


@pytest.mark.asyncio
@pytest.mark.integration
async def test_lifespan_installs_catalog():
    app = FastAPI()
    async with app_main.lifespan(app):
        assert len(app.state.catalog) == 9
        assert app.state.ranking_engine.catalog is app.state.catalog
        assert app.state.catalog_engine.is_loaded
    assert app.state.catalog is None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_invalid_catalog_aborts_startup(monkeypatch, write_catalog):
    path = write_catalog(
        """
instruments:
  - id: broken
    name: Broken
    provider: Nobody
    type: T-Bill
    annual_rate: -3
    ytd_rate: 1
    maturity_days: 91
    min_investment: 100
    risk_level: LOW RISK
"""
    )
    monkeypatch.setattr(settings, "CATALOG_FILE", path)

    app = FastAPI()
    with pytest.raises(CatalogError):
        async with app_main.lifespan(app):
            pass
    assert getattr(app.state, "catalog", None) is None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_catalog_aborts_startup(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "CATALOG_FILE", tmp_path / "absent.yml")

    app = FastAPI()
    with pytest.raises(FileNotFoundError):
        async with app_main.lifespan(app):
            pass


def test_app_registers_routes():
    paths = set(app_main.app.openapi()["paths"])
    assert {
        "/health",
        "/ready",
        "/api/instruments",
        "/api/instruments/compare",
        "/api/instruments/ytd",
        "/api/instruments/{instrument_id}",
    } <= paths
