from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.api.routes import health, instruments
from app.domain.services.catalog_engine import CatalogEngine, InstrumentCatalog
from app.domain.services.ranking_engine import RankingEngine


CATALOG_FILE = Path(__file__).resolve().parents[1] / "config" / "instruments.yml"


@pytest.fixture(scope="session")
def catalog_engine() -> CatalogEngine:
    engine = CatalogEngine(CATALOG_FILE)
    engine.load()
    return engine


@pytest.fixture(scope="session")
def catalog(catalog_engine) -> InstrumentCatalog:
    return catalog_engine.catalog


@pytest.fixture()
def app(catalog_engine, catalog) -> FastAPI:
    app = FastAPI()
    app.include_router(health.router, tags=["Health"])
    app.include_router(instruments.router, prefix="/api/instruments", tags=["Instruments"])

    app.state.catalog_engine = catalog_engine
    app.state.catalog = catalog
    app.state.ranking_engine = RankingEngine(catalog)

    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
def write_catalog(tmp_path):
    """Write a catalog YAML with the given text and return its path"""
    def _write(text: str) -> Path:
        path = tmp_path / "instruments.yml"
        path.write_text(text)
        return path
    return _write
