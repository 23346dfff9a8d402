"""
FastAPI Main Application
Instrument return comparison API
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from app.config import settings
from app.core.logging import setup_logging, get_logger
from app.domain.services.catalog_engine import CatalogEngine
from app.domain.services.ranking_engine import RankingEngine
from app.api.routes import health, instruments

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Loads the instrument catalog once; an invalid catalog aborts startup
    """
    logger.info("=" * 60)
    logger.info("🚀 Starting Instrument Comparison API")
    logger.info("=" * 60)

    catalog_engine = CatalogEngine(settings.CATALOG_FILE)
    try:
        catalog = catalog_engine.load()
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"❌ Invalid instrument catalog, refusing to start: {e}")
        raise

    app.state.catalog_engine = catalog_engine
    app.state.catalog = catalog
    app.state.ranking_engine = RankingEngine(catalog)

    logger.info(f"✅ Catalog loaded: {len(catalog)} instruments")
    logger.info(f"   Defaults: capital={settings.DEFAULT_CAPITAL}, period={settings.DEFAULT_PERIOD_MONTHS}m")
    logger.info(f"   API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")

    yield

    logger.info("🛑 Shutting down Instrument Comparison API")
    app.state.catalog_engine = None
    app.state.catalog = None
    app.state.ranking_engine = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Instrument Return Comparison API",
        description="Rank fixed-income instruments by projected and year-to-date returns",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(instruments.router, prefix="/api/instruments", tags=["Instruments"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
