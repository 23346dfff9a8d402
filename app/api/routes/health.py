from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/ready")
def ready(request: Request):
    catalog_engine = getattr(request.app.state, "catalog_engine", None)
    catalog_loaded = catalog_engine is not None and catalog_engine.is_loaded

    return {
        "status": "ready" if catalog_loaded else "not_ready",
        "catalog_loaded": catalog_loaded,
        "instrument_count": len(catalog_engine.catalog) if catalog_loaded else 0,
    }
