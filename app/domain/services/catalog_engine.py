"""
CATALOG ENGINE
Load, validate, and expose the instrument catalog

RESPONSIBILITIES:
- Load the YAML instrument table
- Validate every record
- Expose a read-only, ordered catalog

RULES:
❌ No partial catalogs
❌ No mutation after load
✅ Fail fast on invalid config
✅ Definition order preserved
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple

import yaml

from app.domain.models import Instrument, RiskLevel

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "id",
    "name",
    "provider",
    "type",
    "annual_rate",
    "ytd_rate",
    "min_investment",
    "risk_level",
)


class CatalogError(ValueError):
    """Raised when the instrument catalog is malformed"""


class InstrumentNotFound(KeyError):
    """Raised when an instrument id is not in the catalog"""


@dataclass(frozen=True)
class InstrumentCatalog:
    """Immutable, ordered collection of instruments"""
    instruments: Tuple[Instrument, ...]

    def __len__(self) -> int:
        return len(self.instruments)

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self.instruments)

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(inst.id for inst in self.instruments)

    def get_instrument(self, instrument_id: str) -> Instrument:
        """Get instrument by id"""
        for inst in self.instruments:
            if inst.id == instrument_id:
                return inst
        raise InstrumentNotFound(instrument_id)


class CatalogEngine:
    """
    Catalog Engine
    Single source of truth for instrument reference data
    """

    def __init__(self, catalog_file: Path):
        """Initialize with path to the catalog YAML"""
        self.catalog_file = Path(catalog_file)
        self._catalog: Optional[InstrumentCatalog] = None

    def load(self) -> InstrumentCatalog:
        """Load and validate the catalog file"""
        if not self.catalog_file.exists():
            raise FileNotFoundError(f"Instrument catalog not found: {self.catalog_file}")

        with open(self.catalog_file, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise CatalogError("Catalog file must be a mapping with an 'instruments' list")

        self._catalog = build_catalog(data.get('instruments'))
        logger.info(f"Loaded {len(self._catalog)} instruments from {self.catalog_file}")
        return self._catalog

    @property
    def catalog(self) -> InstrumentCatalog:
        if self._catalog is None:
            raise RuntimeError("Catalog not loaded. Call load() first.")
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None


def build_catalog(entries: Any) -> InstrumentCatalog:
    """
    Build a validated catalog from raw records.

    Raises:
        CatalogError: on any invalid or duplicate record
    """
    if not isinstance(entries, list) or not entries:
        raise CatalogError("Catalog must contain a non-empty 'instruments' list")

    instruments = [_parse_instrument(index, entry) for index, entry in enumerate(entries)]

    ids = [inst.id for inst in instruments]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate instrument ids found in catalog: {duplicates}")

    return InstrumentCatalog(instruments=tuple(instruments))


def _parse_instrument(index: int, entry: Any) -> Instrument:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry #{index} is not a mapping")

    missing = [name for name in REQUIRED_FIELDS if name not in entry]
    if missing:
        raise CatalogError(f"Catalog entry #{index} missing fields: {missing}")

    instrument_id = str(entry['id']).strip()
    if not instrument_id:
        raise CatalogError(f"Catalog entry #{index} has an empty id")

    try:
        risk_level = RiskLevel(entry['risk_level'])
    except ValueError:
        allowed = [level.value for level in RiskLevel]
        raise CatalogError(
            f"Instrument {instrument_id}: risk_level must be one of {allowed}, "
            f"got {entry['risk_level']!r}"
        )

    return Instrument(
        id=instrument_id,
        name=str(entry['name']),
        provider=str(entry['provider']),
        type=str(entry['type']),
        annual_rate=_non_negative(instrument_id, 'annual_rate', entry['annual_rate']),
        ytd_rate=_non_negative(instrument_id, 'ytd_rate', entry['ytd_rate']),
        maturity_days=_maturity(instrument_id, entry.get('maturity_days')),
        min_investment=_non_negative(instrument_id, 'min_investment', entry['min_investment']),
        risk_level=risk_level,
        description=str(entry.get('description') or ""),
    )


def _non_negative(instrument_id: str, field: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"Instrument {instrument_id}: {field} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise CatalogError(f"Instrument {instrument_id}: {field} must be >= 0, got {value}")
    return Decimal(str(value))


def _maturity(instrument_id: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise CatalogError(
            f"Instrument {instrument_id}: maturity_days must be a positive integer or null, got {value!r}"
        )
    return value

