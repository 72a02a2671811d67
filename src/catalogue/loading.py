"""Process-wide catalogue instance, built once on first use."""

import json
from functools import lru_cache
from pathlib import Path

import structlog

from catalogue.config import get_catalogue_path
from catalogue.data import STORES
from catalogue.store import CatalogueConfigurationError, StoreCatalogue

logger = structlog.get_logger(__name__)


def load_catalogue(path: Path | None = None) -> StoreCatalogue:
    """Build a catalogue from a JSON file, or from the bundled stores."""
    if path is None:
        return StoreCatalogue.from_records(STORES)

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogueConfigurationError(f"Cannot read catalogue file {path}: {exc}") from exc

    if not isinstance(records, list):
        raise CatalogueConfigurationError(f"Catalogue file {path} must contain a list of stores")

    return StoreCatalogue.from_records(records)


@lru_cache(maxsize=1)
def get_catalogue() -> StoreCatalogue:
    path = get_catalogue_path()
    catalogue = load_catalogue(path)
    logger.info(
        "Store catalogue loaded",
        source=str(path) if path else "bundled",
        stores=len(catalogue.stores),
    )
    return catalogue


def reset_catalogue() -> None:
    """Forget the cached catalogue so the next lookup reloads it."""
    get_catalogue.cache_clear()
