"""Environment-driven settings for the store catalogue."""

import os
from enum import Enum
from pathlib import Path


class ProductMatchPolicy(Enum):
    """How a requested item is matched against a store's product list."""

    EXACT = "exact"
    NAME_AND_UNIT = "name_and_unit"


def get_product_match_policy() -> ProductMatchPolicy:
    """Read the match policy from ``PRODUCT_MATCH_POLICY`` (default: exact)."""
    raw = os.getenv("PRODUCT_MATCH_POLICY", ProductMatchPolicy.EXACT.value).strip().lower()
    try:
        return ProductMatchPolicy(raw)
    except ValueError:
        choices = ", ".join(p.value for p in ProductMatchPolicy)
        raise ValueError(f"Invalid PRODUCT_MATCH_POLICY {raw!r}; expected one of: {choices}") from None


def get_catalogue_path() -> Path | None:
    """Optional JSON file that replaces the bundled catalogue."""
    raw = os.getenv("CATALOGUE_FILE")
    return Path(raw) if raw else None
