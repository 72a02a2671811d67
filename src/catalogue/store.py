"""Static store catalogue: stores, products and item membership checks.

The catalogue is loaded once at process start and never mutated. Membership
of a requested item in a store is decided by a ``ProductMatchPolicy``:

- ``exact``: name, unit and price must all match (price compared to the cent)
- ``name_and_unit``: price drift does not invalidate an otherwise known product
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from catalogue.config import ProductMatchPolicy, get_product_match_policy


class CatalogueError(Exception):
    """Base class for catalogue failures."""


class CatalogueConfigurationError(CatalogueError):
    """The catalogue source could not be read or is malformed."""


class StoreNotFound(CatalogueError):
    """No store in the catalogue carries the requested name."""

    def __init__(self, store_name: str):
        self.store_name = store_name
        super().__init__(f"Store {store_name!r} not found")


@dataclass(frozen=True)
class Product:
    """A product a store sells, priced per unit."""

    name: str
    unit: str
    price: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Product":
        return cls(
            name=str(record["name"]),
            unit=str(record["unit"]),
            price=float(record["price"]),
        )

    def key(self, policy: ProductMatchPolicy) -> tuple:
        if policy is ProductMatchPolicy.NAME_AND_UNIT:
            return (self.name, self.unit)
        return (self.name, self.unit, round(self.price, 2))

    def to_dict(self) -> dict:
        return {"name": self.name, "unit": self.unit, "price": self.price}


@dataclass(frozen=True)
class Store:
    name: str
    products: tuple[Product, ...] = field(default_factory=tuple)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Store":
        return cls(
            name=str(record["name"]),
            products=tuple(Product.from_record(p) for p in record.get("products", [])),
        )

    def has_product(self, item: Product, policy: ProductMatchPolicy) -> bool:
        wanted = item.key(policy)
        return any(product.key(policy) == wanted for product in self.products)


class StoreCatalogue:
    """Read-only table of stores, keyed by store name."""

    def __init__(self, stores: Iterable[Store]):
        self._stores: dict[str, Store] = {}
        for store in stores:
            if store.name in self._stores:
                raise CatalogueConfigurationError(f"Duplicate store name {store.name!r}")
            self._stores[store.name] = store

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "StoreCatalogue":
        try:
            return cls(Store.from_record(record) for record in records)
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogueConfigurationError(f"Malformed catalogue record: {exc}") from exc

    @property
    def stores(self) -> tuple[Store, ...]:
        return tuple(self._stores.values())

    def find_store(self, name: str) -> Store:
        try:
            return self._stores[name]
        except KeyError:
            raise StoreNotFound(name) from None

    def unmatched_items(
        self,
        store_name: str,
        items: Iterable[Product],
        policy: ProductMatchPolicy | None = None,
    ) -> list[Product]:
        """Return the requested items the store does not list, in request order.

        Raises ``StoreNotFound`` when ``store_name`` is unknown. An empty list
        means every item is valid.
        """
        store = self.find_store(store_name)
        policy = policy or get_product_match_policy()
        return [item for item in items if not store.has_product(item, policy)]
