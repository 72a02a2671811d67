"""Tests for loading the catalogue from the bundled data or a JSON file."""

import json

import pytest
from catalogue.data import STORES
from catalogue.loading import get_catalogue, load_catalogue
from catalogue.store import CatalogueConfigurationError, Product


class TestBundledCatalogue:
    def test_loads_every_bundled_store(self):
        catalogue = load_catalogue()
        assert [store.name for store in catalogue.stores] == [record["name"] for record in STORES]

    def test_downtown_sells_bread_but_not_milk(self):
        catalogue = load_catalogue()
        assert catalogue.unmatched_items("Downtown", [Product("Bread", "loaf", 2.5)]) == []
        assert catalogue.unmatched_items("Downtown", [Product("Milk", "liter", 1.1)]) == [
            Product("Milk", "liter", 1.1)
        ]


class TestCatalogueFile:
    def test_loads_stores_from_json(self, tmp_path):
        path = tmp_path / "stores.json"
        path.write_text(json.dumps([{"name": "Kiosk", "products": [{"name": "Tea", "unit": "box", "price": 3}]}]))

        catalogue = load_catalogue(path)

        assert [store.name for store in catalogue.stores] == ["Kiosk"]
        assert catalogue.find_store("Kiosk").products == (Product("Tea", "box", 3.0),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogueConfigurationError, match="Cannot read"):
            load_catalogue(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "stores.json"
        path.write_text("{not json")
        with pytest.raises(CatalogueConfigurationError):
            load_catalogue(path)

    def test_top_level_must_be_a_list(self, tmp_path):
        path = tmp_path / "stores.json"
        path.write_text(json.dumps({"name": "Kiosk"}))
        with pytest.raises(CatalogueConfigurationError, match="list of stores"):
            load_catalogue(path)


class TestProcessCatalogue:
    def test_is_built_once(self):
        assert get_catalogue() is get_catalogue()

    def test_uses_catalogue_file_setting(self, tmp_path, monkeypatch):
        path = tmp_path / "stores.json"
        path.write_text(json.dumps([{"name": "Kiosk", "products": []}]))
        monkeypatch.setenv("CATALOGUE_FILE", str(path))

        assert [store.name for store in get_catalogue().stores] == ["Kiosk"]
