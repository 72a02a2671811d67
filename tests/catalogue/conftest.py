import pytest
from catalogue.loading import reset_catalogue


@pytest.fixture(autouse=True)
def fresh_catalogue(monkeypatch):
    """Each test starts from the bundled catalogue and default settings."""
    monkeypatch.delenv("CATALOGUE_FILE", raising=False)
    monkeypatch.delenv("PRODUCT_MATCH_POLICY", raising=False)
    reset_catalogue()

    yield

    reset_catalogue()
