from __future__ import annotations

import pytest

from backend.catalog import Catalog, load_catalog
from backend.ticker import make_rng


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture
def rng():
    return make_rng(1234)
