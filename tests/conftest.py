"""Shared pytest fixtures for restaurant billing tests."""

from __future__ import annotations

import pytest

from restaurant_billing.catalog import Catalog
from restaurant_billing.data import seed_catalog


@pytest.fixture
def catalog() -> Catalog:
    return seed_catalog()
