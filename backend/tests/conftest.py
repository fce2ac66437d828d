"""
Shared fixtures for inventory analytics tests.
"""

from datetime import datetime

import pytest

from inventory_analytics.models.inventory import InventoryItem


def make_item(item_id: str = "sku-1", name: str = "Widget", **overrides) -> InventoryItem:
    """Build an optimal item, overriding any field."""
    fields = dict(
        id=item_id,
        name=name,
        current_stock=30,
        min_threshold=10,
        max_threshold=50,
        daily_demand=2,
        reorder_point=15,
        storage_per_unit=1.0,
        cost_per_unit=10.0,
    )
    fields.update(overrides)
    return InventoryItem(**fields)


@pytest.fixture
def as_of():
    """Fixed evaluation time; tests never depend on the clock."""
    return datetime(2024, 3, 1, 9, 0, 0)


@pytest.fixture
def critical_item():
    return make_item(
        "sku-crit", "Chicken Breast 5lb",
        current_stock=5, min_threshold=10, max_threshold=50,
        daily_demand=2, cost_per_unit=20, reorder_point=12,
    )


@pytest.fixture
def overstock_item():
    return make_item(
        "sku-over", "Paper Towels",
        current_stock=80, min_threshold=10, max_threshold=50,
        daily_demand=1, storage_per_unit=1.5, cost_per_unit=10,
    )


@pytest.fixture
def optimal_item():
    return make_item("sku-ok", "Olive Oil")


@pytest.fixture
def mixed_items(critical_item, overstock_item, optimal_item):
    return [critical_item, overstock_item, optimal_item]


@pytest.fixture
def raw_items():
    """Dashboard-shaped (camelCase) payload."""
    return [
        {
            "id": "sku-crit",
            "name": "Chicken Breast 5lb",
            "currentStock": 5,
            "minThreshold": 10,
            "maxThreshold": 50,
            "dailyDemand": 2,
            "reorderPoint": 12,
            "storagePerUnit": 0.5,
            "costPerUnit": 20,
        },
        {
            "id": "sku-over",
            "name": "Paper Towels",
            "currentStock": 80,
            "minThreshold": 10,
            "maxThreshold": 50,
            "dailyDemand": 0,
            "reorderPoint": 20,
            "storagePerUnit": 1.5,
            "costPerUnit": 10,
        },
        {
            "id": "sku-ok",
            "name": "Olive Oil",
            "currentStock": 30,
            "minThreshold": 10,
            "maxThreshold": 50,
            "dailyDemand": 3,
            "reorderPoint": 15,
            "storagePerUnit": 1.0,
            "costPerUnit": 8,
        },
    ]
