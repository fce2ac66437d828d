# Inventory Analytics Core
from inventory_analytics.services.analytics.classifier import classify, status_counts
from inventory_analytics.services.analytics.projector import project, project_all
from inventory_analytics.services.analytics.aggregator import (
    build_alert_set,
    evaluate_and_alert,
    partition,
    stock_efficiency,
)
from inventory_analytics.services.analytics.snapshot import load_snapshot, validate_item
from inventory_analytics.services.analytics.engine import (
    InventoryAnalyticsEngine,
    inventory_analytics_engine,
)

__all__ = [
    "classify",
    "status_counts",
    "project",
    "project_all",
    "partition",
    "build_alert_set",
    "evaluate_and_alert",
    "stock_efficiency",
    "load_snapshot",
    "validate_item",
    "InventoryAnalyticsEngine",
    "inventory_analytics_engine",
]
