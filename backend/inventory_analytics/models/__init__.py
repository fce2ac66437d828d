from inventory_analytics.models.inventory import (
    AlertEvent,
    AlertSet,
    AlertSeverity,
    CriticalItemImpact,
    DepletionProjection,
    InventoryHealthReport,
    InventoryItem,
    InventorySnapshot,
    InventoryTrend,
    OverstockItemImpact,
    Recommendation,
    RecommendationAction,
    StockStatus,
)

__all__ = [
    "AlertEvent",
    "AlertSet",
    "AlertSeverity",
    "CriticalItemImpact",
    "DepletionProjection",
    "InventoryHealthReport",
    "InventoryItem",
    "InventorySnapshot",
    "InventoryTrend",
    "OverstockItemImpact",
    "Recommendation",
    "RecommendationAction",
    "StockStatus",
]
