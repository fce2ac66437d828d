"""
Inventory Analytics - Status Classifier

Precedence: STOCKOUT_RISK is tested before OVERSTOCK, so an item sitting on
both thresholds (min == max == current) is a stockout risk.
"""

from collections.abc import Iterable

from inventory_analytics.models.inventory import InventoryItem, StockStatus


def classify(item: InventoryItem) -> StockStatus:
    """Label an item as stockout-risk, overstock or optimal."""
    if item.current_stock <= item.min_threshold:
        return StockStatus.STOCKOUT_RISK
    if item.current_stock >= item.max_threshold:
        return StockStatus.OVERSTOCK
    return StockStatus.OPTIMAL


def status_counts(items: Iterable[InventoryItem]) -> dict[StockStatus, int]:
    """Count items per status. Every status is present, zero when unused."""
    counts = {status: 0 for status in StockStatus}
    for item in items:
        counts[classify(item)] += 1
    return counts
