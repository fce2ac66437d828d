"""
Inventory Analytics - Depletion Projector

Linear run-rate projection: stock / daily demand, floored to whole days.
Flooring underestimates remaining days, which is the safe side for alerting.

The projection date is always relative to an explicit as_of timestamp so the
same snapshot projects identically no matter when it is evaluated.
"""

import math
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Optional

from inventory_analytics.models.inventory import DepletionProjection, InventoryItem


def days_until_stockout(item: InventoryItem) -> Optional[int]:
    """
    Whole days of stock left.
    
    None (unbounded) when there is no measurable demand, or when demand is so
    small that stock / demand overflows to infinity.
    """
    if item.daily_demand <= 0:
        return None
    ratio = item.current_stock / item.daily_demand
    if not math.isfinite(ratio):
        return None
    return math.floor(ratio)


def _stockout_date(as_of: datetime, days: int) -> Optional[datetime]:
    """as_of + days, or None when the date lies beyond datetime.max."""
    try:
        return as_of + timedelta(days=days)
    except OverflowError:
        return None


def project(item: InventoryItem, as_of: datetime) -> DepletionProjection:
    """
    Project when an item runs out, relative to as_of.
    
    A day count too large for a calendar date keeps the count and leaves
    projected_stockout_date empty.
    """
    days = days_until_stockout(item)
    if days is None:
        return DepletionProjection(item_id=item.id, item_name=item.name)
    
    return DepletionProjection(
        item_id=item.id,
        item_name=item.name,
        days_until_stockout=days,
        projected_stockout_date=_stockout_date(as_of, days),
    )


def project_all(items: Iterable[InventoryItem], as_of: datetime) -> dict[str, datetime]:
    """
    Map item id to projected stockout date.
    
    Items without demand, or whose date is beyond datetime.max, are left out.
    """
    predictions: dict[str, datetime] = {}
    for item in items:
        projection = project(item, as_of)
        if projection.projected_stockout_date is not None:
            predictions[item.id] = projection.projected_stockout_date
    return predictions
