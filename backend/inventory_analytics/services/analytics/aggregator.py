"""
Inventory Analytics - Alert & Impact Aggregator

Splits a snapshot into critical and overstock sets, prices the impact of each
flagged item, and emits the stockout alert events the notifier consumes.

Impact formulas:
    potential_loss = (min_threshold - current_stock) * cost_per_unit * loss_margin_rate
    excess_stock   = current_stock - max_threshold
    storage_waste  = excess_stock * storage_per_unit
    capital_tied   = excess_stock * cost_per_unit

All results keep input order. Callers wanting urgency ordering sort themselves.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Optional

from inventory_analytics.core.config import settings
from inventory_analytics.core.types import round_half_up
from inventory_analytics.models.inventory import (
    AlertEvent,
    AlertSet,
    AlertSeverity,
    CriticalItemImpact,
    InventoryItem,
    OverstockItemImpact,
    StockStatus,
)
from inventory_analytics.services.analytics.classifier import classify
from inventory_analytics.services.analytics.projector import days_until_stockout, project

logger = logging.getLogger(__name__)


# =============================================================================
# PARTITIONING
# =============================================================================

def partition(
    items: Iterable[InventoryItem],
) -> tuple[list[InventoryItem], list[InventoryItem]]:
    """Return (critical_items, overstock_items); optimal items are dropped."""
    critical: list[InventoryItem] = []
    overstock: list[InventoryItem] = []
    for item in items:
        status = classify(item)
        if status == StockStatus.STOCKOUT_RISK:
            critical.append(item)
        elif status == StockStatus.OVERSTOCK:
            overstock.append(item)
    return critical, overstock


# =============================================================================
# IMPACT FIGURES
# =============================================================================

def critical_impact(
    item: InventoryItem,
    loss_margin_rate: Optional[float] = None,
) -> CriticalItemImpact:
    """Price the shortfall of a stockout-risk item (margin defaults to LOSS_MARGIN_RATE)."""
    if loss_margin_rate is None:
        loss_margin_rate = settings.LOSS_MARGIN_RATE
    shortfall = item.min_threshold - item.current_stock
    return CriticalItemImpact(
        item_id=item.id,
        item_name=item.name,
        current_stock=item.current_stock,
        min_threshold=item.min_threshold,
        daily_demand=item.daily_demand,
        reorder_point=item.reorder_point,
        days_until_stockout=days_until_stockout(item),
        shortfall=shortfall,
        potential_loss=shortfall * (item.cost_per_unit * loss_margin_rate),
    )


def overstock_impact(item: InventoryItem) -> OverstockItemImpact:
    """Price the excess of an overstock item."""
    excess = item.current_stock - item.max_threshold
    return OverstockItemImpact(
        item_id=item.id,
        item_name=item.name,
        current_stock=item.current_stock,
        max_threshold=item.max_threshold,
        excess_stock=excess,
        storage_waste=excess * item.storage_per_unit,
        capital_tied=excess * item.cost_per_unit,
    )


def build_alert_set(
    items: Sequence[InventoryItem],
    loss_margin_rate: Optional[float] = None,
) -> AlertSet:
    """Partition a snapshot and attach impact figures and totals."""
    critical_items, overstock_items = partition(items)
    
    critical = [critical_impact(item, loss_margin_rate) for item in critical_items]
    overstock = [overstock_impact(item) for item in overstock_items]
    
    return AlertSet(
        critical=critical,
        overstock=overstock,
        total_potential_loss=sum(c.potential_loss for c in critical),
        total_storage_waste=sum(o.storage_waste for o in overstock),
        total_capital_tied=sum(o.capital_tied for o in overstock),
    )


# =============================================================================
# ALERTS
# =============================================================================

def evaluate_and_alert(
    items: Iterable[InventoryItem],
    as_of: datetime,
    threshold_days: Optional[int] = None,
) -> list[AlertEvent]:
    """
    Emit one CRITICAL alert per item projected to run out within threshold_days
    (default ALERT_THRESHOLD_DAYS).
    
    Items without a projected date never alert. Order follows the input.
    """
    if threshold_days is None:
        threshold_days = settings.ALERT_THRESHOLD_DAYS
    
    events: list[AlertEvent] = []
    for item in items:
        projection = project(item, as_of)
        if projection.projected_stockout_date is None:
            continue
        if projection.days_until_stockout > threshold_days:
            continue
        
        events.append(AlertEvent(
            item_id=item.id,
            item_name=item.name,
            days_until_stockout=projection.days_until_stockout,
            projected_stockout_date=projection.projected_stockout_date,
            severity=AlertSeverity.CRITICAL,
            message=(
                f"Critical: {item.name} will stock out in "
                f"{projection.days_until_stockout} days!"
            ),
        ))
        logger.info(
            f"Stockout alert: {item.id} ({item.name}) in "
            f"{projection.days_until_stockout}d"
        )
    return events


# =============================================================================
# EFFICIENCY
# =============================================================================

def stock_efficiency(
    items: Sequence[InventoryItem],
    empty_value: Optional[int] = None,
) -> int:
    """
    Percentage of items in the optimal band, rounded half-up.
    
    An empty snapshot has nothing out of band and reports empty_value
    (default EMPTY_SNAPSHOT_EFFICIENCY).
    """
    if not items:
        return settings.EMPTY_SNAPSHOT_EFFICIENCY if empty_value is None else empty_value
    optimal = sum(1 for item in items if classify(item) == StockStatus.OPTIMAL)
    return int(round_half_up(100 * optimal / len(items)))
