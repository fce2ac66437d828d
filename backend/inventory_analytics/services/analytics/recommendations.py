"""
Inventory Analytics - Recommendation Builder

Turns flagged items into the remediation steps shown on the dashboard:
per-item actions for critical and overstock items, plus snapshot-wide
guidance whenever either set is non-empty.
"""

import math

from inventory_analytics.core.types import format_money, format_units
from inventory_analytics.models.inventory import (
    AlertSet,
    CriticalItemImpact,
    OverstockItemImpact,
    Recommendation,
    RecommendationAction,
)


def for_critical_item(impact: CriticalItemImpact) -> list[Recommendation]:
    """Restock steps for an item at or below its minimum threshold."""
    order_qty = math.ceil(impact.shortfall)
    steps = []
    if order_qty > 0:
        steps.append(Recommendation(
            action=RecommendationAction.ORDER_NOW,
            item_id=impact.item_id,
            quantity=order_qty,
            message=(
                f"Order {order_qty} units of {impact.item_name} immediately "
                f"(potential loss {format_money(impact.potential_loss)})"
            ),
        ))
    steps.extend([
        Recommendation(
            action=RecommendationAction.REVIEW_REORDER_POINT,
            item_id=impact.item_id,
            quantity=impact.reorder_point,
            message=f"Review reorder point (currently {format_units(impact.reorder_point)})",
        ),
        Recommendation(
            action=RecommendationAction.EXPEDITE_SHIPPING,
            item_id=impact.item_id,
            message="Consider expedited shipping options",
        ),
        Recommendation(
            action=RecommendationAction.MONITOR_DEMAND,
            item_id=impact.item_id,
            message="Monitor daily demand patterns",
        ),
    ])
    return steps


def for_overstock_item(impact: OverstockItemImpact) -> list[Recommendation]:
    """Drawdown steps for an item at or above its maximum threshold."""
    steps = []
    if impact.excess_stock > 0:
        steps.append(Recommendation(
            action=RecommendationAction.REDUCE_EXCESS,
            item_id=impact.item_id,
            quantity=impact.excess_stock,
            message=(
                f"Reduce {format_units(impact.excess_stock)} excess units of {impact.item_name} "
                f"({format_money(impact.capital_tied)} capital tied up)"
            ),
        ))
    steps.extend([
        Recommendation(
            action=RecommendationAction.REVIEW_STORAGE_COSTS,
            item_id=impact.item_id,
            message=f"Review storage costs ({format_money(impact.storage_waste)} wasted)",
        ),
        Recommendation(
            action=RecommendationAction.ADJUST_ORDER_QUANTITIES,
            item_id=impact.item_id,
            message="Adjust future order quantities",
        ),
    ])
    return steps


def overview(alert_set: AlertSet) -> list[Recommendation]:
    """Snapshot-wide guidance (item_id is None)."""
    steps = []
    if alert_set.critical:
        steps.extend([
            Recommendation(
                action=RecommendationAction.ORDER_NOW,
                message="Place immediate orders for high-risk items",
            ),
            Recommendation(
                action=RecommendationAction.REVIEW_REORDER_POINT,
                message="Review and adjust reorder points",
            ),
            Recommendation(
                action=RecommendationAction.EXPEDITE_SHIPPING,
                message="Consider expedited shipping options",
            ),
        ])
    if alert_set.overstock:
        steps.extend([
            Recommendation(
                action=RecommendationAction.RUN_PROMOTION,
                message="Consider promotional activities",
            ),
            Recommendation(
                action=RecommendationAction.REVIEW_STORAGE_COSTS,
                message="Review storage costs",
            ),
            Recommendation(
                action=RecommendationAction.ADJUST_ORDER_QUANTITIES,
                message="Adjust future order quantities",
            ),
        ])
    return steps


def build_recommendations(alert_set: AlertSet) -> list[Recommendation]:
    """Overview guidance first, then per-item steps in alert-set order."""
    steps = overview(alert_set)
    for impact in alert_set.critical:
        steps.extend(for_critical_item(impact))
    for impact in alert_set.overstock:
        steps.extend(for_overstock_item(impact))
    return steps
