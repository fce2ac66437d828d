"""
Inventory Analytics - Analytics Engine
Configured facade over the classifier, projector and aggregator.

LOGIC:
1. Accept a snapshot (validated once at the boundary)
2. Classify every item
3. Project stockout dates from the daily run-rate
4. Partition into critical / overstock sets and price their impact
5. Emit stockout alerts for items running out within the threshold

GUARDRAILS:
- Stateless between calls: holds configuration only
- Never reads the clock: as_of is always passed in
- Never mutates input items
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any, Optional

from inventory_analytics.core.config import settings
from inventory_analytics.models.inventory import (
    AlertEvent,
    AlertSet,
    DepletionProjection,
    InventoryHealthReport,
    InventoryItem,
    InventorySnapshot,
    InventoryTrend,
    Recommendation,
    StockStatus,
)
from inventory_analytics.services.analytics import aggregator, classifier, projector
from inventory_analytics.services.analytics.recommendations import build_recommendations
from inventory_analytics.services.analytics.snapshot import load_snapshot

logger = logging.getLogger(__name__)


class InventoryAnalyticsEngine:
    """
    Inventory Analytics Engine
    
    Deterministic: identical snapshot and as_of give identical output.
    Outputs classifications, projections, impact figures and alert events only.
    """
    
    def __init__(
        self,
        loss_margin_rate: Optional[float] = None,
        alert_threshold_days: Optional[int] = None,
        empty_efficiency: Optional[int] = None,
        preview_limit: Optional[int] = None,
    ) -> None:
        self.loss_margin_rate = (
            settings.LOSS_MARGIN_RATE if loss_margin_rate is None else loss_margin_rate
        )
        self.alert_threshold_days = (
            settings.ALERT_THRESHOLD_DAYS if alert_threshold_days is None else alert_threshold_days
        )
        self.empty_efficiency = (
            settings.EMPTY_SNAPSHOT_EFFICIENCY if empty_efficiency is None else empty_efficiency
        )
        self.preview_limit = settings.PREVIEW_LIMIT if preview_limit is None else preview_limit
    
    # =========================================================================
    # SNAPSHOT BOUNDARY
    # =========================================================================
    
    def accept_snapshot(
        self,
        items: Iterable[InventoryItem | Mapping[str, Any]],
        trends: Iterable[InventoryTrend | Mapping[str, Any]] = (),
    ) -> InventorySnapshot:
        """Validate raw records. Raises InvalidItemError on bad input."""
        return load_snapshot(items, trends)
    
    # =========================================================================
    # PER-ITEM OPERATIONS
    # =========================================================================
    
    def classify(self, item: InventoryItem) -> StockStatus:
        return classifier.classify(item)
    
    def project(self, item: InventoryItem, as_of: datetime) -> DepletionProjection:
        return projector.project(item, as_of)
    
    # =========================================================================
    # SNAPSHOT OPERATIONS
    # =========================================================================
    
    def status_counts(self, items: Iterable[InventoryItem]) -> dict[StockStatus, int]:
        return classifier.status_counts(items)
    
    def project_all(self, items: Iterable[InventoryItem], as_of: datetime) -> dict[str, datetime]:
        return projector.project_all(items, as_of)
    
    def partition(
        self, items: Iterable[InventoryItem]
    ) -> tuple[list[InventoryItem], list[InventoryItem]]:
        return aggregator.partition(items)
    
    def build_alert_set(self, items: Sequence[InventoryItem]) -> AlertSet:
        return aggregator.build_alert_set(items, loss_margin_rate=self.loss_margin_rate)
    
    def evaluate_and_alert(
        self,
        items: Sequence[InventoryItem],
        as_of: datetime,
        threshold_days: Optional[int] = None,
    ) -> list[AlertEvent]:
        """Stockout alerts for items running out within threshold_days (default from settings)."""
        if threshold_days is None:
            threshold_days = self.alert_threshold_days
        return aggregator.evaluate_and_alert(items, as_of, threshold_days=threshold_days)
    
    def stock_efficiency(self, items: Sequence[InventoryItem]) -> int:
        return aggregator.stock_efficiency(items, empty_value=self.empty_efficiency)
    
    def recommendations(self, items: Sequence[InventoryItem]) -> list[Recommendation]:
        return build_recommendations(self.build_alert_set(items))
    
    # =========================================================================
    # PUBLIC API
    # =========================================================================
    
    def build_report(
        self,
        snapshot: InventorySnapshot,
        as_of: datetime,
        threshold_days: Optional[int] = None,
    ) -> InventoryHealthReport:
        """
        Evaluate a snapshot end to end.
        
        Args:
            snapshot: Validated snapshot (see accept_snapshot)
            as_of: Reference time for projections
            threshold_days: Alert horizon override
        
        Returns:
            InventoryHealthReport with everything the dashboard renders
        """
        items = list(snapshot.items)
        alert_set = self.build_alert_set(items)
        alerts = self.evaluate_and_alert(items, as_of, threshold_days)
        
        report = InventoryHealthReport(
            as_of=as_of,
            total_items=len(items),
            status_counts=self.status_counts(items),
            stock_efficiency=self.stock_efficiency(items),
            projections=[self.project(item, as_of) for item in items],
            alert_set=alert_set,
            alerts=alerts,
            recommendations=build_recommendations(alert_set),
            critical_preview=alert_set.critical[:self.preview_limit],
            overstock_preview=alert_set.overstock[:self.preview_limit],
            trends=list(snapshot.trends),
        )
        
        logger.info(
            f"Evaluated {report.total_items} items: "
            f"{len(alert_set.critical)} critical, {len(alert_set.overstock)} overstock, "
            f"{len(alerts)} alerts, efficiency {report.stock_efficiency}%"
        )
        return report


# Singleton instance
inventory_analytics_engine = InventoryAnalyticsEngine()
