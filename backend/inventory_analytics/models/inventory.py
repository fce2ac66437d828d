"""
Inventory Analytics - Inventory Health Schemas
Data contracts for stock classification, depletion projection and alerting.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory_analytics.core.types import Quantity


class StockStatus(str, Enum):
    """Three-way stock health classification."""
    STOCKOUT_RISK = "stockout-risk"
    OVERSTOCK = "overstock"
    OPTIMAL = "optimal"


class AlertSeverity(str, Enum):
    """Alert urgency levels."""
    CRITICAL = "critical"


class RecommendationAction(str, Enum):
    """Remediation actions surfaced next to flagged items."""
    ORDER_NOW = "ORDER_NOW"
    REVIEW_REORDER_POINT = "REVIEW_REORDER_POINT"
    EXPEDITE_SHIPPING = "EXPEDITE_SHIPPING"
    MONITOR_DEMAND = "MONITOR_DEMAND"
    REDUCE_EXCESS = "REDUCE_EXCESS"
    RUN_PROMOTION = "RUN_PROMOTION"
    REVIEW_STORAGE_COSTS = "REVIEW_STORAGE_COSTS"
    ADJUST_ORDER_QUANTITIES = "ADJUST_ORDER_QUANTITIES"


# =============================================================================
# SNAPSHOT RECORDS
# =============================================================================

class InventoryItem(BaseModel):
    """
    Immutable inventory record as supplied by the caller.
    
    Field names accept both snake_case and the camelCase used by dashboard
    payloads (currentStock, minThreshold, ...).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
    
    id: str
    name: str
    current_stock: Quantity
    min_threshold: Quantity
    max_threshold: Quantity
    daily_demand: Quantity
    reorder_point: Quantity = 0.0
    storage_per_unit: Quantity = 0.0
    cost_per_unit: Quantity = 0.0
    predicted_stockout: Optional[str] = None  # upstream forecast, passed through


class InventoryTrend(BaseModel):
    """Time-series point for trend charts. Never computed by the core."""
    model_config = ConfigDict(frozen=True)
    
    date: str
    stock: float
    demand: float
    predicted: float


class InventorySnapshot(BaseModel):
    """A validated, complete set of inventory records at one point in time."""
    model_config = ConfigDict(frozen=True)
    
    items: tuple[InventoryItem, ...] = ()
    trends: tuple[InventoryTrend, ...] = ()
    
    @property
    def item_ids(self) -> list[str]:
        return [item.id for item in self.items]


# =============================================================================
# DERIVED VALUES
# =============================================================================

class DepletionProjection(BaseModel):
    """Run-rate stockout projection for a single item."""
    item_id: str
    item_name: str
    days_until_stockout: Optional[int] = Field(None, ge=0)  # None = unbounded
    projected_stockout_date: Optional[datetime] = None
    
    @property
    def is_unbounded(self) -> bool:
        return self.days_until_stockout is None


class CriticalItemImpact(BaseModel):
    """Impact figures for an item at or below its minimum threshold."""
    item_id: str
    item_name: str
    current_stock: float
    min_threshold: float
    daily_demand: float
    reorder_point: float
    days_until_stockout: Optional[int] = None
    shortfall: float
    potential_loss: float


class OverstockItemImpact(BaseModel):
    """Impact figures for an item at or above its maximum threshold."""
    item_id: str
    item_name: str
    current_stock: float
    max_threshold: float
    excess_stock: float
    storage_waste: float
    capital_tied: float


class AlertSet(BaseModel):
    """Critical and overstock items of one snapshot with their impact totals."""
    critical: list[CriticalItemImpact] = Field(default_factory=list)
    overstock: list[OverstockItemImpact] = Field(default_factory=list)
    total_potential_loss: float = 0.0
    total_storage_waste: float = 0.0
    total_capital_tied: float = 0.0


class AlertEvent(BaseModel):
    """
    Stockout warning consumed by the notifier.
    Deterministic output schema - message is display text only.
    """
    item_id: str
    item_name: str
    days_until_stockout: int = Field(..., ge=0)
    projected_stockout_date: datetime
    severity: AlertSeverity = AlertSeverity.CRITICAL
    message: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "item_id": "sku-1042",
                "item_name": "Chicken Breast 5lb",
                "days_until_stockout": 2,
                "projected_stockout_date": "2024-03-03T09:00:00",
                "severity": "critical",
                "message": "Critical: Chicken Breast 5lb will stock out in 2 days!",
            }
        }


class Recommendation(BaseModel):
    """A remediation step for one item, or for the whole snapshot when item_id is None."""
    action: RecommendationAction
    message: str
    item_id: Optional[str] = None
    quantity: Optional[float] = None


class InventoryHealthReport(BaseModel):
    """Everything the dashboard renders for one snapshot."""
    as_of: datetime
    total_items: int
    status_counts: dict[StockStatus, int]
    stock_efficiency: int = Field(..., ge=0, le=100)
    projections: list[DepletionProjection]
    alert_set: AlertSet
    alerts: list[AlertEvent]
    recommendations: list[Recommendation]
    critical_preview: list[CriticalItemImpact]
    overstock_preview: list[OverstockItemImpact]
    trends: list[InventoryTrend] = Field(default_factory=list)


# =============================================================================
# API CONTRACTS
# =============================================================================

class AnalyticsRequest(BaseModel):
    """Snapshot submitted for evaluation."""
    items: list[dict[str, Any]]
    trends: list[InventoryTrend] = Field(default_factory=list)
    as_of: Optional[datetime] = None  # defaults to now at the API edge


class ItemStatus(BaseModel):
    """Classification of a single item."""
    item_id: str
    item_name: str
    status: StockStatus


class EfficiencyResponse(BaseModel):
    """Share of items in the optimal band."""
    stock_efficiency: int
    total_items: int
