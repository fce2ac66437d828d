"""
Inventory Analytics - API Routes
Dashboard endpoints over the analytics engine.

The router is the only place that reads the clock: when a request omits
as_of, the current UTC time is used.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from inventory_analytics.core.errors import InvalidItemError
from inventory_analytics.models.inventory import (
    AlertEvent,
    AlertSet,
    AnalyticsRequest,
    DepletionProjection,
    EfficiencyResponse,
    InventoryHealthReport,
    InventorySnapshot,
    ItemStatus,
)
from inventory_analytics.services.analytics import inventory_analytics_engine

router = APIRouter(prefix="/inventory-analytics", tags=["Inventory Analytics"])


def _accept(request: AnalyticsRequest) -> InventorySnapshot:
    """Validate the submitted snapshot, mapping rejections to 422."""
    try:
        return inventory_analytics_engine.accept_snapshot(request.items, request.trends)
    except InvalidItemError as e:
        raise HTTPException(
            status_code=422,
            detail={"item_id": e.item_id, "reason": e.reason},
        )


def _as_of(request: AnalyticsRequest) -> datetime:
    return request.as_of or datetime.now(timezone.utc)


# =============================================================================
# CLASSIFICATION & PROJECTION
# =============================================================================

@router.post("/classify", response_model=list[ItemStatus])
async def classify_items(request: AnalyticsRequest) -> list[ItemStatus]:
    """Stock status of every item, in input order."""
    snapshot = _accept(request)
    return [
        ItemStatus(
            item_id=item.id,
            item_name=item.name,
            status=inventory_analytics_engine.classify(item),
        )
        for item in snapshot.items
    ]


@router.post("/projections", response_model=list[DepletionProjection])
async def project_items(request: AnalyticsRequest) -> list[DepletionProjection]:
    """
    Run-rate depletion projection for every item.
    
    Items without demand come back with null days and date (unbounded).
    """
    snapshot = _accept(request)
    as_of = _as_of(request)
    return [inventory_analytics_engine.project(item, as_of) for item in snapshot.items]


# =============================================================================
# ALERTS & IMPACT
# =============================================================================

@router.post("/alerts", response_model=list[AlertEvent])
async def evaluate_alerts(
    request: AnalyticsRequest,
    threshold_days: Optional[int] = Query(None, ge=0),
) -> list[AlertEvent]:
    """Stockout alerts for items running out within threshold_days."""
    snapshot = _accept(request)
    return inventory_analytics_engine.evaluate_and_alert(
        list(snapshot.items),
        _as_of(request),
        threshold_days=threshold_days,
    )


@router.post("/alert-set", response_model=AlertSet)
async def get_alert_set(request: AnalyticsRequest) -> AlertSet:
    """Critical and overstock items with potential loss, storage waste and capital tied up."""
    snapshot = _accept(request)
    return inventory_analytics_engine.build_alert_set(list(snapshot.items))


@router.post("/efficiency", response_model=EfficiencyResponse)
async def get_stock_efficiency(request: AnalyticsRequest) -> EfficiencyResponse:
    """Share of items within their optimal band."""
    snapshot = _accept(request)
    items = list(snapshot.items)
    return EfficiencyResponse(
        stock_efficiency=inventory_analytics_engine.stock_efficiency(items),
        total_items=len(items),
    )


@router.post("/report", response_model=InventoryHealthReport)
async def get_report(
    request: AnalyticsRequest,
    threshold_days: Optional[int] = Query(None, ge=0),
) -> InventoryHealthReport:
    """Full inventory health report for the dashboard."""
    snapshot = _accept(request)
    return inventory_analytics_engine.build_report(
        snapshot,
        _as_of(request),
        threshold_days=threshold_days,
    )
