"""
Inventory Analytics - Engine & Report Tests
"""

import pytest

from inventory_analytics.models.inventory import RecommendationAction, StockStatus
from inventory_analytics.services.analytics.engine import (
    InventoryAnalyticsEngine,
    inventory_analytics_engine,
)
from inventory_analytics.services.analytics.recommendations import (
    build_recommendations,
    for_critical_item,
    for_overstock_item,
    overview,
)
from inventory_analytics.services.analytics.aggregator import (
    build_alert_set,
    critical_impact,
    overstock_impact,
)

from conftest import make_item


class TestEngineConfiguration:
    """Settings-backed defaults and per-instance overrides."""
    
    def test_defaults_from_settings(self):
        engine = InventoryAnalyticsEngine()
        assert engine.loss_margin_rate == pytest.approx(0.3)
        assert engine.alert_threshold_days == 7
        assert engine.empty_efficiency == 100
        assert engine.preview_limit == 3
    
    def test_loss_margin_override(self, critical_item):
        engine = InventoryAnalyticsEngine(loss_margin_rate=0.1)
        alert_set = engine.build_alert_set([critical_item])
        assert alert_set.critical[0].potential_loss == pytest.approx(10.0)
    
    def test_threshold_override(self, as_of):
        engine = InventoryAnalyticsEngine(alert_threshold_days=2)
        items = [
            make_item("two", current_stock=4, daily_demand=2),
            make_item("three", current_stock=6, daily_demand=2),
        ]
        assert [e.item_id for e in engine.evaluate_and_alert(items, as_of)] == ["two"]
        assert len(engine.evaluate_and_alert(items, as_of, threshold_days=3)) == 2
    
    def test_empty_efficiency_override(self):
        assert InventoryAnalyticsEngine(empty_efficiency=0).stock_efficiency([]) == 0
    
    def test_singleton(self):
        assert isinstance(inventory_analytics_engine, InventoryAnalyticsEngine)


class TestBuildReport:
    """End-to-end evaluation of a snapshot."""
    
    def test_report_from_dashboard_payload(self, raw_items, as_of):
        engine = InventoryAnalyticsEngine()
        snapshot = engine.accept_snapshot(
            raw_items,
            [{"date": "2024-02-29", "stock": 37, "demand": 3, "predicted": 3.1}],
        )
        report = engine.build_report(snapshot, as_of)
        
        assert report.as_of == as_of
        assert report.total_items == 3
        assert report.status_counts == {
            StockStatus.STOCKOUT_RISK: 1,
            StockStatus.OVERSTOCK: 1,
            StockStatus.OPTIMAL: 1,
        }
        assert report.stock_efficiency == 33
        assert [p.item_id for p in report.projections] == ["sku-crit", "sku-over", "sku-ok"]
        assert report.projections[1].is_unbounded
        assert [a.item_id for a in report.alerts] == ["sku-crit"]
        assert report.alert_set.total_potential_loss == pytest.approx(30.0)
        assert report.alert_set.total_storage_waste == pytest.approx(45.0)
        assert report.alert_set.total_capital_tied == pytest.approx(300.0)
        assert len(report.trends) == 1
        assert report.recommendations
    
    def test_previews_are_capped(self, as_of):
        engine = InventoryAnalyticsEngine(preview_limit=2)
        items = [make_item(f"c{i}", current_stock=i) for i in range(5)]
        report = engine.build_report(engine.accept_snapshot(items), as_of)
        assert len(report.alert_set.critical) == 5
        assert [c.item_id for c in report.critical_preview] == ["c0", "c1"]
        assert report.overstock_preview == []
    
    def test_empty_snapshot_report(self, as_of):
        engine = InventoryAnalyticsEngine()
        report = engine.build_report(engine.accept_snapshot([]), as_of)
        assert report.total_items == 0
        assert report.stock_efficiency == 100
        assert report.alerts == []
        assert report.recommendations == []
    
    def test_report_is_reproducible(self, raw_items, as_of):
        engine = InventoryAnalyticsEngine()
        snapshot = engine.accept_snapshot(raw_items)
        assert engine.build_report(snapshot, as_of) == engine.build_report(snapshot, as_of)


class TestRecommendations:
    """Remediation steps for flagged items."""
    
    def test_critical_item_steps(self, critical_item):
        steps = for_critical_item(critical_impact(critical_item))
        assert [s.action for s in steps] == [
            RecommendationAction.ORDER_NOW,
            RecommendationAction.REVIEW_REORDER_POINT,
            RecommendationAction.EXPEDITE_SHIPPING,
            RecommendationAction.MONITOR_DEMAND,
        ]
        order = steps[0]
        assert order.quantity == 5
        assert order.item_id == "sku-crit"
        assert "Order 5 units" in order.message
        assert "$30.00" in order.message
        assert steps[1].message == "Review reorder point (currently 12)"
    
    def test_fractional_shortfall_rounds_up(self):
        impact = critical_impact(make_item(current_stock=7.5, min_threshold=10))
        assert for_critical_item(impact)[0].quantity == 3
    
    def test_no_order_when_exactly_at_min(self):
        impact = critical_impact(make_item(current_stock=10, min_threshold=10))
        actions = [s.action for s in for_critical_item(impact)]
        assert RecommendationAction.ORDER_NOW not in actions
    
    def test_overstock_item_steps(self, overstock_item):
        steps = for_overstock_item(overstock_impact(overstock_item))
        assert steps[0].action == RecommendationAction.REDUCE_EXCESS
        assert steps[0].quantity == 30
        assert "$300.00" in steps[0].message
        assert "$45.00" in steps[1].message
    
    def test_overview_by_category(self, critical_item, overstock_item):
        only_critical = overview(build_alert_set([critical_item]))
        assert [s.message for s in only_critical] == [
            "Place immediate orders for high-risk items",
            "Review and adjust reorder points",
            "Consider expedited shipping options",
        ]
        only_overstock = overview(build_alert_set([overstock_item]))
        assert [s.message for s in only_overstock] == [
            "Consider promotional activities",
            "Review storage costs",
            "Adjust future order quantities",
        ]
        assert all(s.item_id is None for s in only_critical + only_overstock)
    
    def test_overview_comes_first(self, mixed_items):
        steps = build_recommendations(build_alert_set(mixed_items))
        assert steps[0].item_id is None
        assert steps[-1].item_id == "sku-over"
    
    def test_engine_recommendations(self, mixed_items):
        steps = InventoryAnalyticsEngine().recommendations(mixed_items)
        assert {s.item_id for s in steps} == {None, "sku-crit", "sku-over"}


class TestLongHorizonReport:
    """Slow movers must not break evaluation of the rest of the snapshot."""
    
    def test_report_with_slow_and_stalled_items(self, as_of):
        engine = InventoryAnalyticsEngine()
        snapshot = engine.accept_snapshot([
            make_item("slow", "Bulk Salt", current_stock=5_000_000, daily_demand=1),
            make_item("vast", "Sand", current_stock=1e300, daily_demand=1e-300),
            make_item("soon", "Yeast", current_stock=3, daily_demand=1),
        ])
        report = engine.build_report(snapshot, as_of)
        
        by_id = {p.item_id: p for p in report.projections}
        assert by_id["slow"].days_until_stockout == 5_000_000
        assert by_id["slow"].projected_stockout_date is None
        assert by_id["vast"].is_unbounded
        assert by_id["soon"].days_until_stockout == 3
        assert [a.item_id for a in report.alerts] == ["soon"]
        assert [o.item_id for o in report.alert_set.overstock] == ["slow", "vast"]
        assert report.alert_set.total_capital_tied > 0
        assert report.recommendations
    
    def test_project_all_and_alerts_skip_slow_mover(self, as_of):
        engine = InventoryAnalyticsEngine()
        items = [make_item("slow", current_stock=5_000_000, daily_demand=1)]
        assert engine.project_all(items, as_of) == {}
        assert engine.evaluate_and_alert(items, as_of, threshold_days=10**9) == []
