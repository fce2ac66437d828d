"""
Inventory Analytics - Snapshot Boundary

Raw records are validated once, here, when a snapshot is accepted. The
classifier, projector and aggregator assume well-formed items and never
re-check.

Rejected:
    - records that do not parse into an InventoryItem
    - negative or non-finite quantities and unit costs
    - min_threshold > max_threshold
    - duplicate item ids (derived structures are keyed by id)
    - trend points that do not parse (reported with item_id None)
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import ValidationError

from inventory_analytics.core.errors import InvalidItemError
from inventory_analytics.models.inventory import (
    InventoryItem,
    InventorySnapshot,
    InventoryTrend,
)

logger = logging.getLogger(__name__)

NON_NEGATIVE_FIELDS = (
    "current_stock",
    "min_threshold",
    "max_threshold",
    "daily_demand",
    "reorder_point",
    "storage_per_unit",
    "cost_per_unit",
)

RawItem = Union[InventoryItem, Mapping[str, Any]]
RawTrend = Union[InventoryTrend, Mapping[str, Any]]


def validate_item(item: InventoryItem) -> InventoryItem:
    """Check value ranges of a parsed item. Returns the item unchanged."""
    for field_name in NON_NEGATIVE_FIELDS:
        value = getattr(item, field_name)
        if not math.isfinite(value):
            raise InvalidItemError(item.id, f"{field_name} must be finite, got {value}")
        if value < 0:
            raise InvalidItemError(item.id, f"{field_name} must be non-negative, got {value}")
    
    if item.min_threshold > item.max_threshold:
        raise InvalidItemError(
            item.id,
            f"min_threshold ({item.min_threshold}) exceeds max_threshold ({item.max_threshold})",
        )
    return item


def _parse_item(raw: RawItem) -> InventoryItem:
    if isinstance(raw, InventoryItem):
        return raw
    try:
        return InventoryItem.model_validate(raw)
    except ValidationError as e:
        item_id = raw.get("id") if isinstance(raw, Mapping) else None
        raise InvalidItemError(
            str(item_id) if item_id is not None else None,
            f"malformed record ({e.error_count()} errors): {e.errors()[0]['msg']}",
        ) from e


def _parse_trend(index: int, raw: RawTrend) -> InventoryTrend:
    if isinstance(raw, InventoryTrend):
        return raw
    try:
        return InventoryTrend.model_validate(raw)
    except ValidationError as e:
        raise InvalidItemError(
            None,
            f"malformed trend point {index} ({e.error_count()} errors): {e.errors()[0]['msg']}",
        ) from e


def load_snapshot(
    items: Iterable[RawItem],
    trends: Iterable[RawTrend] = (),
) -> InventorySnapshot:
    """
    Validate raw records into an immutable snapshot.
    
    Raises:
        InvalidItemError: on the first rejected record or trend point
    """
    parsed: list[InventoryItem] = []
    seen_ids: set[str] = set()
    
    for raw in items:
        try:
            item = validate_item(_parse_item(raw))
            if item.id in seen_ids:
                raise InvalidItemError(item.id, "duplicate item id")
        except InvalidItemError as e:
            logger.warning(f"Rejected snapshot: {e}")
            raise
        seen_ids.add(item.id)
        parsed.append(item)
    
    try:
        parsed_trends = [_parse_trend(i, t) for i, t in enumerate(trends)]
    except InvalidItemError as e:
        logger.warning(f"Rejected snapshot: {e}")
        raise
    
    logger.debug(f"Accepted snapshot: {len(parsed)} items, {len(parsed_trends)} trend points")
    return InventorySnapshot(items=tuple(parsed), trends=tuple(parsed_trends))
