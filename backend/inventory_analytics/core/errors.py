"""
Inventory Analytics - Error Types
"""

from typing import Optional


class InvalidItemError(Exception):
    """Raised when an inventory record is rejected at the snapshot boundary."""

    def __init__(self, item_id: Optional[str], reason: str) -> None:
        self.item_id = item_id
        self.reason = reason
        label = item_id if item_id is not None else "<unknown>"
        super().__init__(f"Invalid inventory item {label}: {reason}")
