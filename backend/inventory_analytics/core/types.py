"""
Inventory Analytics - Canonical Quantity & Money Helpers
========================================================

Quantities and unit costs arrive from the presentation layer as JSON numbers,
numeric strings or Decimals. They are normalised to float here so every
downstream calculation works on one numeric type.

Range checks (negative, NaN, infinity) are NOT done here. They belong to the
snapshot boundary (services/analytics/snapshot.py), which reports them with
the offending item id.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Annotated, Any

from pydantic import BeforeValidator, WithJsonSchema


# =============================================================================
# QUANTITY (float)
# =============================================================================

def _validate_quantity(v: Any) -> float:
    """
    Validate and convert to a float quantity.
    
    Accepts:
        - int / float: Passed through as float
        - Decimal: Converted to float
        - str: Parsed as Decimal, then converted
        - bool: REJECTED (raises ValueError)
    """
    if isinstance(v, bool):
        raise ValueError(f"Boolean not allowed for quantity. Got: {v}")
    
    if isinstance(v, (int, float)):
        return float(v)
    
    if isinstance(v, Decimal):
        return float(v)
    
    if isinstance(v, str):
        try:
            return float(Decimal(v.strip()))
        except InvalidOperation:
            raise ValueError(f"Invalid quantity: {v}")
    
    raise ValueError(f"Invalid quantity type: {type(v)}")


Quantity = Annotated[
    float,
    BeforeValidator(_validate_quantity),
    WithJsonSchema({"type": "number", "description": "Non-negative quantity or unit cost"}),
]


# =============================================================================
# ROUNDING & DISPLAY
# =============================================================================

def _quantize(value: float, places: int) -> Decimal:
    """Half-up quantize with enough precision for any finite float."""
    dec = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, dec.adjusted() + places + 2)
        return dec.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def round_half_up(value: float, places: int = 0) -> float:
    """Round half away from zero (dashboard rounding, not banker's rounding)."""
    return float(_quantize(value, places))


def format_money(value: float, places: int = 2) -> str:
    """Format a monetary value for display, e.g. 30 -> "$30.00"."""
    return f"${_quantize(value, places)}"


def format_units(value: float) -> str:
    """Render a quantity without a trailing .0 for whole units."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


__all__ = [
    "Quantity",
    "round_half_up",
    "format_money",
    "format_units",
]
