"""
CardFolio — Inventory rules
"""
from decimal import Decimal, ROUND_HALF_UP

UNIT_COST_QUANTUM = Decimal("0.0001")


def compute_unit_cost(invoice_cost: Decimal | None, units: int | None) -> Decimal:
    """invoice_cost / units when both are present and units > 0, otherwise 0."""
    if not invoice_cost or units is None or units <= 0:
        return Decimal("0")
    return (Decimal(invoice_cost) / Decimal(units)).quantize(UNIT_COST_QUANTUM, rounding=ROUND_HALF_UP)
