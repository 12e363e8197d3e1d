"""
Planned item financial metrics.

All money and quantity arithmetic is done in Decimal and rounded half-up to
two decimals.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

ZERO = Decimal('0')
HUNDRED = Decimal('100')
CENTS = Decimal('0.01')

HIGH_COST_THRESHOLD = Decimal('1000')
LARGE_QUANTITY_THRESHOLD = Decimal('100')
WELL_BUDGETED_TOLERANCE = Decimal('0.10')
IMMEDIATE_ATTENTION_OVERRUN = Decimal('1.20')

# (slug, lower bound exclusive, upper bound inclusive)
DISTRIBUTION_QUANTITY_BUCKETS = {
    'small': (None, Decimal('10')),
    'medium': (Decimal('10'), Decimal('50')),
    'large': (Decimal('50'), Decimal('100')),
    'bulk': (Decimal('100'), None),
}


def _decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value) -> Decimal:
    return _decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def total_cost(unit_cost, planned_quantity) -> Decimal:
    return quantize(_decimal(unit_cost) * _decimal(planned_quantity))


def variance(allocated_amount, unit_cost, planned_quantity) -> Decimal:
    return quantize(_decimal(allocated_amount) - total_cost(unit_cost, planned_quantity))


def budget_utilization(allocated_amount, unit_cost, planned_quantity) -> Decimal:
    """Total cost as a percentage of the allocated amount, 0 when nothing is allocated."""
    allocated = _decimal(allocated_amount)
    if allocated <= ZERO:
        return ZERO
    ratio = (total_cost(unit_cost, planned_quantity) / allocated).quantize(
        Decimal('0.0001'), rounding=ROUND_HALF_UP
    )
    return quantize(ratio * HUNDRED)


def planning_status(utilization) -> str:
    utilization = _decimal(utilization)
    if utilization == ZERO:
        return 'NOT_PLANNED'
    if utilization <= 50:
        return 'UNDER_PLANNED'
    if utilization <= 100:
        return 'WELL_PLANNED'
    if utilization <= 120:
        return 'OVER_PLANNED'
    return 'SIGNIFICANTLY_OVER_PLANNED'


def cost_category(unit_cost) -> str:
    unit_cost = _decimal(unit_cost)
    if unit_cost <= ZERO:
        return 'NO_COST'
    if unit_cost <= 100:
        return 'LOW_COST'
    if unit_cost <= 1000:
        return 'MEDIUM_COST'
    if unit_cost <= 10000:
        return 'HIGH_COST'
    return 'VERY_HIGH_COST'


def quantity_scale(planned_quantity) -> str:
    quantity = _decimal(planned_quantity)
    if quantity <= ZERO:
        return 'NO_QUANTITY'
    if quantity <= 10:
        return 'SMALL_SCALE'
    if quantity <= 100:
        return 'MEDIUM_SCALE'
    if quantity <= 1000:
        return 'LARGE_SCALE'
    return 'VERY_LARGE_SCALE'


def distribution_complexity(distributions_count: Optional[int]) -> str:
    count = distributions_count or 0
    if count == 0:
        return 'NO_DISTRIBUTION'
    if count == 1:
        return 'SIMPLE_DISTRIBUTION'
    if count <= 5:
        return 'MODERATE_DISTRIBUTION'
    if count <= 10:
        return 'COMPLEX_DISTRIBUTION'
    return 'VERY_COMPLEX_DISTRIBUTION'


# =============================================================================
# ITEM DISTRIBUTION
# =============================================================================

def distribution_category(quantity) -> str:
    quantity = _decimal(quantity)
    if quantity <= ZERO:
        return 'NO_DISTRIBUTION'
    if quantity <= 1:
        return 'UNIT_DISTRIBUTION'
    if quantity <= 10:
        return 'SMALL_DISTRIBUTION'
    if quantity <= 50:
        return 'MEDIUM_DISTRIBUTION'
    if quantity <= 100:
        return 'LARGE_DISTRIBUTION'
    return 'BULK_DISTRIBUTION'


def distribution_percentage(quantity, planned_quantity) -> Decimal:
    planned = _decimal(planned_quantity)
    if planned <= ZERO:
        return ZERO
    ratio = (_decimal(quantity) / planned).quantize(Decimal('0.0001'), rounding=ROUND_HALF_UP)
    return quantize(ratio * HUNDRED)


def distribution_cost(quantity, unit_cost) -> Decimal:
    return quantize(_decimal(quantity) * _decimal(unit_cost))


def exceeds_planned_quantity(already_distributed, requested, planned_quantity) -> bool:
    return _decimal(already_distributed) + _decimal(requested) > _decimal(planned_quantity)
