"""
Tests for the planned item and distribution metrics.
"""

from decimal import Decimal

import pytest

from domain.plan import metrics


def test_total_cost_is_rounded_half_up():
    assert metrics.total_cost(Decimal('10.005'), Decimal('1')) == Decimal('10.01')
    assert metrics.total_cost('2.50', '4') == Decimal('10.00')
    assert metrics.total_cost(None, Decimal('3')) == Decimal('0.00')


def test_variance_is_allocated_minus_total_cost():
    assert metrics.variance(Decimal('800'), Decimal('100'), Decimal('10')) == Decimal('-200.00')
    assert metrics.variance(Decimal('1200'), Decimal('100'), Decimal('10')) == Decimal('200.00')


def test_budget_utilization():
    assert metrics.budget_utilization(Decimal('800'), Decimal('100'), Decimal('10')) == Decimal('125.00')
    assert metrics.budget_utilization(Decimal('0'), Decimal('100'), Decimal('10')) == Decimal('0')
    assert metrics.budget_utilization(Decimal('3'), Decimal('1'), Decimal('1')) == Decimal('33.33')


@pytest.mark.parametrize('utilization,expected', [
    (Decimal('0'), 'NOT_PLANNED'),
    (Decimal('50'), 'UNDER_PLANNED'),
    (Decimal('100'), 'WELL_PLANNED'),
    (Decimal('120'), 'OVER_PLANNED'),
    (Decimal('120.01'), 'SIGNIFICANTLY_OVER_PLANNED'),
])
def test_planning_status(utilization, expected):
    assert metrics.planning_status(utilization) == expected


@pytest.mark.parametrize('unit_cost,expected', [
    (Decimal('0'), 'NO_COST'),
    (Decimal('100'), 'LOW_COST'),
    (Decimal('1000'), 'MEDIUM_COST'),
    (Decimal('10000'), 'HIGH_COST'),
    (Decimal('10000.01'), 'VERY_HIGH_COST'),
])
def test_cost_category(unit_cost, expected):
    assert metrics.cost_category(unit_cost) == expected


def test_quantity_scale_and_distribution_complexity():
    assert metrics.quantity_scale(Decimal('10')) == 'SMALL_SCALE'
    assert metrics.quantity_scale(Decimal('1001')) == 'VERY_LARGE_SCALE'
    assert metrics.distribution_complexity(None) == 'NO_DISTRIBUTION'
    assert metrics.distribution_complexity(1) == 'SIMPLE_DISTRIBUTION'
    assert metrics.distribution_complexity(11) == 'VERY_COMPLEX_DISTRIBUTION'


def test_distribution_metrics():
    assert metrics.distribution_category(Decimal('1')) == 'UNIT_DISTRIBUTION'
    assert metrics.distribution_category(Decimal('150')) == 'BULK_DISTRIBUTION'
    assert metrics.distribution_percentage(Decimal('4'), Decimal('10')) == Decimal('40.00')
    assert metrics.distribution_percentage(Decimal('4'), Decimal('0')) == Decimal('0')
    assert metrics.distribution_cost(Decimal('4'), Decimal('99.99')) == Decimal('399.96')


def test_exceeds_planned_quantity():
    assert not metrics.exceeds_planned_quantity(Decimal('6'), Decimal('4'), Decimal('10'))
    assert metrics.exceeds_planned_quantity(Decimal('6'), Decimal('4.01'), Decimal('10'))
    assert not metrics.exceeds_planned_quantity(None, Decimal('10'), Decimal('10'))
