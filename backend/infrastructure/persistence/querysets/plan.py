"""
Plan QuerySets.

Filtered reads for the budget planning entities: domains, rubrics, items,
item statuses, budget types, financial operations, budget modifications,
planned items and item distributions.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from django.db import models
from django.db.models import Avg, Count, DecimalField, ExpressionWrapper, F, Max, Min, Sum
from django.db.models.functions import Abs, Coalesce
from django.utils import timezone

from domain.plan import classification, metrics
from domain.shared.value_objects import Priority
from .base import ChildCountQuerySet, DesignationQuerySet, SearchableQuerySet, count_statistics, keyword_q

MONEY = DecimalField(max_digits=32, decimal_places=4)


def _between(queryset, field: str, minimum, maximum):
    if minimum is not None:
        queryset = queryset.filter(**{f'{field}__gte': minimum})
    if maximum is not None:
        queryset = queryset.filter(**{f'{field}__lte': maximum})
    return queryset


# =============================================================================
# CLASSIFICATION HIERARCHY
# =============================================================================

class DomainQuerySet(ChildCountQuerySet):
    child_relation = 'rubrics'

    def with_priority(self, priority: Priority):
        categories = classification.DOMAIN_CLASSIFIER.by_codes(
            classification.domain_categories_with_priority(priority)
        )
        if priority is Priority.NORMAL:
            # Unclassified domains default to normal priority.
            others = [
                category for category in classification.DOMAIN_CLASSIFIER.categories
                if category not in categories
            ]
            return self.in_any_category(categories) | self.outside_categories(others)
        return self.in_any_category(categories)

    def requiring_executive_oversight(self):
        return self.with_priority(Priority.CRITICAL)


class RubricQuerySet(ChildCountQuerySet):
    child_relation = 'items'

    def for_domain(self, domain_id):
        return self.filter(domain_id=domain_id)

    def in_domain_category(self, category):
        fields = [f'domain__{field}' for field in self.designation_fields]
        return self.filter(keyword_q(category, fields))


class ItemQuerySet(ChildCountQuerySet):
    child_relation = 'planned_items'

    def for_rubric(self, rubric_id):
        return self.filter(rubric_id=rubric_id)

    def for_domain(self, domain_id):
        return self.filter(rubric__domain_id=domain_id)


class ItemStatusQuerySet(DesignationQuerySet):

    def operational(self):
        categories = classification.ITEM_STATUS_CLASSIFIER.by_codes(classification.OPERATIONAL_STATUSES)
        return self.in_any_category(categories)

    def non_operational(self):
        categories = classification.ITEM_STATUS_CLASSIFIER.by_codes(classification.OPERATIONAL_STATUSES)
        return self.outside_categories(categories)

    def requiring_action(self):
        categories = classification.ITEM_STATUS_CLASSIFIER.by_codes(classification.ACTION_REQUIRED_STATUSES)
        return self.in_any_category(categories)

    def with_priority(self, priority: Priority):
        categories = classification.ITEM_STATUS_CLASSIFIER.by_codes(
            classification.item_status_categories_with_priority(priority)
        )
        return self.in_any_category(categories)


# =============================================================================
# BUDGET
# =============================================================================

class BudgetTypeQuerySet(DesignationQuerySet):
    search_fields = (
        'designation_fr', 'designation_en', 'designation_ar',
        'acronym_fr', 'acronym_en', 'acronym_ar',
    )


class FinancialOperationQuerySet(SearchableQuerySet):
    search_fields = ('operation',)

    def in_category(self, category):
        return self.filter(keyword_q(category, ('operation',)))

    def for_year(self, year):
        return self.filter(budget_year=str(year))

    def current_year(self):
        return self.for_year(timezone.localdate().year)

    def future_years(self):
        return self.filter(budget_year__gt=str(timezone.localdate().year))

    def past_years(self):
        return self.filter(budget_year__lt=str(timezone.localdate().year))

    def for_budget_type(self, budget_type_id):
        return self.filter(budget_type_id=budget_type_id)

    def year_range(self, start_year, end_year):
        queryset = self
        if start_year is not None:
            queryset = queryset.filter(budget_year__gte=str(start_year))
        if end_year is not None:
            queryset = queryset.filter(budget_year__lte=str(end_year))
        return queryset

    def budget_years(self) -> list:
        return list(self.order_by('budget_year').values_list('budget_year', flat=True).distinct())


class BudgetModificationQuerySet(SearchableQuerySet):
    search_fields = ('object', 'description')

    def for_demande(self, document_id):
        return self.filter(demande_id=document_id)

    def for_response(self, document_id):
        return self.filter(response_id=document_id)

    def pending(self):
        return self.filter(approval_date__isnull=True)

    def approved(self, today: Optional[date] = None):
        return self.filter(approval_date__lte=today or timezone.localdate())

    def scheduled(self, today: Optional[date] = None):
        return self.filter(approval_date__gt=today or timezone.localdate())

    def with_status(self, status: str):
        return {
            classification.PENDING_APPROVAL: self.pending,
            classification.APPROVED: self.approved,
            classification.SCHEDULED_FOR_APPROVAL: self.scheduled,
        }[status]()

    def approval_date_between(self, start: Optional[date], end: Optional[date]):
        return _between(self, 'approval_date', start, end)

    def for_year(self, year: int):
        return self.filter(approval_date__year=year)

    def current_year(self):
        return self.for_year(timezone.localdate().year)

    def current_month(self):
        today = timezone.localdate()
        return self.filter(approval_date__year=today.year, approval_date__month=today.month)

    def recent(self, days: int = 30):
        today = timezone.localdate()
        return self.filter(approval_date__gte=today - timedelta(days=days), approval_date__lte=today)

    def of_type(self, category):
        return self.filter(keyword_q(category, ('object',)))


# =============================================================================
# PLANNED ITEMS
# =============================================================================

def _total_cost_expression():
    return ExpressionWrapper(
        F('unit_cost') * F('planned_quantity'),
        output_field=MONEY,
    )


class PlannedItemQuerySet(SearchableQuerySet):
    search_fields = ('designation',)

    def with_financials(self):
        """Annotate `planned_total` and `budget_excess` (planned total minus allocated amount)."""
        return self.annotate(planned_total=_total_cost_expression()).annotate(
            budget_excess=ExpressionWrapper(F('planned_total') - F('allocated_amount'), output_field=MONEY)
        )

    def with_distributions_count(self):
        return self.annotate(distribution_records=Count('distributions', distinct=True))

    def for_item(self, item_id):
        return self.filter(item_id=item_id)

    def for_item_status(self, item_status_id):
        return self.filter(item_status_id=item_status_id)

    def for_financial_operation(self, financial_operation_id):
        return self.filter(financial_operation_id=financial_operation_id)

    def for_budget_modification(self, budget_modification_id):
        return self.filter(budget_modification_id=budget_modification_id)

    def for_rubric(self, rubric_id):
        return self.filter(item__rubric_id=rubric_id)

    def for_domain(self, domain_id):
        return self.filter(item__rubric__domain_id=domain_id)

    def for_budget_type(self, budget_type_id):
        return self.filter(financial_operation__budget_type_id=budget_type_id)

    def with_distributions(self):
        return self.filter(distributions__isnull=False).distinct()

    def without_distributions(self):
        return self.filter(distributions__isnull=True)

    def with_budget_modification(self):
        return self.filter(budget_modification__isnull=False)

    def without_budget_modification(self):
        return self.filter(budget_modification__isnull=True)

    def cost_range(self, minimum, maximum):
        return _between(self, 'unit_cost', minimum, maximum).order_by('unit_cost')

    def quantity_range(self, minimum, maximum):
        return _between(self, 'planned_quantity', minimum, maximum).order_by('-planned_quantity')

    def allocated_amount_range(self, minimum, maximum):
        return _between(self, 'allocated_amount', minimum, maximum).order_by('-allocated_amount')

    def total_cost_range(self, minimum, maximum):
        return _between(self.with_financials(), 'planned_total', minimum, maximum).order_by('-planned_total')

    def high_cost(self):
        return self.filter(unit_cost__gt=metrics.HIGH_COST_THRESHOLD).order_by('-unit_cost')

    def large_quantity(self):
        return self.filter(planned_quantity__gt=metrics.LARGE_QUANTITY_THRESHOLD).order_by('-planned_quantity')

    def over_budget(self):
        return self.with_financials().filter(budget_excess__gt=0).order_by('-budget_excess')

    def under_budget(self):
        return self.with_financials().filter(budget_excess__lt=0).order_by('budget_excess')

    def well_budgeted(self):
        return self.with_financials().alias(budget_gap=Abs('budget_excess')).filter(
            allocated_amount__gt=0,
            budget_gap__lte=F('allocated_amount') * metrics.WELL_BUDGETED_TOLERANCE,
        ).order_by('designation')

    def most_expensive(self):
        return self.with_financials().order_by('-planned_total')

    def requiring_immediate_attention(self):
        return self.with_financials().filter(
            planned_total__gt=F('allocated_amount') * metrics.IMMEDIATE_ATTENTION_OVERRUN
        ).order_by('-budget_excess')

    def statistics(self) -> dict:
        totals = self.with_financials().aggregate(
            count=Count('id'),
            sum_allocated_amount=Coalesce(Sum('allocated_amount'), Decimal('0'), output_field=MONEY),
            sum_total_cost=Coalesce(Sum('planned_total'), Decimal('0'), output_field=MONEY),
            average_unit_cost=Avg('unit_cost'),
            average_planned_quantity=Avg('planned_quantity'),
            average_allocated_amount=Avg('allocated_amount'),
            max_unit_cost=Max('unit_cost'),
            max_planned_quantity=Max('planned_quantity'),
            max_allocated_amount=Max('allocated_amount'),
        )
        result = {
            key: metrics.quantize(value) if value is not None and key != 'count' else value
            for key, value in totals.items()
        }
        counts = self.with_distributions_count().values_list('distribution_records', flat=True)
        distributions = count_statistics(counts)
        result['average_distributions'] = distributions['average']
        result['max_distributions'] = distributions['maximum']
        result['sum_variance'] = metrics.quantize(result['sum_allocated_amount'] - result['sum_total_cost'])
        return result


# =============================================================================
# ITEM DISTRIBUTIONS
# =============================================================================

class ItemDistributionQuerySet(models.QuerySet):

    def with_cost(self):
        return self.annotate(
            cost_value=ExpressionWrapper(F('quantity') * F('planned_item__unit_cost'), output_field=MONEY)
        )

    def for_planned_item(self, planned_item_id):
        return self.filter(planned_item_id=planned_item_id)

    def for_structure(self, structure_id):
        return self.filter(structure_id=structure_id)

    def for_item(self, item_id):
        return self.filter(planned_item__item_id=item_id)

    def for_rubric(self, rubric_id):
        return self.filter(planned_item__item__rubric_id=rubric_id)

    def for_domain(self, domain_id):
        return self.filter(planned_item__item__rubric__domain_id=domain_id)

    def for_financial_operation(self, financial_operation_id):
        return self.filter(planned_item__financial_operation_id=financial_operation_id)

    def for_parent_structure(self, structure_id):
        return self.filter(structure__structure_up_id=structure_id)

    def quantity_range(self, minimum, maximum):
        return _between(self, 'quantity', minimum, maximum).order_by('-quantity')

    def quantity_bucket(self, bucket: str):
        """Filter by quantity scale: small, medium, large or bulk."""
        lower, upper = metrics.DISTRIBUTION_QUANTITY_BUCKETS[bucket]
        queryset = self
        if lower is not None:
            queryset = queryset.filter(quantity__gt=lower)
        if upper is not None:
            queryset = queryset.filter(quantity__lte=upper)
        return queryset.order_by('-quantity')

    def sum_quantity(self) -> Decimal:
        return self.aggregate(total=Coalesce(Sum('quantity'), Decimal('0'), output_field=MONEY))['total']

    def sum_total_cost(self) -> Decimal:
        total = self.with_cost().aggregate(
            total=Coalesce(Sum('cost_value'), Decimal('0'), output_field=MONEY)
        )['total']
        return metrics.quantize(total)

    def distributed_quantity(self, planned_item_id, exclude_id=None) -> Decimal:
        queryset = self.for_planned_item(planned_item_id)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.sum_quantity()

    def statistics(self) -> dict:
        totals = self.with_cost().aggregate(
            count=Count('id'),
            sum_quantity=Coalesce(Sum('quantity'), Decimal('0'), output_field=MONEY),
            sum_total_cost=Coalesce(Sum('cost_value'), Decimal('0'), output_field=MONEY),
            average_quantity=Avg('quantity'),
            max_quantity=Max('quantity'),
            min_quantity=Min('quantity'),
            structures=Count('structure', distinct=True),
            planned_items=Count('planned_item', distinct=True),
        )
        money = ('sum_quantity', 'sum_total_cost', 'average_quantity', 'max_quantity', 'min_quantity')
        return {
            key: metrics.quantize(value) if key in money and value is not None else value
            for key, value in totals.items()
        }
