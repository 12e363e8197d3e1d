"""
Plan Models.

Budget classification hierarchy (domain → rubric → item), item statuses,
budget types, financial operations and the transactional planning records:
budget modifications, planned items and item distributions.
"""

from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone

from domain.plan import classification, metrics
from domain.shared.value_objects import ComplexityLevel
from ..querysets.plan import (
    BudgetModificationQuerySet,
    BudgetTypeQuerySet,
    DomainQuerySet,
    FinancialOperationQuerySet,
    ItemDistributionQuerySet,
    ItemQuerySet,
    ItemStatusQuerySet,
    PlannedItemQuerySet,
    RubricQuerySet,
)
from .base import BaseModel, BaseModelWithHistory, DesignationMixin


# =============================================================================
# CLASSIFICATION HIERARCHY
# =============================================================================

class Domain(DesignationMixin, BaseModel):
    """
    Top-level budget classification category.

    Groups rubrics; the domain category is derived from its designation.
    """

    objects = DomainQuerySet.as_manager()

    class Meta:
        db_table = 'plan_domain'
        verbose_name = "Domain"
        verbose_name_plural = "Domains"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.DOMAIN_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self):
        return classification.domain_priority(self.category)

    @property
    def scope(self) -> str:
        return classification.domain_scope(self.category)

    @property
    def governance_model(self) -> str:
        return classification.domain_governance_model(self.category)

    @property
    def reporting_frequency(self) -> str:
        return classification.domain_reporting_frequency(self.category)

    @property
    def rubrics_count(self) -> int:
        count = getattr(self, 'children_count', None)
        return count if count is not None else self.rubrics.count()

    @property
    def complexity(self) -> str:
        return ComplexityLevel.from_count(self.rubrics_count).value


class Rubric(DesignationMixin, BaseModel):
    """Budget classification category inside a domain."""

    domain = models.ForeignKey(
        Domain,
        on_delete=models.PROTECT,
        related_name='rubrics',
        verbose_name="Domain"
    )

    objects = RubricQuerySet.as_manager()

    class Meta:
        db_table = 'plan_rubric'
        verbose_name = "Rubric"
        verbose_name_plural = "Rubrics"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.RUBRIC_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self):
        return classification.rubric_priority(self.category)

    @property
    def items_count(self) -> int:
        count = getattr(self, 'children_count', None)
        return count if count is not None else self.items.count()

    @property
    def complexity(self) -> str:
        return ComplexityLevel.from_count(self.items_count).value


class Item(DesignationMixin, BaseModel):
    """Budgetable item inside a rubric."""

    designation_fr = models.CharField(
        max_length=200,
        verbose_name="Designation (French)"
    )
    rubric = models.ForeignKey(
        Rubric,
        on_delete=models.PROTECT,
        related_name='items',
        verbose_name="Rubric"
    )

    objects = ItemQuerySet.as_manager()

    class Meta:
        db_table = 'plan_item'
        verbose_name = "Item"
        verbose_name_plural = "Items"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.ITEM_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self):
        return classification.item_priority(self.category)

    @property
    def lifecycle(self) -> str:
        return classification.item_lifecycle(self.category)

    @property
    def planned_items_count(self) -> int:
        count = getattr(self, 'children_count', None)
        return count if count is not None else self.planned_items.count()


class ItemStatus(DesignationMixin, BaseModel):
    """Status of a planned item (available, in maintenance, lost...)."""

    objects = ItemStatusQuerySet.as_manager()

    class Meta:
        db_table = 'plan_item_status'
        verbose_name = "Item status"
        verbose_name_plural = "Item statuses"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.ITEM_STATUS_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self):
        return classification.item_status_priority(self.category)

    @property
    def operational_impact(self) -> str:
        return classification.item_status_impact(self.category)

    @property
    def lifecycle_stage(self) -> str:
        return classification.item_status_lifecycle_stage(self.category)

    @property
    def allows_usage(self) -> bool:
        return classification.item_status_allows_usage(self.category)

    @property
    def requires_action(self) -> bool:
        return classification.item_status_requires_action(self.category)


# =============================================================================
# BUDGET
# =============================================================================

class BudgetType(DesignationMixin, BaseModel):
    """Budget nature (investment, operating, personnel...)."""

    acronym_ar = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        verbose_name="Acronym (Arabic)"
    )
    acronym_en = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        verbose_name="Acronym (English)"
    )
    acronym_fr = models.CharField(
        max_length=20,
        unique=True,
        verbose_name="Acronym (French)"
    )

    objects = BudgetTypeQuerySet.as_manager()

    class Meta:
        db_table = 'plan_budget_type'
        verbose_name = "Budget type"
        verbose_name_plural = "Budget types"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.BUDGET_TYPE_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self):
        return classification.budget_type_priority(self.category)

    @property
    def approval_level(self) -> str:
        return classification.budget_type_approval_level(self.category)


budget_year_validator = RegexValidator(
    regex=r'^\d{4}$',
    message="Budget year must be exactly 4 digits",
)


class FinancialOperation(BaseModel):
    """Financial operation of a budget year, typed by budget type."""

    operation = models.CharField(
        max_length=200,
        unique=True,
        verbose_name="Operation"
    )
    budget_year = models.CharField(
        max_length=4,
        validators=[budget_year_validator],
        db_index=True,
        verbose_name="Budget year"
    )
    budget_type = models.ForeignKey(
        BudgetType,
        on_delete=models.PROTECT,
        related_name='financial_operations',
        verbose_name="Budget type"
    )

    objects = FinancialOperationQuerySet.as_manager()

    class Meta:
        db_table = 'plan_financial_operation'
        verbose_name = "Financial operation"
        verbose_name_plural = "Financial operations"
        ordering = ['-budget_year', 'operation']

    def __str__(self):
        return f"{self.operation} ({self.budget_year})"

    @property
    def category(self) -> str:
        return classification.FINANCIAL_OPERATION_CLASSIFIER.classify(self.operation)

    @property
    def financial_impact(self) -> str:
        return classification.financial_operation_impact(self.category)

    @property
    def is_current_year(self) -> bool:
        return self.budget_year == str(timezone.localdate().year)


class BudgetModification(BaseModelWithHistory):
    """
    Amendment of the budget plan.

    Requested by a `demande` document and answered by a `response` document;
    pending until an approval date is set.
    """

    object = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        verbose_name="Object"
    )
    description = models.CharField(
        max_length=500,
        blank=True,
        null=True,
        verbose_name="Description"
    )
    approval_date = models.DateField(
        null=True,
        blank=True,
        verbose_name="Approval date"
    )
    demande = models.ForeignKey(
        'persistence.Document',
        on_delete=models.PROTECT,
        related_name='demanded_modifications',
        verbose_name="Demande"
    )
    response = models.ForeignKey(
        'persistence.Document',
        on_delete=models.PROTECT,
        related_name='answered_modifications',
        verbose_name="Response"
    )

    objects = BudgetModificationQuerySet.as_manager()

    class Meta:
        db_table = 'plan_budget_modification'
        verbose_name = "Budget modification"
        verbose_name_plural = "Budget modifications"
        ordering = ['-approval_date', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['approval_date', 'demande'],
                name='unique_budget_modification_approval_demande',
            ),
        ]

    def __str__(self):
        return self.display_text

    @property
    def status(self) -> str:
        return classification.modification_status(self.approval_date, timezone.localdate())

    @property
    def modification_type(self) -> str:
        return classification.modification_type(self.object)

    @property
    def priority(self):
        return classification.modification_priority(self.modification_type)

    @property
    def urgency(self) -> str:
        return classification.modification_urgency(self.modification_type, self.status)

    @property
    def display_text(self) -> str:
        return classification.modification_display_text(self.object, self.description, self.pk)


# =============================================================================
# PLANNED ITEMS
# =============================================================================

class PlannedItem(BaseModelWithHistory):
    """Budgeted line item linked to a financial operation."""

    designation = models.CharField(
        max_length=200,
        verbose_name="Designation"
    )
    unit_cost = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        verbose_name="Unit cost"
    )
    planned_quantity = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        verbose_name="Planned quantity"
    )
    allocated_amount = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        default=0,
        verbose_name="Allocated amount"
    )
    item_status = models.ForeignKey(
        ItemStatus,
        on_delete=models.PROTECT,
        related_name='planned_items',
        verbose_name="Item status"
    )
    item = models.ForeignKey(
        Item,
        on_delete=models.PROTECT,
        related_name='planned_items',
        verbose_name="Item"
    )
    financial_operation = models.ForeignKey(
        FinancialOperation,
        on_delete=models.PROTECT,
        related_name='planned_items',
        verbose_name="Financial operation"
    )
    budget_modification = models.ForeignKey(
        BudgetModification,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='planned_items',
        verbose_name="Budget modification"
    )

    objects = PlannedItemQuerySet.as_manager()

    class Meta:
        db_table = 'plan_planned_item'
        verbose_name = "Planned item"
        verbose_name_plural = "Planned items"
        ordering = ['designation']

    def __str__(self):
        return self.designation

    @property
    def total_cost(self):
        return metrics.total_cost(self.unit_cost, self.planned_quantity)

    @property
    def variance(self):
        return metrics.variance(self.allocated_amount, self.unit_cost, self.planned_quantity)

    @property
    def budget_utilization(self):
        return metrics.budget_utilization(self.allocated_amount, self.unit_cost, self.planned_quantity)

    @property
    def planning_status(self) -> str:
        return metrics.planning_status(self.budget_utilization)

    @property
    def cost_category(self) -> str:
        return metrics.cost_category(self.unit_cost)

    @property
    def quantity_scale(self) -> str:
        return metrics.quantity_scale(self.planned_quantity)

    @property
    def distributions_count(self) -> int:
        count = getattr(self, 'distribution_records', None)
        return count if count is not None else self.distributions.count()

    @property
    def distribution_complexity(self) -> str:
        return metrics.distribution_complexity(self.distributions_count)


class ItemDistribution(BaseModelWithHistory):
    """Allocation of part of a planned item's quantity to a structure."""

    quantity = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        verbose_name="Quantity"
    )
    planned_item = models.ForeignKey(
        PlannedItem,
        on_delete=models.PROTECT,
        related_name='distributions',
        verbose_name="Planned item"
    )
    structure = models.ForeignKey(
        'persistence.Structure',
        on_delete=models.PROTECT,
        related_name='item_distributions',
        verbose_name="Structure"
    )

    objects = ItemDistributionQuerySet.as_manager()

    class Meta:
        db_table = 'plan_item_distribution'
        verbose_name = "Item distribution"
        verbose_name_plural = "Item distributions"
        ordering = ['-quantity', 'id']

    def __str__(self):
        return f"{self.planned_item_id} → {self.structure_id}: {self.quantity}"

    @property
    def distribution_category(self) -> str:
        return metrics.distribution_category(self.quantity)

    @property
    def distribution_percentage(self):
        return metrics.distribution_percentage(self.quantity, self.planned_item.planned_quantity)

    @property
    def distribution_cost(self):
        return metrics.distribution_cost(self.quantity, self.planned_item.unit_cost)
