"""
Plan Serializers.

Serializers for the budget classification hierarchy, budget types,
financial operations, budget modifications, planned items and item
distributions. `*InfoSerializer` classes add the derived classification.
"""

from rest_framework import serializers

from domain.plan import metrics
from domain.shared.exceptions import BusinessRuleViolationException, ValidationException
from infrastructure.persistence.models import (
    BudgetModification,
    BudgetType,
    Domain,
    FinancialOperation,
    Item,
    ItemDistribution,
    ItemStatus,
    PlannedItem,
    Rubric,
)
from .base import AUDIT_FIELDS, DESIGNATION_FIELDS, BaseModelSerializer, required_positive

DESIGNATION_UNIQUE = {'designation_fr': 'French designation'}


# =============================================================================
# CLASSIFICATION HIERARCHY
# =============================================================================

class DomainSerializer(BaseModelSerializer):
    """Serializer for budget domains."""

    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = Domain
        fields = ['id', *DESIGNATION_FIELDS, *AUDIT_FIELDS]


class DomainInfoSerializer(DomainSerializer):
    """Domain with its classification and rubric-based complexity."""

    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(DomainSerializer.Meta):
        fields = DomainSerializer.Meta.fields + [
            'category', 'priority', 'scope', 'governance_model',
            'reporting_frequency', 'rubrics_count', 'complexity',
        ]


class RubricSerializer(BaseModelSerializer):
    """Serializer for rubrics."""

    domain_designation = serializers.CharField(source='domain.designation_fr', read_only=True)
    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = Rubric
        fields = ['id', *DESIGNATION_FIELDS, 'domain', 'domain_designation', *AUDIT_FIELDS]


class RubricInfoSerializer(RubricSerializer):
    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(RubricSerializer.Meta):
        fields = RubricSerializer.Meta.fields + ['category', 'priority', 'items_count', 'complexity']


class ItemSerializer(BaseModelSerializer):
    """Serializer for items. French designations may repeat across rubrics."""

    rubric_designation = serializers.CharField(source='rubric.designation_fr', read_only=True)
    domain = serializers.IntegerField(source='rubric.domain_id', read_only=True)

    class Meta:
        model = Item
        fields = ['id', *DESIGNATION_FIELDS, 'rubric', 'rubric_designation', 'domain', *AUDIT_FIELDS]


class ItemInfoSerializer(ItemSerializer):
    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ['category', 'priority', 'lifecycle', 'planned_items_count']


class ItemStatusSerializer(BaseModelSerializer):
    """Serializer for item statuses."""

    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = ItemStatus
        fields = ['id', *DESIGNATION_FIELDS, *AUDIT_FIELDS]


class ItemStatusInfoSerializer(ItemStatusSerializer):
    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(ItemStatusSerializer.Meta):
        fields = ItemStatusSerializer.Meta.fields + [
            'category', 'priority', 'operational_impact', 'lifecycle_stage',
            'allows_usage', 'requires_action',
        ]


# =============================================================================
# BUDGET
# =============================================================================

class BudgetTypeSerializer(BaseModelSerializer):
    """Serializer for budget types."""

    unique_fields = {
        'designation_fr': 'French designation',
        'acronym_fr': 'French acronym',
    }

    class Meta:
        model = BudgetType
        fields = [
            'id', *DESIGNATION_FIELDS,
            'acronym_ar', 'acronym_en', 'acronym_fr',
            *AUDIT_FIELDS,
        ]


class BudgetTypeInfoSerializer(BudgetTypeSerializer):
    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(BudgetTypeSerializer.Meta):
        fields = BudgetTypeSerializer.Meta.fields + ['category', 'priority', 'approval_level']


class FinancialOperationSerializer(BaseModelSerializer):
    """
    Serializer for financial operations.

    The budget year is validated by the model field (exactly four digits).
    """

    budget_type_designation = serializers.CharField(source='budget_type.designation_fr', read_only=True)
    unique_fields = {'operation': 'operation'}

    class Meta:
        model = FinancialOperation
        fields = [
            'id', 'operation', 'budget_year',
            'budget_type', 'budget_type_designation',
            *AUDIT_FIELDS,
        ]


class FinancialOperationInfoSerializer(FinancialOperationSerializer):

    class Meta(FinancialOperationSerializer.Meta):
        fields = FinancialOperationSerializer.Meta.fields + ['category', 'financial_impact', 'is_current_year']


class BudgetModificationSerializer(BaseModelSerializer):
    """
    Serializer for budget modifications.

    The (approval date, demande) pair is unique; the check runs here instead
    of DRF's generated validator so that a conflict answers 409.
    """

    demande_reference = serializers.CharField(source='demande.reference', read_only=True)
    response_reference = serializers.CharField(source='response.reference', read_only=True)

    class Meta:
        model = BudgetModification
        fields = [
            'id', 'object', 'description', 'approval_date',
            'demande', 'demande_reference',
            'response', 'response_reference',
            *AUDIT_FIELDS,
        ]
        validators = []

    def validate(self, attrs):
        attrs = super().validate(attrs)
        approval_date = self.incoming_value(attrs, 'approval_date')
        demande = self.incoming_value(attrs, 'demande')
        if approval_date is not None and demande is not None:
            if self.others().filter(approval_date=approval_date, demande=demande).exists():
                raise BusinessRuleViolationException(
                    'UNIQUE_APPROVAL_DATE_DEMANDE',
                    f"Budget modification with approval date '{approval_date}' "
                    f"and demande ID '{demande.pk}' already exists",
                )
        return attrs


class BudgetModificationInfoSerializer(BudgetModificationSerializer):
    priority = serializers.CharField(source='priority.value', read_only=True)

    class Meta(BudgetModificationSerializer.Meta):
        fields = BudgetModificationSerializer.Meta.fields + [
            'status', 'modification_type', 'priority', 'urgency', 'display_text',
        ]


# =============================================================================
# PLANNED ITEMS
# =============================================================================

class PlannedItemSerializer(BaseModelSerializer):
    """Serializer for planned items with their computed total cost and variance."""

    item_designation = serializers.CharField(source='item.designation_fr', read_only=True)
    item_status_designation = serializers.CharField(source='item_status.designation_fr', read_only=True)
    financial_operation_name = serializers.CharField(source='financial_operation.operation', read_only=True)
    total_cost = serializers.DecimalField(max_digits=32, decimal_places=2, read_only=True)
    variance = serializers.DecimalField(max_digits=32, decimal_places=2, read_only=True)

    class Meta:
        model = PlannedItem
        fields = [
            'id', 'designation',
            'unit_cost', 'planned_quantity', 'allocated_amount',
            'total_cost', 'variance',
            'item_status', 'item_status_designation',
            'item', 'item_designation',
            'financial_operation', 'financial_operation_name',
            'budget_modification',
            *AUDIT_FIELDS,
        ]

    def validate_unit_cost(self, value):
        return required_positive(value, 'Unit cost')

    def validate_planned_quantity(self, value):
        return required_positive(value, 'Planned quantity')

    def validate_allocated_amount(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Allocated amount cannot be negative")
        return value


class PlannedItemInfoSerializer(PlannedItemSerializer):
    budget_utilization = serializers.DecimalField(max_digits=32, decimal_places=2, read_only=True)

    class Meta(PlannedItemSerializer.Meta):
        fields = PlannedItemSerializer.Meta.fields + [
            'budget_utilization', 'planning_status', 'cost_category',
            'quantity_scale', 'distributions_count', 'distribution_complexity',
        ]


class ItemDistributionSerializer(BaseModelSerializer):
    """
    Serializer for item distributions.

    The quantities distributed for one planned item never exceed its planned
    quantity; the record being updated is left out of the running total.
    """

    planned_item_designation = serializers.CharField(source='planned_item.designation', read_only=True)
    structure_designation = serializers.CharField(source='structure.designation_fr', read_only=True)

    class Meta:
        model = ItemDistribution
        fields = [
            'id', 'quantity',
            'planned_item', 'planned_item_designation',
            'structure', 'structure_designation',
            *AUDIT_FIELDS,
        ]

    def validate_quantity(self, value):
        return required_positive(value, 'Quantity')

    def validate(self, attrs):
        attrs = super().validate(attrs)
        planned_item = self.incoming_value(attrs, 'planned_item')
        quantity = self.incoming_value(attrs, 'quantity')
        exclude_id = self.instance.pk if self.instance is not None else None
        distributed = ItemDistribution.objects.distributed_quantity(planned_item.pk, exclude_id=exclude_id)
        if metrics.exceeds_planned_quantity(distributed, quantity, planned_item.planned_quantity):
            total = metrics.quantize(distributed + quantity)
            raise ValidationException(
                f"Total distribution quantity ({total}) cannot exceed "
                f"planned quantity ({planned_item.planned_quantity})",
                field='quantity',
                value=quantity,
            )
        return attrs


class ItemDistributionInfoSerializer(ItemDistributionSerializer):
    distribution_percentage = serializers.DecimalField(max_digits=32, decimal_places=2, read_only=True)
    distribution_cost = serializers.DecimalField(max_digits=32, decimal_places=2, read_only=True)

    class Meta(ItemDistributionSerializer.Meta):
        fields = ItemDistributionSerializer.Meta.fields + [
            'distribution_category', 'distribution_percentage', 'distribution_cost',
        ]
