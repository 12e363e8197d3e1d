"""
Plan Views.

API views for the budget classification hierarchy (domains, rubrics, items),
item statuses, budget types, financial operations, budget modifications,
planned items and item distributions.
"""

from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from domain.plan import classification, metrics
from domain.shared.value_objects import Priority
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
from ..serializers.plan import (
    BudgetModificationInfoSerializer,
    BudgetModificationSerializer,
    BudgetTypeInfoSerializer,
    BudgetTypeSerializer,
    DomainInfoSerializer,
    DomainSerializer,
    FinancialOperationInfoSerializer,
    FinancialOperationSerializer,
    ItemDistributionInfoSerializer,
    ItemDistributionSerializer,
    ItemInfoSerializer,
    ItemSerializer,
    ItemStatusInfoSerializer,
    ItemStatusSerializer,
    PlannedItemInfoSerializer,
    PlannedItemSerializer,
    RubricInfoSerializer,
    RubricSerializer,
)
from .base import (
    BaseModelViewSet,
    CategoryViewMixin,
    DesignationViewMixin,
    HistoryViewMixin,
    date_param,
    decimal_param,
    int_param,
)

DESIGNATION_ORDERING = ['id', 'designation_fr', 'designation_en', 'designation_ar', 'created_at', 'updated_at']
COMPLEXITY_LEVELS = ('low', 'medium', 'high')


def get_priority(slug: str) -> Priority:
    priority = Priority.from_slug(slug)
    if priority is None:
        raise NotFound(f"Unknown priority: {slug}")
    return priority


def get_complexity(level: str) -> str:
    level = level.lower()
    if level not in COMPLEXITY_LEVELS:
        raise NotFound(f"Unknown complexity level: {level}")
    return level


# =============================================================================
# CLASSIFICATION HIERARCHY
# =============================================================================

class DomainViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for budget domains.

    Endpoints:
    - GET /domains/ - list domains
    - POST /domains/ - create domain
    - GET /domains/{id}/ - get domain
    - PUT/PATCH /domains/{id}/ - update domain
    - DELETE /domains/{id}/ - delete domain without rubrics
    - GET /domains/with-rubrics/ - domains having rubrics
    - GET /domains/without-rubrics/ - domains without rubrics
    - GET /domains/rubrics-count-range/?minCount=&maxCount= - by rubric count
    - GET /domains/complexity/{low|medium|high}/ - by management complexity
    - GET /domains/priority/{priority}/ - by classification priority
    - GET /domains/requiring-executive-oversight/ - critical domains
    - GET /domains/statistics/ - rubric count statistics
    """

    queryset = Domain.objects.all()
    serializer_classes = {
        'info': DomainInfoSerializer,
        'default': DomainSerializer,
    }
    ordering_fields = DESIGNATION_ORDERING
    ordering = ['designation_fr']
    classifier = classification.DOMAIN_CLASSIFIER
    count_filters = {
        'with-rubrics': 'with_children',
        'without-rubrics': 'without_children',
    }
    delete_guards = (('rubrics', 'rubrics'),)

    @action(detail=False, methods=['get'], url_path='with-rubrics')
    def with_rubrics(self, request):
        return self.paginated(self.get_queryset().with_children())

    @action(detail=False, methods=['get'], url_path='without-rubrics')
    def without_rubrics(self, request):
        return self.paginated(self.get_queryset().without_children())

    @action(detail=False, methods=['get'], url_path='rubrics-count-range')
    def rubrics_count_range(self, request):
        queryset = self.get_queryset().children_count_between(
            int_param(request, 'minCount'), int_param(request, 'maxCount')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path=r'complexity/(?P<level>[^/.]+)')
    def complexity(self, request, level=None):
        return self.paginated(self.get_queryset().with_complexity(get_complexity(level)))

    @action(detail=False, methods=['get'], url_path=r'priority/(?P<priority>[^/.]+)')
    def priority(self, request, priority=None):
        return self.paginated(self.get_queryset().with_priority(get_priority(priority)))

    @action(detail=False, methods=['get'], url_path='requiring-executive-oversight')
    def requiring_executive_oversight(self, request):
        return self.paginated(self.get_queryset().requiring_executive_oversight())

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        return Response(self.get_queryset().children_statistics())


class RubricViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for rubrics.

    Endpoints:
    - GET /rubrics/ - list rubrics (filter: ?domain=)
    - POST /rubrics/ - create rubric
    - GET /rubrics/{id}/ - get rubric
    - PUT/PATCH /rubrics/{id}/ - update rubric
    - DELETE /rubrics/{id}/ - delete rubric without items
    - GET /rubrics/domain/{domainId}/ - rubrics of a domain
    - GET /rubrics/domain-category/{slug}/ - rubrics whose domain matches a category
    - GET /rubrics/with-items/, /rubrics/without-items/
    - GET /rubrics/items-count-range/?minCount=&maxCount=
    - GET /rubrics/complexity/{low|medium|high}/
    - GET /rubrics/statistics/ - item count statistics
    """

    queryset = Rubric.objects.select_related('domain')
    serializer_classes = {
        'info': RubricInfoSerializer,
        'default': RubricSerializer,
    }
    filterset_fields = ['domain']
    ordering_fields = DESIGNATION_ORDERING + ['domain__designation_fr']
    ordering = ['designation_fr']
    classifier = classification.RUBRIC_CLASSIFIER
    count_filters = {
        'with-items': 'with_children',
        'without-items': 'without_children',
    }
    delete_guards = (('items', 'items'),)

    @action(detail=False, methods=['get'], url_path=r'domain/(?P<domain_id>\d+)')
    def by_domain(self, request, domain_id=None):
        return self.paginated(self.get_queryset().for_domain(domain_id))

    @action(detail=False, methods=['get'], url_path=r'domain-category/(?P<slug>[^/.]+)')
    def domain_category(self, request, slug=None):
        category = classification.DOMAIN_CLASSIFIER.get(slug)
        if category is None:
            raise NotFound(f"Unknown category: {slug}")
        return self.paginated(self.get_queryset().in_domain_category(category))

    @action(detail=False, methods=['get'], url_path='with-items')
    def with_items(self, request):
        return self.paginated(self.get_queryset().with_children())

    @action(detail=False, methods=['get'], url_path='without-items')
    def without_items(self, request):
        return self.paginated(self.get_queryset().without_children())

    @action(detail=False, methods=['get'], url_path='items-count-range')
    def items_count_range(self, request):
        queryset = self.get_queryset().children_count_between(
            int_param(request, 'minCount'), int_param(request, 'maxCount')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path=r'complexity/(?P<level>[^/.]+)')
    def complexity(self, request, level=None):
        return self.paginated(self.get_queryset().with_complexity(get_complexity(level)))

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        return Response(self.get_queryset().children_statistics())


class ItemViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for items.

    Endpoints:
    - GET /items/ - list items (filter: ?rubric=)
    - POST /items/ - create item
    - GET /items/{id}/ - get item
    - PUT/PATCH /items/{id}/ - update item
    - DELETE /items/{id}/ - delete item without planned items
    - GET /items/rubric/{rubricId}/, /items/domain/{domainId}/
    - GET /items/with-planned-items/, /items/without-planned-items/
    - GET /items/planned-items-count-range/?minCount=&maxCount=
    - GET /items/statistics/ - planned item count statistics
    """

    queryset = Item.objects.select_related('rubric')
    serializer_classes = {
        'info': ItemInfoSerializer,
        'default': ItemSerializer,
    }
    filterset_fields = ['rubric']
    ordering_fields = DESIGNATION_ORDERING + ['rubric__designation_fr']
    ordering = ['designation_fr']
    classifier = classification.ITEM_CLASSIFIER
    count_filters = {
        'with-planned-items': 'with_children',
        'without-planned-items': 'without_children',
    }
    delete_guards = (('planned_items', 'planned items'),)

    @action(detail=False, methods=['get'], url_path=r'rubric/(?P<rubric_id>\d+)')
    def by_rubric(self, request, rubric_id=None):
        return self.paginated(self.get_queryset().for_rubric(rubric_id))

    @action(detail=False, methods=['get'], url_path=r'domain/(?P<domain_id>\d+)')
    def by_domain(self, request, domain_id=None):
        return self.paginated(self.get_queryset().for_domain(domain_id))

    @action(detail=False, methods=['get'], url_path='with-planned-items')
    def with_planned_items(self, request):
        return self.paginated(self.get_queryset().with_children())

    @action(detail=False, methods=['get'], url_path='without-planned-items')
    def without_planned_items(self, request):
        return self.paginated(self.get_queryset().without_children())

    @action(detail=False, methods=['get'], url_path='planned-items-count-range')
    def planned_items_count_range(self, request):
        queryset = self.get_queryset().children_count_between(
            int_param(request, 'minCount'), int_param(request, 'maxCount')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        return Response(self.get_queryset().children_statistics())


class ItemStatusViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for item statuses.

    Endpoints:
    - GET /item-statuses/ - list statuses
    - POST /item-statuses/ - create status
    - GET /item-statuses/{id}/ - get status
    - PUT/PATCH /item-statuses/{id}/ - update status
    - DELETE /item-statuses/{id}/ - delete status not used by planned items
    - GET /item-statuses/operational/ready/ - statuses allowing usage
    - GET /item-statuses/operational/not-ready/ - every other status
    - GET /item-statuses/requiring-action/ - damaged, lost, maintenance, pending
    - GET /item-statuses/priority/{priority}/
    """

    queryset = ItemStatus.objects.all()
    serializer_classes = {
        'info': ItemStatusInfoSerializer,
        'default': ItemStatusSerializer,
    }
    ordering_fields = DESIGNATION_ORDERING
    ordering = ['designation_fr']
    classifier = classification.ITEM_STATUS_CLASSIFIER
    count_filters = {
        'operational': 'operational',
        'non-operational': 'non_operational',
    }
    delete_guards = (('planned_items', 'planned items'),)

    @action(detail=False, methods=['get'], url_path='operational/ready')
    def operational_ready(self, request):
        return self.paginated(self.get_queryset().operational())

    @action(detail=False, methods=['get'], url_path='operational/not-ready')
    def operational_not_ready(self, request):
        return self.paginated(self.get_queryset().non_operational())

    @action(detail=False, methods=['get'], url_path='requiring-action')
    def requiring_action(self, request):
        return self.paginated(self.get_queryset().requiring_action())

    @action(detail=False, methods=['get'], url_path=r'priority/(?P<priority>[^/.]+)')
    def priority(self, request, priority=None):
        return self.paginated(self.get_queryset().with_priority(get_priority(priority)))


# =============================================================================
# BUDGET
# =============================================================================

class BudgetTypeViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for budget types.

    Endpoints:
    - GET /budget-types/ - list budget types
    - POST /budget-types/ - create budget type
    - GET /budget-types/{id}/ - get budget type
    - PUT/PATCH /budget-types/{id}/ - update budget type
    - DELETE /budget-types/{id}/ - delete budget type without financial operations
    - GET /budget-types/acronym-fr/{value}/ - exact match on the French acronym
    - GET /budget-types/exists/acronym-fr/{value}/
    """

    queryset = BudgetType.objects.all()
    serializer_classes = {
        'info': BudgetTypeInfoSerializer,
        'default': BudgetTypeSerializer,
    }
    ordering_fields = DESIGNATION_ORDERING + ['acronym_fr']
    ordering = ['designation_fr']
    classifier = classification.BUDGET_TYPE_CLASSIFIER
    delete_guards = (('financial_operations', 'financial operations'),)

    @action(detail=False, methods=['get'], url_path=r'acronym-fr/(?P<value>[^/]+)')
    def by_acronym_fr(self, request, value=None):
        return self.find_by('acronym_fr', value, 'French acronym')

    @action(detail=False, methods=['get'], url_path=r'exists/acronym-fr/(?P<value>[^/]+)')
    def exists_acronym_fr(self, request, value=None):
        return self.exists_by('acronym_fr', value)


class FinancialOperationViewSet(CategoryViewMixin, BaseModelViewSet):
    """
    ViewSet for financial operations.

    Endpoints:
    - GET /financial-operations/ - list operations (filters: ?budget_type=&budget_year=)
    - POST /financial-operations/ - create operation
    - GET /financial-operations/{id}/ - get operation
    - PUT/PATCH /financial-operations/{id}/ - update operation
    - DELETE /financial-operations/{id}/ - delete operation without planned items
    - GET /financial-operations/operation/{value}/, /financial-operations/exists/operation/{value}/
    - GET /financial-operations/budget-year/{year}/
    - GET /financial-operations/current-year/, /future-years/, /past-years/
    - GET /financial-operations/budget-type/{id}/
    - GET /financial-operations/budget-year-range/?startYear=&endYear=
    - GET /financial-operations/budget-years/ - distinct budget years
    """

    queryset = FinancialOperation.objects.select_related('budget_type')
    serializer_classes = {
        'info': FinancialOperationInfoSerializer,
        'default': FinancialOperationSerializer,
    }
    filterset_fields = ['budget_type', 'budget_year']
    ordering_fields = ['id', 'operation', 'budget_year', 'budget_type__designation_fr', 'created_at', 'updated_at']
    ordering = ['-budget_year', 'operation']
    classifier = classification.FINANCIAL_OPERATION_CLASSIFIER
    count_filters = {
        'current-year': 'current_year',
    }
    delete_guards = (('planned_items', 'planned items'),)

    @action(detail=False, methods=['get'], url_path=r'operation/(?P<value>[^/]+)')
    def by_operation(self, request, value=None):
        return self.find_by('operation', value, 'operation')

    @action(detail=False, methods=['get'], url_path=r'exists/operation/(?P<value>[^/]+)')
    def exists_operation(self, request, value=None):
        return self.exists_by('operation', value)

    @action(detail=False, methods=['get'], url_path=r'budget-year/(?P<year>\d{4})')
    def budget_year(self, request, year=None):
        return self.paginated(self.get_queryset().for_year(year))

    @action(detail=False, methods=['get'], url_path='current-year')
    def current_year(self, request):
        return self.paginated(self.get_queryset().current_year())

    @action(detail=False, methods=['get'], url_path='future-years')
    def future_years(self, request):
        return self.paginated(self.get_queryset().future_years())

    @action(detail=False, methods=['get'], url_path='past-years')
    def past_years(self, request):
        return self.paginated(self.get_queryset().past_years())

    @action(detail=False, methods=['get'], url_path=r'budget-type/(?P<budget_type_id>\d+)')
    def by_budget_type(self, request, budget_type_id=None):
        return self.paginated(self.get_queryset().for_budget_type(budget_type_id))

    @action(detail=False, methods=['get'], url_path='budget-year-range')
    def budget_year_range(self, request):
        queryset = self.get_queryset().year_range(
            int_param(request, 'startYear'), int_param(request, 'endYear')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path='budget-years')
    def budget_years(self, request):
        return Response(self.get_queryset().budget_years())


class BudgetModificationViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for budget modifications.

    Endpoints:
    - GET /budget-modifications/ - list modifications (filters: ?demande=&response=)
    - POST /budget-modifications/ - create modification
    - GET /budget-modifications/{id}/ - get modification
    - PUT/PATCH /budget-modifications/{id}/ - update modification
    - DELETE /budget-modifications/{id}/ - delete modification without planned items
    - GET /budget-modifications/{id}/history/ - change history
    - GET /budget-modifications/demande/{id}/, /budget-modifications/response/{id}/
    - GET /budget-modifications/status/{pending|approved|scheduled}/
    - GET /budget-modifications/approval-date-range/?startDate=&endDate=
    - GET /budget-modifications/current-year/, /year/{year}/, /current-month/, /recent/
    - GET /budget-modifications/type/{slug}/ - by keyword type of the object
    - GET /budget-modifications/exists/approval-date-demande/?approvalDate=&demandeId=
    """

    queryset = BudgetModification.objects.select_related('demande', 'response')
    serializer_classes = {
        'info': BudgetModificationInfoSerializer,
        'default': BudgetModificationSerializer,
    }
    filterset_fields = ['demande', 'response']
    ordering_fields = ['id', 'object', 'approval_date', 'created_at', 'updated_at']
    ordering = ['-approval_date', '-id']
    count_filters = {
        'pending': 'pending',
        'approved': 'approved',
        'scheduled': 'scheduled',
        'current-year': 'current_year',
    }
    delete_guards = (('planned_items', 'planned items'),)

    @action(detail=False, methods=['get'], url_path=r'demande/(?P<document_id>\d+)')
    def by_demande(self, request, document_id=None):
        return self.paginated(self.get_queryset().for_demande(document_id))

    @action(detail=False, methods=['get'], url_path=r'response/(?P<document_id>\d+)')
    def by_response(self, request, document_id=None):
        return self.paginated(self.get_queryset().for_response(document_id))

    @action(detail=False, methods=['get'], url_path=r'status/(?P<status_slug>[^/.]+)')
    def by_status(self, request, status_slug=None):
        status_code = classification.MODIFICATION_STATUS_SLUGS.get(status_slug.lower())
        if status_code is None:
            raise NotFound(f"Unknown status: {status_slug}")
        return self.paginated(self.get_queryset().with_status(status_code))

    @action(detail=False, methods=['get'], url_path='approval-date-range')
    def approval_date_range(self, request):
        queryset = self.get_queryset().approval_date_between(
            date_param(request, 'startDate'), date_param(request, 'endDate')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path='current-year')
    def current_year(self, request):
        return self.paginated(self.get_queryset().current_year())

    @action(detail=False, methods=['get'], url_path=r'year/(?P<year>\d{4})')
    def by_year(self, request, year=None):
        return self.paginated(self.get_queryset().for_year(int(year)))

    @action(detail=False, methods=['get'], url_path='current-month')
    def current_month(self, request):
        return self.paginated(self.get_queryset().current_month())

    @action(detail=False, methods=['get'])
    def recent(self, request):
        return self.paginated(self.get_queryset().recent())

    @action(detail=False, methods=['get'], url_path=r'type/(?P<slug>[^/.]+)')
    def by_type(self, request, slug=None):
        category = classification.BUDGET_MODIFICATION_CLASSIFIER.get(slug)
        if category is None:
            raise NotFound(f"Unknown modification type: {slug}")
        return self.paginated(self.get_queryset().of_type(category))

    @action(detail=False, methods=['get'], url_path='exists/approval-date-demande')
    def exists_approval_date_demande(self, request):
        approval_date = date_param(request, 'approvalDate')
        demande_id = int_param(request, 'demandeId')
        exists = self.get_queryset().filter(approval_date=approval_date, demande_id=demande_id).exists()
        return Response({
            'approval_date': approval_date,
            'demande_id': demande_id,
            'exists': exists,
        })


# =============================================================================
# PLANNED ITEMS
# =============================================================================

class PlannedItemViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for planned items.

    Endpoints:
    - GET /planned-items/ - list planned items
    - POST /planned-items/ - create planned item
    - GET /planned-items/{id}/ - get planned item
    - PUT/PATCH /planned-items/{id}/ - update planned item
    - DELETE /planned-items/{id}/ - delete planned item without distributions
    - GET /planned-items/{id}/history/ - change history
    - GET /planned-items/{item|item-status|financial-operation|budget-modification}/{id}/
    - GET /planned-items/{rubric|domain|budget-type}/{id}/
    - GET /planned-items/with-distributions/, /without-distributions/
    - GET /planned-items/with-budget-modification/, /without-budget-modification/
    - GET /planned-items/{cost|quantity|allocated-amount|total-cost}-range/?min=&max=
    - GET /planned-items/high-cost/, /large-quantity/
    - GET /planned-items/over-budget/, /under-budget/, /well-budgeted/
    - GET /planned-items/most-expensive/, /requiring-immediate-attention/
    - GET /planned-items/statistics/
    """

    queryset = PlannedItem.objects.select_related('item', 'item_status', 'financial_operation')
    serializer_classes = {
        'info': PlannedItemInfoSerializer,
        'default': PlannedItemSerializer,
    }
    filterset_fields = ['item', 'item_status', 'financial_operation', 'budget_modification']
    ordering_fields = [
        'id', 'designation', 'unit_cost', 'planned_quantity', 'allocated_amount',
        'created_at', 'updated_at',
    ]
    ordering = ['designation']
    count_filters = {
        'with-distributions': 'with_distributions',
        'without-distributions': 'without_distributions',
        'over-budget': 'over_budget',
    }
    delete_guards = (('distributions', 'item distributions'),)

    @action(detail=False, methods=['get'], url_path=r'item/(?P<related_id>\d+)')
    def by_item(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_item(related_id))

    @action(detail=False, methods=['get'], url_path=r'item-status/(?P<related_id>\d+)')
    def by_item_status(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_item_status(related_id))

    @action(detail=False, methods=['get'], url_path=r'financial-operation/(?P<related_id>\d+)')
    def by_financial_operation(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_financial_operation(related_id))

    @action(detail=False, methods=['get'], url_path=r'budget-modification/(?P<related_id>\d+)')
    def by_budget_modification(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_budget_modification(related_id))

    @action(detail=False, methods=['get'], url_path=r'rubric/(?P<related_id>\d+)')
    def by_rubric(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_rubric(related_id))

    @action(detail=False, methods=['get'], url_path=r'domain/(?P<related_id>\d+)')
    def by_domain(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_domain(related_id))

    @action(detail=False, methods=['get'], url_path=r'budget-type/(?P<related_id>\d+)')
    def by_budget_type(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_budget_type(related_id))

    @action(detail=False, methods=['get'], url_path='with-distributions')
    def with_distributions(self, request):
        return self.paginated(self.get_queryset().with_distributions())

    @action(detail=False, methods=['get'], url_path='without-distributions')
    def without_distributions(self, request):
        return self.paginated(self.get_queryset().without_distributions())

    @action(detail=False, methods=['get'], url_path='with-budget-modification')
    def with_budget_modification(self, request):
        return self.paginated(self.get_queryset().with_budget_modification())

    @action(detail=False, methods=['get'], url_path='without-budget-modification')
    def without_budget_modification(self, request):
        return self.paginated(self.get_queryset().without_budget_modification())

    def range_response(self, method: str):
        queryset = getattr(self.get_queryset(), method)(
            decimal_param(self.request, 'min'), decimal_param(self.request, 'max')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path='cost-range')
    def cost_range(self, request):
        return self.range_response('cost_range')

    @action(detail=False, methods=['get'], url_path='quantity-range')
    def quantity_range(self, request):
        return self.range_response('quantity_range')

    @action(detail=False, methods=['get'], url_path='allocated-amount-range')
    def allocated_amount_range(self, request):
        return self.range_response('allocated_amount_range')

    @action(detail=False, methods=['get'], url_path='total-cost-range')
    def total_cost_range(self, request):
        return self.range_response('total_cost_range')

    @action(detail=False, methods=['get'], url_path='high-cost')
    def high_cost(self, request):
        return self.paginated(self.get_queryset().high_cost())

    @action(detail=False, methods=['get'], url_path='large-quantity')
    def large_quantity(self, request):
        return self.paginated(self.get_queryset().large_quantity())

    @action(detail=False, methods=['get'], url_path='over-budget')
    def over_budget(self, request):
        return self.paginated(self.get_queryset().over_budget())

    @action(detail=False, methods=['get'], url_path='under-budget')
    def under_budget(self, request):
        return self.paginated(self.get_queryset().under_budget())

    @action(detail=False, methods=['get'], url_path='well-budgeted')
    def well_budgeted(self, request):
        return self.paginated(self.get_queryset().well_budgeted())

    @action(detail=False, methods=['get'], url_path='most-expensive')
    def most_expensive(self, request):
        return self.paginated(self.get_queryset().most_expensive())

    @action(detail=False, methods=['get'], url_path='requiring-immediate-attention')
    def requiring_immediate_attention(self, request):
        return self.paginated(self.get_queryset().requiring_immediate_attention())

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        return Response(self.get_queryset().statistics())


class ItemDistributionViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for item distributions.

    Endpoints:
    - GET /item-distributions/ - list distributions
    - POST /item-distributions/ - create distribution
    - GET /item-distributions/{id}/ - get distribution
    - PUT/PATCH /item-distributions/{id}/ - update distribution
    - DELETE /item-distributions/{id}/ - delete distribution
    - GET /item-distributions/{id}/history/ - change history
    - GET /item-distributions/{planned-item|structure|item|rubric|domain}/{id}/
    - GET /item-distributions/financial-operation/{id}/, /parent-structure/{id}/
    - GET /item-distributions/quantity-range/?min=&max=
    - GET /item-distributions/quantity/{small|medium|large|bulk}/
    - GET /item-distributions/planned-item/{id}/sum-quantity/
    - GET /item-distributions/structure/{id}/sum-quantity/
    - GET /item-distributions/structure/{id}/sum-total-cost/
    - GET /item-distributions/statistics/
    """

    queryset = ItemDistribution.objects.select_related('planned_item', 'structure')
    serializer_classes = {
        'info': ItemDistributionInfoSerializer,
        'default': ItemDistributionSerializer,
    }
    filterset_fields = ['planned_item', 'structure']
    ordering_fields = ['id', 'quantity', 'planned_item__designation', 'structure__designation_fr', 'created_at']
    ordering = ['-quantity', 'id']

    @action(detail=False, methods=['get'], url_path=r'planned-item/(?P<related_id>\d+)')
    def by_planned_item(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_planned_item(related_id))

    @action(detail=False, methods=['get'], url_path=r'structure/(?P<related_id>\d+)')
    def by_structure(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_structure(related_id))

    @action(detail=False, methods=['get'], url_path=r'item/(?P<related_id>\d+)')
    def by_item(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_item(related_id))

    @action(detail=False, methods=['get'], url_path=r'rubric/(?P<related_id>\d+)')
    def by_rubric(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_rubric(related_id))

    @action(detail=False, methods=['get'], url_path=r'domain/(?P<related_id>\d+)')
    def by_domain(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_domain(related_id))

    @action(detail=False, methods=['get'], url_path=r'financial-operation/(?P<related_id>\d+)')
    def by_financial_operation(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_financial_operation(related_id))

    @action(detail=False, methods=['get'], url_path=r'parent-structure/(?P<related_id>\d+)')
    def by_parent_structure(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_parent_structure(related_id))

    @action(detail=False, methods=['get'], url_path='quantity-range')
    def quantity_range(self, request):
        queryset = self.get_queryset().quantity_range(
            decimal_param(request, 'min'), decimal_param(request, 'max')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path=r'quantity/(?P<bucket>[^/.]+)')
    def quantity_bucket(self, request, bucket=None):
        bucket = bucket.lower()
        if bucket not in metrics.DISTRIBUTION_QUANTITY_BUCKETS:
            raise NotFound(f"Unknown quantity scale: {bucket}")
        return self.paginated(self.get_queryset().quantity_bucket(bucket))

    @action(detail=False, methods=['get'], url_path=r'planned-item/(?P<related_id>\d+)/sum-quantity')
    def planned_item_sum_quantity(self, request, related_id=None):
        total = self.get_queryset().for_planned_item(related_id).sum_quantity()
        return Response({'planned_item': int(related_id), 'sum_quantity': metrics.quantize(total)})

    @action(detail=False, methods=['get'], url_path=r'structure/(?P<related_id>\d+)/sum-quantity')
    def structure_sum_quantity(self, request, related_id=None):
        total = self.get_queryset().for_structure(related_id).sum_quantity()
        return Response({'structure': int(related_id), 'sum_quantity': metrics.quantize(total)})

    @action(detail=False, methods=['get'], url_path=r'structure/(?P<related_id>\d+)/sum-total-cost')
    def structure_sum_total_cost(self, request, related_id=None):
        total = self.get_queryset().for_structure(related_id).sum_total_cost()
        return Response({'structure': int(related_id), 'sum_total_cost': total})

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        return Response(self.get_queryset().statistics())
