"""
API v1 URL Configuration.

All API endpoints for version 1. Trailing slashes are optional.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views.plan import (
    BudgetModificationViewSet,
    BudgetTypeViewSet,
    DomainViewSet,
    FinancialOperationViewSet,
    ItemDistributionViewSet,
    ItemStatusViewSet,
    ItemViewSet,
    PlannedItemViewSet,
    RubricViewSet,
)
from .views.document import (
    DocumentTypeViewSet,
    DocumentViewSet,
)
from .views.administration import (
    CountryViewSet,
    EmployeeViewSet,
    JobViewSet,
    LocalityViewSet,
    MilitaryCategoryViewSet,
    MilitaryRankViewSet,
    PersonViewSet,
    StateViewSet,
    StructureTypeViewSet,
    StructureViewSet,
)


class OptionalSlashRouter(DefaultRouter):
    """Router matching URLs with or without the trailing slash."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'


router = OptionalSlashRouter()

# Plan
router.register(r'budget-types', BudgetTypeViewSet, basename='budget-types')
router.register(r'domains', DomainViewSet, basename='domains')
router.register(r'rubrics', RubricViewSet, basename='rubrics')
router.register(r'items', ItemViewSet, basename='items')
router.register(r'item-statuses', ItemStatusViewSet, basename='item-statuses')
router.register(r'financial-operations', FinancialOperationViewSet, basename='financial-operations')
router.register(r'budget-modifications', BudgetModificationViewSet, basename='budget-modifications')
router.register(r'planned-items', PlannedItemViewSet, basename='planned-items')
router.register(r'item-distributions', ItemDistributionViewSet, basename='item-distributions')

# Documents
router.register(r'document-types', DocumentTypeViewSet, basename='document-types')
router.register(r'documents', DocumentViewSet, basename='documents')

# Administration
router.register(r'countries', CountryViewSet, basename='countries')
router.register(r'states', StateViewSet, basename='states')
router.register(r'localities', LocalityViewSet, basename='localities')
router.register(r'structure-types', StructureTypeViewSet, basename='structure-types')
router.register(r'structures', StructureViewSet, basename='structures')
router.register(r'jobs', JobViewSet, basename='jobs')
router.register(r'military-categories', MilitaryCategoryViewSet, basename='military-categories')
router.register(r'military-ranks', MilitaryRankViewSet, basename='military-ranks')
router.register(r'persons', PersonViewSet, basename='persons')
router.register(r'employees', EmployeeViewSet, basename='employees')

app_name = 'api_v1'

urlpatterns = [
    path('auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('', include(router.urls)),
]
