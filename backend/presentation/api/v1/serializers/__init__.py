"""
Serializers Package.

All API serializers for the RAAS planning system.
"""

from .base import BaseModelSerializer

from .document import (
    DocumentTypeSerializer,
    DocumentSerializer,
)

from .plan import (
    DomainSerializer,
    DomainInfoSerializer,
    RubricSerializer,
    RubricInfoSerializer,
    ItemSerializer,
    ItemInfoSerializer,
    ItemStatusSerializer,
    ItemStatusInfoSerializer,
    BudgetTypeSerializer,
    BudgetTypeInfoSerializer,
    FinancialOperationSerializer,
    FinancialOperationInfoSerializer,
    BudgetModificationSerializer,
    BudgetModificationInfoSerializer,
    PlannedItemSerializer,
    PlannedItemInfoSerializer,
    ItemDistributionSerializer,
    ItemDistributionInfoSerializer,
)

from .administration import (
    CountrySerializer,
    StateSerializer,
    StateInfoSerializer,
    LocalitySerializer,
    StructureTypeSerializer,
    StructureSerializer,
    StructureInfoSerializer,
    JobSerializer,
    JobInfoSerializer,
    MilitaryCategorySerializer,
    MilitaryCategoryInfoSerializer,
    MilitaryRankSerializer,
    MilitaryRankInfoSerializer,
    PersonSerializer,
    PersonInfoSerializer,
    EmployeeSerializer,
    EmployeeInfoSerializer,
)
