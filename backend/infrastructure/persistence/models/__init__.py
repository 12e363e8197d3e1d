"""
Persistence Models Package.

All Django ORM models for the RAAS planning system.
"""

# Base mixins
from .base import (
    TimeStampedMixin,
    AuditMixin,
    BaseModel,
    BaseModelWithHistory,
    DesignationMixin,
)

# Document models
from .document import (
    DocumentType,
    Document,
)

# Administration models
from .administration import (
    Country,
    State,
    Locality,
    StructureType,
    Structure,
    Job,
    MilitaryCategory,
    MilitaryRank,
    Person,
    Employee,
)

# Plan models
from .plan import (
    Domain,
    Rubric,
    Item,
    ItemStatus,
    BudgetType,
    FinancialOperation,
    BudgetModification,
    PlannedItem,
    ItemDistribution,
)

__all__ = [
    # Base
    'TimeStampedMixin',
    'AuditMixin',
    'BaseModel',
    'BaseModelWithHistory',
    'DesignationMixin',
    # Document
    'DocumentType',
    'Document',
    # Administration
    'Country',
    'State',
    'Locality',
    'StructureType',
    'Structure',
    'Job',
    'MilitaryCategory',
    'MilitaryRank',
    'Person',
    'Employee',
    # Plan
    'Domain',
    'Rubric',
    'Item',
    'ItemStatus',
    'BudgetType',
    'FinancialOperation',
    'BudgetModification',
    'PlannedItem',
    'ItemDistribution',
]
