"""
Shared fixtures for the API tests.
"""

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from infrastructure.persistence.models import (
    BudgetModification,
    BudgetType,
    Document,
    DocumentType,
    Domain,
    FinancialOperation,
    Item,
    ItemStatus,
    MilitaryCategory,
    MilitaryRank,
    Person,
    PlannedItem,
    Rubric,
    Structure,
    StructureType,
)


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='planner', password='secret')


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


# =============================================================================
# PLAN
# =============================================================================

@pytest.fixture
def domain(db):
    return Domain.objects.create(designation_fr='Sécurité et défense', designation_en='Security')


@pytest.fixture
def rubric(domain):
    return Rubric.objects.create(designation_fr='Équipement informatique', domain=domain)


@pytest.fixture
def item(rubric):
    return Item.objects.create(designation_fr='Ordinateur portable', rubric=rubric)


@pytest.fixture
def item_status(db):
    return ItemStatus.objects.create(designation_fr='Actif', designation_en='Active')


@pytest.fixture
def budget_type(db):
    return BudgetType.objects.create(designation_fr="Budget d'équipement", acronym_fr='BE')


@pytest.fixture
def financial_operation(budget_type):
    return FinancialOperation.objects.create(
        operation='Acquisition matériel 2024', budget_year='2024', budget_type=budget_type
    )


@pytest.fixture
def planned_item(item, item_status, financial_operation):
    return PlannedItem.objects.create(
        designation='Laptops',
        unit_cost=Decimal('100.00'),
        planned_quantity=Decimal('10'),
        allocated_amount=Decimal('800.00'),
        item=item,
        item_status=item_status,
        financial_operation=financial_operation,
    )


@pytest.fixture
def make_planned_item(item, item_status, financial_operation):
    def make(designation, unit_cost, planned_quantity, allocated_amount):
        return PlannedItem.objects.create(
            designation=designation,
            unit_cost=Decimal(unit_cost),
            planned_quantity=Decimal(planned_quantity),
            allocated_amount=Decimal(allocated_amount),
            item=item,
            item_status=item_status,
            financial_operation=financial_operation,
        )
    return make


# =============================================================================
# DOCUMENTS
# =============================================================================

@pytest.fixture
def document_type(db):
    return DocumentType.objects.create(designation_fr='Demande de modification', scope=1)


@pytest.fixture
def demande(document_type):
    return Document.objects.create(reference='DEM-001', issue_date=date(2024, 1, 10), document_type=document_type)


@pytest.fixture
def response_document(document_type):
    return Document.objects.create(reference='REP-001', issue_date=date(2024, 2, 1), document_type=document_type)


@pytest.fixture
def budget_modification(demande, response_document):
    return BudgetModification.objects.create(
        object='Augmentation du budget',
        approval_date=date(2024, 3, 1),
        demande=demande,
        response=response_document,
    )


# =============================================================================
# ADMINISTRATION
# =============================================================================

@pytest.fixture
def structure_type(db):
    return StructureType.objects.create(designation_fr='Direction')


@pytest.fixture
def make_structure(structure_type):
    def make(acronym, parent=None):
        return Structure.objects.create(
            designation_fr=f'Structure {acronym}',
            acronym_fr=acronym,
            structure_type=structure_type,
            structure_up=parent,
        )
    return make


@pytest.fixture
def structure(make_structure):
    return make_structure('DG')


@pytest.fixture
def military_rank(db):
    category = MilitaryCategory.objects.create(designation_fr='Armée de terre', abbreviation_fr='FT')
    return MilitaryRank.objects.create(designation_fr='Capitaine', military_category=category)


@pytest.fixture
def person(db):
    return Person.objects.create(firstname_lt='Karim', lastname_lt='Benali', birth_date=date(1985, 5, 20))
