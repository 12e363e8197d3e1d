"""
API tests for the budget classification hierarchy and the planning records.
"""

from decimal import Decimal
from urllib.parse import quote

import pytest

from infrastructure.persistence.models import Domain, ItemDistribution, PlannedItem, Rubric


@pytest.mark.django_db
class TestDomainAPI:

    def test_create_domain(self, api_client, user):
        response = api_client.post('/api/v1/domains/', {'designation_fr': 'Logistique', 'designation_en': 'Logistics'})

        assert response.status_code == 201
        assert response.data['default_designation'] == 'Logistique'
        assert response.data['created_by'] == str(user)
        assert Domain.objects.filter(designation_fr='Logistique').exists()

    def test_duplicate_designation_conflicts(self, api_client, domain):
        response = api_client.post('/api/v1/domains/', {'designation_fr': domain.designation_fr})

        assert response.status_code == 409
        assert response.data['error'] == 'ENTITY_ALREADY_EXISTS'
        assert response.data['detail'] == f"Domain with French designation '{domain.designation_fr}' already exists"

    def test_rename_onto_another_domain_conflicts(self, api_client, domain):
        other = Domain.objects.create(designation_fr='Formation')

        response = api_client.patch(f'/api/v1/domains/{other.pk}/', {'designation_fr': domain.designation_fr})

        assert response.status_code == 409
        assert response.data['detail'].startswith('Another domain with French designation')

    def test_update_keeping_own_designation(self, api_client, domain):
        response = api_client.put(
            f'/api/v1/domains/{domain.pk}/',
            {'designation_fr': domain.designation_fr, 'designation_ar': 'أمن'},
        )

        assert response.status_code == 200
        assert response.data['designation_ar'] == 'أمن'

    def test_missing_domain_is_not_found(self, api_client, db):
        response = api_client.get('/api/v1/domains/999/')

        assert response.status_code == 404
        assert response.data['error'] == 'ENTITY_NOT_FOUND'
        assert response.data['detail'] == 'Domain not found with ID: 999'

    def test_delete_blocked_by_rubrics(self, api_client, rubric):
        domain = rubric.domain

        response = api_client.delete(f'/api/v1/domains/{domain.pk}/')

        assert response.status_code == 409
        assert response.data['detail'] == (
            f"Cannot delete domain with ID {domain.pk} because it has 1 associated rubrics"
        )
        assert Domain.objects.filter(pk=domain.pk).exists()

    def test_delete_domain_without_rubrics(self, api_client, domain):
        response = api_client.delete(f'/api/v1/domains/{domain.pk}/')

        assert response.status_code == 204
        assert not Domain.objects.filter(pk=domain.pk).exists()

    def test_info_includes_classification(self, api_client, rubric):
        response = api_client.get(f'/api/v1/domains/{rubric.domain_id}/info/')

        assert response.status_code == 200
        assert response.data['category'] == 'SECURITY_DOMAIN'
        assert response.data['priority'] == 'CRITICAL_PRIORITY'
        assert response.data['governance_model'] == 'EXECUTIVE_GOVERNANCE'
        assert response.data['rubrics_count'] == 1
        assert response.data['complexity'] == 'LOW_COMPLEXITY'

    def test_exists_endpoints(self, api_client, domain):
        assert api_client.get(f'/api/v1/domains/{domain.pk}/exists/').data == {'id': domain.pk, 'exists': True}
        assert api_client.get('/api/v1/domains/9999/exists/').data['exists'] is False

        response = api_client.get('/api/v1/domains/exists/designation-fr/Inconnu/')
        assert response.data == {'value': 'Inconnu', 'exists': False}

    def test_find_by_designation(self, api_client, domain):
        response = api_client.get(f'/api/v1/domains/designation-fr/{quote(domain.designation_fr)}/')

        assert response.status_code == 200
        assert response.data['id'] == domain.pk

    def test_category_and_priority_filters(self, api_client, domain):
        Domain.objects.create(designation_fr='Formation continue')

        security = api_client.get('/api/v1/domains/category/security/')
        critical = api_client.get('/api/v1/domains/priority/critical/')

        assert [row['id'] for row in security.data['results']] == [domain.pk]
        assert [row['id'] for row in critical.data['results']] == [domain.pk]

    def test_unknown_category_is_not_found(self, api_client, db):
        assert api_client.get('/api/v1/domains/category/astrology/').status_code == 404
        assert api_client.get('/api/v1/domains/priority/urgent/').status_code == 404

    def test_counts(self, api_client, rubric):
        Domain.objects.create(designation_fr='Formation')

        assert api_client.get('/api/v1/domains/count/all/').data == {'key': 'all', 'count': 2}
        assert api_client.get('/api/v1/domains/count/with-rubrics/').data['count'] == 1
        assert api_client.get('/api/v1/domains/count/without-rubrics/').data['count'] == 1
        assert api_client.get('/api/v1/domains/count/training/').data['count'] == 1
        assert api_client.get('/api/v1/domains/count/bogus/').status_code == 404

    def test_search(self, api_client, domain):
        Domain.objects.create(designation_fr='Formation')

        response = api_client.get('/api/v1/domains/search/', {'query': 'sécurité'})

        assert [row['id'] for row in response.data['results']] == [domain.pk]


@pytest.mark.django_db
class TestHierarchyAPI:

    def test_rubrics_of_domain(self, api_client, rubric):
        Rubric.objects.create(designation_fr='Autre', domain=Domain.objects.create(designation_fr='Autre domaine'))

        response = api_client.get(f'/api/v1/rubrics/domain/{rubric.domain_id}/')

        assert [row['id'] for row in response.data['results']] == [rubric.pk]

    def test_item_exposes_its_domain(self, api_client, item):
        response = api_client.get(f'/api/v1/items/{item.pk}/')

        assert response.data['rubric'] == item.rubric_id
        assert response.data['domain'] == item.rubric.domain_id

    def test_items_of_domain(self, api_client, item):
        response = api_client.get(f'/api/v1/items/domain/{item.rubric.domain_id}/')

        assert response.data['count'] == 1

    def test_delete_rubric_blocked_by_items(self, api_client, item):
        response = api_client.delete(f'/api/v1/rubrics/{item.rubric_id}/')

        assert response.status_code == 409
        assert 'associated items' in response.data['detail']


@pytest.mark.django_db
class TestFinancialOperationAPI:

    def test_budget_year_must_have_four_digits(self, api_client, budget_type):
        response = api_client.post(
            '/api/v1/financial-operations/',
            {'operation': 'Op', 'budget_year': '24', 'budget_type': budget_type.pk},
        )

        assert response.status_code == 400
        assert 'budget_year' in response.data

    def test_duplicate_operation_conflicts(self, api_client, financial_operation):
        response = api_client.post(
            '/api/v1/financial-operations/',
            {
                'operation': financial_operation.operation,
                'budget_year': '2025',
                'budget_type': financial_operation.budget_type_id,
            },
        )

        assert response.status_code == 409

    def test_budget_years(self, api_client, financial_operation):
        response = api_client.get('/api/v1/financial-operations/budget-years/')

        assert response.status_code == 200
        assert '2024' in response.data

    def test_delete_budget_type_blocked_by_operations(self, api_client, financial_operation):
        response = api_client.delete(f'/api/v1/budget-types/{financial_operation.budget_type_id}/')

        assert response.status_code == 409
        assert 'associated financial operations' in response.data['detail']


@pytest.mark.django_db
class TestBudgetModificationAPI:

    def test_approval_date_and_demande_are_unique_together(self, api_client, budget_modification):
        response = api_client.post('/api/v1/budget-modifications/', {
            'object': 'Réduction',
            'approval_date': '2024-03-01',
            'demande': budget_modification.demande_id,
            'response': budget_modification.response_id,
        })

        assert response.status_code == 409
        assert response.data['error'] == 'BUSINESS_RULE_VIOLATION'
        assert response.data['rule'] == 'UNIQUE_APPROVAL_DATE_DEMANDE'

    def test_pending_modifications_share_a_demande(self, api_client, budget_modification):
        payload = {
            'object': 'Révision',
            'demande': budget_modification.demande_id,
            'response': budget_modification.response_id,
        }

        assert api_client.post('/api/v1/budget-modifications/', payload).status_code == 201
        assert api_client.post('/api/v1/budget-modifications/', payload).status_code == 201

    def test_status_endpoints(self, api_client, budget_modification):
        pending = api_client.post('/api/v1/budget-modifications/', {
            'demande': budget_modification.demande_id,
            'response': budget_modification.response_id,
        })

        approved = api_client.get('/api/v1/budget-modifications/status/approved/')
        waiting = api_client.get('/api/v1/budget-modifications/status/pending/')

        assert [row['id'] for row in approved.data['results']] == [budget_modification.pk]
        assert [row['id'] for row in waiting.data['results']] == [pending.data['id']]
        assert api_client.get('/api/v1/budget-modifications/status/lost/').status_code == 404

    def test_info(self, api_client, budget_modification):
        response = api_client.get(f'/api/v1/budget-modifications/{budget_modification.pk}/info/')

        assert response.data['status'] == 'APPROVED'
        assert response.data['modification_type'] == 'BUDGET_INCREASE'
        assert response.data['priority'] == 'HIGH_PRIORITY'
        assert response.data['display_text'] == 'Augmentation du budget'

    def test_exists_by_approval_date_and_demande(self, api_client, budget_modification):
        response = api_client.get(
            '/api/v1/budget-modifications/exists/approval-date-demande/',
            {'approvalDate': '2024-03-01', 'demandeId': budget_modification.demande_id},
        )

        assert response.data['exists'] is True

    def test_invalid_date_parameter(self, api_client, db):
        response = api_client.get('/api/v1/budget-modifications/approval-date-range/', {'startDate': 'yesterday'})

        assert response.status_code == 400
        assert response.data['error'] == 'VALIDATION_ERROR'

    def test_delete_document_used_by_modification(self, api_client, budget_modification):
        response = api_client.delete(f'/api/v1/documents/{budget_modification.demande_id}/')

        assert response.status_code == 409
        assert 'budget modifications as demande' in response.data['detail']


@pytest.mark.django_db
class TestPlannedItemAPI:

    def payload(self, item, item_status, financial_operation, **overrides):
        data = {
            'designation': 'Imprimantes',
            'unit_cost': '250.00',
            'planned_quantity': '4',
            'allocated_amount': '1000.00',
            'item': item.pk,
            'item_status': item_status.pk,
            'financial_operation': financial_operation.pk,
        }
        data.update(overrides)
        return data

    def test_create_computes_total_cost_and_variance(self, api_client, item, item_status, financial_operation):
        response = api_client.post(
            '/api/v1/planned-items/', self.payload(item, item_status, financial_operation, allocated_amount='900.00')
        )

        assert response.status_code == 201
        assert response.data['total_cost'] == '1000.00'
        assert response.data['variance'] == '-100.00'
        assert response.data['financial_operation_name'] == financial_operation.operation

    @pytest.mark.parametrize('field,value,message', [
        ('unit_cost', '0', 'Unit cost must be greater than zero'),
        ('planned_quantity', '-1', 'Planned quantity must be greater than zero'),
        ('allocated_amount', '-5', 'Allocated amount cannot be negative'),
    ])
    def test_amount_validation(self, api_client, item, item_status, financial_operation, field, value, message):
        response = api_client.post(
            '/api/v1/planned-items/', self.payload(item, item_status, financial_operation, **{field: value})
        )

        assert response.status_code == 400
        assert response.data[field] == [message]

    def test_over_budget_sorted_by_excess(self, api_client, make_planned_item):
        moderate = make_planned_item('A', '100', '10', '800')
        make_planned_item('B', '50', '10', '600')
        severe = make_planned_item('C', '200', '10', '1000')

        response = api_client.get('/api/v1/planned-items/over-budget/')

        assert [row['id'] for row in response.data['results']] == [severe.pk, moderate.pk]
        assert api_client.get('/api/v1/planned-items/count/over-budget/').data['count'] == 2

    def test_cost_range(self, api_client, make_planned_item):
        make_planned_item('A', '100', '1', '0')
        middle = make_planned_item('B', '500', '1', '0')
        make_planned_item('C', '5000', '1', '0')

        response = api_client.get('/api/v1/planned-items/cost-range/', {'min': '200', 'max': '1000'})

        assert [row['id'] for row in response.data['results']] == [middle.pk]

    def test_invalid_number_parameter(self, api_client, db):
        response = api_client.get('/api/v1/planned-items/cost-range/', {'min': 'cheap'})

        assert response.status_code == 400

    def test_info(self, api_client, planned_item):
        response = api_client.get(f'/api/v1/planned-items/{planned_item.pk}/info/')

        assert response.data['budget_utilization'] == '125.00'
        assert response.data['planning_status'] == 'SIGNIFICANTLY_OVER_PLANNED'
        assert response.data['cost_category'] == 'LOW_COST'
        assert response.data['distribution_complexity'] == 'NO_DISTRIBUTION'

    def test_history_records_changes(self, api_client, planned_item):
        api_client.patch(f'/api/v1/planned-items/{planned_item.pk}/', {'allocated_amount': '1000.00'})

        response = api_client.get(f'/api/v1/planned-items/{planned_item.pk}/history/')

        assert response.status_code == 200
        assert [entry['type'] for entry in response.data] == ['~', '+']

    def test_delete_blocked_by_distributions(self, api_client, planned_item, structure):
        ItemDistribution.objects.create(planned_item=planned_item, structure=structure, quantity=Decimal('2'))

        response = api_client.delete(f'/api/v1/planned-items/{planned_item.pk}/')

        assert response.status_code == 409
        assert response.data['detail'] == (
            f"Cannot delete planned item with ID {planned_item.pk} "
            "because it has 1 associated item distributions"
        )
        assert PlannedItem.objects.filter(pk=planned_item.pk).exists()


@pytest.mark.django_db
class TestItemDistributionAPI:

    def test_distribution_within_planned_quantity(self, api_client, planned_item, structure):
        response = api_client.post('/api/v1/item-distributions/', {
            'quantity': '6', 'planned_item': planned_item.pk, 'structure': structure.pk,
        })

        assert response.status_code == 201
        assert response.data['structure_designation'] == structure.designation_fr

    def test_distribution_cannot_exceed_planned_quantity(self, api_client, planned_item, structure):
        ItemDistribution.objects.create(planned_item=planned_item, structure=structure, quantity=Decimal('6'))

        response = api_client.post('/api/v1/item-distributions/', {
            'quantity': '5', 'planned_item': planned_item.pk, 'structure': structure.pk,
        })

        assert response.status_code == 400
        assert response.data['error'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'quantity'
        assert 'cannot exceed planned quantity' in response.data['detail']
        assert ItemDistribution.objects.count() == 1

    def test_update_excludes_the_record_itself(self, api_client, planned_item, structure):
        distribution = ItemDistribution.objects.create(
            planned_item=planned_item, structure=structure, quantity=Decimal('6')
        )

        response = api_client.patch(f'/api/v1/item-distributions/{distribution.pk}/', {'quantity': '10'})

        assert response.status_code == 200

    def test_quantity_must_be_positive(self, api_client, planned_item, structure):
        response = api_client.post('/api/v1/item-distributions/', {
            'quantity': '0', 'planned_item': planned_item.pk, 'structure': structure.pk,
        })

        assert response.status_code == 400
        assert response.data['quantity'] == ['Quantity must be greater than zero']

    def test_sums(self, api_client, planned_item, make_structure):
        first, second = make_structure('S1'), make_structure('S2')
        ItemDistribution.objects.create(planned_item=planned_item, structure=first, quantity=Decimal('3'))
        ItemDistribution.objects.create(planned_item=planned_item, structure=second, quantity=Decimal('4'))

        planned = api_client.get(f'/api/v1/item-distributions/planned-item/{planned_item.pk}/sum-quantity/')
        cost = api_client.get(f'/api/v1/item-distributions/structure/{second.pk}/sum-total-cost/')

        assert planned.data == {'planned_item': planned_item.pk, 'sum_quantity': Decimal('7.00')}
        assert cost.data == {'structure': second.pk, 'sum_total_cost': Decimal('400.00')}

    def test_distributions_of_parent_structure(self, api_client, planned_item, make_structure):
        parent = make_structure('P')
        child = make_structure('C', parent=parent)
        ItemDistribution.objects.create(planned_item=planned_item, structure=child, quantity=Decimal('1'))

        response = api_client.get(f'/api/v1/item-distributions/parent-structure/{parent.pk}/')

        assert response.data['count'] == 1

    def test_unknown_quantity_scale(self, api_client, db):
        assert api_client.get('/api/v1/item-distributions/quantity/huge/').status_code == 404


@pytest.mark.django_db
def test_budget_modification_link_on_planned_item(api_client, planned_item, budget_modification):
    response = api_client.patch(
        f'/api/v1/planned-items/{planned_item.pk}/', {'budget_modification': budget_modification.pk}
    )

    assert response.status_code == 200
    listed = api_client.get(f'/api/v1/planned-items/budget-modification/{budget_modification.pk}/')
    assert [row['id'] for row in listed.data['results']] == [planned_item.pk]


def ids(response):
    return [row['id'] for row in response.data['results']]


@pytest.mark.django_db
class TestBudgetThresholds:

    @pytest.fixture
    def budgeted(self, make_planned_item):
        return {
            'A': make_planned_item('A', '100', '10', '1100'),
            'B': make_planned_item('B', '100', '10', '800'),
            'C': make_planned_item('C', '110', '10', '1000'),
            'E': make_planned_item('E', '120', '10', '1000'),
        }

    def test_well_budgeted_within_ten_percent(self, api_client, budgeted):
        response = api_client.get('/api/v1/planned-items/well-budgeted/')

        assert ids(response) == [budgeted['A'].pk, budgeted['C'].pk]

    def test_immediate_attention_above_twenty_percent(self, api_client, budgeted):
        response = api_client.get('/api/v1/planned-items/requiring-immediate-attention/')

        assert ids(response) == [budgeted['B'].pk]

    def test_under_budget(self, api_client, budgeted):
        response = api_client.get('/api/v1/planned-items/under-budget/')

        assert ids(response) == [budgeted['A'].pk]

    def test_statistics(self, api_client, make_planned_item, structure):
        first = make_planned_item('A', '100', '10', '1100')
        make_planned_item('B', '100', '10', '800')
        ItemDistribution.objects.create(planned_item=first, structure=structure, quantity=Decimal('2'))

        data = api_client.get('/api/v1/planned-items/statistics/').data

        assert data['count'] == 2
        assert data['sum_allocated_amount'] == Decimal('1900.00')
        assert data['sum_total_cost'] == Decimal('2000.00')
        assert data['sum_variance'] == Decimal('-100.00')
        assert data['max_unit_cost'] == Decimal('100.00')
        assert data['max_distributions'] == 1


@pytest.mark.django_db
class TestDistributionQuantityScales:

    @pytest.fixture
    def distributions(self, make_planned_item, structure):
        planned = make_planned_item('Bulk', '1', '1000', '1000')
        return {
            quantity: ItemDistribution.objects.create(
                planned_item=planned, structure=structure, quantity=Decimal(quantity)
            )
            for quantity in ('10', '50', '100', '101')
        }

    @pytest.mark.parametrize('scale,quantity', [
        ('small', '10'),
        ('medium', '50'),
        ('large', '100'),
        ('bulk', '101'),
    ])
    def test_scale_boundaries(self, api_client, distributions, scale, quantity):
        response = api_client.get(f'/api/v1/item-distributions/quantity/{scale}/')

        assert ids(response) == [distributions[quantity].pk]

    def test_statistics(self, api_client, distributions):
        data = api_client.get('/api/v1/item-distributions/statistics/').data

        assert data['count'] == 4
        assert data['sum_quantity'] == Decimal('261.00')
        assert data['max_quantity'] == Decimal('101.00')
        assert data['min_quantity'] == Decimal('10.00')
        assert data['structures'] == 1


@pytest.mark.django_db
class TestChildCountFilters:

    @pytest.fixture
    def domains(self):
        five = Domain.objects.create(designation_fr='Domaine cinq')
        six = Domain.objects.create(designation_fr='Domaine six')
        empty = Domain.objects.create(designation_fr='Domaine vide')
        for index in range(5):
            Rubric.objects.create(designation_fr=f'Rubrique 5-{index}', domain=five)
        for index in range(6):
            Rubric.objects.create(designation_fr=f'Rubrique 6-{index}', domain=six)
        return five, six, empty

    def test_domain_complexity_levels(self, api_client, domains):
        five, six, _ = domains

        assert ids(api_client.get('/api/v1/domains/complexity/low/')) == [five.pk]
        assert ids(api_client.get('/api/v1/domains/complexity/medium/')) == [six.pk]
        assert api_client.get('/api/v1/domains/complexity/high/').data['count'] == 0
        assert api_client.get('/api/v1/domains/complexity/extreme/').status_code == 404

    def test_rubrics_count_range(self, api_client, domains):
        five, six, empty = domains

        exact = api_client.get('/api/v1/domains/rubrics-count-range/', {'minCount': 5, 'maxCount': 5})
        at_most = api_client.get('/api/v1/domains/rubrics-count-range/', {'maxCount': 5})

        assert ids(exact) == [five.pk]
        assert ids(at_most) == [five.pk, empty.pk]

    def test_domain_statistics(self, api_client, domains):
        response = api_client.get('/api/v1/domains/statistics/')

        assert response.data == {
            'records': 3, 'average': 3.67, 'maximum': 6, 'minimum_excluding_zero': 5,
        }

    def test_rubric_complexity_and_items_count_range(self, api_client, rubric, item):
        Rubric.objects.create(designation_fr='Rubrique vide', domain=rubric.domain)

        assert ids(api_client.get('/api/v1/rubrics/complexity/low/')) == [rubric.pk]
        assert ids(api_client.get('/api/v1/rubrics/items-count-range/', {'minCount': 1})) == [rubric.pk]
        assert api_client.get('/api/v1/rubrics/statistics/').data == {
            'records': 2, 'average': 0.5, 'maximum': 1, 'minimum_excluding_zero': 1,
        }
