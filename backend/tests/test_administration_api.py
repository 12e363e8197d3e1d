"""
API tests for geography, structures, persons and employees.
"""

from datetime import date, timedelta

import pytest
from django.utils import timezone

from domain.shared.value_objects import years_before
from infrastructure.persistence.models import Employee, Locality, Person, State, Structure


@pytest.fixture
def tree(make_structure):
    """DG <- A <- B, plus the unrelated root X."""
    root = make_structure('DG')
    middle = make_structure('A', parent=root)
    leaf = make_structure('B', parent=middle)
    other = make_structure('X')
    return root, middle, leaf, other


def ids(response):
    return [row['id'] for row in response.data['results']]


@pytest.mark.django_db
class TestStateAPI:

    def test_duplicate_code_conflicts(self, api_client):
        State.objects.create(code=16, designation_ar='الجزائر', designation_lt='Alger')

        response = api_client.post('/api/v1/states/', {
            'code': 16, 'designation_ar': 'وهران', 'designation_lt': 'Oran',
        })

        assert response.status_code == 409
        assert response.data['error'] == 'ENTITY_ALREADY_EXISTS'

    def test_find_by_code(self, api_client):
        state = State.objects.create(code=31, designation_ar='وهران', designation_lt='Oran')

        assert api_client.get('/api/v1/states/code/31/').data['id'] == state.pk
        assert api_client.get('/api/v1/states/exists/code/99/').data == {'value': 99, 'exists': False}
        assert api_client.get('/api/v1/states/code/99/').status_code == 404

    def test_delete_blocked_by_localities(self, api_client):
        state = State.objects.create(code=31, designation_ar='وهران', designation_lt='Oran')
        Locality.objects.create(code='3101', designation_ar='بئر الجير', designation_lt='Bir El Djir', state=state)

        response = api_client.delete(f'/api/v1/states/{state.pk}/')
        has_localities = api_client.get(f'/api/v1/localities/state/{state.pk}/has-localities/')

        assert response.status_code == 409
        assert 'associated localities' in response.data['detail']
        assert has_localities.data == {'state_id': state.pk, 'has_localities': True}


@pytest.mark.django_db
class TestStructureHierarchyAPI:

    def test_ancestors_nearest_first(self, api_client, tree):
        root, middle, leaf, _ = tree

        response = api_client.get(f'/api/v1/structures/{leaf.pk}/ancestors/')

        assert ids(response) == [middle.pk, root.pk]

    def test_descendants(self, api_client, tree):
        root, middle, leaf, _ = tree

        response = api_client.get(f'/api/v1/structures/{root.pk}/descendants/')

        assert ids(response) == [middle.pk, leaf.pk]

    def test_leaf_has_no_descendants(self, api_client, tree):
        _, _, leaf, _ = tree

        response = api_client.get(f'/api/v1/structures/{leaf.pk}/descendants/')

        assert response.data['count'] == 0

    def test_potential_parents_exclude_self_and_descendants(self, api_client, tree):
        root, middle, leaf, other = tree

        response = api_client.get(f'/api/v1/structures/{middle.pk}/potential-parents/')

        assert set(ids(response)) == {root.pk, other.pk}

    def test_is_ancestor_of(self, api_client, tree):
        root, _, leaf, other = tree

        assert api_client.get(f'/api/v1/structures/{root.pk}/is-ancestor-of/{leaf.pk}/').data == {
            'ancestor_id': root.pk, 'descendant_id': leaf.pk, 'is_ancestor': True,
        }
        assert api_client.get(f'/api/v1/structures/{other.pk}/is-ancestor-of/{leaf.pk}/').data['is_ancestor'] is False

    def test_roots_leaves_and_levels(self, api_client, tree):
        root, middle, leaf, other = tree

        assert set(ids(api_client.get('/api/v1/structures/roots/'))) == {root.pk, other.pk}
        assert set(ids(api_client.get('/api/v1/structures/leaves/'))) == {leaf.pk, other.pk}
        assert ids(api_client.get('/api/v1/structures/level/1/')) == [middle.pk]
        assert ids(api_client.get('/api/v1/structures/level/2/')) == [leaf.pk]
        assert api_client.get('/api/v1/structures/count/with-children/').data['count'] == 2

    def test_level_is_capped(self, api_client, tree):
        response = api_client.get('/api/v1/structures/level/11/')

        assert response.status_code == 400

    def test_children_count(self, api_client, tree):
        root, middle, _, _ = tree

        response = api_client.get(f'/api/v1/structures/{root.pk}/children-count/')

        assert response.data == {'id': root.pk, 'children_count': 1}

    def test_descendant_as_parent_is_a_cycle(self, api_client, tree):
        root, _, leaf, _ = tree

        response = api_client.patch(f'/api/v1/structures/{root.pk}/', {'structure_up': leaf.pk})

        assert response.status_code == 409
        assert response.data['error'] == 'CIRCULAR_REFERENCE'
        root.refresh_from_db()
        assert root.structure_up_id is None

    def test_structure_cannot_be_its_own_parent(self, api_client, tree):
        _, middle, _, _ = tree

        response = api_client.patch(f'/api/v1/structures/{middle.pk}/', {'structure_up': middle.pk})

        assert response.status_code == 400
        assert response.data['detail'] == 'A structure cannot be its own parent'

    def test_move_under_unrelated_root(self, api_client, tree):
        _, middle, _, other = tree

        response = api_client.patch(f'/api/v1/structures/{middle.pk}/', {'structure_up': other.pk})

        assert response.status_code == 200
        assert Structure.objects.get(pk=middle.pk).structure_up_id == other.pk

    def test_duplicate_acronym_conflicts(self, api_client, tree, structure_type):
        response = api_client.post('/api/v1/structures/', {
            'designation_fr': 'Nouvelle structure', 'acronym_fr': 'DG', 'structure_type': structure_type.pk,
        })

        assert response.status_code == 409
        assert response.data['detail'] == "Structure with French acronym 'DG' already exists"

    def test_delete_blocked_by_children(self, api_client, tree):
        root, _, _, _ = tree

        response = api_client.delete(f'/api/v1/structures/{root.pk}/')

        assert response.status_code == 409
        assert response.data['detail'] == (
            f"Cannot delete structure with ID {root.pk} because it has 1 associated child structures"
        )


@pytest.mark.django_db
class TestPersonAPI:

    def test_a_name_is_required(self, api_client):
        response = api_client.post('/api/v1/persons/', {'firstname_lt': '  ', 'birth_place': 'Alger'})

        assert response.status_code == 400
        assert response.data['non_field_errors'] == ['At least one first or last name is required']

    def test_birth_date_cannot_be_in_the_future(self, api_client):
        tomorrow = timezone.localdate() + timedelta(days=1)

        response = api_client.post('/api/v1/persons/', {'lastname_ar': 'بن علي', 'birth_date': tomorrow.isoformat()})

        assert response.status_code == 400
        assert response.data['birth_date'] == ['Birth date cannot be in the future']

    def test_info(self, api_client, person):
        response = api_client.get(f'/api/v1/persons/{person.pk}/info/')

        assert response.data['display_name'] == 'Karim Benali'
        assert response.data['age'] >= 39
        assert response.data['age_group'] in ('MIDDLE_AGED', 'SENIOR')

    def test_minors_and_adults(self, api_client, person):
        minor = Person.objects.create(firstname_lt='Amine', birth_date=years_before(timezone.localdate(), 10))

        assert ids(api_client.get('/api/v1/persons/minors/')) == [minor.pk]
        assert api_client.get('/api/v1/persons/count/adults/').data['count'] == 1

    def test_birth_year(self, api_client, person):
        response = api_client.get('/api/v1/persons/birth-year/1985/')

        assert ids(response) == [person.pk]

    def test_delete_blocked_by_employee_record(self, api_client, person, military_rank):
        Employee.objects.create(person=person, military_rank=military_rank, serial='M-001')

        response = api_client.delete(f'/api/v1/persons/{person.pk}/')

        assert response.status_code == 409
        assert response.data['detail'] == (
            f"Cannot delete person with ID {person.pk} because it has 1 associated employee record"
        )


@pytest.mark.django_db
class TestEmployeeAPI:

    def test_create_employee(self, api_client, person, military_rank):
        response = api_client.post('/api/v1/employees/', {
            'serial': 'M-001', 'hiring_date': '2010-09-01',
            'person': person.pk, 'military_rank': military_rank.pk,
        })

        assert response.status_code == 201
        assert response.data['person_display_name'] == 'Karim Benali'
        assert response.data['job'] is None

    def test_one_employee_per_person(self, api_client, person, military_rank):
        Employee.objects.create(person=person, military_rank=military_rank, serial='M-001')

        response = api_client.post('/api/v1/employees/', {
            'serial': 'M-002', 'person': person.pk, 'military_rank': military_rank.pk,
        })

        assert response.status_code == 409
        assert response.data['rule'] == 'ONE_EMPLOYEE_PER_PERSON'
        assert response.data['detail'] == f"Person with ID {person.pk} already has an employee record"

    def test_duplicate_serial_conflicts(self, api_client, person, military_rank):
        Employee.objects.create(person=person, military_rank=military_rank, serial='M-001')
        other = Person.objects.create(lastname_lt='Haddad')

        response = api_client.post('/api/v1/employees/', {
            'serial': 'M-001', 'person': other.pk, 'military_rank': military_rank.pk,
        })

        assert response.status_code == 409
        assert response.data['detail'] == "Employee with serial 'M-001' already exists"

    def test_blank_serials_do_not_conflict(self, api_client, person, military_rank):
        Employee.objects.create(person=person, military_rank=military_rank)
        other = Person.objects.create(lastname_lt='Haddad')

        response = api_client.post('/api/v1/employees/', {
            'serial': '', 'person': other.pk, 'military_rank': military_rank.pk,
        })

        assert response.status_code == 201
        assert response.data['serial'] is None

    def test_hiring_date_cannot_be_in_the_future(self, api_client, person, military_rank):
        response = api_client.post('/api/v1/employees/', {
            'person': person.pk, 'military_rank': military_rank.pk,
            'hiring_date': (timezone.localdate() + timedelta(days=30)).isoformat(),
        })

        assert response.status_code == 400
        assert response.data['hiring_date'] == ['Hiring date cannot be in the future']

    def test_info(self, api_client, person, military_rank):
        employee = Employee.objects.create(
            person=person, military_rank=military_rank, serial='M-001',
            hiring_date=years_before(timezone.localdate(), 12),
        )

        response = api_client.get(f'/api/v1/employees/{employee.pk}/info/')

        assert response.data['years_of_service'] == 12
        assert response.data['service_category'] == 'SENIOR'
        assert response.data['status'] == 'ACTIVE_SENIOR'

    def test_hiring_date_range(self, api_client, person, military_rank):
        employee = Employee.objects.create(
            person=person, military_rank=military_rank, hiring_date=date(2015, 6, 1)
        )

        inside = api_client.get('/api/v1/employees/hiring-date-range/', {'startDate': '2015-01-01', 'endDate': '2015-12-31'})
        outside = api_client.get('/api/v1/employees/hiring-date-range/', {'startDate': '2016-01-01'})

        assert ids(inside) == [employee.pk]
        assert outside.data['count'] == 0


@pytest.mark.django_db
class TestDeepStructureChain:

    @pytest.fixture
    def chain(self, make_structure):
        nodes = [make_structure('S0')]
        for index in range(1, 13):
            nodes.append(make_structure(f'S{index}', parent=nodes[-1]))
        return nodes

    def test_deep_descendant_as_parent_is_a_cycle(self, api_client, chain):
        root, deepest = chain[0], chain[-1]

        response = api_client.patch(f'/api/v1/structures/{root.pk}/', {'structure_up': deepest.pk})

        assert response.status_code == 409
        assert response.data['error'] == 'CIRCULAR_REFERENCE'
        root.refresh_from_db()
        assert root.structure_up_id is None

    def test_potential_parents_exclude_deep_descendants(self, api_client, chain, make_structure):
        other = make_structure('X')

        response = api_client.get(f'/api/v1/structures/{chain[0].pk}/potential-parents/')

        assert ids(response) == [other.pk]

    def test_ancestor_listing_stays_capped(self, api_client, chain):
        response = api_client.get(f'/api/v1/structures/{chain[-1].pk}/ancestors/')

        assert ids(response) == [node.pk for node in reversed(chain[2:-1])]


@pytest.mark.django_db
class TestServiceThresholds:

    @pytest.fixture
    def hire(self, military_rank):
        today = timezone.localdate()

        def hire(name, years_of_service, age=40):
            person = Person.objects.create(lastname_lt=name, birth_date=years_before(today, age))
            return Employee.objects.create(
                person=person, military_rank=military_rank,
                hiring_date=years_before(today, years_of_service),
            )
        return hire

    def test_new_recruits_below_two_years(self, api_client, hire):
        recruit = hire('Recrue', 1)
        hire('Deux ans', 2)

        assert ids(api_client.get('/api/v1/employees/new-recruits/')) == [recruit.pk]

    def test_veterans_from_twenty_years(self, api_client, hire):
        veteran = hire('Vingt ans', 20, age=45)
        hire('Dix-neuf ans', 19, age=45)

        assert ids(api_client.get('/api/v1/employees/veterans/')) == [veteran.pk]
        assert api_client.get('/api/v1/employees/count/veterans/').data['count'] == 1

    def test_retirement_by_service_or_age(self, api_client, hire):
        by_service = hire('Trente ans', 30, age=50)
        by_age = hire('Soixante', 5, age=60)
        hire('Actif', 29, age=59)

        response = api_client.get('/api/v1/employees/retirement-eligible/')

        assert set(ids(response)) == {by_service.pk, by_age.pk}


@pytest.mark.django_db
def test_person_age_range_bounds_are_inclusive(api_client):
    today = timezone.localdate()
    aged = {
        age: Person.objects.create(lastname_lt=f'Age {age}', birth_date=years_before(today, age))
        for age in (29, 30, 40, 41)
    }

    response = api_client.get('/api/v1/persons/age-range/', {'minAge': 30, 'maxAge': 40})

    assert set(ids(response)) == {aged[30].pk, aged[40].pk}
