"""
Tests for pagination, sorting and authentication on list endpoints.
"""

import pytest
from rest_framework.test import APIClient

from infrastructure.persistence.models import Domain


@pytest.fixture
def domains(db):
    return [Domain.objects.create(designation_fr=f'Domaine {index:02d}') for index in range(25)]


@pytest.mark.django_db
class TestPagination:

    def test_first_page_is_page_zero(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'size': 10})

        assert response.status_code == 200
        assert response.data['count'] == 25
        assert response.data['total_pages'] == 3
        assert response.data['page'] == 0
        assert response.data['size'] == 10
        assert response.data['previous'] is None
        assert [row['designation_fr'] for row in response.data['results']][:2] == ['Domaine 00', 'Domaine 01']

    def test_last_page(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'page': 2, 'size': 10})

        assert response.status_code == 200
        assert response.data['page'] == 2
        assert len(response.data['results']) == 5
        assert response.data['next'] is None

    def test_page_past_the_end_is_not_found(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'page': 5, 'size': 10})

        assert response.status_code == 404

    def test_size_is_capped(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'size': 5000})

        assert response.data['size'] == 1000

    def test_trailing_slash_is_optional(self, api_client, domains):
        response = api_client.get('/api/v1/domains', {'size': 1})

        assert response.status_code == 200
        assert response.data['count'] == 25


@pytest.mark.django_db
class TestSorting:

    def test_sort_descending(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'sortBy': 'designationFr', 'sortDir': 'desc', 'size': 3})

        assert [row['designation_fr'] for row in response.data['results']] == [
            'Domaine 24', 'Domaine 23', 'Domaine 22',
        ]

    def test_unknown_sort_field_is_ignored(self, api_client, domains):
        response = api_client.get('/api/v1/domains/', {'sortBy': 'password', 'size': 1})

        assert response.status_code == 200
        assert response.data['results'][0]['designation_fr'] == 'Domaine 00'


@pytest.mark.django_db
def test_authentication_is_required():
    response = APIClient().get('/api/v1/domains/')

    assert response.status_code in (401, 403)
