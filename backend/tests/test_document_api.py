"""
API tests for document types and documents.
"""

import pytest
from django.core.management import call_command

from infrastructure.persistence.models import Document, DocumentType, ItemStatus, StructureType


@pytest.mark.django_db
class TestDocumentTypeAPI:

    def test_same_designation_in_another_scope(self, api_client, document_type):
        response = api_client.post('/api/v1/document-types/', {
            'designation_fr': document_type.designation_fr, 'scope': 2,
        })

        assert response.status_code == 201

    def test_designation_is_unique_within_a_scope(self, api_client, document_type):
        response = api_client.post('/api/v1/document-types/', {
            'designation_fr': document_type.designation_fr, 'scope': document_type.scope,
        })

        assert response.status_code == 409
        assert response.data['detail'] == (
            "Document type with scope 1 and French designation "
            f"'{document_type.designation_fr}' already exists"
        )

    def test_by_scope(self, api_client, document_type):
        DocumentType.objects.create(designation_fr='Décision', scope=2)

        response = api_client.get('/api/v1/document-types/scope/1/')

        assert [row['id'] for row in response.data['results']] == [document_type.pk]

    def test_delete_blocked_by_documents(self, api_client, demande):
        response = api_client.delete(f'/api/v1/document-types/{demande.document_type_id}/')

        assert response.status_code == 409
        assert 'associated documents' in response.data['detail']


@pytest.mark.django_db
class TestDocumentAPI:

    def test_create_document(self, api_client, document_type):
        response = api_client.post('/api/v1/documents/', {
            'reference': 'DEC-2024-07', 'issue_date': '2024-07-01', 'document_type': document_type.pk,
        })

        assert response.status_code == 201
        assert response.data['document_type_designation'] == document_type.designation_fr

    def test_documents_of_type(self, api_client, demande, response_document):
        other_type = DocumentType.objects.create(designation_fr='Décision', scope=2)
        Document.objects.create(reference='DEC-1', document_type=other_type)

        response = api_client.get(f'/api/v1/documents/document-type/{demande.document_type_id}/')

        assert response.data['count'] == 2

    def test_search_by_reference(self, api_client, demande, response_document):
        response = api_client.get('/api/v1/documents/search/', {'query': 'rep'})

        assert [row['id'] for row in response.data['results']] == [response_document.pk]

    def test_delete_unused_document(self, api_client, demande):
        response = api_client.delete(f'/api/v1/documents/{demande.pk}/')

        assert response.status_code == 204


@pytest.mark.django_db
def test_init_reference_data_is_idempotent():
    call_command('init_reference_data')
    call_command('init_reference_data')

    assert ItemStatus.objects.count() == 9
    assert StructureType.objects.count() == 4
    assert DocumentType.objects.filter(scope=1).count() == 2


@pytest.mark.django_db
def test_init_reference_data_creates_no_users(django_user_model):
    call_command('init_reference_data')

    assert not django_user_model.objects.exists()
    with pytest.raises(TypeError):
        call_command('init_reference_data', with_admin=True)
