"""
Document Views.

API views for document types and the documents referenced by budget
modifications.
"""

from rest_framework.decorators import action

from infrastructure.persistence.models import Document, DocumentType
from ..serializers.document import DocumentSerializer, DocumentTypeSerializer
from .base import BaseModelViewSet, DesignationViewMixin


class DocumentTypeViewSet(DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for document types.

    Endpoints:
    - GET /document-types/ - list document types (filter: ?scope=)
    - POST /document-types/ - create document type
    - GET /document-types/{id}/ - get document type
    - PUT/PATCH /document-types/{id}/ - update document type
    - DELETE /document-types/{id}/ - delete document type without documents
    - GET /document-types/scope/{scope}/ - document types of a scope
    """

    queryset = DocumentType.objects.all()
    serializer_class = DocumentTypeSerializer
    filterset_fields = ['scope']
    ordering_fields = ['id', 'scope', 'designation_fr', 'designation_en', 'designation_ar', 'created_at']
    ordering = ['scope', 'designation_fr']
    delete_guards = (('documents', 'documents'),)

    @action(detail=False, methods=['get'], url_path=r'scope/(?P<scope>-?\d+)')
    def by_scope(self, request, scope=None):
        return self.paginated(self.get_queryset().for_scope(int(scope)))


class DocumentViewSet(BaseModelViewSet):
    """
    ViewSet for documents.

    Endpoints:
    - GET /documents/ - list documents (filter: ?document_type=)
    - POST /documents/ - create document
    - GET /documents/{id}/ - get document
    - PUT/PATCH /documents/{id}/ - update document
    - DELETE /documents/{id}/ - delete document not used by budget modifications
    - GET /documents/document-type/{id}/ - documents of a type
    - GET /documents/search/?query= - search on reference and type
    """

    queryset = Document.objects.select_related('document_type')
    serializer_class = DocumentSerializer
    filterset_fields = ['document_type', 'issue_date']
    ordering_fields = ['id', 'reference', 'issue_date', 'created_at']
    ordering = ['-issue_date', 'reference']
    delete_guards = (
        ('demanded_modifications', 'budget modifications as demande'),
        ('answered_modifications', 'budget modifications as response'),
    )

    @action(detail=False, methods=['get'], url_path=r'document-type/(?P<document_type_id>\d+)')
    def by_document_type(self, request, document_type_id=None):
        return self.paginated(self.get_queryset().for_document_type(document_type_id))
