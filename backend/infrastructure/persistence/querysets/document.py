"""
Document QuerySets.
"""

from .base import DesignationQuerySet, SearchableQuerySet


class DocumentTypeQuerySet(DesignationQuerySet):

    def for_scope(self, scope: int):
        return self.filter(scope=scope)


class DocumentQuerySet(SearchableQuerySet):
    search_fields = ('reference', 'document_type__designation_fr')

    def for_document_type(self, document_type_id):
        return self.filter(document_type_id=document_type_id)
