"""
Document Serializers.
"""

from rest_framework import serializers

from domain.shared.exceptions import EntityAlreadyExistsException
from infrastructure.persistence.models import Document, DocumentType
from .base import AUDIT_FIELDS, DESIGNATION_FIELDS, BaseModelSerializer


class DocumentTypeSerializer(BaseModelSerializer):
    """
    Serializer for document types.

    The French designation is optional and unique within a scope.
    """

    class Meta:
        model = DocumentType
        fields = ['id', *DESIGNATION_FIELDS, 'scope', *AUDIT_FIELDS]
        validators = []

    def validate(self, attrs):
        attrs = super().validate(attrs)
        designation_fr = self.incoming_value(attrs, 'designation_fr')
        scope = self.incoming_value(attrs, 'scope')
        if designation_fr and self.others().filter(designation_fr=designation_fr, scope=scope).exists():
            raise EntityAlreadyExistsException(
                self.get_entity_name(),
                f'scope {scope} and French designation',
                designation_fr,
                updating=self.instance is not None,
            )
        return attrs


class DocumentSerializer(BaseModelSerializer):
    """Serializer for documents."""

    document_type_designation = serializers.CharField(
        source='document_type.default_designation', read_only=True
    )

    class Meta:
        model = Document
        fields = [
            'id', 'reference', 'issue_date',
            'document_type', 'document_type_designation',
            *AUDIT_FIELDS,
        ]
