"""
Document Models.

Typed documents referenced by budget modifications as demande and response.
"""

from django.db import models

from ..querysets.document import DocumentQuerySet, DocumentTypeQuerySet
from .base import BaseModel, DesignationMixin


class DocumentType(DesignationMixin, BaseModel):
    """Kind of document, unique per designation within a scope."""

    designation_fr = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        verbose_name="Designation (French)"
    )
    scope = models.IntegerField(
        verbose_name="Scope"
    )

    objects = DocumentTypeQuerySet.as_manager()

    class Meta:
        db_table = 'document_type'
        verbose_name = "Document type"
        verbose_name_plural = "Document types"
        ordering = ['scope', 'designation_fr']
        constraints = [
            models.UniqueConstraint(
                fields=['designation_fr', 'scope'],
                name='unique_document_type_designation_scope',
            ),
        ]


class Document(BaseModel):
    """Official document (request, decision, answer...)."""

    reference = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="Reference"
    )
    issue_date = models.DateField(
        null=True,
        blank=True,
        verbose_name="Issue date"
    )
    document_type = models.ForeignKey(
        DocumentType,
        on_delete=models.PROTECT,
        related_name='documents',
        verbose_name="Document type"
    )

    objects = DocumentQuerySet.as_manager()

    class Meta:
        db_table = 'document'
        verbose_name = "Document"
        verbose_name_plural = "Documents"
        ordering = ['-issue_date', '-id']

    def __str__(self):
        return self.reference or f"Document #{self.pk}"
