"""
Base ORM Models and Mixins.

Provides common functionality for all models:
- Auto-increment primary keys
- Timestamps (created_at, updated_at)
- Audit tracking (created_by, updated_by)
- Change history for transactional records
"""

from django.db import models
from django.conf import settings
from simple_history.models import HistoricalRecords

from domain.shared.value_objects import Designation


class TimeStampedMixin(models.Model):
    """Mixin for created_at and updated_at timestamps."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created at"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated at"
    )

    class Meta:
        abstract = True


class AuditMixin(models.Model):
    """Mixin for tracking who created/modified records."""

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_created",
        verbose_name="Created by"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_updated",
        verbose_name="Updated by"
    )

    class Meta:
        abstract = True


class BaseModel(TimeStampedMixin, AuditMixin):
    """
    Base model with all common functionality.

    Includes:
    - Auto-increment primary key
    - Timestamps (created_at, updated_at)
    - Audit (created_by, updated_by)
    """

    id = models.BigAutoField(
        primary_key=True,
        verbose_name="ID"
    )

    class Meta:
        abstract = True

    def __str__(self):
        return str(self.id)


class BaseModelWithHistory(BaseModel):
    """
    Base model with historical records tracking.

    Uses django-simple-history to track all changes.
    """

    history = HistoricalRecords(inherit=True)

    class Meta:
        abstract = True


# =============================================================================
# DESIGNATION
# =============================================================================

class DesignationMixin(models.Model):
    """
    French/English/Arabic designation triplet.

    French is required and unique; subclasses redefine the fields when the
    lengths or constraints differ.
    """

    designation_ar = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        verbose_name="Designation (Arabic)"
    )
    designation_en = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        verbose_name="Designation (English)"
    )
    designation_fr = models.CharField(
        max_length=200,
        unique=True,
        verbose_name="Designation (French)"
    )

    class Meta:
        abstract = True

    @property
    def designation(self) -> Designation:
        return Designation(fr=self.designation_fr, en=self.designation_en, ar=self.designation_ar)

    @property
    def default_designation(self) -> str:
        return self.designation.default

    def __str__(self):
        return self.default_designation
