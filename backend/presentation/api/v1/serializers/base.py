"""
Base Serializers.

Common serializer mixins and base classes.
"""

from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from domain.shared.exceptions import EntityAlreadyExistsException


AUDIT_FIELDS = ['created_at', 'updated_at', 'created_by', 'updated_by']

DESIGNATION_FIELDS = ['designation_ar', 'designation_en', 'designation_fr', 'default_designation']


def entity_label(model) -> str:
    """Human-readable entity name used in messages (`Item status`)."""
    return str(model._meta.verbose_name).capitalize()


class AuditFieldsMixin(serializers.Serializer):
    """Mixin for audit fields (created_at, updated_at, etc.)"""

    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    created_by = serializers.StringRelatedField(read_only=True)
    updated_by = serializers.StringRelatedField(read_only=True)


class BaseModelSerializer(AuditFieldsMixin, serializers.ModelSerializer):
    """
    Base serializer with common configuration.

    Uniqueness is checked explicitly so that conflicts answer 409 with a
    readable message. `unique_fields` maps a model field to its label:

        unique_fields = {'designation_fr': 'French designation'}

    DRF's generated unique validators are removed from every field.
    """

    unique_fields: dict = {}

    class Meta:
        abstract = True
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_fields(self):
        fields = super().get_fields()
        for field in fields.values():
            field.validators = [
                validator for validator in field.validators
                if not isinstance(validator, UniqueValidator)
            ]
        return fields

    def get_entity_name(self) -> str:
        return entity_label(self.Meta.model)

    def incoming_value(self, attrs, field):
        """Incoming value of `field`, falling back to the instance on partial updates."""
        if field in attrs:
            return attrs[field]
        if self.instance is not None:
            return getattr(self.instance, field)
        return None

    def others(self):
        """Queryset of the model excluding the instance being updated."""
        queryset = self.Meta.model.objects.all()
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        return queryset

    def validate(self, attrs):
        attrs = super().validate(attrs)
        for field, label in self.unique_fields.items():
            value = attrs.get(field)
            if value in (None, ''):
                continue
            if self.others().filter(**{field: value}).exists():
                raise EntityAlreadyExistsException(
                    self.get_entity_name(), label, value, updating=self.instance is not None
                )
        return attrs


def required_positive(value, label: str):
    if value is None or value <= 0:
        raise serializers.ValidationError(f"{label} must be greater than zero")
    return value
