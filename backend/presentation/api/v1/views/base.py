"""
Base Views.

Common view mixins and base classes.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from django.http import Http404
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from domain.shared.exceptions import (
    DeletionBlockedException,
    EntityNotFoundException,
    ValidationException,
)
from ..serializers.base import entity_label

logger = logging.getLogger(__name__)


# =============================================================================
# QUERY PARAMETERS
# =============================================================================

def _param(request, name):
    value = request.query_params.get(name)
    if value is None or value.strip() == '':
        return None
    return value.strip()


def int_param(request, name):
    value = _param(request, name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationException(f"Parameter '{name}' must be an integer", field=name, value=value)


def decimal_param(request, name):
    value = _param(request, name)
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValidationException(f"Parameter '{name}' must be a number", field=name, value=value)


def date_param(request, name):
    value = _param(request, name)
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationException(f"Parameter '{name}' must be a date (YYYY-MM-DD)", field=name, value=value)


# =============================================================================
# MIXINS
# =============================================================================

class AuditViewMixin:
    """
    Mixin that adds audit fields on create/update.
    """

    def perform_create(self, serializer):
        """Set created_by and updated_by on create."""
        instance = serializer.save(
            created_by=self.request.user,
            updated_by=self.request.user
        )
        logger.info("Created %s with ID: %s", self.get_entity_name(), instance.pk)

    def perform_update(self, serializer):
        """Set updated_by on update."""
        instance = serializer.save(updated_by=self.request.user)
        logger.info("Updated %s with ID: %s", self.get_entity_name(), instance.pk)


class HistoryViewMixin:
    """
    Mixin for accessing object history.
    """

    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        """Get object history."""
        obj = self.get_object()

        history = obj.history.all()[:50]
        data = [{
            'id': h.history_id,
            'date': h.history_date,
            'user': str(h.history_user) if h.history_user else None,
            'type': h.history_type,
            'changes': h.history_change_reason,
        } for h in history]

        return Response(data)


class ResourceViewMixin:
    """
    Read endpoints shared by every resource.

    Endpoints:
    - GET /{resource}/{id}/exists/ - {"id", "exists"}
    - GET /{resource}/{id}/info/ - record with its derived classification
    - GET /{resource}/count/{key}/ - {"key", "count"} for `all` or a named filter
    - GET /{resource}/search/?query= - case-insensitive text search

    `count_filters` maps a count key to a queryset method name;
    `delete_guards` lists (reverse relation, label) pairs that block deletion
    while dependent records exist.
    """

    entity_name = None
    count_filters: dict = {}
    delete_guards: tuple = ()

    def get_entity_name(self) -> str:
        return self.entity_name or entity_label(self.get_queryset().model)

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
            raise EntityNotFoundException(self.get_entity_name(), self.kwargs[lookup_url_kwarg])

    def paginated(self, queryset):
        """Filter, sort and paginate `queryset` the way the list endpoint does."""
        queryset = self.filter_queryset(queryset)
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    def find_by(self, field: str, value, label: str):
        """Single record whose `field` equals `value`, or 404."""
        instance = self.get_queryset().filter(**{field: value}).first()
        if instance is None:
            raise EntityNotFoundException(self.get_entity_name(), value, label)
        return Response(self.get_serializer(instance).data)

    def exists_by(self, field: str, value):
        return Response({
            'value': value,
            'exists': self.get_queryset().filter(**{field: value}).exists(),
        })

    def dependents_count(self, instance, relation: str) -> int:
        related = instance._meta.get_field(relation)
        return related.related_model._default_manager.filter(**{related.field.name: instance}).count()

    def perform_destroy(self, instance):
        for relation, label in self.delete_guards:
            count = self.dependents_count(instance, relation)
            if count:
                raise DeletionBlockedException(self.get_entity_name(), instance.pk, count, label)
        pk = instance.pk
        instance.delete()
        logger.info("Deleted %s with ID: %s", self.get_entity_name(), pk)

    def get_count_queryset(self, key: str):
        queryset = self.get_queryset()
        if key == 'all':
            return queryset
        method = self.count_filters.get(key)
        if method is None:
            raise NotFound(f"Unknown count key: {key}")
        return getattr(queryset, method)()

    @action(detail=True, methods=['get'])
    def exists(self, request, pk=None):
        return Response({'id': int(pk), 'exists': self.get_queryset().filter(pk=pk).exists()})

    @action(detail=True, methods=['get'])
    def info(self, request, pk=None):
        serializer = self.get_serializer(self.get_object())
        return Response(serializer.data)

    @action(detail=False, methods=['get'], url_path=r'count/(?P<key>[^/.]+)')
    def count(self, request, key=None):
        return Response({'key': key, 'count': self.get_count_queryset(key).count()})

    @action(detail=False, methods=['get'])
    def search(self, request):
        return self.paginated(self.get_queryset().search(request.query_params.get('query')))


class DesignationViewMixin:
    """
    Endpoints for resources named by a French/English/Arabic designation.

    Endpoints:
    - GET /{resource}/multilingual/ - records with at least two designations
    - GET /{resource}/designation-fr/{value}/ - exact match on the French designation
    - GET /{resource}/exists/designation-fr/{value}/ - {"value", "exists"}
    """

    @action(detail=False, methods=['get'])
    def multilingual(self, request):
        return self.paginated(self.get_queryset().multilingual())

    @action(detail=False, methods=['get'], url_path=r'designation-fr/(?P<value>[^/]+)')
    def by_designation_fr(self, request, value=None):
        return self.find_by('designation_fr', value, 'French designation')

    @action(detail=False, methods=['get'], url_path=r'exists/designation-fr/(?P<value>[^/]+)')
    def exists_designation_fr(self, request, value=None):
        return self.exists_by('designation_fr', value)


class CategoryViewMixin:
    """
    Keyword category filter.

    Endpoints:
    - GET /{resource}/category/{slug}/ - records matching any keyword of the category

    Category slugs are also accepted as count keys.
    """

    classifier = None

    def get_category(self, slug: str):
        category = self.classifier.get(slug)
        if category is None:
            raise NotFound(f"Unknown category: {slug}")
        return category

    def get_count_queryset(self, key: str):
        if key != 'all' and key not in self.count_filters and key in self.classifier:
            return self.get_queryset().in_category(self.get_category(key))
        return super().get_count_queryset(key)

    @action(detail=False, methods=['get'], url_path=r'category/(?P<slug>[^/.]+)')
    def category(self, request, slug=None):
        return self.paginated(self.get_queryset().in_category(self.get_category(slug)))


# =============================================================================
# VIEWSETS
# =============================================================================

class BaseModelViewSet(
    AuditViewMixin,
    ResourceViewMixin,
    viewsets.ModelViewSet
):
    """
    Base viewset with common functionality.
    """
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_serializer_class(self):
        """
        Return different serializers per action.

        Override `serializer_classes` dict in subclass:
        serializer_classes = {
            'info': InfoSerializer,
            'default': Serializer,
        }
        """
        serializer_classes = getattr(self, 'serializer_classes', {})
        if self.action in serializer_classes:
            return serializer_classes[self.action]
        if 'default' in serializer_classes:
            return serializer_classes['default']
        return super().get_serializer_class()
