"""
Base QuerySets.

Repository-style reads shared by every reference entity: text search,
multilingual filters and keyword category filters.
"""

from typing import Iterable, Optional, Sequence

from django.db import models
from django.db.models import Case, Count, IntegerField, Q, Value, When

from domain.shared.classification import KeywordCategory


def keyword_q(category: KeywordCategory, fields: Sequence[str]) -> Q:
    """OR of case-insensitive LIKE clauses for every keyword on every field."""
    condition = Q()
    for keyword in category.keywords:
        parts = keyword if isinstance(keyword, tuple) else (keyword,)
        for field in fields:
            clause = Q()
            for part in parts:
                clause &= Q(**{f'{field}__icontains': part})
            condition |= clause
    return condition


def filled_q(field: str) -> Q:
    return Q(**{f'{field}__isnull': False}) & ~Q(**{field: ''})


def count_statistics(counts: Iterable[int]) -> dict:
    counts = [count or 0 for count in counts]
    non_zero = [count for count in counts if count > 0]
    return {
        'records': len(counts),
        'average': round(sum(counts) / len(counts), 2) if counts else 0,
        'maximum': max(counts, default=0),
        'minimum_excluding_zero': min(non_zero, default=0),
    }


def preserve_order(ids: Sequence[int]):
    return Case(
        *[When(pk=pk, then=Value(position)) for position, pk in enumerate(ids)],
        output_field=IntegerField(),
    )


class SearchableQuerySet(models.QuerySet):
    """QuerySet with a free-text search over `search_fields`."""

    search_fields: Sequence[str] = ()

    def get_search_fields(self) -> Sequence[str]:
        return self.search_fields

    def search(self, term: Optional[str]):
        term = (term or '').strip()
        if not term:
            return self.all()
        condition = Q()
        for field in self.get_search_fields():
            condition |= Q(**{f'{field}__icontains': term})
        return self.filter(condition)


class DesignationQuerySet(SearchableQuerySet):
    """QuerySet for entities named by a French/English/Arabic designation triplet."""

    designation_fields: Sequence[str] = ('designation_fr', 'designation_en', 'designation_ar')
    keyword_fields: Optional[Sequence[str]] = None

    def get_search_fields(self) -> Sequence[str]:
        return self.search_fields or self.designation_fields

    def get_keyword_fields(self) -> Sequence[str]:
        return self.keyword_fields or self.designation_fields

    def multilingual(self):
        """Records with at least two filled designations."""
        filled = sum(
            (Case(When(filled_q(field), then=Value(1)), default=Value(0), output_field=IntegerField())
             for field in self.designation_fields),
            Value(0),
        )
        return self.alias(languages_count=filled).filter(languages_count__gte=2)

    def in_category(self, category: KeywordCategory):
        return self.filter(keyword_q(category, self.get_keyword_fields()))

    def in_any_category(self, categories: Iterable[KeywordCategory]):
        categories = list(categories)
        if not categories:
            return self.none()
        condition = Q()
        for category in categories:
            condition |= keyword_q(category, self.get_keyword_fields())
        return self.filter(condition)

    def outside_categories(self, categories: Iterable[KeywordCategory]):
        condition = Q()
        for category in categories:
            condition |= keyword_q(category, self.get_keyword_fields())
        return self.exclude(condition)


class ChildCountQuerySet(DesignationQuerySet):
    """
    Designation QuerySet whose entities own a collection of children.

    `child_relation` names the reverse relation counted into `children_count`.
    """

    child_relation: str = ''

    def with_children_count(self):
        return self.annotate(children_count=Count(self.child_relation, distinct=True))

    def with_children(self):
        return self.with_children_count().filter(children_count__gt=0)

    def without_children(self):
        return self.with_children_count().filter(children_count=0)

    def children_count_between(self, minimum: Optional[int], maximum: Optional[int]):
        queryset = self.with_children_count()
        if minimum is not None:
            queryset = queryset.filter(children_count__gte=minimum)
        if maximum is not None:
            queryset = queryset.filter(children_count__lte=maximum)
        return queryset

    def with_complexity(self, level: str):
        """Filter by management complexity: low (1-5), medium (6-15) or high (above 15)."""
        bounds = {
            'low': (1, 5),
            'medium': (6, 15),
            'high': (16, None),
        }
        minimum, maximum = bounds[level]
        return self.children_count_between(minimum, maximum)

    def children_statistics(self) -> dict:
        counts = self.with_children_count().values_list('children_count', flat=True)
        return count_statistics(counts)
