"""
Administration QuerySets.

Filtered reads for countries, states, localities, structures, jobs,
military categories and ranks, persons and employees.

Structure ancestors and descendants are resolved with a recursive common
table expression capped at `MAX_HIERARCHY_DEPTH` levels for reads. Cycle
checks and parent candidates walk the whole tree.
"""

from datetime import date
from typing import Optional

from django.db import connection
from django.db.models import Q, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from domain.administration import classification
from domain.shared.value_objects import years_before
from .base import DesignationQuerySet, SearchableQuerySet, filled_q, keyword_q, preserve_order

MAX_HIERARCHY_DEPTH = 10


# =============================================================================
# GEOGRAPHY
# =============================================================================

class StateQuerySet(SearchableQuerySet):
    search_fields = ('designation_ar', 'designation_lt')


class LocalityQuerySet(SearchableQuerySet):
    search_fields = ('code', 'designation_ar', 'designation_lt', 'state__designation_lt')

    def for_state(self, state_id):
        return self.filter(state_id=state_id)


# =============================================================================
# STRUCTURES
# =============================================================================

_DESCENDANTS_SQL = """
WITH RECURSIVE hierarchy (id, depth) AS (
    SELECT id, 0 FROM {table} WHERE id = %s
    UNION ALL
    SELECT child.id, hierarchy.depth + 1
    FROM {table} child INNER JOIN hierarchy ON child.{parent} = hierarchy.id
    WHERE hierarchy.depth < %s
)
SELECT hierarchy.id FROM hierarchy
INNER JOIN {table} node ON node.id = hierarchy.id
WHERE hierarchy.id <> %s
ORDER BY hierarchy.depth, node.designation_fr
"""

_ANCESTORS_SQL = """
WITH RECURSIVE hierarchy (id, parent_id, depth) AS (
    SELECT id, {parent}, 0 FROM {table} WHERE id = %s
    UNION ALL
    SELECT node.id, node.{parent}, hierarchy.depth + 1
    FROM {table} node INNER JOIN hierarchy ON node.id = hierarchy.parent_id
    WHERE hierarchy.depth < %s
)
SELECT id FROM hierarchy WHERE id <> %s ORDER BY depth
"""

# Uncapped walks for write-side checks; UNION drops repeated rows so a
# corrupted loop still terminates.
_SUBTREE_SQL = """
WITH RECURSIVE subtree (id) AS (
    SELECT id FROM {table} WHERE id = %s
    UNION
    SELECT child.id FROM {table} child INNER JOIN subtree ON child.{parent} = subtree.id
)
SELECT id FROM subtree WHERE id <> %s
"""

_LINEAGE_SQL = """
WITH RECURSIVE lineage (id, parent_id) AS (
    SELECT id, {parent} FROM {table} WHERE id = %s
    UNION
    SELECT node.id, node.{parent} FROM {table} node INNER JOIN lineage ON node.id = lineage.parent_id
)
SELECT id FROM lineage WHERE id <> %s
"""


class StructureQuerySet(DesignationQuerySet):
    search_fields = (
        'designation_fr', 'designation_en', 'designation_ar',
        'acronym_fr', 'acronym_en', 'acronym_ar',
        'structure_type__designation_fr',
        'structure_up__designation_fr', 'structure_up__acronym_fr',
    )

    def _hierarchy_ids(self, sql: str, structure_id, capped: bool = True) -> list:
        meta = self.model._meta
        query = sql.format(
            table=connection.ops.quote_name(meta.db_table),
            parent=connection.ops.quote_name(meta.get_field('structure_up').column),
        )
        params = [structure_id, MAX_HIERARCHY_DEPTH, structure_id] if capped else [structure_id, structure_id]
        with connection.cursor() as cursor:
            cursor.execute(query, params)
            rows = cursor.fetchall()
        ids = []
        for (pk,) in rows:
            if pk not in ids:
                ids.append(pk)
        return ids

    def descendant_ids(self, structure_id) -> list:
        return self._hierarchy_ids(_DESCENDANTS_SQL, structure_id)

    def ancestor_ids(self, structure_id) -> list:
        """Ancestor ids, nearest parent first."""
        return self._hierarchy_ids(_ANCESTORS_SQL, structure_id)

    def _ordered(self, ids: list):
        if not ids:
            return self.none()
        return self.filter(pk__in=ids).order_by(preserve_order(ids))

    def descendants(self, structure_id):
        return self._ordered(self.descendant_ids(structure_id))

    def ancestors(self, structure_id):
        return self._ordered(self.ancestor_ids(structure_id))

    def subtree_ids(self, structure_id) -> list:
        """Every descendant id, at any depth."""
        return self._hierarchy_ids(_SUBTREE_SQL, structure_id, capped=False)

    def lineage_ids(self, structure_id) -> list:
        """Every ancestor id, up to the root."""
        return self._hierarchy_ids(_LINEAGE_SQL, structure_id, capped=False)

    def would_create_cycle(self, structure_id, parent_id) -> bool:
        return structure_id in self.lineage_ids(parent_id)

    def potential_parents(self, structure_id):
        excluded = [structure_id, *self.subtree_ids(structure_id)]
        return self.exclude(pk__in=excluded)

    def is_ancestor_of(self, ancestor_id, descendant_id) -> bool:
        return ancestor_id in self.ancestor_ids(descendant_id)

    def for_type(self, structure_type_id):
        return self.filter(structure_type_id=structure_type_id)

    def children_of(self, parent_id):
        return self.filter(structure_up_id=parent_id)

    def roots(self):
        return self.filter(structure_up__isnull=True)

    def with_children(self):
        return self.filter(children__isnull=False).distinct()

    def leaves(self):
        return self.filter(children__isnull=True)

    def at_level(self, level: int):
        """Structures `level` steps below a root; level 0 is the roots."""
        chain = '__'.join(['structure_up'] * (level + 1))
        conditions = {f'{chain}__isnull': True}
        if level > 0:
            conditions['__'.join(['structure_up'] * level) + '__isnull'] = False
        return self.filter(**conditions)

    def ordered_by_hierarchy(self):
        return self.order_by(Coalesce('structure_up__designation_fr', Value('')), 'designation_fr')


class JobQuerySet(DesignationQuerySet):

    def for_structure(self, structure_id):
        return self.filter(structure_id=structure_id)


# =============================================================================
# MILITARY
# =============================================================================

class MilitaryCategoryQuerySet(DesignationQuerySet):
    search_fields = (
        'designation_fr', 'designation_en', 'designation_ar',
        'abbreviation_fr', 'abbreviation_en', 'abbreviation_ar',
    )
    keyword_fields = ('designation_fr',)

    def main_service_branches(self):
        return self.in_any_category(
            classification.MILITARY_CATEGORY_CLASSIFIER.by_codes(classification.MAIN_SERVICE_BRANCHES)
        )

    def missing_translations(self):
        return self.exclude(filled_q('designation_ar') & filled_q('designation_en'))


class MilitaryRankQuerySet(DesignationQuerySet):
    search_fields = (
        'designation_fr', 'designation_en', 'designation_ar',
        'abbreviation_fr', 'abbreviation_en', 'abbreviation_ar',
    )
    keyword_fields = ('designation_fr',)

    def for_category(self, military_category_id):
        return self.filter(military_category_id=military_category_id)

    def officers(self):
        return self.in_any_category(
            classification.MILITARY_RANK_CLASSIFIER.by_codes(classification.OFFICER_LEVELS)
        )

    def ordered_by_category(self):
        return self.order_by('military_category__designation_fr', 'designation_fr')


# =============================================================================
# PERSONNEL
# =============================================================================

class PersonQuerySet(SearchableQuerySet):
    search_fields = ('firstname_ar', 'lastname_ar', 'firstname_lt', 'lastname_lt')

    def born_in_state(self, state_id):
        return self.filter(birth_state_id=state_id)

    def living_in_state(self, state_id):
        return self.filter(address_state_id=state_id)

    def born_in_year(self, year: int):
        return self.filter(birth_date__year=year)

    def aged_between(self, minimum: Optional[int], maximum: Optional[int], today: Optional[date] = None):
        today = today or timezone.localdate()
        queryset = self.filter(birth_date__isnull=False)
        if minimum is not None:
            queryset = queryset.filter(birth_date__lte=years_before(today, minimum))
        if maximum is not None:
            queryset = queryset.filter(birth_date__gt=years_before(today, maximum + 1))
        return queryset

    def minors(self):
        return self.filter(birth_date__gt=years_before(timezone.localdate(), classification.ADULT_AGE))

    def adults(self):
        return self.filter(birth_date__lte=years_before(timezone.localdate(), classification.ADULT_AGE))

    def with_arabic_names(self):
        return self.filter(filled_q('firstname_ar') & filled_q('lastname_ar'))

    def with_latin_names(self):
        return self.filter(filled_q('firstname_lt') & filled_q('lastname_lt'))

    def multilingual(self):
        return self.with_arabic_names().with_latin_names()

    def with_complete_birth_info(self):
        return self.filter(filled_q('birth_place'), birth_date__isnull=False, birth_state__isnull=False)

    def birthdays_this_month(self):
        return self.filter(birth_date__month=timezone.localdate().month).order_by('birth_date__day')


class EmployeeQuerySet(SearchableQuerySet):
    search_fields = (
        'serial',
        'person__firstname_ar', 'person__lastname_ar',
        'person__firstname_lt', 'person__lastname_lt',
        'military_rank__designation_fr',
    )

    def for_person(self, person_id):
        return self.filter(person_id=person_id)

    def for_military_rank(self, military_rank_id):
        return self.filter(military_rank_id=military_rank_id)

    def for_job(self, job_id):
        return self.filter(job_id=job_id)

    def with_job(self):
        return self.filter(job__isnull=False)

    def without_job(self):
        return self.filter(job__isnull=True)

    def hired_in_year(self, year: int):
        return self.filter(hiring_date__year=year)

    def hired_between(self, start: Optional[date], end: Optional[date]):
        queryset = self
        if start is not None:
            queryset = queryset.filter(hiring_date__gte=start)
        if end is not None:
            queryset = queryset.filter(hiring_date__lte=end)
        return queryset

    def new_recruits(self):
        return self.filter(hiring_date__gt=years_before(timezone.localdate(), classification.NEW_RECRUIT_YEARS))

    def veterans(self):
        return self.filter(hiring_date__lte=years_before(timezone.localdate(), classification.VETERAN_YEARS))

    def retirement_eligible(self):
        today = timezone.localdate()
        return self.filter(
            Q(hiring_date__lte=years_before(today, classification.RETIREMENT_SERVICE_YEARS))
            | Q(person__birth_date__lte=years_before(today, classification.RETIREMENT_AGE))
        )

    def with_rank_level(self, category):
        return self.filter(keyword_q(category, ('military_rank__designation_fr',)))
