"""
Administration Views.

API views for geography, the organizational structure hierarchy, jobs,
military categories and ranks, persons and employees.
"""

from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from domain.administration import classification
from domain.shared.exceptions import ValidationException
from infrastructure.persistence.models import (
    Country,
    Employee,
    Job,
    Locality,
    MilitaryCategory,
    MilitaryRank,
    Person,
    State,
    Structure,
    StructureType,
)
from infrastructure.persistence.querysets.administration import MAX_HIERARCHY_DEPTH
from ..serializers.administration import (
    CountrySerializer,
    EmployeeInfoSerializer,
    EmployeeSerializer,
    JobInfoSerializer,
    JobSerializer,
    LocalitySerializer,
    MilitaryCategoryInfoSerializer,
    MilitaryCategorySerializer,
    MilitaryRankInfoSerializer,
    MilitaryRankSerializer,
    PersonInfoSerializer,
    PersonSerializer,
    StateInfoSerializer,
    StateSerializer,
    StructureInfoSerializer,
    StructureSerializer,
    StructureTypeSerializer,
)
from .base import (
    BaseModelViewSet,
    CategoryViewMixin,
    DesignationViewMixin,
    date_param,
    int_param,
)

DESIGNATION_ORDERING = ['id', 'designation_fr', 'designation_en', 'designation_ar', 'created_at', 'updated_at']


def get_rank_level(slug: str):
    category = classification.MILITARY_RANK_CLASSIFIER.get(slug)
    if category is None:
        raise NotFound(f"Unknown rank level: {slug}")
    return category


# =============================================================================
# GEOGRAPHY
# =============================================================================

class CountryViewSet(DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for countries.

    Endpoints:
    - GET /countries/ - list countries
    - POST /countries/ - create country
    - GET /countries/{id}/ - get country
    - PUT/PATCH /countries/{id}/ - update country
    - DELETE /countries/{id}/ - delete country
    """

    queryset = Country.objects.all()
    serializer_class = CountrySerializer
    ordering_fields = DESIGNATION_ORDERING
    ordering = ['designation_fr']


class StateViewSet(BaseModelViewSet):
    """
    ViewSet for states.

    Endpoints:
    - GET /states/ - list states
    - POST /states/ - create state
    - GET /states/{id}/ - get state
    - PUT/PATCH /states/{id}/ - update state
    - DELETE /states/{id}/ - delete state without localities or persons
    - GET /states/code/{code}/, /states/exists/code/{code}/
    - GET /states/designation-ar/{value}/, /states/designation-lt/{value}/
    """

    queryset = State.objects.all()
    serializer_classes = {
        'info': StateInfoSerializer,
        'default': StateSerializer,
    }
    ordering_fields = ['id', 'code', 'designation_ar', 'designation_lt', 'created_at']
    ordering = ['code']
    delete_guards = (
        ('localities', 'localities'),
        ('born_persons', 'persons born in it'),
        ('resident_persons', 'persons living in it'),
    )

    @action(detail=False, methods=['get'], url_path=r'code/(?P<code>\d+)')
    def by_code(self, request, code=None):
        return self.find_by('code', int(code), 'code')

    @action(detail=False, methods=['get'], url_path=r'exists/code/(?P<code>\d+)')
    def exists_code(self, request, code=None):
        return self.exists_by('code', int(code))

    @action(detail=False, methods=['get'], url_path=r'designation-ar/(?P<value>[^/]+)')
    def by_designation_ar(self, request, value=None):
        return self.find_by('designation_ar', value, 'Arabic designation')

    @action(detail=False, methods=['get'], url_path=r'designation-lt/(?P<value>[^/]+)')
    def by_designation_lt(self, request, value=None):
        return self.find_by('designation_lt', value, 'Latin designation')


class LocalityViewSet(BaseModelViewSet):
    """
    ViewSet for localities.

    Endpoints:
    - GET /localities/ - list localities (filter: ?state=)
    - POST /localities/ - create locality
    - GET /localities/{id}/ - get locality
    - PUT/PATCH /localities/{id}/ - update locality
    - DELETE /localities/{id}/ - delete locality
    - GET /localities/code/{code}/, /localities/exists/code/{code}/
    - GET /localities/by-state/{stateId}/ - localities of a state
    - GET /localities/state/{stateId}/has-localities/
    """

    queryset = Locality.objects.select_related('state')
    serializer_class = LocalitySerializer
    filterset_fields = ['state']
    ordering_fields = ['id', 'code', 'designation_ar', 'designation_lt', 'state__code', 'created_at']
    ordering = ['designation_lt']

    @action(detail=False, methods=['get'], url_path=r'code/(?P<code>[^/]+)')
    def by_code(self, request, code=None):
        return self.find_by('code', code, 'code')

    @action(detail=False, methods=['get'], url_path=r'exists/code/(?P<code>[^/]+)')
    def exists_code(self, request, code=None):
        return self.exists_by('code', code)

    @action(detail=False, methods=['get'], url_path=r'by-state/(?P<state_id>\d+)')
    def by_state(self, request, state_id=None):
        return self.paginated(self.get_queryset().for_state(state_id))

    @action(detail=False, methods=['get'], url_path=r'state/(?P<state_id>\d+)/has-localities')
    def state_has_localities(self, request, state_id=None):
        return Response({
            'state_id': int(state_id),
            'has_localities': self.get_queryset().for_state(state_id).exists(),
        })


# =============================================================================
# ORGANIZATION
# =============================================================================

class StructureTypeViewSet(DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for structure types.

    Endpoints:
    - GET /structure-types/ - list structure types
    - POST /structure-types/ - create structure type
    - GET /structure-types/{id}/ - get structure type
    - PUT/PATCH /structure-types/{id}/ - update structure type
    - DELETE /structure-types/{id}/ - delete structure type without structures
    """

    queryset = StructureType.objects.all()
    serializer_class = StructureTypeSerializer
    ordering_fields = DESIGNATION_ORDERING
    ordering = ['designation_fr']
    delete_guards = (('structures', 'structures'),)


class StructureViewSet(DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for organizational structures.

    Structures form a tree through `structure_up`. Ancestors and descendants
    are resolved by a depth-capped recursive query.

    Endpoints:
    - GET /structures/ - list structures (filters: ?structure_type=&structure_up=)
    - POST /structures/ - create structure
    - GET /structures/{id}/ - get structure
    - PUT/PATCH /structures/{id}/ - update structure (no cycles)
    - DELETE /structures/{id}/ - delete structure without children, jobs or distributions
    - GET /structures/acronym-fr/{value}/, /structures/exists/acronym-fr/{value}/
    - GET /structures/type/{typeId}/, /structures/parent/{parentId}/
    - GET /structures/roots/, /structures/with-children/, /structures/leaves/
    - GET /structures/level/{n}/ - structures n levels below a root
    - GET /structures/ordered-by-hierarchy/
    - GET /structures/{id}/children/, /structures/{id}/children-count/
    - GET /structures/{id}/ancestors/, /structures/{id}/descendants/
    - GET /structures/{id}/potential-parents/
    - GET /structures/{id}/is-ancestor-of/{descendantId}/
    """

    queryset = Structure.objects.select_related('structure_type', 'structure_up')
    serializer_classes = {
        'info': StructureInfoSerializer,
        'default': StructureSerializer,
    }
    filterset_fields = ['structure_type', 'structure_up']
    ordering_fields = DESIGNATION_ORDERING + ['acronym_fr', 'structure_type__designation_fr']
    ordering = ['designation_fr']
    count_filters = {
        'roots': 'roots',
        'with-children': 'with_children',
        'leaves': 'leaves',
    }
    delete_guards = (
        ('children', 'child structures'),
        ('jobs', 'jobs'),
        ('item_distributions', 'item distributions'),
    )

    @action(detail=False, methods=['get'], url_path=r'acronym-fr/(?P<value>[^/]+)')
    def by_acronym_fr(self, request, value=None):
        return self.find_by('acronym_fr', value, 'French acronym')

    @action(detail=False, methods=['get'], url_path=r'exists/acronym-fr/(?P<value>[^/]+)')
    def exists_acronym_fr(self, request, value=None):
        return self.exists_by('acronym_fr', value)

    @action(detail=False, methods=['get'], url_path=r'type/(?P<structure_type_id>\d+)')
    def by_type(self, request, structure_type_id=None):
        return self.paginated(self.get_queryset().for_type(structure_type_id))

    @action(detail=False, methods=['get'], url_path=r'parent/(?P<parent_id>\d+)')
    def by_parent(self, request, parent_id=None):
        return self.paginated(self.get_queryset().children_of(parent_id))

    @action(detail=False, methods=['get'])
    def roots(self, request):
        return self.paginated(self.get_queryset().roots())

    @action(detail=False, methods=['get'], url_path='with-children')
    def with_children(self, request):
        return self.paginated(self.get_queryset().with_children())

    @action(detail=False, methods=['get'])
    def leaves(self, request):
        return self.paginated(self.get_queryset().leaves())

    @action(detail=False, methods=['get'], url_path=r'level/(?P<level>\d+)')
    def level(self, request, level=None):
        level = int(level)
        if level > MAX_HIERARCHY_DEPTH:
            raise ValidationException(
                f"Level cannot exceed {MAX_HIERARCHY_DEPTH}", field='level', value=level
            )
        return self.paginated(self.get_queryset().at_level(level))

    @action(detail=False, methods=['get'], url_path='ordered-by-hierarchy')
    def ordered_by_hierarchy(self, request):
        return self.paginated(self.get_queryset().ordered_by_hierarchy())

    @action(detail=True, methods=['get'])
    def children(self, request, pk=None):
        structure = self.get_object()
        return self.paginated(self.get_queryset().children_of(structure.pk))

    @action(detail=True, methods=['get'], url_path='children-count')
    def children_count(self, request, pk=None):
        structure = self.get_object()
        return Response({'id': structure.pk, 'children_count': structure.children.count()})

    @action(detail=True, methods=['get'])
    def ancestors(self, request, pk=None):
        structure = self.get_object()
        return self.paginated(self.get_queryset().ancestors(structure.pk))

    @action(detail=True, methods=['get'])
    def descendants(self, request, pk=None):
        structure = self.get_object()
        return self.paginated(self.get_queryset().descendants(structure.pk))

    @action(detail=True, methods=['get'], url_path='potential-parents')
    def potential_parents(self, request, pk=None):
        structure = self.get_object()
        return self.paginated(self.get_queryset().potential_parents(structure.pk))

    @action(detail=True, methods=['get'], url_path=r'is-ancestor-of/(?P<descendant_id>\d+)')
    def is_ancestor_of(self, request, pk=None, descendant_id=None):
        structure = self.get_object()
        descendant_id = int(descendant_id)
        return Response({
            'ancestor_id': structure.pk,
            'descendant_id': descendant_id,
            'is_ancestor': Structure.objects.is_ancestor_of(structure.pk, descendant_id),
        })


class JobViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for jobs.

    Endpoints:
    - GET /jobs/ - list jobs (filter: ?structure=)
    - POST /jobs/ - create job
    - GET /jobs/{id}/ - get job
    - PUT/PATCH /jobs/{id}/ - update job
    - DELETE /jobs/{id}/ - delete job without employees
    - GET /jobs/structure/{id}/ - jobs of a structure
    """

    queryset = Job.objects.select_related('structure')
    serializer_classes = {
        'info': JobInfoSerializer,
        'default': JobSerializer,
    }
    filterset_fields = ['structure']
    ordering_fields = DESIGNATION_ORDERING + ['structure__designation_fr']
    ordering = ['designation_fr']
    classifier = classification.JOB_CLASSIFIER
    delete_guards = (('employees', 'employees'),)

    @action(detail=False, methods=['get'], url_path=r'structure/(?P<structure_id>\d+)')
    def by_structure(self, request, structure_id=None):
        return self.paginated(self.get_queryset().for_structure(structure_id))


# =============================================================================
# MILITARY
# =============================================================================

class MilitaryCategoryViewSet(CategoryViewMixin, DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for military categories.

    Endpoints:
    - GET /military-categories/ - list categories
    - POST /military-categories/ - create category
    - GET /military-categories/{id}/ - get category
    - PUT/PATCH /military-categories/{id}/ - update category
    - DELETE /military-categories/{id}/ - delete category without ranks
    - GET /military-categories/abbreviation-fr/{value}/
    - GET /military-categories/exists/abbreviation-fr/{value}/
    - GET /military-categories/main-service-branches/ - army, navy and air force
    - GET /military-categories/missing-translations/
    """

    queryset = MilitaryCategory.objects.all()
    serializer_classes = {
        'info': MilitaryCategoryInfoSerializer,
        'default': MilitaryCategorySerializer,
    }
    ordering_fields = DESIGNATION_ORDERING + ['abbreviation_fr']
    ordering = ['designation_fr']
    classifier = classification.MILITARY_CATEGORY_CLASSIFIER
    count_filters = {
        'main-service-branches': 'main_service_branches',
    }
    delete_guards = (('military_ranks', 'military ranks'),)

    @action(detail=False, methods=['get'], url_path=r'abbreviation-fr/(?P<value>[^/]+)')
    def by_abbreviation_fr(self, request, value=None):
        return self.find_by('abbreviation_fr', value, 'French abbreviation')

    @action(detail=False, methods=['get'], url_path=r'exists/abbreviation-fr/(?P<value>[^/]+)')
    def exists_abbreviation_fr(self, request, value=None):
        return self.exists_by('abbreviation_fr', value)

    @action(detail=False, methods=['get'], url_path='main-service-branches')
    def main_service_branches(self, request):
        return self.paginated(self.get_queryset().main_service_branches())

    @action(detail=False, methods=['get'], url_path='missing-translations')
    def missing_translations(self, request):
        return self.paginated(self.get_queryset().missing_translations())


class MilitaryRankViewSet(DesignationViewMixin, BaseModelViewSet):
    """
    ViewSet for military ranks.

    Endpoints:
    - GET /military-ranks/ - list ranks (filter: ?military_category=)
    - POST /military-ranks/ - create rank
    - GET /military-ranks/{id}/ - get rank
    - PUT/PATCH /military-ranks/{id}/ - update rank
    - DELETE /military-ranks/{id}/ - delete rank without employees
    - GET /military-ranks/military-category/{id}/
    - GET /military-ranks/rank-level/{slug}/ - by keyword rank level
    - GET /military-ranks/officers/ - general, senior and company officers
    - GET /military-ranks/ordered-by-category/
    """

    queryset = MilitaryRank.objects.select_related('military_category')
    serializer_classes = {
        'info': MilitaryRankInfoSerializer,
        'default': MilitaryRankSerializer,
    }
    filterset_fields = ['military_category']
    ordering_fields = DESIGNATION_ORDERING + ['abbreviation_fr', 'military_category__designation_fr']
    ordering = ['designation_fr']
    count_filters = {
        'officers': 'officers',
    }
    delete_guards = (('employees', 'employees'),)

    @action(detail=False, methods=['get'], url_path=r'military-category/(?P<military_category_id>\d+)')
    def by_military_category(self, request, military_category_id=None):
        return self.paginated(self.get_queryset().for_category(military_category_id))

    @action(detail=False, methods=['get'], url_path=r'rank-level/(?P<slug>[^/.]+)')
    def rank_level(self, request, slug=None):
        return self.paginated(self.get_queryset().in_category(get_rank_level(slug)))

    @action(detail=False, methods=['get'])
    def officers(self, request):
        return self.paginated(self.get_queryset().officers())

    @action(detail=False, methods=['get'], url_path='ordered-by-category')
    def ordered_by_category(self, request):
        return self.paginated(self.get_queryset().ordered_by_category())


# =============================================================================
# PERSONNEL
# =============================================================================

class PersonViewSet(BaseModelViewSet):
    """
    ViewSet for persons.

    Endpoints:
    - GET /persons/ - list persons (filters: ?birth_state=&address_state=)
    - POST /persons/ - create person
    - GET /persons/{id}/ - get person
    - PUT/PATCH /persons/{id}/ - update person
    - DELETE /persons/{id}/ - delete person without employee record
    - GET /persons/birth-state/{id}/, /persons/address-state/{id}/
    - GET /persons/birth-year/{year}/
    - GET /persons/age-range/?minAge=&maxAge=
    - GET /persons/minors/, /persons/adults/
    - GET /persons/arabic-names/, /persons/latin-names/, /persons/multilingual/
    - GET /persons/complete-birth-info/
    - GET /persons/birthdays/this-month/
    """

    queryset = Person.objects.all()
    serializer_classes = {
        'info': PersonInfoSerializer,
        'default': PersonSerializer,
    }
    filterset_fields = ['birth_state', 'address_state']
    ordering_fields = [
        'id', 'firstname_ar', 'lastname_ar', 'firstname_lt', 'lastname_lt',
        'birth_date', 'created_at',
    ]
    ordering = ['lastname_lt', 'firstname_lt', 'lastname_ar', 'firstname_ar']
    count_filters = {
        'minors': 'minors',
        'adults': 'adults',
    }
    delete_guards = (('employee', 'employee record'),)

    @action(detail=False, methods=['get'], url_path=r'birth-state/(?P<state_id>\d+)')
    def by_birth_state(self, request, state_id=None):
        return self.paginated(self.get_queryset().born_in_state(state_id))

    @action(detail=False, methods=['get'], url_path=r'address-state/(?P<state_id>\d+)')
    def by_address_state(self, request, state_id=None):
        return self.paginated(self.get_queryset().living_in_state(state_id))

    @action(detail=False, methods=['get'], url_path=r'birth-year/(?P<year>\d{4})')
    def by_birth_year(self, request, year=None):
        return self.paginated(self.get_queryset().born_in_year(int(year)))

    @action(detail=False, methods=['get'], url_path='age-range')
    def age_range(self, request):
        queryset = self.get_queryset().aged_between(int_param(request, 'minAge'), int_param(request, 'maxAge'))
        return self.paginated(queryset)

    @action(detail=False, methods=['get'])
    def minors(self, request):
        return self.paginated(self.get_queryset().minors())

    @action(detail=False, methods=['get'])
    def adults(self, request):
        return self.paginated(self.get_queryset().adults())

    @action(detail=False, methods=['get'], url_path='arabic-names')
    def arabic_names(self, request):
        return self.paginated(self.get_queryset().with_arabic_names())

    @action(detail=False, methods=['get'], url_path='latin-names')
    def latin_names(self, request):
        return self.paginated(self.get_queryset().with_latin_names())

    @action(detail=False, methods=['get'])
    def multilingual(self, request):
        return self.paginated(self.get_queryset().multilingual())

    @action(detail=False, methods=['get'], url_path='complete-birth-info')
    def complete_birth_info(self, request):
        return self.paginated(self.get_queryset().with_complete_birth_info())

    @action(detail=False, methods=['get'], url_path='birthdays/this-month')
    def birthdays_this_month(self, request):
        return self.paginated(self.get_queryset().birthdays_this_month())


class EmployeeViewSet(BaseModelViewSet):
    """
    ViewSet for employees.

    Endpoints:
    - GET /employees/ - list employees (filters: ?military_rank=&job=)
    - POST /employees/ - create employee
    - GET /employees/{id}/ - get employee
    - PUT/PATCH /employees/{id}/ - update employee
    - DELETE /employees/{id}/ - delete employee
    - GET /employees/serial/{serial}/, /employees/exists/serial/{serial}/
    - GET /employees/{person|military-rank|job}/{id}/
    - GET /employees/with-job/, /employees/without-job/
    - GET /employees/hiring-year/{year}/
    - GET /employees/hiring-date-range/?startDate=&endDate=
    - GET /employees/new-recruits/, /employees/veterans/, /employees/retirement-eligible/
    - GET /employees/rank-level/{slug}/
    """

    queryset = Employee.objects.select_related('person', 'military_rank', 'job')
    serializer_classes = {
        'info': EmployeeInfoSerializer,
        'default': EmployeeSerializer,
    }
    filterset_fields = ['military_rank', 'job']
    ordering_fields = ['id', 'serial', 'hiring_date', 'person__lastname_lt', 'military_rank__designation_fr']
    ordering = ['-hiring_date', 'id']
    count_filters = {
        'with-job': 'with_job',
        'without-job': 'without_job',
        'new-recruits': 'new_recruits',
        'veterans': 'veterans',
        'retirement-eligible': 'retirement_eligible',
    }

    @action(detail=False, methods=['get'], url_path=r'serial/(?P<serial>[^/]+)')
    def by_serial(self, request, serial=None):
        return self.find_by('serial', serial, 'serial')

    @action(detail=False, methods=['get'], url_path=r'exists/serial/(?P<serial>[^/]+)')
    def exists_serial(self, request, serial=None):
        return self.exists_by('serial', serial)

    @action(detail=False, methods=['get'], url_path=r'person/(?P<related_id>\d+)')
    def by_person(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_person(related_id))

    @action(detail=False, methods=['get'], url_path=r'military-rank/(?P<related_id>\d+)')
    def by_military_rank(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_military_rank(related_id))

    @action(detail=False, methods=['get'], url_path=r'job/(?P<related_id>\d+)')
    def by_job(self, request, related_id=None):
        return self.paginated(self.get_queryset().for_job(related_id))

    @action(detail=False, methods=['get'], url_path='with-job')
    def with_job(self, request):
        return self.paginated(self.get_queryset().with_job())

    @action(detail=False, methods=['get'], url_path='without-job')
    def without_job(self, request):
        return self.paginated(self.get_queryset().without_job())

    @action(detail=False, methods=['get'], url_path=r'hiring-year/(?P<year>\d{4})')
    def hiring_year(self, request, year=None):
        return self.paginated(self.get_queryset().hired_in_year(int(year)))

    @action(detail=False, methods=['get'], url_path='hiring-date-range')
    def hiring_date_range(self, request):
        queryset = self.get_queryset().hired_between(
            date_param(request, 'startDate'), date_param(request, 'endDate')
        )
        return self.paginated(queryset)

    @action(detail=False, methods=['get'], url_path='new-recruits')
    def new_recruits(self, request):
        return self.paginated(self.get_queryset().new_recruits())

    @action(detail=False, methods=['get'])
    def veterans(self, request):
        return self.paginated(self.get_queryset().veterans())

    @action(detail=False, methods=['get'], url_path='retirement-eligible')
    def retirement_eligible(self, request):
        return self.paginated(self.get_queryset().retirement_eligible())

    @action(detail=False, methods=['get'], url_path=r'rank-level/(?P<slug>[^/.]+)')
    def rank_level(self, request, slug=None):
        return self.paginated(self.get_queryset().with_rank_level(get_rank_level(slug)))
