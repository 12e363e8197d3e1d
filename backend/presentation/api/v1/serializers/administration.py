"""
Administration Serializers.

Serializers for geography, organizational structures, jobs, military
categories and ranks, persons and employees.
"""

from django.utils import timezone
from rest_framework import serializers

from domain.shared.exceptions import (
    BusinessRuleViolationException,
    CircularReferenceException,
    ValidationException,
)
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
from .base import AUDIT_FIELDS, DESIGNATION_FIELDS, BaseModelSerializer

DESIGNATION_UNIQUE = {'designation_fr': 'French designation'}
ABBREVIATION_FIELDS = ['abbreviation_ar', 'abbreviation_en', 'abbreviation_fr']


def not_in_future(value, label: str):
    if value is not None and value > timezone.localdate():
        raise serializers.ValidationError(f"{label} cannot be in the future")
    return value


# =============================================================================
# GEOGRAPHY
# =============================================================================

class CountrySerializer(BaseModelSerializer):
    """Serializer for countries."""

    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = Country
        fields = ['id', *DESIGNATION_FIELDS, *AUDIT_FIELDS]


class StateSerializer(BaseModelSerializer):
    """Serializer for states (wilayas)."""

    unique_fields = {
        'code': 'code',
        'designation_ar': 'Arabic designation',
        'designation_lt': 'Latin designation',
    }

    class Meta:
        model = State
        fields = ['id', 'code', 'designation_ar', 'designation_lt', *AUDIT_FIELDS]


class StateInfoSerializer(StateSerializer):
    localities_count = serializers.IntegerField(source='localities.count', read_only=True)

    class Meta(StateSerializer.Meta):
        fields = StateSerializer.Meta.fields + ['localities_count']


class LocalitySerializer(BaseModelSerializer):
    """Serializer for localities."""

    state_designation = serializers.CharField(source='state.designation_lt', read_only=True)
    unique_fields = {
        'code': 'code',
        'designation_ar': 'Arabic designation',
        'designation_lt': 'Latin designation',
    }

    class Meta:
        model = Locality
        fields = [
            'id', 'code', 'designation_ar', 'designation_lt',
            'state', 'state_designation',
            *AUDIT_FIELDS,
        ]


# =============================================================================
# ORGANIZATION
# =============================================================================

class StructureTypeSerializer(BaseModelSerializer):
    """Serializer for structure types."""

    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = StructureType
        fields = ['id', *DESIGNATION_FIELDS, *AUDIT_FIELDS]


class StructureSerializer(BaseModelSerializer):
    """
    Serializer for organizational structures.

    A structure cannot be its own parent, nor take one of its descendants
    as parent.
    """

    structure_type_designation = serializers.CharField(
        source='structure_type.designation_fr', read_only=True
    )
    structure_up_designation = serializers.CharField(
        source='structure_up.designation_fr', read_only=True, default=None
    )
    unique_fields = {
        'designation_fr': 'French designation',
        'acronym_fr': 'French acronym',
    }

    class Meta:
        model = Structure
        fields = [
            'id', *DESIGNATION_FIELDS,
            'acronym_ar', 'acronym_en', 'acronym_fr',
            'structure_type', 'structure_type_designation',
            'structure_up', 'structure_up_designation',
            'is_root', 'display_name',
            *AUDIT_FIELDS,
        ]

    def validate_structure_up(self, value):
        if value is None or self.instance is None:
            return value
        if value.pk == self.instance.pk:
            raise ValidationException(
                "A structure cannot be its own parent", field='structure_up', value=value.pk
            )
        if Structure.objects.would_create_cycle(self.instance.pk, value.pk):
            raise CircularReferenceException('Structure', value.pk, self.instance.pk)
        return value


class StructureInfoSerializer(StructureSerializer):
    children_count = serializers.IntegerField(source='children.count', read_only=True)
    jobs_count = serializers.IntegerField(source='jobs.count', read_only=True)

    class Meta(StructureSerializer.Meta):
        fields = StructureSerializer.Meta.fields + ['children_count', 'jobs_count']


class JobSerializer(BaseModelSerializer):
    """Serializer for jobs."""

    structure_designation = serializers.CharField(source='structure.designation_fr', read_only=True)
    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = Job
        fields = ['id', *DESIGNATION_FIELDS, 'structure', 'structure_designation', *AUDIT_FIELDS]


class JobInfoSerializer(JobSerializer):

    class Meta(JobSerializer.Meta):
        fields = JobSerializer.Meta.fields + ['category', 'priority']


# =============================================================================
# MILITARY
# =============================================================================

class MilitaryCategorySerializer(BaseModelSerializer):
    """Serializer for military categories."""

    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = MilitaryCategory
        fields = ['id', *DESIGNATION_FIELDS, *ABBREVIATION_FIELDS, *AUDIT_FIELDS]


class MilitaryCategoryInfoSerializer(MilitaryCategorySerializer):

    class Meta(MilitaryCategorySerializer.Meta):
        fields = MilitaryCategorySerializer.Meta.fields + [
            'category_type', 'priority', 'is_main_service_branch', 'organizational_level',
        ]


class MilitaryRankSerializer(BaseModelSerializer):
    """Serializer for military ranks."""

    military_category_designation = serializers.CharField(
        source='military_category.designation_fr', read_only=True
    )
    unique_fields = DESIGNATION_UNIQUE

    class Meta:
        model = MilitaryRank
        fields = [
            'id', *DESIGNATION_FIELDS, *ABBREVIATION_FIELDS,
            'military_category', 'military_category_designation',
            *AUDIT_FIELDS,
        ]


class MilitaryRankInfoSerializer(MilitaryRankSerializer):

    class Meta(MilitaryRankSerializer.Meta):
        fields = MilitaryRankSerializer.Meta.fields + [
            'rank_level', 'precedence', 'is_commissioned_officer', 'authority_level',
        ]


# =============================================================================
# PERSONNEL
# =============================================================================

class PersonSerializer(BaseModelSerializer):
    """Serializer for persons. At least one name is required."""

    NAME_FIELDS = ('firstname_ar', 'lastname_ar', 'firstname_lt', 'lastname_lt')

    class Meta:
        model = Person
        fields = [
            'id',
            'firstname_ar', 'lastname_ar', 'firstname_lt', 'lastname_lt',
            'display_name',
            'birth_date', 'birth_place', 'address',
            'birth_state', 'address_state',
            *AUDIT_FIELDS,
        ]

    def validate_birth_date(self, value):
        return not_in_future(value, 'Birth date')

    def validate(self, attrs):
        attrs = super().validate(attrs)
        names = [self.incoming_value(attrs, field) for field in self.NAME_FIELDS]
        if not any(name and name.strip() for name in names):
            raise serializers.ValidationError("At least one first or last name is required")
        return attrs


class PersonInfoSerializer(PersonSerializer):

    class Meta(PersonSerializer.Meta):
        fields = PersonSerializer.Meta.fields + ['age', 'age_group', 'profile_completeness']


class EmployeeSerializer(BaseModelSerializer):
    """
    Serializer for employees.

    One employee record per person; the serial is unique when present.
    """

    person_display_name = serializers.CharField(source='person.display_name', read_only=True)
    military_rank_designation = serializers.CharField(
        source='military_rank.designation_fr', read_only=True
    )
    job_designation = serializers.CharField(source='job.designation_fr', read_only=True, default=None)
    unique_fields = {'serial': 'serial'}

    class Meta:
        model = Employee
        fields = [
            'id', 'serial', 'hiring_date',
            'person', 'person_display_name',
            'military_rank', 'military_rank_designation',
            'job', 'job_designation',
            *AUDIT_FIELDS,
        ]

    def validate_serial(self, value):
        value = (value or '').strip()
        return value or None

    def validate_hiring_date(self, value):
        return not_in_future(value, 'Hiring date')

    def validate_person(self, value):
        if self.others().filter(person=value).exists():
            raise BusinessRuleViolationException(
                'ONE_EMPLOYEE_PER_PERSON',
                f"Person with ID {value.pk} already has an employee record",
            )
        return value


class EmployeeInfoSerializer(EmployeeSerializer):

    class Meta(EmployeeSerializer.Meta):
        fields = EmployeeSerializer.Meta.fields + [
            'years_of_service', 'service_category', 'is_retirement_eligible',
            'status', 'profile_completeness',
        ]
