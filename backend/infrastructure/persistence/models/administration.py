"""
Administration Models.

Geography (countries, states, localities), the organizational structure
hierarchy, jobs, military categories and ranks, persons and employees.
"""

from django.db import models
from django.utils import timezone

from domain.administration import classification
from domain.shared.value_objects import PersonName
from ..querysets.base import DesignationQuerySet
from ..querysets.administration import (
    EmployeeQuerySet,
    JobQuerySet,
    LocalityQuerySet,
    MilitaryCategoryQuerySet,
    MilitaryRankQuerySet,
    PersonQuerySet,
    StateQuerySet,
    StructureQuerySet,
)
from .base import BaseModel, DesignationMixin


# =============================================================================
# GEOGRAPHY
# =============================================================================

class Country(DesignationMixin, BaseModel):
    """Country."""

    designation_ar = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="Designation (Arabic)"
    )
    designation_en = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="Designation (English)"
    )
    designation_fr = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Designation (French)"
    )

    objects = DesignationQuerySet.as_manager()

    class Meta:
        db_table = 'administration_country'
        verbose_name = "Country"
        verbose_name_plural = "Countries"
        ordering = ['designation_fr']


class State(BaseModel):
    """Administrative state (wilaya) identified by a numeric code."""

    code = models.PositiveIntegerField(
        unique=True,
        verbose_name="Code"
    )
    designation_ar = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Designation (Arabic)"
    )
    designation_lt = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Designation (Latin)"
    )

    objects = StateQuerySet.as_manager()

    class Meta:
        db_table = 'administration_state'
        verbose_name = "State"
        verbose_name_plural = "States"
        ordering = ['code']

    def __str__(self):
        return f"{self.code:02d} - {self.designation_lt}"


class Locality(BaseModel):
    """Locality (commune) of a state."""

    code = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Code"
    )
    designation_ar = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Designation (Arabic)"
    )
    designation_lt = models.CharField(
        max_length=100,
        unique=True,
        verbose_name="Designation (Latin)"
    )
    state = models.ForeignKey(
        State,
        on_delete=models.PROTECT,
        related_name='localities',
        verbose_name="State"
    )

    objects = LocalityQuerySet.as_manager()

    class Meta:
        db_table = 'administration_locality'
        verbose_name = "Locality"
        verbose_name_plural = "Localities"
        ordering = ['designation_lt']

    def __str__(self):
        return self.designation_lt


# =============================================================================
# ORGANIZATION
# =============================================================================

class StructureType(DesignationMixin, BaseModel):
    """Kind of organizational unit (directorate, service, office...)."""

    objects = DesignationQuerySet.as_manager()

    class Meta:
        db_table = 'administration_structure_type'
        verbose_name = "Structure type"
        verbose_name_plural = "Structure types"
        ordering = ['designation_fr']


class Structure(DesignationMixin, BaseModel):
    """
    Organizational unit.

    Structures form a tree through `structure_up`; a structure without a
    parent is a root.
    """

    acronym_ar = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        verbose_name="Acronym (Arabic)"
    )
    acronym_en = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        verbose_name="Acronym (English)"
    )
    acronym_fr = models.CharField(
        max_length=20,
        unique=True,
        verbose_name="Acronym (French)"
    )
    structure_type = models.ForeignKey(
        StructureType,
        on_delete=models.PROTECT,
        related_name='structures',
        verbose_name="Structure type"
    )
    structure_up = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
        verbose_name="Parent structure"
    )

    objects = StructureQuerySet.as_manager()

    class Meta:
        db_table = 'administration_structure'
        verbose_name = "Structure"
        verbose_name_plural = "Structures"
        ordering = ['designation_fr']

    @property
    def is_root(self) -> bool:
        return self.structure_up_id is None

    @property
    def display_name(self) -> str:
        return f"{self.acronym_fr} - {self.default_designation}"


class Job(DesignationMixin, BaseModel):
    """Position held inside a structure."""

    structure = models.ForeignKey(
        Structure,
        on_delete=models.PROTECT,
        related_name='jobs',
        verbose_name="Structure"
    )

    objects = JobQuerySet.as_manager()

    class Meta:
        db_table = 'administration_job'
        verbose_name = "Job"
        verbose_name_plural = "Jobs"
        ordering = ['designation_fr']

    @property
    def category(self) -> str:
        return classification.JOB_CLASSIFIER.classify(self.default_designation)

    @property
    def priority(self) -> int:
        return classification.job_priority(self.category)


# =============================================================================
# MILITARY
# =============================================================================

class MilitaryCategory(DesignationMixin, BaseModel):
    """Service branch or corps (army, navy, gendarmerie...)."""

    designation_ar = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        verbose_name="Designation (Arabic)"
    )
    designation_en = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        verbose_name="Designation (English)"
    )
    designation_fr = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Designation (French)"
    )
    abbreviation_ar = models.CharField(
        max_length=10,
        blank=True,
        null=True,
        verbose_name="Abbreviation (Arabic)"
    )
    abbreviation_en = models.CharField(
        max_length=10,
        blank=True,
        null=True,
        verbose_name="Abbreviation (English)"
    )
    abbreviation_fr = models.CharField(
        max_length=10,
        verbose_name="Abbreviation (French)"
    )

    objects = MilitaryCategoryQuerySet.as_manager()

    class Meta:
        db_table = 'administration_military_category'
        verbose_name = "Military category"
        verbose_name_plural = "Military categories"
        ordering = ['designation_fr']

    @property
    def category_type(self) -> str:
        return classification.MILITARY_CATEGORY_CLASSIFIER.classify(self.designation_fr)

    @property
    def priority(self) -> int:
        return classification.military_category_priority(self.category_type)

    @property
    def is_main_service_branch(self) -> bool:
        return classification.is_main_service_branch(self.category_type)

    @property
    def organizational_level(self) -> str:
        return classification.military_organizational_level(self.category_type)


class MilitaryRank(DesignationMixin, BaseModel):
    """Military rank within a category."""

    designation_ar = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        verbose_name="Designation (Arabic)"
    )
    designation_en = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        verbose_name="Designation (English)"
    )
    designation_fr = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Designation (French)"
    )
    abbreviation_ar = models.CharField(
        max_length=10,
        blank=True,
        null=True,
        verbose_name="Abbreviation (Arabic)"
    )
    abbreviation_en = models.CharField(
        max_length=10,
        blank=True,
        null=True,
        verbose_name="Abbreviation (English)"
    )
    abbreviation_fr = models.CharField(
        max_length=10,
        verbose_name="Abbreviation (French)"
    )
    military_category = models.ForeignKey(
        MilitaryCategory,
        on_delete=models.PROTECT,
        related_name='military_ranks',
        verbose_name="Military category"
    )

    objects = MilitaryRankQuerySet.as_manager()

    class Meta:
        db_table = 'administration_military_rank'
        verbose_name = "Military rank"
        verbose_name_plural = "Military ranks"
        ordering = ['designation_fr']

    @property
    def rank_level(self) -> str:
        return classification.MILITARY_RANK_CLASSIFIER.classify(self.designation_fr)

    @property
    def precedence(self) -> int:
        return classification.rank_precedence(self.designation_fr)

    @property
    def is_commissioned_officer(self) -> bool:
        return classification.is_commissioned_officer(self.rank_level)

    @property
    def authority_level(self) -> str:
        return classification.rank_authority_level(self.rank_level)


# =============================================================================
# PERSONNEL
# =============================================================================

class Person(BaseModel):
    """Civil identity of a person, names in Arabic and Latin script."""

    firstname_ar = models.CharField(max_length=100, blank=True, null=True, verbose_name="First name (Arabic)")
    lastname_ar = models.CharField(max_length=100, blank=True, null=True, verbose_name="Last name (Arabic)")
    firstname_lt = models.CharField(max_length=100, blank=True, null=True, verbose_name="First name (Latin)")
    lastname_lt = models.CharField(max_length=100, blank=True, null=True, verbose_name="Last name (Latin)")
    birth_date = models.DateField(
        null=True,
        blank=True,
        verbose_name="Birth date"
    )
    birth_place = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        verbose_name="Birth place"
    )
    address = models.CharField(
        max_length=500,
        blank=True,
        null=True,
        verbose_name="Address"
    )
    birth_state = models.ForeignKey(
        State,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='born_persons',
        verbose_name="Birth state"
    )
    address_state = models.ForeignKey(
        State,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='resident_persons',
        verbose_name="Address state"
    )

    objects = PersonQuerySet.as_manager()

    class Meta:
        db_table = 'administration_person'
        verbose_name = "Person"
        verbose_name_plural = "Persons"
        ordering = ['lastname_lt', 'firstname_lt', 'lastname_ar', 'firstname_ar']

    def __str__(self):
        return self.display_name

    @property
    def name(self) -> PersonName:
        return PersonName(
            firstname_ar=self.firstname_ar,
            lastname_ar=self.lastname_ar,
            firstname_lt=self.firstname_lt,
            lastname_lt=self.lastname_lt,
        )

    @property
    def display_name(self) -> str:
        return self.name.display

    @property
    def age(self):
        return classification.age_on(self.birth_date, timezone.localdate())

    @property
    def age_group(self) -> str:
        return classification.age_group(self.age)

    @property
    def profile_completeness(self) -> float:
        return classification.completeness(
            self.firstname_ar, self.lastname_ar, self.firstname_lt, self.lastname_lt,
            self.birth_date, self.birth_place, self.address,
            self.birth_state_id, self.address_state_id,
        )


class Employee(BaseModel):
    """Service record of a person: rank, job, serial and hiring date."""

    serial = models.CharField(
        max_length=50,
        unique=True,
        null=True,
        blank=True,
        verbose_name="Serial"
    )
    hiring_date = models.DateField(
        null=True,
        blank=True,
        verbose_name="Hiring date"
    )
    person = models.OneToOneField(
        Person,
        on_delete=models.PROTECT,
        related_name='employee',
        verbose_name="Person"
    )
    military_rank = models.ForeignKey(
        MilitaryRank,
        on_delete=models.PROTECT,
        related_name='employees',
        verbose_name="Military rank"
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='employees',
        verbose_name="Job"
    )

    objects = EmployeeQuerySet.as_manager()

    class Meta:
        db_table = 'administration_employee'
        verbose_name = "Employee"
        verbose_name_plural = "Employees"
        ordering = ['-hiring_date', 'id']

    def __str__(self):
        return self.serial or f"Employee #{self.pk}"

    @property
    def years_of_service(self):
        return classification.years_of_service(self.hiring_date, timezone.localdate())

    @property
    def service_category(self) -> str:
        return classification.service_category(self.years_of_service)

    @property
    def is_retirement_eligible(self) -> bool:
        return classification.is_retirement_eligible(self.years_of_service, self.person.age)

    @property
    def status(self) -> str:
        return classification.employee_status(self.years_of_service, self.person.age)

    @property
    def profile_completeness(self) -> float:
        return classification.completeness(
            self.person_id, self.military_rank_id, self.serial, self.hiring_date, self.job_id,
        )
