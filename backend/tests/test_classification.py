"""
Tests for the keyword classifiers and the derived labels.
"""

from datetime import date

import pytest

from domain.administration import classification as admin
from domain.plan import classification as plan
from domain.shared.classification import KeywordCategory, KeywordClassifier
from domain.shared.value_objects import (
    ComplexityLevel,
    Designation,
    PersonName,
    Priority,
    full_years_between,
    years_before,
)


class TestKeywordClassifier:

    def test_first_matching_category_wins(self):
        classifier = KeywordClassifier(
            [
                KeywordCategory('first', 'FIRST', ('alpha',)),
                KeywordCategory('second', 'SECOND', ('alpha', 'beta')),
            ],
            default='NONE',
        )
        assert classifier.classify('Alpha and Beta') == 'FIRST'
        assert classifier.classify('beta only') == 'SECOND'
        assert classifier.classify('gamma') == 'NONE'
        assert classifier.classify(None) == 'NONE'

    def test_tuple_keyword_needs_every_part(self):
        classifier = KeywordClassifier(
            [KeywordCategory('army', 'ARMY', (('armée', 'terre'),))], default='OTHER'
        )
        assert classifier.classify('Armée de terre') == 'ARMY'
        assert classifier.classify('Armée de l\'air') == 'OTHER'

    def test_slug_lookup(self):
        assert plan.DOMAIN_CLASSIFIER.get('SECURITY').code == 'SECURITY_DOMAIN'
        assert 'unknown' not in plan.DOMAIN_CLASSIFIER


class TestPlanClassification:

    @pytest.mark.parametrize('designation,expected', [
        ('Direction technique', 'TECHNICAL_DOMAIN'),
        ('Sécurité et défense', 'SECURITY_DOMAIN'),
        ('أمن', 'SECURITY_DOMAIN'),
        ('Divers', 'GENERAL_DOMAIN'),
    ])
    def test_domain_category(self, designation, expected):
        assert plan.DOMAIN_CLASSIFIER.classify(designation) == expected

    def test_domain_derived_labels(self):
        assert plan.domain_priority('SECURITY_DOMAIN') is Priority.CRITICAL
        assert plan.domain_governance_model('SECURITY_DOMAIN') == 'EXECUTIVE_GOVERNANCE'
        assert plan.domain_reporting_frequency('TRAINING_DOMAIN') == 'ANNUAL_REPORTING'
        assert plan.domain_scope('GENERAL_DOMAIN') == 'GENERAL_SCOPE'

    def test_item_status_flags(self):
        assert plan.item_status_allows_usage('ACTIVE_STATUS')
        assert not plan.item_status_allows_usage('LOST_STATUS')
        assert plan.item_status_requires_action('DAMAGED_STATUS')
        assert not plan.item_status_requires_action('ACTIVE_STATUS')

    def test_modification_status(self):
        today = date(2024, 6, 1)
        assert plan.modification_status(None, today) == plan.PENDING_APPROVAL
        assert plan.modification_status(date(2024, 7, 1), today) == plan.SCHEDULED_FOR_APPROVAL
        assert plan.modification_status(today, today) == plan.APPROVED

    def test_modification_type_and_urgency(self):
        assert plan.modification_type('Augmentation des crédits') == 'BUDGET_INCREASE'
        assert plan.modification_type('   ') == 'GENERAL_MODIFICATION'
        assert plan.modification_urgency('EMERGENCY_MODIFICATION', plan.APPROVED) == 'IMMEDIATE_ACTION'
        assert plan.modification_urgency('BUDGET_INCREASE', plan.PENDING_APPROVAL) == 'URGENT_ACTION'
        assert plan.modification_urgency('BUDGET_INCREASE', plan.APPROVED) == 'STANDARD_ACTION'

    def test_modification_display_text(self):
        assert plan.modification_display_text('Objet', None, 1) == 'Objet'
        assert plan.modification_display_text(None, 'x' * 60, 1) == 'x' * 47 + '...'
        assert plan.modification_display_text(None, None, 7) == 'Budget Modification #7'
        assert plan.modification_display_text(None, None, None) == 'Budget Modification #N/A'


class TestAdministrationClassification:

    def test_military_rank_precedence(self):
        assert admin.rank_precedence("Général de corps d'armée") == 1
        assert admin.rank_precedence('Colonel') == 10
        assert admin.rank_precedence('Capitaine') == 21
        assert admin.rank_precedence('Inconnu') == 99
        assert admin.is_commissioned_officer('COMPANY_OFFICER')
        assert not admin.is_commissioned_officer('ENLISTED')

    @pytest.mark.parametrize('age,expected', [
        (None, 'UNKNOWN'),
        (17, 'MINOR'),
        (18, 'YOUNG_ADULT'),
        (40, 'MIDDLE_AGED'),
        (70, 'ELDERLY'),
    ])
    def test_age_group(self, age, expected):
        assert admin.age_group(age) == expected

    def test_employee_status(self):
        assert admin.employee_status(0, 30) == 'PROBATIONARY'
        assert admin.employee_status(10, 40) == 'ACTIVE_SENIOR'
        assert admin.employee_status(31, 50) == 'RETIREMENT_ELIGIBLE'
        assert admin.employee_status(5, 61) == 'RETIREMENT_ELIGIBLE'
        assert admin.employee_status(None, None) == 'UNKNOWN'

    def test_completeness_ignores_blank_strings(self):
        assert admin.completeness('a', '', None, 'b') == 50.0
        assert admin.completeness() == 0.0


class TestValueObjects:

    def test_designation_fallbacks(self):
        designation = Designation(fr='Domaine', en=None, ar='مجال')
        assert designation.default == 'Domaine'
        assert designation.is_multilingual
        assert not Designation(fr='Domaine', en='  ').is_multilingual
        assert Designation().default == 'N/A'

    def test_person_name_display(self):
        assert PersonName(firstname_ar='كريم').display == 'كريم'
        assert PersonName(firstname_lt='Karim', lastname_lt='Benali').display == 'Karim Benali'
        assert PersonName().display == 'N/A'

    def test_complexity_from_count(self):
        assert ComplexityLevel.from_count(0) is ComplexityLevel.NONE
        assert ComplexityLevel.from_count(5) is ComplexityLevel.LOW
        assert ComplexityLevel.from_count(6) is ComplexityLevel.MEDIUM
        assert ComplexityLevel.from_count(31) is ComplexityLevel.VERY_HIGH

    def test_priority_from_slug(self):
        assert Priority.from_slug('critical') is Priority.CRITICAL
        assert Priority.from_slug('urgent') is None

    def test_year_arithmetic(self):
        assert full_years_between(date(2000, 6, 15), date(2024, 6, 14)) == 23
        assert full_years_between(date(2000, 6, 15), date(2024, 6, 15)) == 24
        assert full_years_between(date(2024, 1, 1), date(2020, 1, 1)) == 0
        assert years_before(date(2024, 2, 29), 1) == date(2023, 2, 28)
