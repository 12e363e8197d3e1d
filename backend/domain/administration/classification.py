"""
Administration classifiers.

Keyword tables for military categories, military ranks and jobs, plus the
age and length-of-service rules applied to persons and employees.
"""

from __future__ import annotations
from datetime import date
from typing import Optional

from domain.shared.classification import KeywordCategory, KeywordClassifier
from domain.shared.value_objects import full_years_between

ADULT_AGE = 18
RETIREMENT_AGE = 60
RETIREMENT_SERVICE_YEARS = 30
NEW_RECRUIT_YEARS = 2
VETERAN_YEARS = 20


# =============================================================================
# MILITARY CATEGORY
# =============================================================================

MILITARY_CATEGORY_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('army', 'ARMY', (('armée', 'terre'),)),
        KeywordCategory('navy', 'NAVY', ('marine', 'naval')),
        KeywordCategory('air-force', 'AIR_FORCE', ('air', 'aérienne')),
        KeywordCategory('gendarmerie', 'GENDARMERIE', ('gendarmerie',)),
        KeywordCategory('republican-guard', 'REPUBLICAN_GUARD', (('garde', 'républicaine'),)),
        KeywordCategory('security', 'SECURITY', ('sécurité',)),
        KeywordCategory('logistics', 'LOGISTICS', ('logistique',)),
        KeywordCategory('medical', 'MEDICAL', ('médical', 'santé')),
        KeywordCategory('communications', 'COMMUNICATIONS', ('communication', 'transmission')),
        KeywordCategory('intelligence', 'INTELLIGENCE', ('renseignement',)),
    ],
    default='OTHER',
)

MILITARY_CATEGORY_PRIORITIES = {
    'ARMY': 1,
    'NAVY': 2,
    'AIR_FORCE': 3,
    'GENDARMERIE': 4,
    'REPUBLICAN_GUARD': 5,
    'SECURITY': 6,
    'INTELLIGENCE': 7,
    'COMMUNICATIONS': 8,
    'MEDICAL': 9,
    'LOGISTICS': 10,
}

MAIN_SERVICE_BRANCHES = ('ARMY', 'NAVY', 'AIR_FORCE')

ORGANIZATIONAL_LEVELS = {
    'ARMY': 'SERVICE_BRANCH',
    'NAVY': 'SERVICE_BRANCH',
    'AIR_FORCE': 'SERVICE_BRANCH',
    'GENDARMERIE': 'PARAMILITARY',
    'REPUBLICAN_GUARD': 'PARAMILITARY',
    'SECURITY': 'SPECIAL_FORCES',
    'INTELLIGENCE': 'SPECIAL_FORCES',
    'MEDICAL': 'SUPPORT_SERVICES',
    'LOGISTICS': 'SUPPORT_SERVICES',
    'COMMUNICATIONS': 'SUPPORT_SERVICES',
}


def military_category_priority(category_type: str) -> int:
    return MILITARY_CATEGORY_PRIORITIES.get(category_type, 99)


def is_main_service_branch(category_type: str) -> bool:
    return category_type in MAIN_SERVICE_BRANCHES


def military_organizational_level(category_type: str) -> str:
    return ORGANIZATIONAL_LEVELS.get(category_type, 'OTHER')


# =============================================================================
# MILITARY RANK
# =============================================================================

MILITARY_RANK_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('general-officer', 'GENERAL_OFFICER', (
            'général', 'general', 'amiral', 'admiral', 'عميد', 'لواء',
        )),
        KeywordCategory('senior-officer', 'SENIOR_OFFICER', (
            'colonel', 'عقيد', 'capitaine de vaisseau', 'نقيب',
        )),
        KeywordCategory('company-officer', 'COMPANY_OFFICER', (
            'commandant', 'major', 'capitaine', 'captain', 'lieutenant', 'ملازم',
        )),
        KeywordCategory('nco', 'NON_COMMISSIONED_OFFICER', (
            'sous-officier', 'sergent', 'adjudant', 'رقيب',
        )),
        KeywordCategory('enlisted', 'ENLISTED', (
            'soldat', 'matelot', 'جندي', 'بحار',
        )),
    ],
    default='UNKNOWN_RANK',
)

OFFICER_LEVELS = ('GENERAL_OFFICER', 'SENIOR_OFFICER', 'COMPANY_OFFICER')

AUTHORITY_LEVELS = {
    'GENERAL_OFFICER': 'STRATEGIC_COMMAND',
    'SENIOR_OFFICER': 'OPERATIONAL_COMMAND',
    'COMPANY_OFFICER': 'TACTICAL_COMMAND',
    'NON_COMMISSIONED_OFFICER': 'SUPERVISORY',
    'ENLISTED': 'OPERATIONAL',
}


def rank_precedence(designation: Optional[str]) -> int:
    """Lower numbers outrank higher ones; 99 when the rank is not recognized."""
    level = MILITARY_RANK_CLASSIFIER.classify(designation)
    text = (designation or '').lower()
    if level == 'GENERAL_OFFICER':
        if "général de corps d'armée" in text or 'فريق' in text:
            return 1
        if 'général de division' in text or 'لواء' in text:
            return 2
        if 'général de brigade' in text or 'عميد' in text:
            return 3
        return 1
    if level == 'SENIOR_OFFICER':
        return 10
    if level == 'COMPANY_OFFICER':
        if 'commandant' in text or 'major' in text:
            return 20
        if 'capitaine' in text:
            return 21
        if 'lieutenant' in text:
            return 22
        return 20
    if level == 'NON_COMMISSIONED_OFFICER':
        return 30
    if level == 'ENLISTED':
        return 40
    return 99


def is_commissioned_officer(rank_level: str) -> bool:
    return rank_level in OFFICER_LEVELS


def rank_authority_level(rank_level: str) -> str:
    return AUTHORITY_LEVELS.get(rank_level, 'UNKNOWN')


# =============================================================================
# JOB
# =============================================================================

JOB_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('leadership', 'LEADERSHIP', ('commandant', 'chef', 'directeur', 'responsable')),
        KeywordCategory('administrative', 'ADMINISTRATIVE', (
            'secrétaire', 'assistant', 'administrateur', 'gestionnaire',
        )),
        KeywordCategory('technical', 'TECHNICAL', ('ingénieur', 'technicien', 'spécialiste', 'expert')),
        KeywordCategory('operational', 'OPERATIONAL', ('opérateur', 'pilote', 'conducteur', 'agent')),
        KeywordCategory('security', 'SECURITY', ('garde', 'sécurité', 'surveillant', 'contrôleur')),
        KeywordCategory('medical', 'MEDICAL', ('médecin', 'infirmier', 'dentiste', 'pharmacien')),
        KeywordCategory('legal', 'LEGAL', ('juriste', 'avocat', 'conseiller juridique', 'magistrat')),
        KeywordCategory('financial', 'FINANCIAL', ('comptable', 'financier', 'trésorier', 'auditeur')),
        KeywordCategory('human-resources', 'HUMAN_RESOURCES', (
            'ressources humaines', 'rh', 'personnel', 'recruteur',
        )),
        KeywordCategory('communication', 'COMMUNICATION', (
            'communication', 'relations publiques', 'journaliste', 'porte-parole',
        )),
        KeywordCategory('logistics', 'LOGISTICS', (
            'logistique', 'approvisionnement', 'magasinier', 'transport',
        )),
        KeywordCategory('training', 'TRAINING', ('formateur', 'instructeur', 'enseignant', 'professeur')),
    ],
    default='GENERAL',
)

JOB_PRIORITIES = {
    'LEADERSHIP': 1,
    'SECURITY': 2,
    'MEDICAL': 3,
    'TECHNICAL': 4,
    'ADMINISTRATIVE': 5,
    'OPERATIONAL': 6,
    'FINANCIAL': 7,
    'LEGAL': 8,
    'HUMAN_RESOURCES': 9,
    'COMMUNICATION': 10,
    'LOGISTICS': 11,
    'TRAINING': 12,
}


def job_priority(category: str) -> int:
    return JOB_PRIORITIES.get(category, 99)


# =============================================================================
# PERSON / EMPLOYEE
# =============================================================================

def age_on(birth_date: Optional[date], today: date) -> Optional[int]:
    if birth_date is None:
        return None
    return full_years_between(birth_date, today)


def age_group(age: Optional[int]) -> str:
    if age is None:
        return 'UNKNOWN'
    if age < 18:
        return 'MINOR'
    if age < 25:
        return 'YOUNG_ADULT'
    if age < 35:
        return 'ADULT'
    if age < 50:
        return 'MIDDLE_AGED'
    if age < 65:
        return 'SENIOR'
    return 'ELDERLY'


def years_of_service(hiring_date: Optional[date], today: date) -> Optional[int]:
    if hiring_date is None:
        return None
    return full_years_between(hiring_date, today)


def service_category(years: Optional[int]) -> str:
    if years is None:
        return 'UNKNOWN'
    if years < 2:
        return 'NEW_RECRUIT'
    if years < 5:
        return 'JUNIOR'
    if years < 10:
        return 'EXPERIENCED'
    if years < 20:
        return 'SENIOR'
    if years < 30:
        return 'VETERAN'
    return 'DISTINGUISHED_VETERAN'


def is_retirement_eligible(years: Optional[int], age: Optional[int]) -> bool:
    return (years is not None and years >= RETIREMENT_SERVICE_YEARS) or (
        age is not None and age >= RETIREMENT_AGE
    )


def employee_status(years: Optional[int], age: Optional[int]) -> str:
    if is_retirement_eligible(years, age):
        return 'RETIREMENT_ELIGIBLE'
    if years is None:
        return 'UNKNOWN'
    if years < 1:
        return 'PROBATIONARY'
    if years < 5:
        return 'ACTIVE_JUNIOR'
    if years < 15:
        return 'ACTIVE_SENIOR'
    return 'ACTIVE_VETERAN'


def completeness(*values) -> float:
    """Share of filled values as a percentage, blank strings count as missing."""
    if not values:
        return 0.0
    filled = sum(1 for value in values if value is not None and str(value).strip() != '')
    return round(filled / len(values) * 100, 2)
