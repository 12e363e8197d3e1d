"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


NOT_AVAILABLE = "N/A"


# =============================================================================
# ENUMERATIONS
# =============================================================================

class Priority(str, Enum):
    """Priority levels shared by the keyword classifiers."""

    CRITICAL = "CRITICAL_PRIORITY"
    HIGH = "HIGH_PRIORITY"
    MEDIUM = "MEDIUM_PRIORITY"
    NORMAL = "NORMAL_PRIORITY"
    LOW = "LOW_PRIORITY"

    @property
    def slug(self) -> str:
        return self.name.lower()

    @classmethod
    def from_slug(cls, slug: str) -> Optional[Priority]:
        for priority in cls:
            if priority.slug == slug.lower():
                return priority
        return None


class ComplexityLevel(str, Enum):
    """Management complexity derived from a child count."""

    NONE = "NO_COMPLEXITY"
    LOW = "LOW_COMPLEXITY"
    MEDIUM = "MEDIUM_COMPLEXITY"
    HIGH = "HIGH_COMPLEXITY"
    VERY_HIGH = "VERY_HIGH_COMPLEXITY"

    @classmethod
    def from_count(cls, count: Optional[int]) -> ComplexityLevel:
        count = count or 0
        if count == 0:
            return cls.NONE
        if count <= 5:
            return cls.LOW
        if count <= 15:
            return cls.MEDIUM
        if count <= 30:
            return cls.HIGH
        return cls.VERY_HIGH


# =============================================================================
# VALUE OBJECTS
# =============================================================================

def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class Designation:
    """
    A name replicated in French, English and Arabic.

    French is the reference language; the other two fall back to it.
    """

    fr: Optional[str] = None
    en: Optional[str] = None
    ar: Optional[str] = None

    @property
    def default(self) -> str:
        for value in (self.fr, self.en, self.ar):
            if _present(value):
                return value
        return NOT_AVAILABLE

    @property
    def is_multilingual(self) -> bool:
        return sum(_present(value) for value in (self.fr, self.en, self.ar)) > 1


@dataclass(frozen=True)
class PersonName:
    """First and last names in Arabic and Latin script."""

    firstname_ar: Optional[str] = None
    lastname_ar: Optional[str] = None
    firstname_lt: Optional[str] = None
    lastname_lt: Optional[str] = None

    @property
    def arabic(self) -> str:
        return " ".join(v.strip() for v in (self.firstname_ar, self.lastname_ar) if _present(v))

    @property
    def latin(self) -> str:
        return " ".join(v.strip() for v in (self.firstname_lt, self.lastname_lt) if _present(v))

    @property
    def has_any(self) -> bool:
        return bool(self.arabic or self.latin)

    @property
    def is_multilingual(self) -> bool:
        return bool(self.arabic and self.latin)

    @property
    def display(self) -> str:
        return self.latin or self.arabic or NOT_AVAILABLE


def full_years_between(start: date, end: date) -> int:
    """Whole years elapsed from `start` to `end`, zero when `end` precedes it."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)


def years_before(reference: date, years: int) -> date:
    """The same calendar day `years` years before `reference` (Feb 29 folds to Feb 28)."""
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)
