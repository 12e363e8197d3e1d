"""
Keyword classification.

A classifier is an ordered table of categories, each holding keywords in
French, English and Arabic. Text is lower-cased and assigned to the first
category having a matching keyword. A keyword given as a tuple matches only
when all of its parts appear.

The same tables drive the database filters in the persistence layer, so a
category endpoint returns the records whose designation mentions any keyword
of that category.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

Keyword = Union[str, tuple[str, ...]]


@dataclass(frozen=True)
class KeywordCategory:
    """One row of a classifier table."""

    slug: str
    code: str
    keywords: tuple[Keyword, ...] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        for keyword in self.keywords:
            if isinstance(keyword, tuple):
                if all(part in text for part in keyword):
                    return True
            elif keyword in text:
                return True
        return False


class KeywordClassifier:
    """First-match keyword classifier over an ordered category table."""

    def __init__(self, categories: Sequence[KeywordCategory], default: str):
        self.categories = tuple(categories)
        self.default = default
        self._by_slug = {category.slug: category for category in self.categories}
        self._by_code = {category.code: category for category in self.categories}

    def classify(self, text: Optional[str]) -> str:
        if not text:
            return self.default
        lowered = text.lower()
        for category in self.categories:
            if category.matches(lowered):
                return category.code
        return self.default

    def get(self, slug: str) -> Optional[KeywordCategory]:
        return self._by_slug.get((slug or '').lower())

    def by_codes(self, codes: Iterable[str]) -> list[KeywordCategory]:
        return [self._by_code[code] for code in codes if code in self._by_code]

    @property
    def slugs(self) -> list[str]:
        return list(self._by_slug)

    def __contains__(self, slug: str) -> bool:
        return self.get(slug) is not None
