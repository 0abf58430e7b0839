from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple


class TaxonomyError(ValueError):
    """Raised when a taxonomy cannot be built."""


@dataclass(frozen=True)
class Category:
    name: str
    keywords: Tuple[str, ...]

    def __post_init__(self) -> None:
        # a bare string would iterate as single characters
        if isinstance(self.keywords, str):
            raise TaxonomyError(f"keywords for {self.name!r} must be a list of phrases, got a string")
        try:
            kws = tuple(self.keywords)
        except TypeError:
            raise TaxonomyError(f"keywords for {self.name!r} must be a list of phrases, got {self.keywords!r}") from None
        object.__setattr__(self, "keywords", kws)
        _check_category(self)


@dataclass(frozen=True)
class Taxonomy:
    """
    Ordered, immutable set of categories.
    Declared order is the tie-break order used when ranking.
    """
    categories: Tuple[Category, ...]

    def __post_init__(self) -> None:
        cats = tuple(self.categories)
        object.__setattr__(self, "categories", cats)
        seen: set[str] = set()
        for cat in cats:
            if not isinstance(cat, Category):
                raise TaxonomyError(f"expected a Category, got {cat!r}")
            if cat.name in seen:
                raise TaxonomyError(f"duplicate category: {cat.name!r}")
            seen.add(cat.name)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> "Taxonomy":
        return cls(categories=tuple(Category(name=name, keywords=kws) for name, kws in mapping.items()))

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.categories]

    def as_dict(self) -> Dict[str, list[str]]:
        return {c.name: list(c.keywords) for c in self.categories}

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)


def _check_category(cat: Category) -> None:
    if not isinstance(cat.name, str) or not cat.name.strip():
        raise TaxonomyError(f"category name must be a non-empty string, got {cat.name!r}")
    if not cat.keywords:
        raise TaxonomyError(f"category {cat.name!r} has no keywords")
    seen: set[str] = set()
    for kw in cat.keywords:
        if not isinstance(kw, str) or not kw.strip():
            raise TaxonomyError(f"category {cat.name!r}: keyword must be a non-empty string, got {kw!r}")
        # phrases are matched against lowercased text, an uppercase one could never hit
        if kw != kw.lower():
            raise TaxonomyError(f"category {cat.name!r}: keyword {kw!r} is not lowercase")
        if kw in seen:
            raise TaxonomyError(f"category {cat.name!r}: duplicate keyword {kw!r}")
        seen.add(kw)


# Transcript tagger vocabulary. "deadline" and "don't forget" are listed twice on purpose.
DEFAULT_TAXONOMY = Taxonomy.from_mapping({
    "idea": [
        "what if", "idea", "imagine", "could we", "concept",
        "brainstorm", "thinking about", "maybe we should", "how about", "wonder if",
    ],
    "todo": [
        "need to", "have to", "gotta", "must", "don't forget",
        "remember to", "should", "task", "to do", "to-do", "make sure",
    ],
    "reminder": [
        "remind", "appointment", "deadline", "by tomorrow", "by monday",
        "by friday", "due", "schedule", "don't forget", "o'clock", "a.m.", "p.m.",
    ],
    "journal": [
        "feeling", "felt", "today was", "my day", "grateful",
        "thankful", "reflecting", "i think", "i feel", "been thinking",
    ],
    "work": [
        "meeting", "project", "client", "team", "office",
        "deadline", "presentation", "email", "boss", "coworker",
        "sprint", "standup", "review",
    ],
    "personal": [
        "family", "doctor", "gym", "workout", "grocery",
        "dinner", "weekend", "vacation", "birthday", "friend", "kids", "home",
    ],
})

# Note categorizer vocabulary (wider category set).
EXTENDED_TAXONOMY = Taxonomy.from_mapping({
    "todo": ["need to", "have to", "should", "must", "remember to", "got to", "gotta",
             "task", "to do", "to-do", "make sure"],
    "idea": ["what if", "idea", "maybe we", "could try", "how about", "brainstorm",
             "concept", "imagine", "we could", "possibility"],
    "question": ["how do", "what is", "why does", "when will", "where can", "who is",
                 "i wonder", "figure out", "not sure", "how come"],
    "reminder": ["tomorrow", "next week", "monday", "tuesday", "wednesday", "thursday",
                 "friday", "saturday", "sunday", "appointment", "pick up", "don't forget",
                 "schedule"],
    "work": ["meeting", "project", "client", "email", "deadline", "presentation", "report",
             "office", "team", "manager", "colleague", "boss", "coworker"],
    "personal": ["family", "friend", "birthday", "vacation", "dinner", "weekend", "kids",
                 "wife", "husband", "parents", "mom", "dad"],
    "health": ["doctor", "exercise", "workout", "sleep", "headache", "medication",
               "medicine", "symptom", "diet", "gym", "pharmacy"],
    "finance": ["payment", "budget", "invoice", "expense", "price", "cost", "money",
                "bill", "bank", "credit", "debt", "salary", "rent"],
})

PRESETS: Dict[str, Taxonomy] = {
    "default": DEFAULT_TAXONOMY,
    "extended": EXTENDED_TAXONOMY,
}


def get_preset(name: str) -> Taxonomy:
    try:
        return PRESETS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise TaxonomyError(f"unknown taxonomy preset {name!r}; expected one of {sorted(PRESETS)}") from None
