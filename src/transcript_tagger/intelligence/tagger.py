from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .taxonomy import DEFAULT_TAXONOMY, Taxonomy
from .utils import as_transcript, matched_phrases, normalize_transcript

MAX_TAGS = 3


@dataclass(frozen=True)
class ScoredCategory:
    name: str
    count: int
    matched: Tuple[str, ...] = ()


class Tagger:
    """
    Keyword tagger over a fixed taxonomy.

    A category scores one point per distinct keyword phrase found anywhere in
    the lowercased transcript (plain substring search, no word boundaries).
    Categories with no hits are dropped, the rest are ranked by score with
    ties kept in taxonomy order, and at most `max_tags` names are returned.
    """

    def __init__(self, taxonomy: Taxonomy = DEFAULT_TAXONOMY, *, max_tags: int = MAX_TAGS) -> None:
        if isinstance(max_tags, bool) or not isinstance(max_tags, int):
            raise TypeError(f"max_tags must be an int, got {type(max_tags).__name__}")
        if max_tags < 1:
            raise ValueError(f"max_tags must be >= 1, got {max_tags}")
        self.taxonomy = taxonomy
        self.max_tags = max_tags

    def score(self, text: object) -> List[ScoredCategory]:
        """Scores for every category in declared order, zeros included."""
        t = as_transcript(text)
        if t is None:
            return []
        lower = normalize_transcript(t)
        out: List[ScoredCategory] = []
        for cat in self.taxonomy:
            hits = matched_phrases(lower, cat.keywords)
            out.append(ScoredCategory(name=cat.name, count=len(hits), matched=hits))
        return out

    def rank(self, scores: List[ScoredCategory]) -> List[ScoredCategory]:
        # sorted() is stable, so equal counts keep taxonomy order
        ranked = sorted((s for s in scores if s.count > 0), key=lambda s: s.count, reverse=True)
        return ranked[: self.max_tags]

    def tag(self, text: object) -> List[str]:
        return [s.name for s in self.rank(self.score(text))]

    def explain(self, text: object) -> dict:
        scores = self.score(text)
        return {
            "scores": [{"category": s.name, "count": s.count, "matched": list(s.matched)} for s in scores],
            "tags": [s.name for s in self.rank(scores)],
        }


_DEFAULT = Tagger()


def tag_transcript(text: object) -> List[str]:
    """Tag `text` with the built-in taxonomy. Returns 0-3 category names."""
    return _DEFAULT.tag(text)
