from __future__ import annotations

from .taxonomy import EXTENDED_TAXONOMY, Taxonomy
from .utils import as_transcript, normalize_transcript


# Any-hit categorization: no scoring, no cap, declared order.
def categorize_note(text: object, taxonomy: Taxonomy = EXTENDED_TAXONOMY) -> list[str]:
    t = as_transcript(text)
    if t is None:
        return []
    lower = normalize_transcript(t)
    return [cat.name for cat in taxonomy if any(kw in lower for kw in cat.keywords)]
