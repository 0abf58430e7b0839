from __future__ import annotations

from typing import Optional


def as_transcript(value: object) -> Optional[str]:
    """
    Return `value` as a plain non-empty str, else None. Never raises.
    str subclasses are reduced to their plain value, so overridden
    methods (lower, __contains__, __bool__) play no part in matching.
    """
    if not isinstance(value, str):
        return None
    t = str.__str__(value)
    return t or None


def normalize_transcript(t: str) -> str:
    """Lowercase only. Whitespace and punctuation are kept so phrases match literally."""
    return str.lower(t)


def matched_phrases(lower: str, keywords: tuple[str, ...]) -> tuple[str, ...]:
    """Distinct keyword phrases found as plain substrings of `lower`, in keyword order."""
    return tuple(kw for kw in keywords if kw in lower)
