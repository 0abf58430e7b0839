from __future__ import annotations
from ..intelligence.tagger import Tagger
from ..intelligence.taxonomy import Taxonomy
from ..intelligence.categorize import categorize_note

def tag_transcript_tool(*, tagger: Tagger, text: object) -> dict:
    return {"tags": tagger.tag(text)}

def explain_tags_tool(*, tagger: Tagger, text: object) -> dict:
    """Per-category hit breakdown plus the final tags."""
    return tagger.explain(text)

def categorize_note_tool(*, taxonomy: Taxonomy, text: object) -> dict:
    return {"categories": categorize_note(text, taxonomy)}
