from __future__ import annotations
from typing import Optional

from mcp.server.fastmcp import FastMCP

from transcript_tagger.config import settings
from transcript_tagger.intelligence.tagger import Tagger
from transcript_tagger.intelligence.taxonomy import Taxonomy, get_preset
from transcript_tagger.tools.tag_transcript import (
    tag_transcript_tool,
    explain_tags_tool,
    categorize_note_tool,
)

mcp = FastMCP("transcript-tagger")

_tagger: Optional[Tagger] = None
_notes_taxonomy: Optional[Taxonomy] = None

def ensure_init() -> None:
    global _tagger, _notes_taxonomy
    if _tagger is not None:
        return
    _tagger = Tagger(get_preset(settings.taxonomy), max_tags=settings.max_tags)
    _notes_taxonomy = get_preset(settings.categorize_taxonomy)

@mcp.tool()
def tag_transcript(text: str) -> dict:
    """Rank up to three topic tags for a voice-note transcript."""
    ensure_init()
    assert _tagger
    return tag_transcript_tool(tagger=_tagger, text=text)

@mcp.tool()
def explain_tags(text: str) -> dict:
    """Show which keyword phrases each category matched."""
    ensure_init()
    assert _tagger
    return explain_tags_tool(tagger=_tagger, text=text)

@mcp.tool()
def categorize_note(text: str) -> dict:
    """List every category with at least one keyword hit."""
    ensure_init()
    assert _notes_taxonomy
    return categorize_note_tool(taxonomy=_notes_taxonomy, text=text)

if __name__ == "__main__":
    mcp.run(transport="stdio")
