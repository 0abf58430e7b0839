from __future__ import annotations
import time
from fastapi import FastAPI, Body, Response
from structlog import get_logger
from .config import settings
from .intelligence.tagger import Tagger
from .intelligence.taxonomy import Taxonomy, get_preset
from .tools.tag_transcript import tag_transcript_tool, explain_tags_tool, categorize_note_tool
from .obs.metrics import METRICS

log = get_logger()
app = FastAPI(title="transcript-tagger", version="0.1.0")

_tagger: Tagger | None = None
_notes_taxonomy: Taxonomy | None = None

@app.on_event("startup")
async def startup() -> None:
    global _tagger, _notes_taxonomy
    # unknown preset names raise TaxonomyError here, before any request is served
    _tagger = Tagger(get_preset(settings.taxonomy), max_tags=settings.max_tags)
    _notes_taxonomy = get_preset(settings.categorize_taxonomy)
    log.info("startup", taxonomy=settings.taxonomy, categories=len(_tagger.taxonomy),
             max_tags=_tagger.max_tags, categorize_taxonomy=settings.categorize_taxonomy)

@app.get("/health")
async def health():
    assert _tagger is not None
    return {
        "ok": True,
        "taxonomy": settings.taxonomy,
        "categories": _tagger.taxonomy.names,
        "max_tags": _tagger.max_tags,
    }

@app.get("/metrics")
async def metrics():
    return Response(content=METRICS.export_prom(), media_type="text/plain; version=0.0.4")

@app.post("/tools/tag_transcript")
async def tag_transcript_ep(payload: dict = Body(...)):
    assert _tagger is not None
    t0 = time.perf_counter()
    res = tag_transcript_tool(tagger=_tagger, text=payload.get("text"))
    METRICS.inc("requests_tag_total")
    METRICS.record_tags(res["tags"])
    METRICS.observe_ms("latency_tag", (time.perf_counter() - t0) * 1000.0)
    log.debug("tag_transcript", n_tags=len(res["tags"]))
    return {"success": True, "data": res}

@app.post("/tools/explain_tags")
async def explain_tags_ep(payload: dict = Body(...)):
    assert _tagger is not None
    res = explain_tags_tool(tagger=_tagger, text=payload.get("text"))
    METRICS.inc("requests_explain_total")
    log.debug("explain_tags", n_tags=len(res["tags"]))
    return {"success": True, "data": res}

@app.post("/tools/categorize_note")
async def categorize_note_ep(payload: dict = Body(...)):
    assert _notes_taxonomy is not None
    res = categorize_note_tool(taxonomy=_notes_taxonomy, text=payload.get("text"))
    METRICS.inc("requests_categorize_total")
    log.debug("categorize_note", n_categories=len(res["categories"]))
    return {"success": True, "data": res}
