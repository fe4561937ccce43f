"""HTTP endpoints for the preview server."""

import random

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from ..counter import count_words, tokenize
from ..errors import SelectionError
from ..generator import DEFAULT_STYLESHEET
from ..render import STYLESHEET_NAME, cloud_class, page_title, render_html
from ..selector import select
from . import state
from .models import CloudEntryModel, CloudRequest, CloudResponse, PreviewState

router = APIRouter()

# Label used in titles of clouds built from posted text
POSTED_TEXT_LABEL = "posted text"


@router.get("/", response_class=HTMLResponse)
def get_page() -> HTMLResponse:
    """Serve the configured word cloud page."""
    if not state.page_path or not state.page_path.exists():
        raise HTTPException(404, "No word cloud page to preview")
    return HTMLResponse(state.page_path.read_text(encoding="utf-8"))


@router.get(f"/{STYLESHEET_NAME}")
def get_stylesheet() -> FileResponse:
    """Serve the stylesheet next to the page, falling back to the bundled one."""
    if state.page_path:
        local = state.page_path.parent / STYLESHEET_NAME
        if local.exists():
            return FileResponse(local, media_type="text/css")
    return FileResponse(DEFAULT_STYLESHEET, media_type="text/css")


@router.get("/api/state")
def get_state() -> PreviewState:
    """Get current preview state."""
    if not state.page_path:
        return PreviewState()
    return PreviewState(page_path=str(state.page_path), page_exists=state.page_path.exists())


@router.post("/api/cloud")
def build_cloud(request: CloudRequest) -> CloudResponse:
    """Build a cloud from posted text without touching the filesystem."""
    table = count_words(tokenize(request.text), keep_empty=request.keep_empty)
    try:
        entries = select(table, request.count, clamp=request.clamp)
    except SelectionError as e:
        raise HTTPException(400, str(e)) from e

    return CloudResponse(
        title=page_title(len(entries), POSTED_TEXT_LABEL),
        cloud_class=cloud_class(len(entries)),
        entries=[
            CloudEntryModel(word=e.word, count=e.count, font_size=e.font_size) for e in entries
        ],
        html=render_html(entries, POSTED_TEXT_LABEL, rng=random.Random(request.seed)),
    )
